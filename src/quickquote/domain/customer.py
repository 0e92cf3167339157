"""Customer domain service."""

from typing import Optional

from quickquote.database.base import Database
from quickquote.domain.entities import Customer
from quickquote.domain.errors import NotFoundError, ValidationError, customer_not_found
from quickquote.domain.validation import validate_customer_form


class CustomerService:
    """Service for managing customers."""

    def __init__(self, db: Database):
        """Initialize customer service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_customer(
        self,
        business_id: str,
        name: str,
        phone: str,
        email: Optional[str] = None,
        address: Optional[str] = None,
    ) -> str:
        """Create a customer.

        Returns:
            Customer ID

        Raises:
            ValidationError: If name or phone is blank or email is malformed
        """
        form = {"name": name, "phone": phone}
        if email is not None:
            form["email"] = email
        if address is not None:
            form["address"] = address
        result = validate_customer_form(form)
        if not result.success:
            raise ValidationError("Invalid customer details", result.errors)

        return self.db.create_customer(
            business_id=business_id,
            name=name.strip(),
            phone=phone.strip(),
            email=email or None,
            address=address,
        )

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        """Get customer by ID."""
        return self.db.get_customer(customer_id)

    def list_customers(self, business_id: str, search: Optional[str] = None) -> list[Customer]:
        """List customers ordered by name.

        Args:
            business_id: Business ID
            search: Optional case-insensitive substring of the name or phone
        """
        customers = self.db.list_customers(business_id)
        if search is None or not search.strip():
            return customers
        needle = search.strip().lower()
        return [c for c in customers if needle in c.name.lower() or needle in c.phone]

    def find_customer(self, business_id: str, reference: str) -> Customer:
        """Find a customer by ID or by case-insensitive name.

        Raises:
            NotFoundError: If no customer matches
        """
        customers = self.db.list_customers(business_id)
        for customer in customers:
            if customer.id == reference:
                return customer
        wanted = reference.strip().lower()
        for customer in customers:
            if customer.name.lower() == wanted:
                return customer
        raise NotFoundError(customer_not_found(reference))

    def update_customer(
        self,
        customer_id: str,
        name: Optional[str] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
    ) -> None:
        """Update the provided customer fields.

        Raises:
            NotFoundError: If the customer does not exist
            ValidationError: If the merged fields are invalid
        """
        customer = self.db.get_customer(customer_id)
        if customer is None:
            raise NotFoundError(customer_not_found(customer_id))

        form = {
            "name": name if name is not None else customer.name,
            "phone": phone if phone is not None else customer.phone,
        }
        merged_email = email if email is not None else customer.email
        if merged_email is not None:
            form["email"] = merged_email
        result = validate_customer_form(form)
        if not result.success:
            raise ValidationError("Invalid customer details", result.errors)

        self.db.update_customer(
            customer_id,
            name=name.strip() if name is not None else None,
            phone=phone.strip() if phone is not None else None,
            email=email,
            address=address,
        )
