"""Service catalog domain service."""

from typing import Optional

from quickquote.database.base import Database
from quickquote.domain.entities import Service
from quickquote.domain.errors import NotFoundError, ValidationError, service_not_found
from quickquote.domain.validation import validate_service_form


class CatalogService:
    """Service for managing the catalog of services a business sells."""

    def __init__(self, db: Database):
        """Initialize catalog service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_service(
        self,
        business_id: str,
        name: str,
        price: float,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> str:
        """Add a service to the catalog.

        Returns:
            Service ID

        Raises:
            ValidationError: If name is blank or price is not positive
        """
        form = {"name": name, "price": price}
        if description is not None:
            form["description"] = description
        if category is not None:
            form["category"] = category
        result = validate_service_form(form)
        if not result.success:
            raise ValidationError("Invalid service details", result.errors)

        return self.db.create_service(
            business_id=business_id,
            name=name.strip(),
            price=price,
            description=description,
            category=category,
        )

    def get_service(self, service_id: str) -> Optional[Service]:
        """Get catalog service by ID."""
        return self.db.get_service(service_id)

    def list_services(self, business_id: str, include_inactive: bool = False) -> list[Service]:
        """List catalog services ordered by category, then name.

        Args:
            business_id: Business ID
            include_inactive: If True, include removed services
        """
        return self.db.list_services(business_id, include_inactive=include_inactive)

    def find_service(
        self, business_id: str, reference: str, include_inactive: bool = False
    ) -> Service:
        """Find a service by ID or by case-insensitive name.

        Raises:
            NotFoundError: If no service matches
        """
        services = self.db.list_services(business_id, include_inactive=include_inactive)
        for service in services:
            if service.id == reference:
                return service
        wanted = reference.strip().lower()
        for service in services:
            if service.name.lower() == wanted:
                return service
        raise NotFoundError(service_not_found(reference))

    def update_service(
        self,
        service_id: str,
        name: Optional[str] = None,
        price: Optional[float] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> None:
        """Update the provided catalog service fields.

        Raises:
            NotFoundError: If the service does not exist
            ValidationError: If the merged fields are invalid
        """
        service = self.db.get_service(service_id)
        if service is None:
            raise NotFoundError(service_not_found(service_id))

        form = {
            "name": name if name is not None else service.name,
            "price": price if price is not None else service.price,
        }
        merged_category = category if category is not None else service.category
        if merged_category is not None:
            form["category"] = merged_category
        result = validate_service_form(form)
        if not result.success:
            raise ValidationError("Invalid service details", result.errors)

        self.db.update_service(
            service_id,
            name=name.strip() if name is not None else None,
            price=price,
            description=description,
            category=category,
        )

    def deactivate_service(self, service_id: str) -> None:
        """Remove a service from the catalog.

        The row is kept (inactive) so existing quotes that reference it
        stay intact.
        """
        service = self.db.get_service(service_id)
        if service is None:
            raise NotFoundError(service_not_found(service_id))
        self.db.update_service(service_id, is_active=False)
