"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from quickquote.domain.entities import (
    Business,
    Customer,
    DiscountType,
    PricedLineItem,
    Quote,
    QuoteStatus,
    Service,
)


class Database(ABC):
    """Abstract database interface for quickquote.

    Quote numbers are unique per business; ``create_quote`` raises
    ConflictError when a number is already taken.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Business operations
    @abstractmethod
    def create_business(
        self,
        name: str,
        default_validity_days: int = 7,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        default_terms: Optional[str] = None,
        logo_url: Optional[str] = None,
    ) -> str:
        """Create a business. Returns business ID."""
        pass

    @abstractmethod
    def get_business(self, business_id: str) -> Optional[Business]:
        """Get business by ID."""
        pass

    @abstractmethod
    def list_businesses(self) -> list[Business]:
        """List all businesses, oldest first."""
        pass

    @abstractmethod
    def update_business(
        self,
        business_id: str,
        name: Optional[str] = None,
        default_validity_days: Optional[int] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        default_terms: Optional[str] = None,
        logo_url: Optional[str] = None,
    ) -> None:
        """Update the business fields that are not None."""
        pass

    # Service operations
    @abstractmethod
    def create_service(
        self,
        business_id: str,
        name: str,
        price: float,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> str:
        """Create a catalog service. Returns service ID."""
        pass

    @abstractmethod
    def get_service(self, service_id: str) -> Optional[Service]:
        """Get catalog service by ID."""
        pass

    @abstractmethod
    def list_services(self, business_id: str, include_inactive: bool = False) -> list[Service]:
        """List catalog services ordered by category, then name."""
        pass

    @abstractmethod
    def update_service(
        self,
        service_id: str,
        name: Optional[str] = None,
        price: Optional[float] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> None:
        """Update the service fields that are not None."""
        pass

    # Customer operations
    @abstractmethod
    def create_customer(
        self,
        business_id: str,
        name: str,
        phone: str,
        email: Optional[str] = None,
        address: Optional[str] = None,
    ) -> str:
        """Create a customer. Returns customer ID."""
        pass

    @abstractmethod
    def get_customer(self, customer_id: str) -> Optional[Customer]:
        """Get customer by ID."""
        pass

    @abstractmethod
    def list_customers(self, business_id: str) -> list[Customer]:
        """List customers ordered by name."""
        pass

    @abstractmethod
    def update_customer(
        self,
        customer_id: str,
        name: Optional[str] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
    ) -> None:
        """Update the customer fields that are not None."""
        pass

    # Quote operations
    @abstractmethod
    def create_quote(
        self,
        business_id: str,
        quote_number: str,
        subtotal: float,
        total: float,
        items: Sequence[PricedLineItem],
        customer_id: Optional[str] = None,
        status: QuoteStatus = QuoteStatus.PENDING,
        discount_type: Optional[DiscountType] = None,
        discount_value: float = 0.0,
        notes: Optional[str] = None,
        terms: Optional[str] = None,
        valid_until: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
    ) -> str:
        """Create a quote together with its line items. Returns quote ID.

        Raises:
            ConflictError: If the business already has this quote number
        """
        pass

    @abstractmethod
    def get_quote(self, quote_id: str) -> Optional[Quote]:
        """Get quote by ID, with customer and items."""
        pass

    @abstractmethod
    def get_quote_by_number(self, business_id: str, quote_number: str) -> Optional[Quote]:
        """Get quote by its quote number, with customer and items."""
        pass

    @abstractmethod
    def list_quotes(self, business_id: str) -> list[Quote]:
        """List all quotes of a business, with customers and items."""
        pass

    @abstractmethod
    def list_quote_numbers(self, business_id: str) -> list[str]:
        """List every quote number used by a business."""
        pass

    @abstractmethod
    def update_quote(
        self,
        quote_id: str,
        status: Optional[QuoteStatus] = None,
        notes: Optional[str] = None,
        terms: Optional[str] = None,
        valid_until: Optional[datetime] = None,
    ) -> None:
        """Update the quote fields that are not None."""
        pass
