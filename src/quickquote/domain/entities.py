"""Domain model entities for quickquote.

These are pure data classes representing business concepts, independent of
the database schema. Storage rows are mapped into these records before any
calculation, filtering or serialization happens, and nothing in the domain
layer mutates them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class QuoteStatus(str, Enum):
    """Lifecycle status of a quote."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"


class DiscountType(str, Enum):
    """How a quote discount is applied to the subtotal."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class Discount:
    """Discount applied once to a quote subtotal.

    ``kind`` tags the variant: a percentage (0..100) of the subtotal or a
    fixed amount.
    """

    kind: DiscountType
    value: float

    @classmethod
    def percentage(cls, value: float) -> "Discount":
        return cls(kind=DiscountType.PERCENTAGE, value=value)

    @classmethod
    def fixed(cls, value: float) -> "Discount":
        return cls(kind=DiscountType.FIXED, value=value)


@dataclass(frozen=True)
class Business:
    """Business (tenant) domain entity."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime
    default_validity_days: int = 7
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    default_terms: Optional[str] = None
    logo_url: Optional[str] = None


@dataclass(frozen=True)
class Service:
    """Catalog service offered by a business."""

    id: str
    business_id: str
    name: str
    price: float
    created_at: datetime
    updated_at: datetime
    is_active: bool = True
    description: Optional[str] = None
    category: Optional[str] = None


@dataclass(frozen=True)
class Customer:
    """Customer domain entity."""

    id: str
    business_id: str
    name: str
    phone: str
    created_at: datetime
    updated_at: datetime
    email: Optional[str] = None
    address: Optional[str] = None


@dataclass(frozen=True)
class QuoteItem:
    """Persisted line item of a quote."""

    id: str
    quote_id: str
    service_name: str
    quantity: int
    unit_price: float
    total_price: float
    created_at: datetime
    service_id: Optional[str] = None


@dataclass(frozen=True)
class Quote:
    """Quote domain entity.

    ``customer`` and ``items`` are relations populated when joined. ``items``
    is None when the items were not loaded and an empty tuple when the quote
    has none.
    """

    id: str
    business_id: str
    quote_number: str
    status: QuoteStatus
    subtotal: float
    discount_value: float
    total: float
    created_at: datetime
    updated_at: datetime
    customer_id: Optional[str] = None
    discount_type: Optional[DiscountType] = None
    notes: Optional[str] = None
    terms: Optional[str] = None
    valid_until: Optional[datetime] = None
    customer: Optional[Customer] = None
    items: Optional[tuple[QuoteItem, ...]] = None

    @property
    def discount(self) -> Optional[Discount]:
        """Discount carried by this quote, if any."""
        if self.discount_type is None:
            return None
        return Discount(kind=self.discount_type, value=self.discount_value)


@dataclass(frozen=True)
class QuoteLineItem:
    """Line item input for the calculation engine."""

    service_name: str
    quantity: int
    unit_price: float
    service_id: Optional[str] = None


@dataclass(frozen=True)
class PricedLineItem:
    """Line item annotated with its computed line total."""

    service_name: str
    quantity: int
    unit_price: float
    line_total: float
    service_id: Optional[str] = None


@dataclass(frozen=True)
class QuoteCalculationResult:
    """Result of pricing a set of line items with an optional discount."""

    line_items: tuple[PricedLineItem, ...]
    subtotal: float
    discount_amount: float
    total: float


@dataclass(frozen=True)
class QuoteNumberParts:
    """Components of a ``QQ-YYYY-NNN`` quote number."""

    year: int
    sequence_number: int


@dataclass(frozen=True)
class DuplicateQuoteItem:
    """Line item copied from an existing quote."""

    service_name: str
    quantity: int
    unit_price: float
    total_price: float
    service_id: Optional[str] = None


@dataclass(frozen=True)
class DuplicateQuoteData:
    """Data needed to create a new quote from an existing one.

    Identity, number, status, timestamps and validity are deliberately
    absent; they are assigned when the copy is stored.
    """

    customer_id: Optional[str]
    items: tuple[DuplicateQuoteItem, ...]
    subtotal: float
    discount_value: float
    total: float
    discount_type: Optional[DiscountType] = None
    notes: Optional[str] = None
    terms: Optional[str] = None


@dataclass(frozen=True)
class DashboardStats:
    """Headline dashboard metrics."""

    total_quotes_this_month: int
    total_accepted_value_this_month: float
    total_pending_amount: float


@dataclass(frozen=True)
class DashboardSummary:
    """Dashboard stats together with the most recent quotes."""

    stats: DashboardStats
    recent_quotes: tuple[Quote, ...] = field(default_factory=tuple)
