"""Quote domain service.

Drives the pure quote modules against storage: pricing and numbering new
quotes, listing and searching, duplication, status changes and expiry.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional, Sequence, Union

from quickquote.database.base import Database
from quickquote.domain.calculation import calculate_quote
from quickquote.domain.dashboard import (
    DEFAULT_RECENT_COUNT,
    calculate_dashboard_stats,
    get_recent_quotes,
)
from quickquote.domain.entities import (
    Business,
    Discount,
    DiscountType,
    DashboardSummary,
    PricedLineItem,
    Quote,
    QuoteLineItem,
    QuoteStatus,
)
from quickquote.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    business_not_found,
    customer_not_found,
    invalid_status,
    quote_not_found,
    quote_number_exhausted,
)
from quickquote.domain.quote_management import (
    create_duplicate_quote_data,
    filter_quotes_by_status,
    get_expired_quotes,
    search_quotes,
    sort_quotes_by_date,
)
from quickquote.domain.quote_number import format_quote_number, get_next_sequence_number

logger = logging.getLogger(__name__)

MAX_QUOTE_NUMBER_ATTEMPTS = 3


def parse_status(value: Union[str, QuoteStatus]) -> QuoteStatus:
    """Convert user input into a QuoteStatus.

    Raises:
        ValidationError: If the value is not a known status
    """
    if isinstance(value, QuoteStatus):
        return value
    try:
        return QuoteStatus(value.strip().lower())
    except ValueError:
        raise ValidationError(invalid_status(value))


def validate_line_items(items: Sequence[QuoteLineItem]) -> None:
    """Check line items before pricing.

    Raises:
        ValidationError: If there are no items or an item is out of range
    """
    if not items:
        raise ValidationError("Quote must have at least one item")

    errors: dict[str, str] = {}
    for index, item in enumerate(items):
        if not item.service_name or not item.service_name.strip():
            errors[f"items.{index}.service_name"] = "Service name is required"
        if item.quantity < 1:
            errors[f"items.{index}.quantity"] = "Quantity must be a positive integer"
        if item.unit_price < 0:
            errors[f"items.{index}.unit_price"] = "Unit price must be non-negative"
    if errors:
        raise ValidationError("Invalid quote items", errors)


def validate_discount(discount: Optional[Discount]) -> None:
    """Check discount range.

    Raises:
        ValidationError: If a percentage is outside 0-100 or an amount is negative
    """
    if discount is None:
        return
    if discount.value < 0:
        raise ValidationError("Discount must be non-negative", {"discount": "Must be non-negative"})
    if discount.kind == DiscountType.PERCENTAGE and discount.value > 100:
        raise ValidationError(
            "Percentage discount cannot exceed 100", {"discount": "Must be between 0 and 100"}
        )


class QuoteService:
    """Service for creating and managing quotes."""

    def __init__(self, db: Database):
        """Initialize quote service.

        Args:
            db: Database instance
        """
        self.db = db

    def _get_business(self, business_id: str) -> Business:
        business = self.db.get_business(business_id)
        if business is None:
            raise NotFoundError(business_not_found(business_id))
        return business

    def _check_customer(self, business_id: str, customer_id: Optional[str]) -> None:
        if customer_id is None:
            return
        customer = self.db.get_customer(customer_id)
        if customer is None or customer.business_id != business_id:
            raise NotFoundError(customer_not_found(customer_id))

    def _insert_with_number(
        self,
        business_id: str,
        now: datetime,
        subtotal: float,
        total: float,
        items: Sequence[PricedLineItem],
        **fields,
    ) -> str:
        """Store a new pending quote under the next free quote number.

        Another writer may take the same number between reading the existing
        numbers and inserting; the insert then fails with ConflictError and a
        fresh number is tried.
        """
        for attempt in range(1, MAX_QUOTE_NUMBER_ATTEMPTS + 1):
            existing = self.db.list_quote_numbers(business_id)
            sequence = get_next_sequence_number(existing, now.year)
            quote_number = format_quote_number(now.year, sequence)
            try:
                quote_id = self.db.create_quote(
                    business_id=business_id,
                    quote_number=quote_number,
                    subtotal=subtotal,
                    total=total,
                    items=items,
                    status=QuoteStatus.PENDING,
                    created_at=now,
                    **fields,
                )
            except ConflictError:
                logger.warning(
                    "Quote number %s already taken (attempt %d of %d)",
                    quote_number,
                    attempt,
                    MAX_QUOTE_NUMBER_ATTEMPTS,
                )
                continue
            logger.info("Created quote %s (%s)", quote_number, quote_id)
            return quote_id

        raise ConflictError(quote_number_exhausted(MAX_QUOTE_NUMBER_ATTEMPTS))

    def create_quote(
        self,
        business_id: str,
        items: Sequence[QuoteLineItem],
        now: datetime,
        customer_id: Optional[str] = None,
        discount: Optional[Discount] = None,
        notes: Optional[str] = None,
        terms: Optional[str] = None,
        valid_until: Optional[datetime] = None,
    ) -> Quote:
        """Price, number and store a new pending quote.

        Args:
            business_id: Business ID
            items: Line items in display order
            now: Current time; sets the quote year, creation time and default validity
            customer_id: Optional customer ID
            discount: Optional discount
            notes: Optional notes
            terms: Terms; defaults to the business's default terms
            valid_until: Validity deadline; defaults to now plus the business's
                default validity days

        Returns:
            The stored quote, with customer and items

        Raises:
            ValidationError: If items or discount are invalid
            NotFoundError: If the business or customer does not exist
            ConflictError: If no unique quote number could be assigned
        """
        validate_line_items(items)
        validate_discount(discount)
        business = self._get_business(business_id)
        self._check_customer(business_id, customer_id)

        calculation = calculate_quote(items, discount)
        if valid_until is None:
            valid_until = now + timedelta(days=business.default_validity_days)
        if terms is None:
            terms = business.default_terms

        quote_id = self._insert_with_number(
            business_id,
            now,
            subtotal=calculation.subtotal,
            total=calculation.total,
            items=calculation.line_items,
            customer_id=customer_id,
            discount_type=discount.kind if discount is not None else None,
            discount_value=discount.value if discount is not None else 0.0,
            notes=notes,
            terms=terms,
            valid_until=valid_until,
        )
        return self.db.get_quote(quote_id)

    def get_quote(self, quote_id: str) -> Optional[Quote]:
        """Get quote by ID."""
        return self.db.get_quote(quote_id)

    def get_quote_by_number(self, business_id: str, quote_number: str) -> Optional[Quote]:
        """Get quote by its quote number."""
        return self.db.get_quote_by_number(business_id, quote_number)

    def find_quote(self, business_id: str, reference: str) -> Quote:
        """Find a quote by quote number (case-insensitive) or ID.

        Raises:
            NotFoundError: If no quote matches
        """
        quote = self.db.get_quote_by_number(business_id, reference.strip().upper())
        if quote is None:
            quote = self.db.get_quote(reference)
        if quote is None or quote.business_id != business_id:
            raise NotFoundError(quote_not_found(reference))
        return quote

    def list_quotes(
        self,
        business_id: str,
        status: Optional[QuoteStatus] = None,
        search: Optional[str] = None,
    ) -> list[Quote]:
        """List quotes newest first, optionally filtered.

        Args:
            business_id: Business ID
            status: Only quotes with this status
            search: Substring of the quote number or customer name
        """
        quotes = sort_quotes_by_date(self.db.list_quotes(business_id))
        if status is not None:
            quotes = filter_quotes_by_status(quotes, status)
        if search:
            quotes = search_quotes(quotes, search)
        return quotes

    def update_quote(
        self,
        quote_id: str,
        status: Optional[Union[str, QuoteStatus]] = None,
        notes: Optional[str] = None,
        terms: Optional[str] = None,
        valid_until: Optional[datetime] = None,
    ) -> Quote:
        """Update status, notes, terms or validity of a quote.

        Raises:
            NotFoundError: If the quote does not exist
            ValidationError: If the status is unknown
        """
        quote = self.db.get_quote(quote_id)
        if quote is None:
            raise NotFoundError(quote_not_found(quote_id))

        new_status = parse_status(status) if status is not None else None
        self.db.update_quote(
            quote_id, status=new_status, notes=notes, terms=terms, valid_until=valid_until
        )
        if new_status is not None and new_status != quote.status:
            logger.info(
                "Quote %s status %s -> %s",
                quote.quote_number,
                quote.status.value,
                new_status.value,
            )
        return self.db.get_quote(quote_id)

    def duplicate_quote(self, quote_id: str, now: datetime) -> Quote:
        """Create a new pending quote with the customer, items and pricing of another.

        The copy gets a fresh quote number and a validity window starting at now.

        Raises:
            NotFoundError: If the quote does not exist
        """
        source = self.db.get_quote(quote_id)
        if source is None:
            raise NotFoundError(quote_not_found(quote_id))

        data = create_duplicate_quote_data(source)
        business = self._get_business(source.business_id)
        items = tuple(
            PricedLineItem(
                service_id=item.service_id,
                service_name=item.service_name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                line_total=item.total_price,
            )
            for item in data.items
        )

        new_id = self._insert_with_number(
            source.business_id,
            now,
            subtotal=data.subtotal,
            total=data.total,
            items=items,
            customer_id=data.customer_id,
            discount_type=data.discount_type,
            discount_value=data.discount_value,
            notes=data.notes,
            terms=data.terms,
            valid_until=now + timedelta(days=business.default_validity_days),
        )
        logger.info("Duplicated quote %s", source.quote_number)
        return self.db.get_quote(new_id)

    def expire_overdue_quotes(self, business_id: str, now: datetime) -> list[Quote]:
        """Mark pending quotes past their validity as expired.

        Returns:
            The quotes that were expired, as stored after the update
        """
        candidates = get_expired_quotes(self.db.list_quotes(business_id), now)
        expired = []
        for quote in candidates:
            self.db.update_quote(quote.id, status=QuoteStatus.EXPIRED)
            logger.info("Expired quote %s", quote.quote_number)
            expired.append(self.db.get_quote(quote.id))
        return expired

    def get_dashboard(
        self, business_id: str, now: datetime, recent_count: int = DEFAULT_RECENT_COUNT
    ) -> DashboardSummary:
        """Compute dashboard stats and the most recent quotes."""
        quotes = self.db.list_quotes(business_id)
        return DashboardSummary(
            stats=calculate_dashboard_stats(quotes, now),
            recent_quotes=tuple(get_recent_quotes(quotes, recent_count)),
        )
