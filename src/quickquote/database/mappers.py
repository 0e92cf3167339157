"""Mapper functions to convert SQLAlchemy models into domain entities.

SQLite drops timezone information, so timestamps read back naive are
interpreted as UTC here (they are always written in UTC).
"""

from datetime import datetime, UTC
from typing import Optional

from quickquote.domain import entities as domain
from quickquote.database.models import (
    Business as ORMBusiness,
    Service as ORMService,
    Customer as ORMCustomer,
    Quote as ORMQuote,
    QuoteItem as ORMQuoteItem,
)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to a naive timestamp read from the database."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def business_to_domain(orm_business: ORMBusiness) -> domain.Business:
    """Convert SQLAlchemy Business model to domain Business entity."""
    return domain.Business(
        id=orm_business.id,
        name=orm_business.name,
        phone=orm_business.phone,
        email=orm_business.email,
        address=orm_business.address,
        logo_url=orm_business.logo_url,
        default_terms=orm_business.default_terms,
        default_validity_days=orm_business.default_validity_days,
        created_at=as_utc(orm_business.created_at),
        updated_at=as_utc(orm_business.updated_at),
    )


def service_to_domain(orm_service: ORMService) -> domain.Service:
    """Convert SQLAlchemy Service model to domain Service entity."""
    return domain.Service(
        id=orm_service.id,
        business_id=orm_service.business_id,
        name=orm_service.name,
        description=orm_service.description,
        price=float(orm_service.price),
        category=orm_service.category,
        is_active=orm_service.is_active,
        created_at=as_utc(orm_service.created_at),
        updated_at=as_utc(orm_service.updated_at),
    )


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    """Convert SQLAlchemy Customer model to domain Customer entity."""
    return domain.Customer(
        id=orm_customer.id,
        business_id=orm_customer.business_id,
        name=orm_customer.name,
        phone=orm_customer.phone,
        email=orm_customer.email,
        address=orm_customer.address,
        created_at=as_utc(orm_customer.created_at),
        updated_at=as_utc(orm_customer.updated_at),
    )


def quote_item_to_domain(orm_item: ORMQuoteItem) -> domain.QuoteItem:
    """Convert SQLAlchemy QuoteItem model to domain QuoteItem entity."""
    return domain.QuoteItem(
        id=orm_item.id,
        quote_id=orm_item.quote_id,
        service_id=orm_item.service_id,
        service_name=orm_item.service_name,
        quantity=orm_item.quantity,
        unit_price=float(orm_item.unit_price),
        total_price=float(orm_item.total_price),
        created_at=as_utc(orm_item.created_at),
    )


def quote_to_domain(orm_quote: ORMQuote, include_relations: bool = True) -> domain.Quote:
    """Convert SQLAlchemy Quote model to domain Quote entity.

    Args:
        orm_quote: ORM quote row
        include_relations: If True, also map the customer and line items
    """
    customer = None
    items = None
    if include_relations:
        if orm_quote.customer is not None:
            customer = customer_to_domain(orm_quote.customer)
        items = tuple(quote_item_to_domain(item) for item in orm_quote.items)

    discount_type = None
    if orm_quote.discount_type is not None:
        discount_type = domain.DiscountType(orm_quote.discount_type)

    return domain.Quote(
        id=orm_quote.id,
        business_id=orm_quote.business_id,
        customer_id=orm_quote.customer_id,
        quote_number=orm_quote.quote_number,
        status=domain.QuoteStatus(orm_quote.status),
        subtotal=float(orm_quote.subtotal),
        discount_type=discount_type,
        discount_value=float(orm_quote.discount_value),
        total=float(orm_quote.total),
        notes=orm_quote.notes,
        terms=orm_quote.terms,
        valid_until=as_utc(orm_quote.valid_until),
        created_at=as_utc(orm_quote.created_at),
        updated_at=as_utc(orm_quote.updated_at),
        customer=customer,
        items=items,
    )
