"""JSON codec for quotes.

Quotes are written with the camelCase field names used by stored and shared
quote documents. Timestamps become ISO-8601 strings with millisecond
precision (UTC is written with a ``Z`` suffix). Optional fields that are
None are left out of the document, and a missing key reads back as None, so
presence survives a round trip.
"""

import json
from datetime import datetime, timedelta
from typing import Any, Optional

from dateutil.parser import isoparse

from quickquote.domain.entities import (
    Customer,
    DiscountType,
    Quote,
    QuoteItem,
    QuoteStatus,
)
from quickquote.domain.errors import MalformedInputError


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ISO-8601 with milliseconds."""
    text = value.isoformat(timespec="milliseconds")
    if value.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp string."""
    if not isinstance(value, str):
        raise TypeError(f"Expected ISO-8601 string, got {type(value).__name__}")
    return isoparse(value)


def _put(document: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        document[key] = value


def _customer_to_dict(customer: Customer) -> dict[str, Any]:
    document: dict[str, Any] = {
        "id": customer.id,
        "businessId": customer.business_id,
        "name": customer.name,
        "phone": customer.phone,
    }
    _put(document, "email", customer.email)
    _put(document, "address", customer.address)
    document["createdAt"] = format_timestamp(customer.created_at)
    document["updatedAt"] = format_timestamp(customer.updated_at)
    return document


def _item_to_dict(item: QuoteItem) -> dict[str, Any]:
    document: dict[str, Any] = {"id": item.id, "quoteId": item.quote_id}
    _put(document, "serviceId", item.service_id)
    document.update(
        {
            "serviceName": item.service_name,
            "quantity": item.quantity,
            "unitPrice": item.unit_price,
            "totalPrice": item.total_price,
            "createdAt": format_timestamp(item.created_at),
        }
    )
    return document


def quote_to_dict(quote: Quote) -> dict[str, Any]:
    """Convert a quote into a JSON-compatible dictionary."""
    document: dict[str, Any] = {
        "id": quote.id,
        "businessId": quote.business_id,
    }
    _put(document, "customerId", quote.customer_id)
    document.update(
        {
            "quoteNumber": quote.quote_number,
            "status": quote.status.value,
            "subtotal": quote.subtotal,
        }
    )
    if quote.discount_type is not None:
        document["discountType"] = quote.discount_type.value
    document["discountValue"] = quote.discount_value
    document["total"] = quote.total
    _put(document, "notes", quote.notes)
    _put(document, "terms", quote.terms)
    if quote.valid_until is not None:
        document["validUntil"] = format_timestamp(quote.valid_until)
    document["createdAt"] = format_timestamp(quote.created_at)
    document["updatedAt"] = format_timestamp(quote.updated_at)
    if quote.customer is not None:
        document["customer"] = _customer_to_dict(quote.customer)
    if quote.items is not None:
        document["items"] = [_item_to_dict(item) for item in quote.items]
    return document


def serialize_quote(quote: Quote) -> str:
    """Serialize a quote, with its customer and items, to JSON text."""
    return json.dumps(quote_to_dict(quote))


def _require(document: dict[str, Any], key: str) -> Any:
    if key not in document or document[key] is None:
        raise KeyError(f"missing required field '{key}'")
    return document[key]


def _require_str(document: dict[str, Any], key: str) -> str:
    value = _require(document, key)
    if not isinstance(value, str):
        raise TypeError(f"field '{key}' must be a string")
    return value


def _require_number(document: dict[str, Any], key: str) -> Any:
    value = _require(document, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"field '{key}' must be a number")
    return value


def _optional_str(document: dict[str, Any], key: str) -> Optional[str]:
    value = document.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"field '{key}' must be a string")
    return value


def _customer_from_dict(document: dict[str, Any]) -> Customer:
    return Customer(
        id=_require_str(document, "id"),
        business_id=_require_str(document, "businessId"),
        name=_require_str(document, "name"),
        phone=_require_str(document, "phone"),
        email=_optional_str(document, "email"),
        address=_optional_str(document, "address"),
        created_at=parse_timestamp(_require(document, "createdAt")),
        updated_at=parse_timestamp(_require(document, "updatedAt")),
    )


def _item_from_dict(document: dict[str, Any]) -> QuoteItem:
    quantity = _require_number(document, "quantity")
    if not isinstance(quantity, int):
        raise TypeError("field 'quantity' must be an integer")
    return QuoteItem(
        id=_require_str(document, "id"),
        quote_id=_require_str(document, "quoteId"),
        service_id=_optional_str(document, "serviceId"),
        service_name=_require_str(document, "serviceName"),
        quantity=quantity,
        unit_price=_require_number(document, "unitPrice"),
        total_price=_require_number(document, "totalPrice"),
        created_at=parse_timestamp(_require(document, "createdAt")),
    )


def quote_from_dict(document: dict[str, Any]) -> Quote:
    """Build a quote from a dictionary produced by ``quote_to_dict``.

    Raises:
        KeyError, TypeError, ValueError: If the structure is not a quote
    """
    if not isinstance(document, dict):
        raise TypeError("quote document must be a JSON object")

    discount_type = document.get("discountType")
    valid_until = document.get("validUntil")
    customer = document.get("customer")
    items = document.get("items")
    if items is not None and not isinstance(items, list):
        raise TypeError("field 'items' must be a list")

    return Quote(
        id=_require_str(document, "id"),
        business_id=_require_str(document, "businessId"),
        customer_id=_optional_str(document, "customerId"),
        quote_number=_require_str(document, "quoteNumber"),
        status=QuoteStatus(_require(document, "status")),
        subtotal=_require_number(document, "subtotal"),
        discount_type=DiscountType(discount_type) if discount_type is not None else None,
        discount_value=_require_number(document, "discountValue"),
        total=_require_number(document, "total"),
        notes=_optional_str(document, "notes"),
        terms=_optional_str(document, "terms"),
        valid_until=parse_timestamp(valid_until) if valid_until is not None else None,
        created_at=parse_timestamp(_require(document, "createdAt")),
        updated_at=parse_timestamp(_require(document, "updatedAt")),
        customer=_customer_from_dict(customer) if customer is not None else None,
        items=tuple(_item_from_dict(item) for item in items) if items is not None else None,
    )


def deserialize_quote(text: str) -> Quote:
    """Deserialize JSON text back into a quote.

    Raises:
        MalformedInputError: If the text is not valid JSON or not a quote document
    """
    try:
        document = json.loads(text)
        return quote_from_dict(document)
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise MalformedInputError(f"Malformed quote document: {e}") from e
