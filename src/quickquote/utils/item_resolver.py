"""Utility for turning item options into quote line items."""

from typing import Optional

from quickquote.domain.catalog import CatalogService
from quickquote.domain.entities import QuoteLineItem
from quickquote.domain.errors import NotFoundError, service_not_found
from quickquote.utils.price_parser import parse_price


def parse_item_spec(spec: str) -> tuple[str, int, Optional[float]]:
    """Split an item option into name, quantity and optional unit price.

    Accepted forms: "NAME", "NAME:QTY" and "NAME:QTY:PRICE".

    Raises:
        ValueError: If the quantity is not a positive integer or the price is invalid
    """
    parts = [part.strip() for part in spec.split(":")]
    if len(parts) > 3 or not parts[0]:
        raise ValueError(f"Invalid item '{spec}'. Use NAME, NAME:QTY or NAME:QTY:PRICE")

    name = parts[0]
    quantity = 1
    if len(parts) >= 2 and parts[1]:
        try:
            quantity = int(parts[1])
        except ValueError:
            raise ValueError(f"Invalid quantity in item '{spec}'")
        if quantity < 1:
            raise ValueError(f"Quantity must be a positive integer in item '{spec}'")

    price = parse_price(parts[2]) if len(parts) == 3 else None
    return name, quantity, price


def resolve_items(
    catalog_service: CatalogService, business_id: str, specs: list[str]
) -> list[QuoteLineItem]:
    """Resolve item options against the catalog.

    An item naming a catalog service (by name or ID) takes that service's
    price unless a price is given. An item with a price but no catalog match
    is a custom item.

    Raises:
        ValueError: If an item option is malformed
        NotFoundError: If an item has no price and matches no catalog service
    """
    items = []
    for spec in specs:
        name, quantity, price = parse_item_spec(spec)
        try:
            service = catalog_service.find_service(business_id, name)
        except NotFoundError:
            if price is None:
                raise NotFoundError(
                    f"{service_not_found(name)}. Give a price (NAME:QTY:PRICE) for a custom item"
                )
            items.append(QuoteLineItem(service_name=name, quantity=quantity, unit_price=price))
            continue

        items.append(
            QuoteLineItem(
                service_name=service.name,
                quantity=quantity,
                unit_price=price if price is not None else service.price,
                service_id=service.id,
            )
        )
    return items
