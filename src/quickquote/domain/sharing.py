"""Quote sharing helpers: public links and WhatsApp messages."""

import re
from typing import Optional
from urllib.parse import quote as url_quote

from quickquote.domain.entities import Business, Customer, Quote
from quickquote.utils.formatting import format_long_date, format_price

WHATSAPP_BASE_URL = "https://wa.me/"
DEFAULT_CUSTOMER_NAME = "Valued Customer"

_PHONE_NOISE = re.compile(r"[\s\-()]")


def generate_quote_link(quote_id: str, base_url: str) -> str:
    """Build the public URL of a quote."""
    return f"{base_url.rstrip('/')}/quotes/{quote_id}"


def generate_whatsapp_message(
    quote: Quote,
    business: Business,
    quote_link: str,
    customer: Optional[Customer] = None,
) -> str:
    """Compose the WhatsApp message sent to a customer for a quote.

    The customer defaults to the one attached to the quote; when neither is
    known the greeting uses a generic name.
    """
    display_customer = customer or quote.customer
    customer_name = display_customer.name if display_customer else DEFAULT_CUSTOMER_NAME

    lines = [
        f"*Quote from {business.name}*",
        "",
        f"Hi {customer_name}!",
        "",
        "Here are your quote details:",
        "",
        f"*Quote Number:* {quote.quote_number}",
        f"*Date:* {format_long_date(quote.created_at)}",
        f"*Valid Until:* {format_long_date(quote.valid_until)}",
        "",
        f"*Total Amount:* {format_price(quote.total)}",
        "",
        "*View Full Quote:*",
        quote_link,
        "",
        "Thank you for your interest! Feel free to reach out if you have any questions.",
        "",
        "_Sent via QuickQuote_",
    ]
    return "\n".join(lines)


def generate_whatsapp_link(message: str, phone_number: Optional[str] = None) -> str:
    """Build a wa.me deep link that pre-fills the message.

    Without a phone number WhatsApp asks the sender to pick a contact.
    """
    encoded = url_quote(message, safe="")
    if phone_number:
        clean_phone = _PHONE_NOISE.sub("", phone_number)
        return f"{WHATSAPP_BASE_URL}{clean_phone}?text={encoded}"
    return f"{WHATSAPP_BASE_URL}?text={encoded}"
