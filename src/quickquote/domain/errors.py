"""Shared domain error messages and error types."""

from typing import Optional

from quickquote.domain.entities import QuoteStatus


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only catch ValueError.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    ``fields`` maps field names to messages when the failure came from
    form validation.
    """

    def __init__(self, message: str, fields: Optional[dict[str, str]] = None):
        super().__init__(message)
        self.fields = dict(fields or {})


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InvalidArgumentError(DomainError):
    """Argument outside the range a pure function accepts."""


class MalformedInputError(DomainError):
    """Text could not be decoded into the expected structure."""


def business_not_found(business_id: Optional[str] = None) -> str:
    """Return message for missing business."""
    if business_id is None:
        return "No business set up yet. Run 'quickquote business setup' first."
    return f"Business {business_id} not found"


def service_not_found(reference: str) -> str:
    """Return message for missing catalog service."""
    return f"Service '{reference}' not found"


def customer_not_found(reference: str) -> str:
    """Return message for missing customer."""
    return f"Customer '{reference}' not found"


def quote_not_found(reference: str) -> str:
    """Return message for missing quote."""
    return f"Quote '{reference}' not found"


def business_already_exists(name: str) -> str:
    """Return message when a second business is set up."""
    return f"A business is already set up ('{name}')"


def duplicate_quote_number(quote_number: str, business_id: str) -> str:
    """Return message for a quote number already used by the business."""
    return f"Quote number '{quote_number}' already exists for business {business_id}"


def quote_number_exhausted(attempts: int) -> str:
    """Return message when every quote number attempt collided."""
    return (
        f"Could not assign a unique quote number after {attempts} "
        f"attempt{'s' if attempts != 1 else ''}"
    )


def invalid_status(value: str) -> str:
    """Return message for an unknown quote status."""
    allowed = ", ".join(status.value for status in QuoteStatus)
    return f"Invalid status '{value}'. Must be one of: {allowed}"

