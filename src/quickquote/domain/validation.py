"""Form validation for businesses, catalog services and customers.

The form models reject blank required fields and return field-keyed
messages instead of raising, so callers can show every problem at once.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import (
    BaseModel,
    EmailStr,
    Field,
    ValidationError as PydanticValidationError,
    field_validator,
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a form."""

    success: bool
    errors: dict[str, str] = field(default_factory=dict)


def is_empty_or_whitespace(value: Optional[str]) -> bool:
    """Check if a string is missing, empty or only whitespace."""
    return not value or not value.strip()


def is_required_field_valid(value: Optional[str]) -> bool:
    """Check if a required text field has content."""
    return not is_empty_or_whitespace(value)


def _required_text(value: str, label: str) -> str:
    if is_empty_or_whitespace(value):
        raise ValueError(f"{label} is required")
    return value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and is_empty_or_whitespace(value):
        return None
    return value


class BusinessForm(BaseModel):
    name: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    default_terms: Optional[str] = None
    default_validity_days: int = Field(default=7, ge=1, le=365)

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required_text(v, "Business name")

    @field_validator("email", mode="before")
    @classmethod
    def empty_email_is_none(cls, v: Any) -> Any:
        return _blank_to_none(v)


class ServiceForm(BaseModel):
    name: str = Field(max_length=255)
    description: Optional[str] = None
    price: float = Field(gt=0)
    category: Optional[str] = Field(default=None, max_length=100)

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required_text(v, "Service name")


class CustomerForm(BaseModel):
    name: str = Field(max_length=255)
    phone: str = Field(max_length=50)
    email: Optional[EmailStr] = None
    address: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required_text(v, "Customer name")

    @field_validator("phone")
    @classmethod
    def phone_required(cls, v: str) -> str:
        return _required_text(v, "Phone number")

    @field_validator("email", mode="before")
    @classmethod
    def empty_email_is_none(cls, v: Any) -> Any:
        return _blank_to_none(v)


_FIELD_MESSAGES = {
    "missing": "This field is required",
    "greater_than": "Must be a positive number",
}


def _error_message(error: dict[str, Any]) -> str:
    if error["loc"] == ("email",):
        return "Invalid email format"
    if error["type"] == "value_error" and "error" in error.get("ctx", {}):
        # pydantic prefixes messages raised from validators
        return str(error["ctx"]["error"])
    if error["type"] == "greater_than" and error["loc"] == ("price",):
        return "Price must be a positive number"
    return _FIELD_MESSAGES.get(error["type"], error["msg"])


def _validate(model: type[BaseModel], data: dict[str, Any]) -> ValidationResult:
    try:
        model.model_validate(data)
    except PydanticValidationError as e:
        errors: dict[str, str] = {}
        for error in e.errors():
            field_name = ".".join(str(part) for part in error["loc"]) or "_form"
            errors.setdefault(field_name, _error_message(error))
        return ValidationResult(success=False, errors=errors)
    return ValidationResult(success=True)


def validate_business_form(data: dict[str, Any]) -> ValidationResult:
    """Validate business setup/update input."""
    return _validate(BusinessForm, data)


def validate_service_form(data: dict[str, Any]) -> ValidationResult:
    """Validate catalog service input."""
    return _validate(ServiceForm, data)


def validate_customer_form(data: dict[str, Any]) -> ValidationResult:
    """Validate customer input."""
    return _validate(CustomerForm, data)
