"""Business domain service."""

import logging
from typing import Optional

from quickquote.database.base import Database
from quickquote.domain.entities import Business
from quickquote.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    business_already_exists,
    business_not_found,
)
from quickquote.domain.validation import validate_business_form

logger = logging.getLogger(__name__)


def _drop_none(values: dict) -> dict:
    return {key: value for key, value in values.items() if value is not None}


class BusinessService:
    """Service for setting up and updating the business profile."""

    def __init__(self, db: Database):
        """Initialize business service.

        Args:
            db: Database instance
        """
        self.db = db

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
        """Create the business profile.

        Returns:
            Business ID

        Raises:
            ValidationError: If the profile fields are invalid
            ConflictError: If a business is already set up in this database
        """
        existing = self.db.list_businesses()
        if existing:
            raise ConflictError(business_already_exists(existing[0].name))

        form = _drop_none(
            {
                "name": name,
                "phone": phone,
                "email": email,
                "address": address,
                "default_terms": default_terms,
                "default_validity_days": default_validity_days,
            }
        )
        result = validate_business_form(form)
        if not result.success:
            raise ValidationError("Invalid business details", result.errors)

        business_id = self.db.create_business(
            name=name.strip(),
            default_validity_days=default_validity_days,
            phone=phone,
            email=email or None,
            address=address,
            default_terms=default_terms,
            logo_url=logo_url,
        )
        logger.info("Created business %s (%s)", name, business_id)
        return business_id

    def get_business(self, business_id: str) -> Optional[Business]:
        """Get business by ID."""
        return self.db.get_business(business_id)

    def get_current_business(self) -> Business:
        """Return the business this database belongs to.

        Raises:
            NotFoundError: If no business has been set up yet
        """
        businesses = self.db.list_businesses()
        if not businesses:
            raise NotFoundError(business_not_found())
        return businesses[0]

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
        """Update the provided business fields.

        Raises:
            NotFoundError: If the business does not exist
            ValidationError: If the merged profile is invalid
        """
        business = self.db.get_business(business_id)
        if business is None:
            raise NotFoundError(business_not_found(business_id))

        merged = _drop_none(
            {
                "name": name if name is not None else business.name,
                "phone": phone if phone is not None else business.phone,
                "email": email if email is not None else business.email,
                "address": address if address is not None else business.address,
                "default_terms": default_terms if default_terms is not None else business.default_terms,
                "default_validity_days": (
                    default_validity_days
                    if default_validity_days is not None
                    else business.default_validity_days
                ),
            }
        )
        result = validate_business_form(merged)
        if not result.success:
            raise ValidationError("Invalid business details", result.errors)

        self.db.update_business(
            business_id,
            name=name.strip() if name is not None else None,
            default_validity_days=default_validity_days,
            phone=phone,
            email=email,
            address=address,
            default_terms=default_terms,
            logo_url=logo_url,
        )
