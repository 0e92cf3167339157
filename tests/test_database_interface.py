"""Tests for Database interface returning domain models."""

import pytest
from datetime import datetime, timedelta, timezone, UTC

from sqlalchemy.exc import IntegrityError

from quickquote.database.factories import create_sqlite_database, DB_PATH_ENV_VAR
from quickquote.database.sqlalchemy_db import is_quote_number_conflict
from quickquote.domain import entities
from quickquote.domain.errors import ConflictError, NotFoundError


def _priced(name, quantity, unit_price, service_id=None):
    return entities.PricedLineItem(
        service_name=name,
        quantity=quantity,
        unit_price=unit_price,
        line_total=quantity * unit_price,
        service_id=service_id,
    )


@pytest.fixture
def business_id(temp_db):
    """Create a business row directly."""
    return temp_db.create_business(name="Green Lawn Co")


class TestBusinessStorage:
    """Tests for business rows."""

    def test_get_business_returns_domain_model(self, temp_db):
        """Test that get_business returns a domain Business entity."""
        business_id = temp_db.create_business(name="Green Lawn Co", phone="555-0100")

        business = temp_db.get_business(business_id)

        assert isinstance(business, entities.Business)
        assert business.id == business_id
        assert business.name == "Green Lawn Co"
        assert business.default_validity_days == 7
        assert business.created_at.tzinfo is not None

    def test_get_missing_business(self, temp_db):
        """Test a missing business returns None."""
        assert temp_db.get_business("missing") is None

    def test_update_business(self, temp_db, business_id):
        """Test only given fields are updated."""
        temp_db.update_business(business_id, default_validity_days=30, email="a@b.co")

        business = temp_db.get_business(business_id)
        assert business.default_validity_days == 30
        assert business.email == "a@b.co"
        assert business.name == "Green Lawn Co"

    def test_update_missing_business(self, temp_db):
        """Test updating a missing business raises NotFoundError."""
        with pytest.raises(NotFoundError):
            temp_db.update_business("missing", name="X")


class TestServiceStorage:
    """Tests for catalog service rows."""

    def test_list_ordered_by_category_then_name(self, temp_db, business_id):
        """Test services come back grouped by category and sorted by name."""
        temp_db.create_service(business_id, "Weeding", 20.0, category="Garden")
        temp_db.create_service(business_id, "Mowing", 45.0, category="Lawn")
        temp_db.create_service(business_id, "Aeration", 80.0, category="Lawn")
        temp_db.create_service(business_id, "Edging", 25.0, category="Garden")

        names = [s.name for s in temp_db.list_services(business_id)]

        assert names == ["Edging", "Weeding", "Aeration", "Mowing"]

    def test_inactive_services_hidden_by_default(self, temp_db, business_id):
        """Test deactivated services are only listed on request."""
        keep = temp_db.create_service(business_id, "Mowing", 45.0)
        gone = temp_db.create_service(business_id, "Raking", 15.0)
        temp_db.update_service(gone, is_active=False)

        assert [s.id for s in temp_db.list_services(business_id)] == [keep]
        assert len(temp_db.list_services(business_id, include_inactive=True)) == 2

    def test_price_is_float(self, temp_db, business_id):
        """Test money columns come back as floats."""
        service_id = temp_db.create_service(business_id, "Mowing", 45.5)
        assert temp_db.get_service(service_id).price == pytest.approx(45.5)


class TestCustomerStorage:
    """Tests for customer rows."""

    def test_list_customers_by_name(self, temp_db, business_id):
        """Test customers are ordered by name and scoped to the business."""
        other = temp_db.create_business(name="Other")
        temp_db.create_customer(business_id, "Zed", "1")
        temp_db.create_customer(business_id, "Amy", "2")
        temp_db.create_customer(other, "Bob", "3")

        assert [c.name for c in temp_db.list_customers(business_id)] == ["Amy", "Zed"]

    def test_update_customer(self, temp_db, business_id):
        """Test customer updates."""
        customer_id = temp_db.create_customer(business_id, "Amy", "2")
        temp_db.update_customer(customer_id, phone="555", address="1 Main St")

        customer = temp_db.get_customer(customer_id)
        assert customer.phone == "555"
        assert customer.address == "1 Main St"


class TestQuoteStorage:
    """Tests for quote rows and their items."""

    def test_create_quote_with_items(self, temp_db, business_id):
        """Test a quote is stored with customer and ordered items."""
        customer_id = temp_db.create_customer(business_id, "Amy", "2")
        created = datetime(2025, 3, 1, 9, 0, tzinfo=UTC)

        quote_id = temp_db.create_quote(
            business_id=business_id,
            quote_number="QQ-2025-001",
            subtotal=125.0,
            total=112.5,
            items=[_priced("Mowing", 2, 45.0), _priced("Haul away", 1, 35.0)],
            customer_id=customer_id,
            discount_type=entities.DiscountType.PERCENTAGE,
            discount_value=10.0,
            valid_until=created + timedelta(days=7),
            created_at=created,
        )

        quote = temp_db.get_quote(quote_id)

        assert isinstance(quote, entities.Quote)
        assert quote.status == entities.QuoteStatus.PENDING
        assert quote.customer.name == "Amy"
        assert [i.service_name for i in quote.items] == ["Mowing", "Haul away"]
        assert quote.items[0].total_price == 90.0
        assert quote.discount == entities.Discount.percentage(10.0)
        assert quote.created_at == created
        assert quote.updated_at == created
        assert quote.valid_until == datetime(2025, 3, 8, 9, 0, tzinfo=UTC)

    def test_timestamps_stored_in_utc(self, temp_db, business_id):
        """Test timestamps with other offsets are read back as the same instant."""
        created = datetime(2025, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=3)))
        quote_id = temp_db.create_quote(
            business_id, "QQ-2025-001", 10.0, 10.0, [_priced("A", 1, 10.0)], created_at=created
        )

        stored = temp_db.get_quote(quote_id).created_at
        assert stored == created
        assert stored.utcoffset() == timedelta(0)

    def test_duplicate_quote_number_conflicts(self, temp_db, business_id):
        """Test a repeated quote number in one business raises ConflictError."""
        temp_db.create_quote(business_id, "QQ-2025-001", 10.0, 10.0, [_priced("A", 1, 10.0)])

        with pytest.raises(ConflictError, match="QQ-2025-001"):
            temp_db.create_quote(business_id, "QQ-2025-001", 20.0, 20.0, [_priced("B", 1, 20.0)])

        # The failed insert left nothing behind and the session still works
        assert temp_db.list_quote_numbers(business_id) == ["QQ-2025-001"]
        assert len(temp_db.list_quotes(business_id)[0].items) == 1

    def test_other_integrity_errors_are_not_conflicts(self, temp_db, business_id):
        """Test only the quote number constraint is reported as a conflict."""
        with pytest.raises(IntegrityError) as excinfo:
            temp_db.create_quote(business_id, "QQ-2025-001", None, 10.0, [_priced("A", 1, 10.0)])

        assert not isinstance(excinfo.value, ConflictError)
        assert not is_quote_number_conflict(excinfo.value)
        # The failed insert was rolled back and the number is still free
        assert temp_db.list_quote_numbers(business_id) == []
        temp_db.create_quote(business_id, "QQ-2025-001", 10.0, 10.0, [_priced("A", 1, 10.0)])

    def test_same_number_in_other_business(self, temp_db, business_id):
        """Test quote numbers are unique per business only."""
        other = temp_db.create_business(name="Other")
        temp_db.create_quote(business_id, "QQ-2025-001", 10.0, 10.0, [])
        temp_db.create_quote(other, "QQ-2025-001", 10.0, 10.0, [])

        assert temp_db.list_quote_numbers(other) == ["QQ-2025-001"]

    def test_get_quote_by_number(self, temp_db, business_id):
        """Test looking up a quote by its number."""
        quote_id = temp_db.create_quote(business_id, "QQ-2025-004", 10.0, 10.0, [])

        assert temp_db.get_quote_by_number(business_id, "QQ-2025-004").id == quote_id
        assert temp_db.get_quote_by_number(business_id, "QQ-2025-005") is None

    def test_update_quote(self, temp_db, business_id):
        """Test status and text updates."""
        quote_id = temp_db.create_quote(business_id, "QQ-2025-001", 10.0, 10.0, [])

        temp_db.update_quote(quote_id, status=entities.QuoteStatus.ACCEPTED, notes="Signed")

        quote = temp_db.get_quote(quote_id)
        assert quote.status == entities.QuoteStatus.ACCEPTED
        assert quote.notes == "Signed"

    def test_update_missing_quote(self, temp_db):
        """Test updating a missing quote raises NotFoundError."""
        with pytest.raises(NotFoundError):
            temp_db.update_quote("missing", status=entities.QuoteStatus.EXPIRED)


def test_factory_uses_environment(monkeypatch, tmp_path):
    """Test the database path falls back to the environment variable."""
    db_path = tmp_path / "env.db"
    monkeypatch.setenv(DB_PATH_ENV_VAR, str(db_path))

    db = create_sqlite_database()
    db.create_business(name="Env Co")
    db.disconnect()

    assert db_path.exists()
