"""Shared pytest fixtures for quickquote tests."""

import tempfile
import os
from datetime import datetime, UTC
import pytest

from quickquote.database.factories import create_sqlite_database
from quickquote.domain.business import BusinessService
from quickquote.domain.catalog import CatalogService
from quickquote.domain.customer import CustomerService
from quickquote.domain.entities import Customer, Quote, QuoteItem, QuoteStatus
from quickquote.domain.quote import QuoteService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def business_service(temp_db):
    """Create a BusinessService with a temporary database."""
    return BusinessService(temp_db)


@pytest.fixture
def catalog_service(temp_db):
    """Create a CatalogService with a temporary database."""
    return CatalogService(temp_db)


@pytest.fixture
def customer_service(temp_db):
    """Create a CustomerService with a temporary database."""
    return CustomerService(temp_db)


@pytest.fixture
def quote_service(temp_db):
    """Create a QuoteService with a temporary database."""
    return QuoteService(temp_db)


@pytest.fixture
def sample_business(business_service):
    """Create a sample business for testing."""
    business_id = business_service.create_business(
        name="Green Lawn Co",
        default_validity_days=7,
        phone="555-0100",
        default_terms="Payment due on completion",
    )
    return business_service.get_business(business_id)


@pytest.fixture
def sample_customer(customer_service, sample_business):
    """Create a sample customer for testing."""
    customer_id = customer_service.create_customer(
        business_id=sample_business.id,
        name="Jane Doe",
        phone="+1 (555) 010-2030",
        email="jane@example.com",
    )
    return customer_service.get_customer(customer_id)


@pytest.fixture
def sample_services(catalog_service, sample_business):
    """Create a few catalog services and return them by name."""
    services = {}
    for name, price, category in [
        ("Lawn mowing", 45.0, "Lawn"),
        ("Hedge trimming", 60.0, "Garden"),
        ("Leaf removal", 30.0, "Lawn"),
    ]:
        service_id = catalog_service.create_service(
            business_id=sample_business.id, name=name, price=price, category=category
        )
        services[name] = catalog_service.get_service(service_id)
    return services


@pytest.fixture
def now():
    """A fixed reference time."""
    return datetime(2025, 3, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def make_quote():
    """Factory for in-memory quotes."""

    def _make_quote(
        id="q1",
        quote_number="QQ-2025-001",
        status=QuoteStatus.PENDING,
        total=100.0,
        created_at=None,
        valid_until=None,
        customer_name=None,
        items=None,
        **overrides,
    ):
        created = created_at or datetime(2025, 3, 1, 9, 0, tzinfo=UTC)
        customer = None
        if customer_name is not None:
            customer = Customer(
                id=f"c-{id}",
                business_id="b1",
                name=customer_name,
                phone="555-0000",
                created_at=created,
                updated_at=created,
            )
        fields = dict(
            id=id,
            business_id="b1",
            quote_number=quote_number,
            status=status,
            subtotal=total,
            discount_value=0.0,
            total=total,
            created_at=created,
            updated_at=created,
            customer_id=customer.id if customer else None,
            valid_until=valid_until,
            customer=customer,
            items=items,
        )
        fields.update(overrides)
        return Quote(**fields)

    return _make_quote


@pytest.fixture
def make_item():
    """Factory for persisted quote items."""

    def _make_item(service_name="Lawn mowing", quantity=1, unit_price=45.0, **overrides):
        fields = dict(
            id=f"item-{service_name}",
            quote_id="q1",
            service_name=service_name,
            quantity=quantity,
            unit_price=unit_price,
            total_price=quantity * unit_price,
            created_at=datetime(2025, 3, 1, 9, 0, tzinfo=UTC),
        )
        fields.update(overrides)
        return QuoteItem(**fields)

    return _make_item


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
