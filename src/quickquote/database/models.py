"""SQLAlchemy models for the quickquote database."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    String,
    Text,
    ForeignKey,
    DateTime,
    Integer,
    Numeric,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def new_id() -> str:
    """Generate a primary key."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


QUOTE_NUMBER_CONSTRAINT = "uq_business_quote_number"

# Money columns hand back floats, the domain layer's number type
Money = Numeric(12, 2, asdecimal=False)


class Business(Base):
    """Business (tenant) model."""

    __tablename__ = "businesses"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    logo_url = Column(String, nullable=True)
    default_terms = Column(Text, nullable=True)
    default_validity_days = Column(Integer, default=7, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    services = relationship("Service", back_populates="business", cascade="all, delete-orphan")
    customers = relationship("Customer", back_populates="business", cascade="all, delete-orphan")
    quotes = relationship("Quote", back_populates="business", cascade="all, delete-orphan")


class Service(Base):
    """Catalog service model."""

    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=new_id)
    business_id = Column(String(36), ForeignKey("businesses.id"), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Money, nullable=False)
    category = Column(String(100), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    business = relationship("Business", back_populates="services")


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=new_id)
    business_id = Column(String(36), ForeignKey("businesses.id"), nullable=False)
    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    email = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    business = relationship("Business", back_populates="customers")
    quotes = relationship("Quote", back_populates="customer")


class Quote(Base):
    """Quote model."""

    __tablename__ = "quotes"

    id = Column(String(36), primary_key=True, default=new_id)
    business_id = Column(String(36), ForeignKey("businesses.id"), nullable=False)
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=True)
    quote_number = Column(String(32), nullable=False)
    status = Column(String(16), default="pending", nullable=False)
    subtotal = Column(Money, nullable=False)
    discount_type = Column(String(16), nullable=True)
    discount_value = Column(Money, default=0, nullable=False)
    total = Column(Money, nullable=False)
    notes = Column(Text, nullable=True)
    terms = Column(Text, nullable=True)
    valid_until = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    # Quote numbers are sequential per business
    __table_args__ = (
        UniqueConstraint("business_id", "quote_number", name=QUOTE_NUMBER_CONSTRAINT),
    )

    # Relationships
    business = relationship("Business", back_populates="quotes")
    customer = relationship("Customer", back_populates="quotes")
    items = relationship(
        "QuoteItem",
        back_populates="quote",
        cascade="all, delete-orphan",
        order_by="QuoteItem.position",
    )


class QuoteItem(Base):
    """Quote line item model."""

    __tablename__ = "quote_items"

    id = Column(String(36), primary_key=True, default=new_id)
    quote_id = Column(String(36), ForeignKey("quotes.id"), nullable=False)
    service_id = Column(String(36), ForeignKey("services.id"), nullable=True)
    service_name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Money, nullable=False)
    total_price = Column(Money, nullable=False)
    position = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    # Relationships
    quote = relationship("Quote", back_populates="items")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
