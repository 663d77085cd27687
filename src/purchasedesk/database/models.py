"""SQLAlchemy models for purchasedesk database."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)


class Project(Base):
    """Project model.

    ``customer_id`` is a plain column: deleting a customer leaves the
    reference dangling.
    """

    __tablename__ = "projects"

    id = Column(String, primary_key=True)
    customer_id = Column(String, nullable=True)
    cup_code = Column(String(15), nullable=True)


class Supplier(Base):
    """Supplier model."""

    __tablename__ = "suppliers"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    vat_number = Column(String, nullable=False)


class PurchaseOrder(Base):
    """Purchase order model."""

    __tablename__ = "purchase_orders"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    supplier_id = Column(String, nullable=False)
    status = Column(String, nullable=False)
    cig_code = Column(String(10), nullable=True)
    project_id = Column(String, nullable=True)
    signed_file_name = Column(String, nullable=True)
    signed_file_type = Column(String, nullable=True)
    signed_file_size = Column(Integer, nullable=True)
    explanation = Column(Text, nullable=True)
    created_by = Column(String, nullable=True)
    created_date = Column(DateTime, nullable=True)
    submitted_date = Column(DateTime, nullable=True)
    approved_by = Column(String, nullable=True)
    approved_date = Column(DateTime, nullable=True)
    rejected_by = Column(String, nullable=True)
    rejected_date = Column(DateTime, nullable=True)
    assigned_date = Column(DateTime, nullable=True)
    closed_date = Column(DateTime, nullable=True)


class Bill(Base):
    """Bill model."""

    __tablename__ = "bills"

    id = Column(String, primary_key=True)
    purchase_order_id = Column(String, nullable=False, index=True)
    file_name = Column(String, nullable=False)
    xml_file_name = Column(String, nullable=False)
    xml_file_type = Column(String, nullable=True)
    xml_file_size = Column(Integer, nullable=True)
    status = Column(String, nullable=False)
    upload_date = Column(DateTime, nullable=False)
    amount = Column(Numeric(12, 2), nullable=True)
    bill_number = Column(String, nullable=True)
    approval_date = Column(DateTime, nullable=True)
    payment_date = Column(DateTime, nullable=True)
    approved_by = Column(String, nullable=True)
    paid_by = Column(String, nullable=True)


class Sequence(Base):
    """Named counter used for purchase order numbering."""

    __tablename__ = "sequences"

    name = Column(String, primary_key=True)
    value = Column(Integer, nullable=False, default=0)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
