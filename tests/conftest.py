"""Shared pytest fixtures for purchasedesk tests."""

import tempfile
import os
from datetime import datetime
import pytest

from purchasedesk.database.factories import create_memory_database, create_sqlite_database
from purchasedesk.domain.bill import BillService
from purchasedesk.domain.customer import CustomerService
from purchasedesk.domain.entities import FileRef
from purchasedesk.domain.project import ProjectService
from purchasedesk.domain.purchase_order import PurchaseOrderService
from purchasedesk.domain.supplier import SupplierService


@pytest.fixture
def temp_db():
    """Create a temporary SQLite database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

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
def memory_db():
    """Create an empty in-memory database."""
    return create_memory_database()


@pytest.fixture(params=["memory", "sqlite"])
def db(request):
    """Run the test against each database implementation."""
    if request.param == "memory":
        return request.getfixturevalue("memory_db")
    return request.getfixturevalue("temp_db")


@pytest.fixture
def customer_service(db):
    return CustomerService(db)


@pytest.fixture
def project_service(db):
    return ProjectService(db)


@pytest.fixture
def supplier_service(db):
    return SupplierService(db)


@pytest.fixture
def po_service(db):
    """PurchaseOrderService acting as 'mario.rossi'."""
    return PurchaseOrderService(db, actor="mario.rossi")


@pytest.fixture
def bill_service(db):
    """BillService acting as 'anna.bianchi'."""
    return BillService(db, actor="anna.bianchi")


@pytest.fixture
def signed_file():
    return FileRef(name="request.pdf", content_type="application/pdf", size=2048)


@pytest.fixture
def sample_customer(customer_service):
    return customer_service.create_customer(name="Comune di Milano", customer_id="C-1")


@pytest.fixture
def sample_project(project_service, sample_customer):
    return project_service.create_project(
        customer_id=sample_customer.id, cup_code="J11B22000120004", project_id="P-1"
    )


@pytest.fixture
def sample_supplier(supplier_service):
    return supplier_service.create_supplier(
        name="Acme S.r.l.", vat_number="IT01234567890", supplier_id="S-1"
    )


@pytest.fixture
def created_at():
    return datetime(2025, 3, 10, 9, 0)


@pytest.fixture
def sample_po(po_service, sample_supplier, sample_project, signed_file, created_at):
    """A draft purchase order created on 10/03/2025."""
    return po_service.create_purchase_order(
        name="Office laptops",
        supplier_id=sample_supplier.id,
        explanation="Replacement of end-of-life laptops",
        signed_file=signed_file,
        cig_code="Z1A2B3C4D5",
        project_id=sample_project.id,
        now=created_at,
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_file(tmp_path):
    """Write a small file under tmp_path and return its path as a string."""

    def _make(name: str, content: str = "<FatturaElettronica/>") -> str:
        path = tmp_path / name
        path.write_text(content)
        return str(path)

    return _make
