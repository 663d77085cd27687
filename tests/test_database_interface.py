"""Tests for the Database interface, run against every implementation."""

import pytest
from datetime import datetime
from decimal import Decimal

from purchasedesk.database.factories import create_sqlite_database
from purchasedesk.domain import entities
from purchasedesk.domain.entities import (
    Bill,
    BillStatus,
    Customer,
    FileRef,
    Project,
    PurchaseOrder,
    PurchaseOrderStatus,
    Supplier,
)


def make_po(po_id="ACQ/2025/001", **kwargs):
    fields = dict(
        id=po_id,
        name="Office laptops",
        supplier_id="S-1",
        status=PurchaseOrderStatus.WAITING_FOR_APPROVAL,
        cig_code="Z1A2B3C4D5",
        project_id="P-1",
        signed_file=FileRef("request.pdf", "application/pdf", 2048),
        explanation="Replacement",
        created_by="mario.rossi",
        created_date=datetime(2025, 3, 10, 9, 0),
    )
    fields.update(kwargs)
    return PurchaseOrder(**fields)


def make_bill(bill_id="BILL-1-0", po_id="ACQ/2025/001", upload_date=datetime(2025, 3, 12), **kwargs):
    return Bill(
        id=bill_id,
        purchase_order_id=po_id,
        file_name=f"{bill_id}.xml",
        xml_file=FileRef(f"{bill_id}.xml", "text/xml", 512),
        upload_date=upload_date,
        **kwargs,
    )


class TestMasterData:
    """Tests for customer, project and supplier storage."""

    def test_customer_round_trip(self, db):
        db.upsert_customer(Customer("C-1", "Comune di Milano"))
        customer = db.get_customer("C-1")
        assert isinstance(customer, entities.Customer)
        assert customer == Customer("C-1", "Comune di Milano")
        assert db.list_customers() == [customer]

    def test_upsert_replaces(self, db):
        db.upsert_customer(Customer("C-1", "Comune di Milano"))
        db.upsert_customer(Customer("C-1", "Comune di Torino"))
        assert db.list_customers() == [Customer("C-1", "Comune di Torino")]

    def test_project_round_trip(self, db):
        project = Project("P-1", customer_id="C-1", cup_code="J11B22000120004")
        db.upsert_project(project)
        assert db.get_project("P-1") == project
        db.upsert_project(Project("P-2"))
        assert db.get_project("P-2") == Project("P-2")

    def test_supplier_round_trip(self, db):
        supplier = Supplier("S-1", "Acme S.r.l.", "IT01234567890")
        db.upsert_supplier(supplier)
        assert db.get_supplier("S-1") == supplier

    def test_get_missing_returns_none(self, db):
        assert db.get_customer("nope") is None
        assert db.get_project("nope") is None
        assert db.get_supplier("nope") is None
        assert db.get_purchase_order("nope") is None
        assert db.get_bill("nope") is None

    def test_delete(self, db):
        db.upsert_supplier(Supplier("S-1", "Acme", "IT1"))
        db.delete_supplier("S-1")
        assert db.get_supplier("S-1") is None
        assert db.list_suppliers() == []

    def test_delete_missing_is_noop(self, db):
        db.delete_customer("nope")
        db.delete_project("nope")
        db.delete_supplier("nope")
        db.delete_purchase_order("nope")
        db.delete_bill("nope")


class TestPurchaseOrders:
    """Tests for purchase order storage."""

    def test_round_trip(self, db):
        po = make_po(approved_by="anna", approved_date=datetime(2025, 3, 11, 15, 45))
        db.upsert_purchase_order(po)
        stored = db.get_purchase_order(po.id)
        assert isinstance(stored, entities.PurchaseOrder)
        assert stored == po
        assert stored.status is PurchaseOrderStatus.WAITING_FOR_APPROVAL

    def test_round_trip_without_signed_file(self, db):
        po = make_po(signed_file=None, cig_code=None, project_id=None)
        db.upsert_purchase_order(po)
        assert db.get_purchase_order(po.id) == po

    def test_update_status(self, db):
        db.upsert_purchase_order(make_po())
        db.upsert_purchase_order(make_po(status=PurchaseOrderStatus.REJECTED))
        orders = db.list_purchase_orders()
        assert len(orders) == 1
        assert orders[0].status == PurchaseOrderStatus.REJECTED


class TestBills:
    """Tests for bill storage."""

    def test_round_trip(self, db):
        bill = make_bill(
            status=BillStatus.PAID,
            amount=Decimal("1234.56"),
            bill_number="FT-17",
            approval_date=datetime(2025, 3, 13),
            payment_date=datetime(2025, 3, 20),
            approved_by="anna",
            paid_by="luca",
        )
        db.upsert_bill(bill)
        stored = db.get_bill(bill.id)
        assert isinstance(stored, entities.Bill)
        assert stored == bill
        assert stored.status is BillStatus.PAID

    def test_list_by_purchase_order(self, db):
        db.upsert_bill(make_bill("BILL-1-0", "ACQ/2025/001"))
        db.upsert_bill(make_bill("BILL-1-1", "ACQ/2025/002"))
        db.upsert_bill(make_bill("BILL-1-2", "ACQ/2025/001"))

        assert [b.id for b in db.list_bills(purchase_order_id="ACQ/2025/001")] == [
            "BILL-1-0",
            "BILL-1-2",
        ]
        assert len(db.list_bills()) == 3


class TestSequences:
    """Tests for named counters."""

    def test_starts_at_one_and_increments(self, db):
        assert db.next_sequence("purchase_order/2025") == 1
        assert db.next_sequence("purchase_order/2025") == 2
        assert db.next_sequence("purchase_order/2026") == 1


def test_sqlite_data_survives_reconnect(temp_db):
    """Data written through one connection is visible to a new one."""
    temp_db.upsert_purchase_order(make_po())
    temp_db.next_sequence("purchase_order/2025")
    temp_db.disconnect()

    other = create_sqlite_database(database_path=temp_db.database_path)
    other.connect()
    try:
        assert other.get_purchase_order("ACQ/2025/001") == make_po()
        assert other.next_sequence("purchase_order/2025") == 2
    finally:
        other.disconnect()
