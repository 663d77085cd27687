"""Tests for domain entities."""

import pytest
from dataclasses import FrozenInstanceError, replace
from datetime import datetime

from purchasedesk.domain.entities import (
    Bill,
    BillStatus,
    Customer,
    FileRef,
    PurchaseOrder,
    PurchaseOrderStatus,
    Supplier,
)


class TestPurchaseOrder:
    """Tests for PurchaseOrder entity."""

    def test_defaults(self):
        po = PurchaseOrder(id="ACQ/2025/001", name="Laptops", supplier_id="S-1")
        assert po.status == PurchaseOrderStatus.DRAFT
        assert po.cig_code is None
        assert po.approved_date is None

    def test_immutability(self):
        po = PurchaseOrder(id="ACQ/2025/001", name="Laptops", supplier_id="S-1")
        with pytest.raises(FrozenInstanceError):
            po.status = PurchaseOrderStatus.CLOSED

    def test_replace_builds_new_instance(self):
        po = PurchaseOrder(id="ACQ/2025/001", name="Laptops", supplier_id="S-1")
        renamed = replace(po, name="Desktops")
        assert renamed.name == "Desktops"
        assert po.name == "Laptops"

    def test_status_compares_to_raw_string(self):
        assert PurchaseOrderStatus.WAITING_FOR_APPROVAL == "waiting_for_approval"
        assert PurchaseOrderStatus("in_progress") is PurchaseOrderStatus.IN_PROGRESS


class TestBill:
    """Tests for Bill entity."""

    def test_defaults(self):
        bill = Bill(
            id="BILL-1-0",
            purchase_order_id="ACQ/2025/001",
            file_name="a.xml",
            xml_file=FileRef("a.xml"),
            upload_date=datetime(2025, 1, 15),
        )
        assert bill.status == BillStatus.NEEDS_APPROVAL
        assert bill.amount is None
        assert bill.paid_by is None


class TestMasterData:
    def test_equality(self):
        assert Customer("C-1", "Comune di Milano") == Customer("C-1", "Comune di Milano")
        assert Supplier("S-1", "Acme", "IT1") != Supplier("S-2", "Acme", "IT1")


class TestFileRef:
    """Tests for FileRef."""

    def test_from_path(self, tmp_path):
        path = tmp_path / "invoice.xml"
        path.write_text("<FatturaElettronica/>")
        ref = FileRef.from_path(str(path))
        assert ref.name == "invoice.xml"
        assert ref.content_type in ("text/xml", "application/xml")
        assert ref.size == len("<FatturaElettronica/>")

    def test_from_missing_path(self):
        ref = FileRef.from_path("/nonexistent/request.pdf")
        assert ref.name == "request.pdf"
        assert ref.content_type == "application/pdf"
        assert ref.size is None


class TestStatusCoercion:
    """Raw status strings are turned into the status enums."""

    def test_purchase_order_string_status(self):
        po = PurchaseOrder(id="ACQ/2025/001", name="Laptops", supplier_id="S-1", status="waiting_for_approval")
        assert po.status is PurchaseOrderStatus.WAITING_FOR_APPROVAL

    def test_bill_string_status(self):
        bill = Bill(
            id="BILL-1-0",
            purchase_order_id="ACQ/2025/001",
            file_name="a.xml",
            xml_file=FileRef("a.xml"),
            upload_date=datetime(2025, 1, 15),
            status="approved",
        )
        assert bill.status is BillStatus.APPROVED

    def test_replace_keeps_enum(self):
        po = PurchaseOrder(id="ACQ/2025/001", name="Laptops", supplier_id="S-1")
        assert replace(po, status="closed").status is PurchaseOrderStatus.CLOSED

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            PurchaseOrder(id="ACQ/2025/001", name="Laptops", supplier_id="S-1", status="archived")
