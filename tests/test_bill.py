"""Tests for bill service and commands."""

import pytest
from datetime import datetime
from decimal import Decimal

from purchasedesk.cli.main import cli
from purchasedesk.domain.bill import bills_total
from purchasedesk.domain.entities import Bill, BillStatus, FileRef
from purchasedesk.domain.errors import NotFoundError, TransitionError, ValidationError
from purchasedesk.domain.purchase_order import PurchaseOrderService
from purchasedesk.domain.supplier import SupplierService

UPLOADED = datetime(2024, 1, 15, 11, 0)


@pytest.fixture
def bill(bill_service, sample_po):
    """A bill awaiting approval on the sample order."""
    return bill_service.import_bills([FileRef("a.xml", "text/xml")], sample_po.id, now=UPLOADED)[0]


class TestImportBills:
    """Tests for bill import."""

    def test_only_xml_files_become_bills(self, bill_service, sample_po):
        """Importing a.xml and b.pdf creates exactly one bill."""
        bills = bill_service.import_bills(
            [FileRef("a.xml", "text/xml"), FileRef("b.pdf", "application/pdf")],
            sample_po.id,
            now=UPLOADED,
        )
        assert len(bills) == 1
        bill = bills[0]
        assert bill.file_name == "a.xml"
        assert bill.purchase_order_id == sample_po.id
        assert bill.status == BillStatus.NEEDS_APPROVAL
        assert bill.upload_date == UPLOADED
        assert bill.amount is None
        assert bill_service.list_bills() == bills

    def test_ids_are_unique(self, bill_service, sample_po):
        files = [FileRef(f"{n}.xml", "text/xml") for n in range(3)]
        first = bill_service.import_bills(files, sample_po.id)
        second = bill_service.import_bills(files, sample_po.id)
        ids = [b.id for b in first + second]
        assert len(set(ids)) == 6
        assert all(i.startswith("BILL-") for i in ids)
        assert [i.rsplit("-", 1)[1] for i in ids[:3]] == ["0", "1", "2"]

    def test_unknown_purchase_order(self, bill_service):
        with pytest.raises(NotFoundError):
            bill_service.import_bills([FileRef("a.xml", "text/xml")], "ACQ/2025/999")
        assert bill_service.list_bills() == []

    def test_no_xml_files(self, bill_service, sample_po):
        assert bill_service.import_bills([FileRef("b.pdf", "application/pdf")], sample_po.id) == []

    def test_upload_appears_on_timeline(self, bill_service, po_service, bill):
        events = po_service.get_timeline(bill.purchase_order_id)
        uploads = [e for e in events if e.id == f"bill_uploaded-{bill.id}"]
        assert len(uploads) == 1
        assert uploads[0].date == UPLOADED


class TestBillDetails:
    """Tests for amount and number entry."""

    def test_set_details(self, bill_service, bill):
        updated = bill_service.set_details(bill.id, amount=Decimal("1234.56"), bill_number="FT-17")
        assert updated.amount == Decimal("1234.56")
        assert updated.bill_number == "FT-17"
        assert bill_service.get_bill(bill.id) == updated

    def test_partial_update_keeps_other_field(self, bill_service, bill):
        bill_service.set_details(bill.id, bill_number="FT-17")
        updated = bill_service.set_details(bill.id, amount=Decimal("10"))
        assert updated.bill_number == "FT-17"

    def test_negative_amount(self, bill_service, bill):
        with pytest.raises(ValidationError):
            bill_service.set_details(bill.id, amount=Decimal("-1"))

    def test_total_amount(self, bill_service, bill, sample_po):
        other = bill_service.import_bills([FileRef("b.xml", "text/xml")], sample_po.id)[0]
        bill_service.set_details(bill.id, amount=Decimal("10.25"))
        bill_service.set_details(other.id, amount=Decimal("5"))
        assert bill_service.total_amount(sample_po.id) == Decimal("15.25")

    def test_details_total_matches_service_total(self, bill_service, po_service, bill, sample_po):
        bill_service.set_details(bill.id, amount=Decimal("7.50"))
        details = po_service.get_details(sample_po.id)
        assert details.total_amount == bill_service.total_amount(sample_po.id) == Decimal("7.50")

    def test_total_ignores_missing_amounts(self, bill_service, bill, sample_po):
        assert bill_service.total_amount(sample_po.id) == Decimal("0")


class TestBillWorkflow:
    """Tests for bill approval and payment."""

    def test_approve_then_pay(self, bill_service, bill):
        approved = bill_service.approve_bill(bill.id, now=datetime(2024, 1, 16))
        assert approved.status == BillStatus.APPROVED
        assert approved.approved_by == "anna.bianchi"
        paid = bill_service.pay_bill(bill.id, now=datetime(2024, 2, 1))
        assert paid.status == BillStatus.PAID
        assert paid.paid_by == "anna.bianchi"
        assert paid.payment_date == datetime(2024, 2, 1)
        assert bill_service.get_bill(bill.id) == paid

    def test_reject(self, bill_service, bill):
        rejected = bill_service.reject_bill(bill.id)
        assert rejected.status == BillStatus.REJECTED
        assert rejected.approval_date is None

    def test_pay_before_approval(self, bill_service, bill):
        with pytest.raises(TransitionError):
            bill_service.pay_bill(bill.id)
        assert bill_service.get_bill(bill.id).status == BillStatus.NEEDS_APPROVAL

    def test_missing_bill(self, bill_service):
        with pytest.raises(NotFoundError):
            bill_service.approve_bill("BILL-0-0")

    def test_search(self, bill_service, bill, sample_po):
        bill_service.approve_bill(bill.id)
        assert bill_service.search_bills("laptops") == [bill_service.get_bill(bill.id)]
        assert bill_service.search_bills(status="needs_approval") == []
        assert len(bill_service.search_bills(status="approved")) == 1

    def test_delete(self, bill_service, bill):
        bill_service.delete_bill(bill.id)
        assert bill_service.list_bills() == []


@pytest.fixture
def po_db(temp_db):
    """SQLite database holding supplier S-1 and draft order ACQ/2025/001."""
    SupplierService(temp_db).create_supplier("Acme S.r.l.", "IT01234567890", supplier_id="S-1")
    PurchaseOrderService(temp_db).create_purchase_order(
        name="Office laptops",
        supplier_id="S-1",
        explanation="Replacement",
        signed_file=FileRef("request.pdf", "application/pdf"),
        now=datetime(2025, 3, 10),
    )
    return temp_db


def test_bill_import_command(cli_runner, po_db, make_file):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", po_db.database_path,
            "bill", "import", make_file("a.xml"), make_file("b.pdf", "%PDF"),
            "--po", "ACQ/2025/001",
        ],
    )
    assert result.exit_code == 0
    assert "Imported: 1 bill(s)" in result.output
    assert "Skipped: 1 non-XML file(s)" in result.output
    assert "a.xml" in result.output


def test_bill_import_unknown_order(cli_runner, po_db, make_file):
    result = cli_runner.invoke(
        cli, ["--db-path", po_db.database_path, "bill", "import", make_file("a.xml"), "--po", "ACQ/1999/001"]
    )
    assert result.exit_code == 1
    assert "Purchase order 'ACQ/1999/001' not found" in result.output


def test_bill_workflow_commands(cli_runner, po_db, make_file):
    args = ["--db-path", po_db.database_path, "bill"]
    cli_runner.invoke(cli, args + ["import", make_file("a.xml"), "--po", "ACQ/2025/001"])
    bill_id = po_db.list_bills()[0].id
    po_db.disconnect()

    result = cli_runner.invoke(cli, args + ["set", bill_id, "--amount", "1.234,56", "--number", "FT-17"])
    assert result.exit_code == 0
    assert "1.234,56 €" in result.output

    result = cli_runner.invoke(cli, args + ["pay", bill_id])
    assert result.exit_code == 1
    assert "Cannot pay bill" in result.output

    result = cli_runner.invoke(cli, args + ["approve", bill_id])
    assert result.exit_code == 0
    assert f"Bill {bill_id} is now Approved" in result.output

    result = cli_runner.invoke(cli, args + ["list", "--status", "approved"])
    assert result.exit_code == 0
    assert "FT-17" in result.output
    assert "Office laptops" in result.output
    assert "Acme S.r.l." in result.output


def test_bill_set_bad_amount(cli_runner, po_db):
    result = cli_runner.invoke(
        cli, ["--db-path", po_db.database_path, "bill", "set", "BILL-0-0", "--amount", "lots"]
    )
    assert result.exit_code == 1
    assert "Could not parse amount" in result.output


def test_bills_total():
    def make(amount):
        return Bill(
            id=f"BILL-1-{amount}",
            purchase_order_id="ACQ/2025/001",
            file_name="a.xml",
            xml_file=FileRef("a.xml"),
            upload_date=UPLOADED,
            amount=amount,
        )

    assert bills_total([]) == Decimal("0")
    assert bills_total([make(Decimal("10.25")), make(None), make(Decimal("5"))]) == Decimal("15.25")
