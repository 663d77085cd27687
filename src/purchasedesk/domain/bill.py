"""Bill domain service: XML import and the approval/payment workflow."""

import logging
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from purchasedesk.database.base import Database
from purchasedesk.domain import identifiers, lifecycle
from purchasedesk.domain.entities import Bill, BillStatus, FileRef
from purchasedesk.domain.errors import NotFoundError, ValidationError, entity_not_found
from purchasedesk.domain.files import accept_bill_files
from purchasedesk.domain.views import ALL_STATUSES, filter_bills
from purchasedesk.utils.date_parser import to_local_naive

logger = logging.getLogger(__name__)


def bills_total(bills: Iterable[Bill]) -> Decimal:
    """Sum bill amounts; bills without an amount count as zero."""
    return sum((b.amount or Decimal("0") for b in bills), Decimal("0"))


class BillService:
    """Service for managing bills."""

    def __init__(self, db: Database, actor: str = lifecycle.DEFAULT_ACTOR, strict: bool = True):
        """Initialize bill service.

        Args:
            db: Database instance
            actor: Name stamped on approved and paid bills
            strict: Enforce the transition table
        """
        self.db = db
        self.actor = actor
        self.strict = strict

    def _require(self, bill_id: str) -> Bill:
        bill = self.db.get_bill(bill_id)
        if bill is None:
            raise NotFoundError(entity_not_found("Bill", bill_id))
        return bill

    def import_bills(
        self,
        files: Iterable[FileRef],
        purchase_order_id: str,
        now: Optional[datetime] = None,
    ) -> list[Bill]:
        """Create one bill per XML file, attached to a purchase order.

        Files that are not XML are dropped without error. File content is not
        parsed, so amount and bill number stay empty.

        Args:
            files: Selected files
            purchase_order_id: Purchase order the bills belong to
            now: Upload time (defaults to the current time)

        Returns:
            The created bills, in file order

        Raises:
            NotFoundError: If the purchase order does not exist
        """
        if self.db.get_purchase_order(purchase_order_id) is None:
            raise NotFoundError(entity_not_found("Purchase order", purchase_order_id))

        now = to_local_naive(now or datetime.now())
        millis = identifiers.epoch_millis()
        # Two imports within the same millisecond must not reuse an id
        while self.db.get_bill(identifiers.bill_id(millis, 0)) is not None:
            millis += 1
        bills = []
        for index, file in enumerate(accept_bill_files(files)):
            bill = Bill(
                id=identifiers.bill_id(millis, index),
                purchase_order_id=purchase_order_id,
                file_name=file.name,
                xml_file=file,
                upload_date=now,
                status=BillStatus.NEEDS_APPROVAL,
            )
            self.db.upsert_bill(bill)
            bills.append(bill)

        logger.info("Imported %d bill(s) for purchase order %s", len(bills), purchase_order_id)
        return bills

    def get_bill(self, bill_id: str) -> Optional[Bill]:
        return self.db.get_bill(bill_id)

    def list_bills(self, purchase_order_id: Optional[str] = None) -> list[Bill]:
        return self.db.list_bills(purchase_order_id=purchase_order_id)

    def search_bills(self, query: str = "", status: str = ALL_STATUSES) -> list[Bill]:
        """Filter bills by free text and status."""
        return filter_bills(
            self.db.list_bills(),
            query=query,
            status=status,
            purchase_orders=self.db.list_purchase_orders(),
            suppliers=self.db.list_suppliers(),
        )

    def set_details(
        self,
        bill_id: str,
        amount: Optional[Decimal] = None,
        bill_number: Optional[str] = None,
    ) -> Bill:
        """Record the amount and/or number read off a bill.

        Fields left as None are not changed.
        """
        bill = self._require(bill_id)
        if amount is not None and amount < 0:
            raise ValidationError({"amount": "Amount must not be negative"})
        updated = replace(
            bill,
            amount=amount if amount is not None else bill.amount,
            bill_number=bill_number if bill_number is not None else bill.bill_number,
        )
        self.db.upsert_bill(updated)
        return updated

    def total_amount(self, purchase_order_id: str) -> Decimal:
        """Sum the known amounts of a purchase order's bills."""
        return bills_total(self.db.list_bills(purchase_order_id=purchase_order_id))

    def delete_bill(self, bill_id: str) -> None:
        self._require(bill_id)
        self.db.delete_bill(bill_id)
        logger.info("Deleted bill %s", bill_id)

    # Workflow

    def _store(self, before: Bill, after: Bill, action: str) -> Bill:
        logger.info("Bill %s: %s (%s -> %s)", after.id, action, before.status.value, after.status.value)
        self.db.upsert_bill(after)
        return after

    def approve_bill(self, bill_id: str, now: Optional[datetime] = None) -> Bill:
        bill = self._require(bill_id)
        updated = lifecycle.approve_bill(bill, actor=self.actor, now=now, strict=self.strict)
        return self._store(bill, updated, lifecycle.APPROVE)

    def reject_bill(self, bill_id: str) -> Bill:
        bill = self._require(bill_id)
        updated = lifecycle.reject_bill(bill, strict=self.strict)
        return self._store(bill, updated, lifecycle.REJECT)

    def pay_bill(self, bill_id: str, now: Optional[datetime] = None) -> Bill:
        bill = self._require(bill_id)
        updated = lifecycle.pay_bill(bill, actor=self.actor, now=now, strict=self.strict)
        return self._store(bill, updated, lifecycle.PAY)
