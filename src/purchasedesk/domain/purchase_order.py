"""Purchase order domain service."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Optional

from purchasedesk.database.base import Database
from purchasedesk.domain import lifecycle
from purchasedesk.domain.bill import bills_total
from purchasedesk.domain.entities import (
    Bill,
    FileRef,
    PurchaseOrder,
    PurchaseOrderStatus,
    TimelineEvent,
)
from purchasedesk.domain.errors import NotFoundError, ValidationError, entity_not_found
from purchasedesk.domain.identifiers import purchase_order_id, purchase_order_sequence_name
from purchasedesk.domain.status import StatusLabel, purchase_order_status_label
from purchasedesk.domain.timeline import build_timeline
from purchasedesk.domain.validation import validate_purchase_order
from purchasedesk.domain.views import (
    ALL_STATUSES,
    filter_purchase_orders,
    project_display,
    supplier_name,
)
from purchasedesk.utils.date_parser import to_local_naive

logger = logging.getLogger(__name__)

_UNSET = object()


@dataclass(frozen=True)
class PurchaseOrderDetails:
    """Everything the detail view of a purchase order shows."""

    purchase_order: PurchaseOrder
    status_label: StatusLabel
    supplier_name: str
    project_display: str
    bills: list[Bill]
    total_amount: Decimal
    timeline: list[TimelineEvent]
    actions: list[str]


class PurchaseOrderService:
    """Service for managing purchase orders and their workflow."""

    def __init__(self, db: Database, actor: str = lifecycle.DEFAULT_ACTOR, strict: bool = True):
        """Initialize purchase order service.

        Args:
            db: Database instance
            actor: Name stamped on created/approved/rejected orders
            strict: Enforce the transition table (False applies any action
                regardless of the current status)
        """
        self.db = db
        self.actor = actor
        self.strict = strict

    def _require(self, po_id: str) -> PurchaseOrder:
        po = self.db.get_purchase_order(po_id)
        if po is None:
            raise NotFoundError(entity_not_found("Purchase order", po_id))
        return po

    def _check_references(self, supplier_id: Optional[str], project_id: Optional[str]) -> None:
        errors = {}
        if supplier_id and self.db.get_supplier(supplier_id) is None:
            errors["supplier_id"] = entity_not_found("Supplier", supplier_id)
        if project_id and self.db.get_project(project_id) is None:
            errors["project_id"] = entity_not_found("Project", project_id)
        if errors:
            raise ValidationError(errors)

    def _next_id(self, year: int) -> str:
        # Skip numbers already used, e.g. by orders loaded from elsewhere
        while True:
            sequence = self.db.next_sequence(purchase_order_sequence_name(year))
            po_id = purchase_order_id(year, sequence)
            if self.db.get_purchase_order(po_id) is None:
                return po_id

    def create_purchase_order(
        self,
        name: str,
        supplier_id: str,
        explanation: str,
        signed_file: Optional[FileRef],
        cig_code: Optional[str] = None,
        project_id: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> PurchaseOrder:
        """Create a draft purchase order.

        The id is ``ACQ/<year>/<sequence>`` with the sequence drawn from the
        store's per-year counter.

        Args:
            name: Order name
            supplier_id: Supplier reference (must exist)
            explanation: Reason for the purchase
            signed_file: Signed request document
            cig_code: Optional CIG code (exactly 10 characters)
            project_id: Optional project reference (must exist when given)
            now: Creation time (defaults to the current time)

        Returns:
            The stored purchase order

        Raises:
            ValidationError: If any field is missing or invalid
        """
        cig_code = cig_code.strip() if cig_code else None
        project_id = project_id or None
        validate_purchase_order(
            name=name,
            supplier_id=supplier_id,
            explanation=explanation,
            cig_code=cig_code,
            signed_file=signed_file,
            creating=True,
        )
        self._check_references(supplier_id, project_id)

        now = to_local_naive(now or datetime.now())
        po = PurchaseOrder(
            id=self._next_id(now.year),
            name=name.strip(),
            supplier_id=supplier_id,
            status=PurchaseOrderStatus.DRAFT,
            cig_code=cig_code,
            project_id=project_id,
            signed_file=signed_file,
            explanation=explanation.strip(),
            created_by=self.actor,
            created_date=now,
        )
        self.db.upsert_purchase_order(po)
        logger.info("Created purchase order %s (%s)", po.id, po.name)
        return po

    def update_purchase_order(
        self,
        po_id: str,
        name=_UNSET,
        supplier_id=_UNSET,
        explanation=_UNSET,
        cig_code=_UNSET,
        project_id=_UNSET,
        signed_file=_UNSET,
    ) -> PurchaseOrder:
        """Edit the form fields of a purchase order.

        Only the arguments passed are changed; pass None to clear an optional
        field. Status and lifecycle stamps are not touched.

        Raises:
            NotFoundError: If the order does not exist
            ValidationError: If the resulting order is invalid
        """
        po = self._require(po_id)
        if cig_code is not _UNSET:
            cig_code = cig_code.strip() if cig_code else None
        if project_id is not _UNSET:
            project_id = project_id or None
        if name is not _UNSET and name is not None:
            name = name.strip()
        if explanation is not _UNSET and explanation is not None:
            explanation = explanation.strip()
        changes = {
            key: value
            for key, value in (
                ("name", name),
                ("supplier_id", supplier_id),
                ("explanation", explanation),
                ("cig_code", cig_code),
                ("project_id", project_id),
                ("signed_file", signed_file),
            )
            if value is not _UNSET
        }
        updated = replace(po, **changes)
        validate_purchase_order(
            name=updated.name,
            supplier_id=updated.supplier_id,
            explanation=updated.explanation,
            cig_code=updated.cig_code,
            signed_file=updated.signed_file,
            creating=False,
        )
        self._check_references(
            updated.supplier_id if "supplier_id" in changes else None,
            updated.project_id if "project_id" in changes else None,
        )
        self.db.upsert_purchase_order(updated)
        logger.info("Updated purchase order %s", po_id)
        return updated

    def delete_purchase_order(self, po_id: str) -> None:
        """Delete a purchase order. Its bills are kept."""
        self._require(po_id)
        self.db.delete_purchase_order(po_id)
        logger.info("Deleted purchase order %s", po_id)

    def get_purchase_order(self, po_id: str) -> Optional[PurchaseOrder]:
        return self.db.get_purchase_order(po_id)

    def list_purchase_orders(self) -> list[PurchaseOrder]:
        return self.db.list_purchase_orders()

    def search_purchase_orders(self, query: str = "", status: str = ALL_STATUSES) -> list[PurchaseOrder]:
        """Filter purchase orders by free text and status."""
        return filter_purchase_orders(
            self.db.list_purchase_orders(),
            query=query,
            status=status,
            suppliers=self.db.list_suppliers(),
            projects=self.db.list_projects(),
            customers=self.db.list_customers(),
        )

    # Workflow

    def apply_action(self, po_id: str, action: str, now: Optional[datetime] = None) -> PurchaseOrder:
        """Run a workflow action on a stored purchase order and store the result.

        Args:
            po_id: Purchase order ID
            action: One of submit, approve, reject, assign, pay, close
            now: Time stamped on the order (defaults to the current time)

        Raises:
            NotFoundError: If the order does not exist
            TransitionError: If the action is not allowed from the current status
            ValueError: If the action is unknown
        """
        if action not in lifecycle.PURCHASE_ORDER_ACTIONS:
            raise ValueError(f"Unknown purchase order action '{action}'")
        po = self._require(po_id)

        if action in (lifecycle.APPROVE, lifecycle.REJECT):
            updated = lifecycle.PURCHASE_ORDER_ACTIONS[action](
                po, actor=self.actor, now=now, strict=self.strict
            )
        elif action == lifecycle.PAY:
            updated = lifecycle.pay(po, strict=self.strict)
        else:
            updated = lifecycle.PURCHASE_ORDER_ACTIONS[action](po, now=now, strict=self.strict)

        logger.info(
            "Purchase order %s: %s (%s -> %s)",
            po_id, action, po.status.value, updated.status.value,
        )
        self.db.upsert_purchase_order(updated)
        return updated

    def submit(self, po_id: str, now: Optional[datetime] = None) -> PurchaseOrder:
        return self.apply_action(po_id, lifecycle.SUBMIT, now)

    def approve(self, po_id: str, now: Optional[datetime] = None) -> PurchaseOrder:
        return self.apply_action(po_id, lifecycle.APPROVE, now)

    def reject(self, po_id: str, now: Optional[datetime] = None) -> PurchaseOrder:
        return self.apply_action(po_id, lifecycle.REJECT, now)

    def assign(self, po_id: str, now: Optional[datetime] = None) -> PurchaseOrder:
        return self.apply_action(po_id, lifecycle.ASSIGN, now)

    def pay(self, po_id: str) -> PurchaseOrder:
        return self.apply_action(po_id, lifecycle.PAY)

    def close(self, po_id: str, now: Optional[datetime] = None) -> PurchaseOrder:
        return self.apply_action(po_id, lifecycle.CLOSE, now)

    # Detail view

    def get_timeline(self, po_id: str) -> list[TimelineEvent]:
        """Rebuild the timeline of a purchase order from its stamps and bills."""
        po = self._require(po_id)
        return build_timeline(po, self.db.list_bills(purchase_order_id=po_id))

    def get_details(self, po_id: str) -> PurchaseOrderDetails:
        """Collect the detail view of a purchase order."""
        po = self._require(po_id)
        bills = self.db.list_bills(purchase_order_id=po_id)
        return PurchaseOrderDetails(
            purchase_order=po,
            status_label=purchase_order_status_label(po.status),
            supplier_name=supplier_name(self.db.list_suppliers(), po.supplier_id),
            project_display=project_display(
                self.db.list_projects(), self.db.list_customers(), po.project_id
            ),
            bills=bills,
            total_amount=bills_total(bills),
            timeline=build_timeline(po, bills),
            actions=lifecycle.available_actions(po),
        )
