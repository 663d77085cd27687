"""Workflow transitions for purchase orders and bills.

Every transition is a pure function: it takes an entity and returns an
updated copy with the new status and the matching actor/date stamps.

Legal moves are listed once in a transition table keyed by
``(from_status, action)``. In strict mode (the default) an action whose
current status has no entry raises ``TransitionError``. With
``strict=False`` the status and stamps are applied whatever the current
status is, which is how the first version of the dashboard behaved.

Stamps are stored as naive local time; aware values are converted first.
"""

from dataclasses import replace
from datetime import datetime
from typing import Optional

from purchasedesk.domain.entities import (
    Bill,
    BillStatus,
    PurchaseOrder,
    PurchaseOrderStatus,
)
from purchasedesk.domain.errors import TransitionError, transition_not_allowed
from purchasedesk.utils.date_parser import to_local_naive

DEFAULT_ACTOR = "admin"

SUBMIT = "submit"
APPROVE = "approve"
REJECT = "reject"
ASSIGN = "assign"
PAY = "pay"
CLOSE = "close"

PO = PurchaseOrderStatus

PURCHASE_ORDER_TRANSITIONS: dict[tuple[PurchaseOrderStatus, str], PurchaseOrderStatus] = {
    (PO.DRAFT, SUBMIT): PO.WAITING_FOR_APPROVAL,
    (PO.WAITING_FOR_APPROVAL, APPROVE): PO.IN_PROGRESS,
    (PO.WAITING_FOR_APPROVAL, REJECT): PO.REJECTED,
    (PO.IN_PROGRESS, ASSIGN): PO.ASSIGNED,
    (PO.ASSIGNED, PAY): PO.PAID,
    (PO.ASSIGNED, CLOSE): PO.CLOSED,
    (PO.PAID, CLOSE): PO.CLOSED,
}

BILL_TRANSITIONS: dict[tuple[BillStatus, str], BillStatus] = {
    (BillStatus.NEEDS_APPROVAL, APPROVE): BillStatus.APPROVED,
    (BillStatus.NEEDS_APPROVAL, REJECT): BillStatus.REJECTED,
    (BillStatus.APPROVED, PAY): BillStatus.PAID,
}


def _targets(table: dict) -> dict:
    return {action: to_status for (_, action), to_status in table.items()}


_PURCHASE_ORDER_TARGETS = _targets(PURCHASE_ORDER_TRANSITIONS)
_BILL_TARGETS = _targets(BILL_TRANSITIONS)


def _next_status(table, targets, kind, entity_id, status, action, strict):
    to_status = table.get((status, action))
    if to_status is not None:
        return to_status
    if strict:
        raw = getattr(status, "value", status)
        raise TransitionError(transition_not_allowed(kind, entity_id, action, raw))
    return targets[action]


def _stamp(now: Optional[datetime]) -> datetime:
    return to_local_naive(now or datetime.now())


def _po_status(po: PurchaseOrder, action: str, strict: bool) -> PurchaseOrderStatus:
    return _next_status(
        PURCHASE_ORDER_TRANSITIONS, _PURCHASE_ORDER_TARGETS,
        "purchase order", po.id, po.status, action, strict,
    )


def _bill_status(bill: Bill, action: str, strict: bool) -> BillStatus:
    return _next_status(
        BILL_TRANSITIONS, _BILL_TARGETS, "bill", bill.id, bill.status, action, strict,
    )


def available_actions(po: PurchaseOrder) -> list[str]:
    """Return actions allowed from the purchase order's current status."""
    return [action for (status, action) in PURCHASE_ORDER_TRANSITIONS if status == po.status]


def available_bill_actions(bill: Bill) -> list[str]:
    """Return actions allowed from the bill's current status."""
    return [action for (status, action) in BILL_TRANSITIONS if status == bill.status]


# Purchase orders

def submit(po: PurchaseOrder, now: Optional[datetime] = None, strict: bool = True) -> PurchaseOrder:
    """Send a draft purchase order for approval."""
    return replace(
        po,
        status=_po_status(po, SUBMIT, strict),
        submitted_date=_stamp(now),
    )


def approve(
    po: PurchaseOrder,
    actor: str = DEFAULT_ACTOR,
    now: Optional[datetime] = None,
    strict: bool = True,
) -> PurchaseOrder:
    """Approve a purchase order; the contracts office takes it in charge."""
    return replace(
        po,
        status=_po_status(po, APPROVE, strict),
        approved_date=_stamp(now),
        approved_by=actor,
    )


def reject(
    po: PurchaseOrder,
    actor: str = DEFAULT_ACTOR,
    now: Optional[datetime] = None,
    strict: bool = True,
) -> PurchaseOrder:
    """Reject a purchase order waiting for approval."""
    return replace(
        po,
        status=_po_status(po, REJECT, strict),
        rejected_date=_stamp(now),
        rejected_by=actor,
    )


def assign(po: PurchaseOrder, now: Optional[datetime] = None, strict: bool = True) -> PurchaseOrder:
    """Mark a purchase order as assigned to its supplier."""
    return replace(
        po,
        status=_po_status(po, ASSIGN, strict),
        assigned_date=_stamp(now),
    )


def pay(po: PurchaseOrder, strict: bool = True) -> PurchaseOrder:
    """Mark an assigned purchase order as paid. There is no payment stamp."""
    return replace(po, status=_po_status(po, PAY, strict))


def close(po: PurchaseOrder, now: Optional[datetime] = None, strict: bool = True) -> PurchaseOrder:
    """Close an assigned or paid purchase order."""
    return replace(
        po,
        status=_po_status(po, CLOSE, strict),
        closed_date=_stamp(now),
    )


# Bills

def approve_bill(
    bill: Bill,
    actor: str = DEFAULT_ACTOR,
    now: Optional[datetime] = None,
    strict: bool = True,
) -> Bill:
    """Approve a bill for payment."""
    return replace(
        bill,
        status=_bill_status(bill, APPROVE, strict),
        approval_date=_stamp(now),
        approved_by=actor,
    )


def reject_bill(bill: Bill, strict: bool = True) -> Bill:
    """Reject a bill.

    Rejection records neither a date nor an actor.
    """
    return replace(bill, status=_bill_status(bill, REJECT, strict))


def pay_bill(
    bill: Bill,
    actor: str = DEFAULT_ACTOR,
    now: Optional[datetime] = None,
    strict: bool = True,
) -> Bill:
    """Mark an approved bill as paid."""
    return replace(
        bill,
        status=_bill_status(bill, PAY, strict),
        payment_date=_stamp(now),
        paid_by=actor,
    )


PURCHASE_ORDER_ACTIONS = {
    SUBMIT: submit,
    APPROVE: approve,
    REJECT: reject,
    ASSIGN: assign,
    PAY: pay,
    CLOSE: close,
}
