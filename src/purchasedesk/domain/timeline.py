"""Timeline reconstruction for a purchase order and its bills."""

from typing import Iterable, Optional
from datetime import datetime

from purchasedesk.domain.entities import (
    Bill,
    PurchaseOrder,
    PurchaseOrderStatus,
    TimelineEvent,
    TimelineEventType as Event,
)


def _event(
    event_type: Event, entity_id: str, description: str, when: datetime, user: Optional[str] = None
) -> TimelineEvent:
    return TimelineEvent(
        id=f"{event_type.value}-{entity_id}",
        type=event_type,
        description=description,
        date=when,
        user=user,
    )


def build_timeline(po: PurchaseOrder, bills: Iterable[Bill]) -> list[TimelineEvent]:
    """Rebuild the ordered event history of a purchase order.

    Events come from the lifecycle dates on the order and on every bill
    attached to it. Bills belonging to other orders are ignored. The result
    is sorted by date ascending; events sharing a date keep the order in
    which they are emitted here.

    Args:
        po: Purchase order to describe
        bills: Bills to consider (typically all bills of the order)

    Returns:
        List of timeline events
    """
    events: list[TimelineEvent] = []

    if po.created_date is not None:
        events.append(
            _event(Event.CREATED, po.id, f"Purchase order {po.id} created", po.created_date, po.created_by)
        )

    was_submitted = (
        po.status == PurchaseOrderStatus.WAITING_FOR_APPROVAL
        or po.approved_date is not None
        or po.rejected_date is not None
        or po.submitted_date is not None
    )
    # No dedicated submission stamp on older orders; fall back to creation.
    submitted_at = po.submitted_date or po.created_date
    if was_submitted and submitted_at is not None:
        events.append(
            _event(Event.SUBMITTED, po.id, "Sent for approval", submitted_at, po.created_by)
        )

    if po.approved_date is not None:
        events.append(
            _event(Event.APPROVED, po.id, "Approved by the contracts office", po.approved_date, po.approved_by)
        )
    if po.rejected_date is not None:
        events.append(_event(Event.REJECTED, po.id, "Rejected", po.rejected_date, po.rejected_by))
    if po.assigned_date is not None:
        events.append(_event(Event.ASSIGNED, po.id, "Assigned to supplier", po.assigned_date))
    if po.closed_date is not None:
        events.append(_event(Event.CLOSED, po.id, "Purchase order closed", po.closed_date))

    for bill in bills:
        if bill.purchase_order_id != po.id:
            continue
        events.append(
            _event(Event.BILL_UPLOADED, bill.id, f"Bill {bill.file_name} uploaded", bill.upload_date)
        )
        if bill.approval_date is not None:
            events.append(
                _event(
                    Event.BILL_APPROVED, bill.id, f"Bill {bill.file_name} approved",
                    bill.approval_date, bill.approved_by,
                )
            )
        if bill.payment_date is not None:
            events.append(
                _event(
                    Event.BILL_PAID, bill.id, f"Bill {bill.file_name} paid",
                    bill.payment_date, bill.paid_by,
                )
            )

    # sorted() is stable, so ties keep emission order
    return sorted(events, key=lambda event: event.date)
