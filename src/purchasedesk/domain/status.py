"""Status label mapping for purchase orders and bills."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from purchasedesk.domain.entities import BillStatus, PurchaseOrderStatus


GRAY = "bg-gray-500 hover:bg-gray-600 text-white"
YELLOW = "bg-yellow-500 hover:bg-yellow-600 text-white"
GREEN = "bg-green-500 hover:bg-green-600 text-white"
BLUE = "bg-blue-500 hover:bg-blue-600 text-white"
RED = "bg-red-500 hover:bg-red-600 text-white"
ORANGE = "bg-orange-500 hover:bg-orange-600 text-white"
SLATE = "bg-slate-700 hover:bg-slate-800 text-white"

DEFAULT_STYLE = GRAY


@dataclass(frozen=True)
class StatusLabel:
    """Display label and style class for a status badge."""

    label: str
    style_class: str


PURCHASE_ORDER_LABELS: dict[str, StatusLabel] = {
    PurchaseOrderStatus.DRAFT.value: StatusLabel("Draft", GRAY),
    PurchaseOrderStatus.WAITING_FOR_APPROVAL.value: StatusLabel("Waiting for Approval", YELLOW),
    PurchaseOrderStatus.IN_PROGRESS.value: StatusLabel("In Progress by Contracts Office", YELLOW),
    PurchaseOrderStatus.ASSIGNED.value: StatusLabel("Assigned", GREEN),
    PurchaseOrderStatus.PAID.value: StatusLabel("Paid", BLUE),
    PurchaseOrderStatus.REJECTED.value: StatusLabel("Rejected", RED),
    PurchaseOrderStatus.CLOSED.value: StatusLabel("Closed", SLATE),
}

BILL_LABELS: dict[str, StatusLabel] = {
    BillStatus.NEEDS_APPROVAL.value: StatusLabel("Needs Approval", ORANGE),
    BillStatus.APPROVED.value: StatusLabel("Approved", GREEN),
    BillStatus.PAID.value: StatusLabel("Paid", BLUE),
    BillStatus.REJECTED.value: StatusLabel("Rejected", RED),
}


def _lookup(table: dict[str, StatusLabel], status: Union[Enum, str]) -> StatusLabel:
    raw = status.value if isinstance(status, Enum) else str(status)
    label = table.get(raw)
    if label is None:
        return StatusLabel(label=raw, style_class=DEFAULT_STYLE)
    return label


def purchase_order_status_label(status: Union[PurchaseOrderStatus, str]) -> StatusLabel:
    """Map a purchase order status to its badge.

    Unknown values come back verbatim as the label with the default style.
    """
    return _lookup(PURCHASE_ORDER_LABELS, status)


def bill_status_label(status: Union[BillStatus, str]) -> StatusLabel:
    """Map a bill status to its badge.

    Unknown values come back verbatim as the label with the default style.
    """
    return _lookup(BILL_LABELS, status)
