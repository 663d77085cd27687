"""List views: reference joins and free-text/status filtering.

Joins are linear lookups by id. A reference that no longer resolves is
shown as ``"-"`` rather than raising.
"""

from enum import Enum
from typing import Iterable, Optional, Sequence, TypeVar, Union

from purchasedesk.domain.entities import (
    Bill,
    Customer,
    Project,
    PurchaseOrder,
    Supplier,
)

ALL_STATUSES = "all"
PLACEHOLDER = "-"

T = TypeVar("T")


def find_by_id(items: Iterable[T], entity_id: Optional[str]) -> Optional[T]:
    """Return the first item whose ``id`` matches, or None."""
    if entity_id is None:
        return None
    for item in items:
        if item.id == entity_id:
            return item
    return None


def customer_name(customers: Sequence[Customer], customer_id: Optional[str]) -> str:
    customer = find_by_id(customers, customer_id)
    return customer.name if customer is not None else PLACEHOLDER


def supplier_name(suppliers: Sequence[Supplier], supplier_id: Optional[str]) -> str:
    supplier = find_by_id(suppliers, supplier_id)
    return supplier.name if supplier is not None else PLACEHOLDER


def project_display(
    projects: Sequence[Project], customers: Sequence[Customer], project_id: Optional[str]
) -> str:
    """Return ``"<project id> - <customer name>"`` for a project reference.

    ``N/A`` stands in for a missing customer; ``-`` for a missing project.
    """
    project = find_by_id(projects, project_id)
    if project is None:
        return PLACEHOLDER
    customer = find_by_id(customers, project.customer_id)
    return f"{project.id} - {customer.name if customer is not None else 'N/A'}"


def _matches(query: str, *fields: Optional[str]) -> bool:
    needle = query.lower()
    return any(field is not None and needle in field.lower() for field in fields)


def _status_matches(status: Union[Enum, str], status_filter: Union[Enum, str]) -> bool:
    wanted = status_filter.value if isinstance(status_filter, Enum) else status_filter
    if wanted == ALL_STATUSES:
        return True
    raw = status.value if isinstance(status, Enum) else status
    return raw == wanted


def filter_purchase_orders(
    orders: Sequence[PurchaseOrder],
    query: str = "",
    status: Union[Enum, str] = ALL_STATUSES,
    suppliers: Sequence[Supplier] = (),
    projects: Sequence[Project] = (),
    customers: Sequence[Customer] = (),
) -> list[PurchaseOrder]:
    """Filter purchase orders by free text and status.

    The query is matched case-insensitively against the id, name, CIG code,
    supplier name and project display string. Input order is preserved.
    """
    return [
        po
        for po in orders
        if _status_matches(po.status, status)
        and _matches(
            query,
            po.id,
            po.name,
            po.cig_code,
            supplier_name(suppliers, po.supplier_id),
            project_display(projects, customers, po.project_id),
        )
    ]


def bill_purchase_order_info(
    bill: Bill,
    purchase_orders: Sequence[PurchaseOrder],
    suppliers: Sequence[Supplier],
    projects: Sequence[Project] = (),
    customers: Sequence[Customer] = (),
) -> dict[str, str]:
    """Return the purchase order, supplier and customer names shown on a bill row."""
    po = find_by_id(purchase_orders, bill.purchase_order_id)
    if po is None:
        return {"po_name": PLACEHOLDER, "supplier_name": PLACEHOLDER, "customer_name": PLACEHOLDER}
    project = find_by_id(projects, po.project_id)
    return {
        "po_name": po.name,
        "supplier_name": supplier_name(suppliers, po.supplier_id),
        "customer_name": customer_name(customers, project.customer_id if project else None),
    }


def filter_bills(
    bills: Sequence[Bill],
    query: str = "",
    status: Union[Enum, str] = ALL_STATUSES,
    purchase_orders: Sequence[PurchaseOrder] = (),
    suppliers: Sequence[Supplier] = (),
) -> list[Bill]:
    """Filter bills by free text and status.

    The query is matched against the bill id, file name, bill number, and the
    name and supplier of the purchase order the bill belongs to.
    """
    result = []
    for bill in bills:
        if not _status_matches(bill.status, status):
            continue
        info = bill_purchase_order_info(bill, purchase_orders, suppliers)
        if _matches(
            query, bill.id, bill.file_name, bill.bill_number, info["po_name"], info["supplier_name"]
        ):
            result.append(bill)
    return result


def filter_customers(customers: Sequence[Customer], query: str = "") -> list[Customer]:
    return [c for c in customers if _matches(query, c.name)]


def filter_projects(
    projects: Sequence[Project], query: str = "", customers: Sequence[Customer] = ()
) -> list[Project]:
    return [
        p
        for p in projects
        if _matches(query, p.id, customer_name(customers, p.customer_id), p.cup_code)
    ]


def filter_suppliers(suppliers: Sequence[Supplier], query: str = "") -> list[Supplier]:
    return [s for s in suppliers if _matches(query, s.name, s.vat_number)]
