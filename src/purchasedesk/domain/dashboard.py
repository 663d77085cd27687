"""Dashboard totals."""

from collections import Counter
from typing import Any

from purchasedesk.database.base import Database
from purchasedesk.domain.entities import BillStatus, PurchaseOrderStatus


class DashboardService:
    """Service computing the counts shown on the dashboard."""

    def __init__(self, db: Database):
        self.db = db

    def get_summary(self) -> dict[str, Any]:
        """Return entity totals and per-status counts.

        Every status appears in the counts, with zero when unused.
        """
        orders = self.db.list_purchase_orders()
        bills = self.db.list_bills()

        po_counts = Counter(po.status.value for po in orders)
        bill_counts = Counter(b.status.value for b in bills)

        return {
            "customers": len(self.db.list_customers()),
            "projects": len(self.db.list_projects()),
            "suppliers": len(self.db.list_suppliers()),
            "purchase_orders": len(orders),
            "bills": len(bills),
            "purchase_orders_by_status": {s.value: po_counts.get(s.value, 0) for s in PurchaseOrderStatus},
            "bills_by_status": {s.value: bill_counts.get(s.value, 0) for s in BillStatus},
        }
