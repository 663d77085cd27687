"""In-memory database implementation."""

from typing import Optional

from purchasedesk.database.base import Database
from purchasedesk.domain.entities import (
    Bill,
    Customer,
    Project,
    PurchaseOrder,
    Supplier,
)


class InMemoryDatabase(Database):
    """Database backed by plain dicts.

    Lists come back in insertion order. Replacing a record keeps its
    position.
    """

    def __init__(self):
        self.customers: dict[str, Customer] = {}
        self.projects: dict[str, Project] = {}
        self.suppliers: dict[str, Supplier] = {}
        self.purchase_orders: dict[str, PurchaseOrder] = {}
        self.bills: dict[str, Bill] = {}
        self.sequences: dict[str, int] = {}

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def initialize_schema(self) -> None:
        pass

    # Customer operations
    def list_customers(self) -> list[Customer]:
        return list(self.customers.values())

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        return self.customers.get(customer_id)

    def upsert_customer(self, customer: Customer) -> None:
        self.customers[customer.id] = customer

    def delete_customer(self, customer_id: str) -> None:
        self.customers.pop(customer_id, None)

    # Project operations
    def list_projects(self) -> list[Project]:
        return list(self.projects.values())

    def get_project(self, project_id: str) -> Optional[Project]:
        return self.projects.get(project_id)

    def upsert_project(self, project: Project) -> None:
        self.projects[project.id] = project

    def delete_project(self, project_id: str) -> None:
        self.projects.pop(project_id, None)

    # Supplier operations
    def list_suppliers(self) -> list[Supplier]:
        return list(self.suppliers.values())

    def get_supplier(self, supplier_id: str) -> Optional[Supplier]:
        return self.suppliers.get(supplier_id)

    def upsert_supplier(self, supplier: Supplier) -> None:
        self.suppliers[supplier.id] = supplier

    def delete_supplier(self, supplier_id: str) -> None:
        self.suppliers.pop(supplier_id, None)

    # Purchase order operations
    def list_purchase_orders(self) -> list[PurchaseOrder]:
        return list(self.purchase_orders.values())

    def get_purchase_order(self, purchase_order_id: str) -> Optional[PurchaseOrder]:
        return self.purchase_orders.get(purchase_order_id)

    def upsert_purchase_order(self, purchase_order: PurchaseOrder) -> None:
        self.purchase_orders[purchase_order.id] = purchase_order

    def delete_purchase_order(self, purchase_order_id: str) -> None:
        self.purchase_orders.pop(purchase_order_id, None)

    # Bill operations
    def list_bills(self, purchase_order_id: Optional[str] = None) -> list[Bill]:
        bills = list(self.bills.values())
        if purchase_order_id is not None:
            bills = [b for b in bills if b.purchase_order_id == purchase_order_id]
        return bills

    def get_bill(self, bill_id: str) -> Optional[Bill]:
        return self.bills.get(bill_id)

    def upsert_bill(self, bill: Bill) -> None:
        self.bills[bill.id] = bill

    def delete_bill(self, bill_id: str) -> None:
        self.bills.pop(bill_id, None)

    # Sequences
    def next_sequence(self, name: str) -> int:
        value = self.sequences.get(name, 0) + 1
        self.sequences[name] = value
        return value
