"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain services
from purchasedesk.domain.entities import (
    Bill,
    Customer,
    Project,
    PurchaseOrder,
    Supplier,
)


class Database(ABC):
    """Abstract store for purchasedesk.

    Every entity type exposes the same four operations: ``list``, ``get``,
    ``upsert`` (insert, or replace the record with the same id) and
    ``delete``. Deleting an unknown id is a no-op; deletes never cascade.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Customer operations
    @abstractmethod
    def list_customers(self) -> list[Customer]:
        """List all customers."""
        pass

    @abstractmethod
    def get_customer(self, customer_id: str) -> Optional[Customer]:
        """Get customer by ID."""
        pass

    @abstractmethod
    def upsert_customer(self, customer: Customer) -> None:
        """Insert or replace a customer."""
        pass

    @abstractmethod
    def delete_customer(self, customer_id: str) -> None:
        """Delete a customer."""
        pass

    # Project operations
    @abstractmethod
    def list_projects(self) -> list[Project]:
        """List all projects."""
        pass

    @abstractmethod
    def get_project(self, project_id: str) -> Optional[Project]:
        """Get project by ID."""
        pass

    @abstractmethod
    def upsert_project(self, project: Project) -> None:
        """Insert or replace a project."""
        pass

    @abstractmethod
    def delete_project(self, project_id: str) -> None:
        """Delete a project."""
        pass

    # Supplier operations
    @abstractmethod
    def list_suppliers(self) -> list[Supplier]:
        """List all suppliers."""
        pass

    @abstractmethod
    def get_supplier(self, supplier_id: str) -> Optional[Supplier]:
        """Get supplier by ID."""
        pass

    @abstractmethod
    def upsert_supplier(self, supplier: Supplier) -> None:
        """Insert or replace a supplier."""
        pass

    @abstractmethod
    def delete_supplier(self, supplier_id: str) -> None:
        """Delete a supplier."""
        pass

    # Purchase order operations
    @abstractmethod
    def list_purchase_orders(self) -> list[PurchaseOrder]:
        """List all purchase orders."""
        pass

    @abstractmethod
    def get_purchase_order(self, purchase_order_id: str) -> Optional[PurchaseOrder]:
        """Get purchase order by ID."""
        pass

    @abstractmethod
    def upsert_purchase_order(self, purchase_order: PurchaseOrder) -> None:
        """Insert or replace a purchase order."""
        pass

    @abstractmethod
    def delete_purchase_order(self, purchase_order_id: str) -> None:
        """Delete a purchase order."""
        pass

    # Bill operations
    @abstractmethod
    def list_bills(self, purchase_order_id: Optional[str] = None) -> list[Bill]:
        """List bills, optionally only those of one purchase order."""
        pass

    @abstractmethod
    def get_bill(self, bill_id: str) -> Optional[Bill]:
        """Get bill by ID."""
        pass

    @abstractmethod
    def upsert_bill(self, bill: Bill) -> None:
        """Insert or replace a bill."""
        pass

    @abstractmethod
    def delete_bill(self, bill_id: str) -> None:
        """Delete a bill."""
        pass

    # Sequences
    @abstractmethod
    def next_sequence(self, name: str) -> int:
        """Advance the named counter and return its new value (starting at 1)."""
        pass
