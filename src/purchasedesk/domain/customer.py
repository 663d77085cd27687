"""Customer domain service."""

import logging
from typing import Optional

from purchasedesk.database.base import Database
from purchasedesk.domain.entities import Customer
from purchasedesk.domain.errors import (
    ConflictError,
    NotFoundError,
    duplicate_id,
    entity_not_found,
)
from purchasedesk.domain.identifiers import default_entity_id
from purchasedesk.domain.validation import validate_customer
from purchasedesk.domain.views import filter_customers

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for managing customers."""

    def __init__(self, db: Database):
        """Initialize customer service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_customer(self, name: str, customer_id: Optional[str] = None) -> Customer:
        """Create a new customer.

        Args:
            name: Customer name
            customer_id: Optional explicit ID (defaults to an epoch-millis string)

        Returns:
            The stored customer

        Raises:
            ValidationError: If the name is blank
            ConflictError: If the explicit ID is already taken
        """
        validate_customer(name)
        taken = {c.id for c in self.db.list_customers()}
        if customer_id is None:
            customer_id = default_entity_id(taken)
        elif customer_id in taken:
            raise ConflictError(duplicate_id("Customer", customer_id))

        customer = Customer(id=customer_id, name=name.strip())
        self.db.upsert_customer(customer)
        logger.info("Created customer %s (%s)", customer.id, customer.name)
        return customer

    def get_customer(self, customer_id: str) -> Optional[Customer]:
        return self.db.get_customer(customer_id)

    def list_customers(self) -> list[Customer]:
        return self.db.list_customers()

    def search_customers(self, query: str = "") -> list[Customer]:
        """List customers whose name contains ``query`` (case-insensitive)."""
        return filter_customers(self.db.list_customers(), query)

    def rename_customer(self, customer_id: str, name: str) -> Customer:
        """Rename a customer.

        Raises:
            NotFoundError: If the customer does not exist
            ValidationError: If the name is blank
        """
        customer = self.db.get_customer(customer_id)
        if customer is None:
            raise NotFoundError(entity_not_found("Customer", customer_id))
        validate_customer(name)

        updated = Customer(id=customer.id, name=name.strip())
        self.db.upsert_customer(updated)
        return updated

    def delete_customer(self, customer_id: str) -> None:
        """Delete a customer.

        Projects referring to the customer keep the dangling reference.

        Raises:
            NotFoundError: If the customer does not exist
        """
        if self.db.get_customer(customer_id) is None:
            raise NotFoundError(entity_not_found("Customer", customer_id))
        self.db.delete_customer(customer_id)
        logger.info("Deleted customer %s", customer_id)
