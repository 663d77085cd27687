"""Supplier domain service."""

import logging
from typing import Optional

from purchasedesk.database.base import Database
from purchasedesk.domain.entities import Supplier
from purchasedesk.domain.errors import (
    ConflictError,
    NotFoundError,
    duplicate_id,
    entity_not_found,
)
from purchasedesk.domain.identifiers import default_entity_id
from purchasedesk.domain.validation import validate_supplier
from purchasedesk.domain.views import filter_suppliers

logger = logging.getLogger(__name__)


class SupplierService:
    """Service for managing suppliers."""

    def __init__(self, db: Database):
        """Initialize supplier service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_supplier(
        self, name: str, vat_number: str, supplier_id: Optional[str] = None
    ) -> Supplier:
        """Create a new supplier.

        Args:
            name: Supplier name
            vat_number: VAT number
            supplier_id: Optional explicit ID (defaults to an epoch-millis string)

        Returns:
            The stored supplier

        Raises:
            ValidationError: If name or VAT number is blank
            ConflictError: If the explicit ID is already taken
        """
        validate_supplier(name, vat_number)
        taken = {s.id for s in self.db.list_suppliers()}
        if supplier_id is None:
            supplier_id = default_entity_id(taken)
        elif supplier_id in taken:
            raise ConflictError(duplicate_id("Supplier", supplier_id))

        supplier = Supplier(id=supplier_id, name=name.strip(), vat_number=vat_number.strip())
        self.db.upsert_supplier(supplier)
        logger.info("Created supplier %s (%s)", supplier.id, supplier.name)
        return supplier

    def get_supplier(self, supplier_id: str) -> Optional[Supplier]:
        return self.db.get_supplier(supplier_id)

    def list_suppliers(self) -> list[Supplier]:
        return self.db.list_suppliers()

    def search_suppliers(self, query: str = "") -> list[Supplier]:
        """List suppliers whose name or VAT number contains ``query``."""
        return filter_suppliers(self.db.list_suppliers(), query)

    def update_supplier(self, supplier_id: str, name: str, vat_number: str) -> Supplier:
        """Replace a supplier's name and VAT number."""
        if self.db.get_supplier(supplier_id) is None:
            raise NotFoundError(entity_not_found("Supplier", supplier_id))
        validate_supplier(name, vat_number)

        supplier = Supplier(id=supplier_id, name=name.strip(), vat_number=vat_number.strip())
        self.db.upsert_supplier(supplier)
        return supplier

    def delete_supplier(self, supplier_id: str) -> None:
        """Delete a supplier.

        Purchase orders referring to the supplier keep the dangling reference
        and show ``-`` as supplier name.
        """
        if self.db.get_supplier(supplier_id) is None:
            raise NotFoundError(entity_not_found("Supplier", supplier_id))
        self.db.delete_supplier(supplier_id)
        logger.info("Deleted supplier %s", supplier_id)
