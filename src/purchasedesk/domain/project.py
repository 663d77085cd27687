"""Project domain service."""

import logging
from typing import Optional

from purchasedesk.database.base import Database
from purchasedesk.domain.entities import Project
from purchasedesk.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_id,
    entity_not_found,
)
from purchasedesk.domain.identifiers import default_entity_id
from purchasedesk.domain.validation import validate_project
from purchasedesk.domain.views import filter_projects, project_display

logger = logging.getLogger(__name__)


def _optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class ProjectService:
    """Service for managing projects."""

    def __init__(self, db: Database):
        """Initialize project service.

        Args:
            db: Database instance
        """
        self.db = db

    def _check_customer(self, customer_id: Optional[str]) -> None:
        if customer_id is not None and self.db.get_customer(customer_id) is None:
            raise ValidationError({"customer_id": entity_not_found("Customer", customer_id)})

    def create_project(
        self,
        customer_id: Optional[str] = None,
        cup_code: Optional[str] = None,
        project_id: Optional[str] = None,
    ) -> Project:
        """Create a project.

        Args:
            customer_id: Optional customer reference
            cup_code: Optional CUP code (exactly 15 characters)
            project_id: Optional explicit ID (defaults to an epoch-millis string)

        Returns:
            The stored project

        Raises:
            ValidationError: If the CUP code has the wrong length or the customer is unknown
            ConflictError: If the explicit ID is already taken
        """
        customer_id = _optional(customer_id)
        cup_code = _optional(cup_code)
        validate_project(cup_code)
        self._check_customer(customer_id)

        taken = {p.id for p in self.db.list_projects()}
        if project_id is None:
            project_id = default_entity_id(taken)
        elif project_id in taken:
            raise ConflictError(duplicate_id("Project", project_id))

        project = Project(id=project_id, customer_id=customer_id, cup_code=cup_code)
        self.db.upsert_project(project)
        logger.info("Created project %s", project.id)
        return project

    def get_project(self, project_id: str) -> Optional[Project]:
        return self.db.get_project(project_id)

    def list_projects(self) -> list[Project]:
        return self.db.list_projects()

    def search_projects(self, query: str = "") -> list[Project]:
        """List projects matching ``query`` on id, customer name or CUP code."""
        return filter_projects(self.db.list_projects(), query, self.db.list_customers())

    def display_name(self, project_id: Optional[str]) -> str:
        """Return ``"<project id> - <customer name>"`` or ``-``."""
        return project_display(self.db.list_projects(), self.db.list_customers(), project_id)

    def update_project(
        self,
        project_id: str,
        customer_id: Optional[str] = None,
        cup_code: Optional[str] = None,
    ) -> Project:
        """Replace a project's customer and CUP code.

        Passing None (or an empty string) clears the field, as submitting the
        edit form with an empty field does.
        """
        if self.db.get_project(project_id) is None:
            raise NotFoundError(entity_not_found("Project", project_id))
        customer_id = _optional(customer_id)
        cup_code = _optional(cup_code)
        validate_project(cup_code)
        self._check_customer(customer_id)

        project = Project(id=project_id, customer_id=customer_id, cup_code=cup_code)
        self.db.upsert_project(project)
        return project

    def delete_project(self, project_id: str) -> None:
        """Delete a project. Purchase orders keep the dangling reference."""
        if self.db.get_project(project_id) is None:
            raise NotFoundError(entity_not_found("Project", project_id))
        self.db.delete_project(project_id)
        logger.info("Deleted project %s", project_id)
