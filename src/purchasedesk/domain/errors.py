"""Shared domain error messages and error types."""

from typing import Mapping


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed form validation.

    ``errors`` maps each offending field to its message so a caller can
    show them next to the field.
    """

    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
        super().__init__(f"Validation failed ({details})")


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class TransitionError(ConflictError):
    """Workflow action is not allowed from the entity's current status."""


REQUIRED = "This field is required"
CIG_CODE_LENGTH = "CIG Code must be exactly 10 characters"
CUP_CODE_LENGTH = "CUP Code must be exactly 15 characters"


def entity_not_found(kind: str, entity_id: str) -> str:
    """Return message for a missing entity."""
    return f"{kind} '{entity_id}' not found"


def duplicate_id(kind: str, entity_id: str) -> str:
    """Return message for an id that is already taken."""
    return f"{kind} with id '{entity_id}' already exists"


def transition_not_allowed(kind: str, entity_id: str, action: str, status: str) -> str:
    """Return message for an illegal workflow action."""
    return f"Cannot {action} {kind} '{entity_id}': status is '{status}'"
