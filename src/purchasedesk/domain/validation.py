"""Form validation for entity input.

Each validator collects every failing field before raising, so callers can
report all problems at once.
"""

from typing import Optional

from purchasedesk.domain.entities import FileRef
from purchasedesk.domain.errors import (
    CIG_CODE_LENGTH,
    CUP_CODE_LENGTH,
    REQUIRED,
    ValidationError,
)

CIG_CODE_LENGTH_CHARS = 10
CUP_CODE_LENGTH_CHARS = 15


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _raise_if_any(errors: dict[str, str]) -> None:
    if errors:
        raise ValidationError(errors)


def validate_customer(name: Optional[str]) -> None:
    errors = {}
    if _blank(name):
        errors["name"] = REQUIRED
    _raise_if_any(errors)


def validate_supplier(name: Optional[str], vat_number: Optional[str]) -> None:
    errors = {}
    if _blank(name):
        errors["name"] = REQUIRED
    if _blank(vat_number):
        errors["vat_number"] = REQUIRED
    _raise_if_any(errors)


def validate_project(cup_code: Optional[str]) -> None:
    errors = {}
    if cup_code and len(cup_code) != CUP_CODE_LENGTH_CHARS:
        errors["cup_code"] = CUP_CODE_LENGTH
    _raise_if_any(errors)


def validate_purchase_order(
    name: Optional[str],
    supplier_id: Optional[str],
    explanation: Optional[str],
    cig_code: Optional[str] = None,
    signed_file: Optional[FileRef] = None,
    creating: bool = True,
) -> None:
    """Validate purchase order form input.

    Args:
        name: Order name (required)
        supplier_id: Supplier reference (required)
        explanation: Reason for the purchase (required)
        cig_code: Optional CIG code, exactly 10 characters when given
        signed_file: Signed document, required when creating
        creating: True for a new order, False when editing

    Raises:
        ValidationError: With one entry per failing field
    """
    errors = {}
    if _blank(name):
        errors["name"] = REQUIRED
    if cig_code and len(cig_code) != CIG_CODE_LENGTH_CHARS:
        errors["cig_code"] = CIG_CODE_LENGTH
    if _blank(supplier_id):
        errors["supplier_id"] = REQUIRED
    if _blank(explanation):
        errors["explanation"] = REQUIRED
    if creating and signed_file is None:
        errors["signed_file"] = REQUIRED
    _raise_if_any(errors)
