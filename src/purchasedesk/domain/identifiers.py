"""Identifier formats."""

import time
from typing import Container, Optional

PURCHASE_ORDER_PREFIX = "ACQ"
BILL_PREFIX = "BILL"


def purchase_order_sequence_name(year: int) -> str:
    """Name of the counter that numbers purchase orders within a year."""
    return f"purchase_order/{year}"


def purchase_order_id(year: int, sequence: int) -> str:
    """Format a purchase order id, e.g. ``ACQ/2025/001``."""
    return f"{PURCHASE_ORDER_PREFIX}/{year:04d}/{sequence:03d}"


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


def bill_id(millis: int, index: int) -> str:
    """Format a bill id, e.g. ``BILL-1705312800000-0``."""
    return f"{BILL_PREFIX}-{millis}-{index}"


def default_entity_id(taken: Container[str] = (), millis: Optional[int] = None) -> str:
    """Epoch-millis id for customers, projects and suppliers.

    Skips forward one millisecond at a time past ids already in ``taken``.
    """
    value = epoch_millis() if millis is None else millis
    while str(value) in taken:
        value += 1
    return str(value)
