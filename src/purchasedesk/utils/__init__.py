"""Utility modules for purchasedesk."""

from purchasedesk.utils.amount_parser import parse_amount
from purchasedesk.utils.date_parser import parse_datetime, to_local_naive

__all__ = ["parse_amount", "parse_datetime", "to_local_naive"]
