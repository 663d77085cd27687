"""Display formatting in the Italian locale style used by the back office."""

from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from purchasedesk.domain.views import PLACEHOLDER


def format_date(value: Optional[Union[date, datetime]], with_time: bool = True) -> str:
    """Format as ``DD/MM/YYYY HH:MM`` (or ``DD/MM/YYYY``); ``-`` for None."""
    if value is None:
        return PLACEHOLDER
    if with_time and isinstance(value, datetime):
        return value.strftime("%d/%m/%Y %H:%M")
    return value.strftime("%d/%m/%Y")


def format_amount(amount: Optional[Union[Decimal, int, float]]) -> str:
    """Format a EUR amount, e.g. ``1.234,56 €``.

    Zero and None render as ``-``, like an empty cell.
    """
    if not amount:
        return PLACEHOLDER
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, cents = f"{abs(value):.2f}".split(".")
    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)
    return f"{sign}{'.'.join(groups)},{cents} €"
