"""Date parsing utilities."""

from datetime import datetime, timedelta
from dateutil import parser as date_parser


def to_local_naive(value: datetime) -> datetime:
    """Return ``value`` as a naive datetime in local time.

    Aware values are converted to the local zone before the offset is
    dropped; naive values are returned unchanged.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_datetime(value: str) -> datetime:
    """Parse a timestamp string into a datetime.

    Supports:
    - Relative words: "now", "today" (midnight), "yesterday", "tomorrow"
    - ISO timestamps: "2024-01-15", "2024-01-15T10:30"
    - Day-first dates as shown in the back office: "15/01/2024 10:30"

    Args:
        value: Timestamp string

    Returns:
        Naive datetime in local time

    Raises:
        ValueError: If the string cannot be parsed
    """
    text = value.strip().lower()
    now = datetime.now()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)

    relative = {
        "now": now,
        "today": midnight,
        "yesterday": midnight - timedelta(days=1),
        "tomorrow": midnight + timedelta(days=1),
    }
    if text in relative:
        return relative[text]

    try:
        # ISO strings are unambiguous; everything else is read day-first
        if len(text) >= 10 and text[4] == "-":
            parsed = date_parser.isoparse(text)
        else:
            parsed = date_parser.parse(text, dayfirst=True)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{value}': {e}")
    return to_local_naive(parsed)
