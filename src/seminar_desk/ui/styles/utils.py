"""
Formatting helpers for session display values.
"""

from datetime import date

from ...models import Session

DATE_DISPLAY_FORMAT = "%Y-%m-%d"


def format_date(value: date) -> str:
    return value.strftime(DATE_DISPLAY_FORMAT)


def format_session_when(session: Session) -> str:
    """Date and time range as shown on a session card (e.g. '2024-01-10  09:00 - 11:00')."""
    return f"{format_date(session.date)}  {session.time_range}"


def format_remaining(session: Session) -> str:
    return f"Remaining: {session.remaining}/{session.capacity}"


def capacity_variant(remaining: int) -> str:
    """Styling for remaining slots on a card: 'danger' once nothing is left."""
    return "danger" if remaining <= 0 else "neutral"


def slots_variant(remaining: int) -> str:
    """Styling for available slots in the detail view."""
    return "danger" if remaining <= 0 else "success"
