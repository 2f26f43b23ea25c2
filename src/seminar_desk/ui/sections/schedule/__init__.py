"""
Schedule views: session list, session details and the sections composing them.
"""

from .list_view import SessionCard, SessionListView, NO_SESSIONS_TEXT
from .detail_view import SessionDetailView, PLACEHOLDER_TEXT, FIELD_NAMES
from .section import ScheduleSection
from .registration import RegistrationSection

__all__ = [
    "SessionCard",
    "SessionListView",
    "NO_SESSIONS_TEXT",
    "SessionDetailView",
    "PLACEHOLDER_TEXT",
    "FIELD_NAMES",
    "ScheduleSection",
    "RegistrationSection",
]
