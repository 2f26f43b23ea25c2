"""
Services consumed by the Seminar Desk views.
"""

from .auth import AuthService
from .demo import demo_sessions, demo_users
from .filters import (
    ALL_DATES,
    ALL_TYPES,
    TYPE_FILTER_OPTIONS,
    FilterCriteria,
    available_dates,
    date_filter_options,
    filter_sessions,
    parse_date_filter,
    parse_type_filter,
)
from .store import (
    InMemorySessionStore,
    RegistrationStore,
    SeminarStore,
    SessionStatsStore,
    SessionStore,
)

__all__ = [
    "AuthService",
    "SessionStore",
    "RegistrationStore",
    "SessionStatsStore",
    "SeminarStore",
    "InMemorySessionStore",
    "demo_sessions",
    "demo_users",
    # Filtering
    "ALL_DATES",
    "ALL_TYPES",
    "TYPE_FILTER_OPTIONS",
    "FilterCriteria",
    "available_dates",
    "date_filter_options",
    "filter_sessions",
    "parse_date_filter",
    "parse_type_filter",
]
