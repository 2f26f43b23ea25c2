"""
Content panels shown in the main window.
"""

from .base import Refreshable
from .dashboard import CoordinatorDashboard
from .placeholder import PlaceholderSection
from .schedule import (
    RegistrationSection,
    ScheduleSection,
    SessionDetailView,
    SessionListView,
)
from .welcome import WelcomeSection, WELCOME_TITLE

__all__ = [
    "Refreshable",
    "CoordinatorDashboard",
    "PlaceholderSection",
    "RegistrationSection",
    "ScheduleSection",
    "SessionDetailView",
    "SessionListView",
    "WelcomeSection",
    "WELCOME_TITLE",
]
