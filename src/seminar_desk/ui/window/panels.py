"""
Panel registry - which content panel backs each menu action.
"""

from typing import Callable, Optional

from PyQt6.QtWidgets import QWidget

from ...models import Role
from ...services import AuthService, SeminarStore
from ..sections import (
    CoordinatorDashboard,
    PlaceholderSection,
    RegistrationSection,
    ScheduleSection,
)
from ..styles import ICONS

PanelFactory = Callable[[], QWidget]

DEFAULT_MENU_ITEMS = {
    Role.COORDINATOR: "DASHBOARD",
    Role.EVALUATOR: "ASSIGNED_LIST",
    Role.STUDENT: "REGISTRATION",
}

PLACEHOLDER_PANELS = {
    "STATUS": ("My Status", ICONS["status"]),
    "ASSIGNED_LIST": ("Assigned Presentations", ICONS["assigned"]),
    "SESSION_MANAGEMENT": ("Session Management", ICONS["session_management"]),
    "REPORTS": ("Reports", ICONS["reports"]),
}


def default_menu_item(role: Role) -> str:
    """Menu action a role lands on after a role change."""
    return DEFAULT_MENU_ITEMS.get(role, "SCHEDULE")


def panel_factory(
    action: str,
    store: SeminarStore,
    auth: AuthService,
    notify: Optional[Callable[[str, str], None]] = None,
) -> Optional[PanelFactory]:
    """Return a zero-argument factory for the panel behind `action`, or None."""
    if action == "SCHEDULE":
        return lambda: ScheduleSection(store)
    if action == "REGISTRATION":
        return lambda: RegistrationSection(store, auth, notify=notify)
    if action == "DASHBOARD":
        return lambda: CoordinatorDashboard(store)
    if action in PLACEHOLDER_PANELS:
        title, icon = PLACEHOLDER_PANELS[action]
        return lambda: PlaceholderSection(title, icon)
    return None
