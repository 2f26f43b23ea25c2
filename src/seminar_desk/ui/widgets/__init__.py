"""
Reusable widgets shared by the window and its panels.
"""

# Navigation
from .navigation import MENU_ITEMS, NavItem, Sidebar

# Window chrome
from .header import HeaderPanel
from .status_bar import StatusBar, COPYRIGHT_TEXT

# Cards
from .cards import MetricCard, MetricsRow

# Badges
from .badges import Badge, TypeBadge, StatusBadge

# Controls
from .controls import PageHeader, Separator, EmptyState

__all__ = [
    # Navigation
    "MENU_ITEMS",
    "NavItem",
    "Sidebar",
    # Window chrome
    "HeaderPanel",
    "StatusBar",
    "COPYRIGHT_TEXT",
    # Cards
    "MetricCard",
    "MetricsRow",
    # Badges
    "Badge",
    "TypeBadge",
    "StatusBadge",
    # Controls
    "PageHeader",
    "Separator",
    "EmptyState",
]
