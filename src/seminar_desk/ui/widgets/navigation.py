"""
Sidebar navigation widgets.

The menu is rebuilt from MENU_ITEMS whenever the role changes. Each item
carries an action key (e.g. "SCHEDULE") that the window dispatches.
"""

from typing import Optional

from PyQt6.QtWidgets import (
    QFrame,
    QLabel,
    QVBoxLayout,
    QHBoxLayout,
    QWidget,
    QPushButton,
)
from PyQt6.QtCore import Qt, pyqtSignal

from ...models import Role
from ..styles import COLORS, SPACING, FONTS, ICONS, UI

# (icon, text, action) per role; None marks a separator
MenuEntry = Optional[tuple[str, str, str]]

MENU_ITEMS: dict[Role, list[MenuEntry]] = {
    Role.GUEST: [
        (ICONS["schedule"], "Schedule", "SCHEDULE"),
        None,
        (ICONS["login"], "Login", "LOGIN"),
    ],
    Role.STUDENT: [
        (ICONS["schedule"], "Schedule", "SCHEDULE"),
        None,
        (ICONS["registration"], "My Registration", "REGISTRATION"),
        (ICONS["status"], "My Status", "STATUS"),
        None,
        (ICONS["logout"], "Logout", "LOGOUT"),
    ],
    Role.EVALUATOR: [
        (ICONS["schedule"], "Schedule", "SCHEDULE"),
        None,
        (ICONS["assigned"], "Assigned Presentations", "ASSIGNED_LIST"),
        None,
        (ICONS["logout"], "Logout", "LOGOUT"),
    ],
    Role.COORDINATOR: [
        (ICONS["dashboard"], "Dashboard", "DASHBOARD"),
        None,
        (ICONS["session_management"], "Session Management", "SESSION_MANAGEMENT"),
        (ICONS["reports"], "Reports", "REPORTS"),
        None,
        (ICONS["logout"], "Logout", "LOGOUT"),
    ],
}


class NavItem(QPushButton):
    """Sidebar navigation item bound to an action key."""

    def __init__(
        self,
        icon: str,
        text: str,
        action: str,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._action = action
        self.setCheckable(True)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMinimumHeight(UI["nav_item_height"])

        layout = QHBoxLayout(self)
        layout.setContentsMargins(SPACING["md"], 0, SPACING["md"], 0)
        layout.setSpacing(SPACING["sm"])

        self._icon = QLabel(icon)
        self._icon.setFixedWidth(24)
        self._icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._icon)

        self._text = QLabel(text)
        layout.addWidget(self._text)
        layout.addStretch()

        self._update_style()
        self.toggled.connect(self._update_style)

    @property
    def action(self) -> str:
        return self._action

    def label(self) -> str:
        return self._text.text()

    def _update_style(self) -> None:
        if self.isChecked():
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: {COLORS["sidebar_active"]};
                    border: none;
                    border-left: 3px solid {COLORS["sidebar_active_border"]};
                    border-radius: 0;
                    text-align: left;
                }}
            """)
            self._text.setStyleSheet(f"""
                color: {COLORS["text_primary"]};
                font-size: {FONTS["size_md"]}px;
                font-weight: {FONTS["weight_medium"]};
            """)
        else:
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: transparent;
                    border: none;
                    border-left: 3px solid transparent;
                    border-radius: 0;
                    text-align: left;
                }}
                QPushButton:hover {{
                    background-color: {COLORS["sidebar_hover"]};
                }}
            """)
            self._text.setStyleSheet(f"""
                color: {COLORS["text_secondary"]};
                font-size: {FONTS["size_md"]}px;
                font-weight: {FONTS["weight_normal"]};
            """)


class Sidebar(QFrame):
    """Role-dependent navigation menu."""

    menu_clicked = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("sidebar")
        self.setFixedWidth(UI["sidebar_width"])
        self.setStyleSheet(f"""
            QFrame#sidebar {{
                background-color: {COLORS["sidebar_bg"]};
                border-right: 1px solid {COLORS["border_default"]};
            }}
        """)

        self._nav_items: list[NavItem] = []
        self._selected_action: Optional[str] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, SPACING["lg"], 0, SPACING["lg"])
        layout.setSpacing(0)

        section_label = QLabel("NAVIGATION")
        section_label.setStyleSheet(f"""
            font-size: {FONTS["size_xs"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["text_muted"]};
            padding: 0 {SPACING["md"]}px {SPACING["sm"]}px;
            letter-spacing: 1px;
        """)
        layout.addWidget(section_label)

        self._menu_container = QWidget()
        self._menu_layout = QVBoxLayout(self._menu_container)
        self._menu_layout.setContentsMargins(0, 0, 0, 0)
        self._menu_layout.setSpacing(0)
        layout.addWidget(self._menu_container)
        layout.addStretch()

        self.update_menu_for_role(Role.GUEST)

    def update_menu_for_role(self, role: Role) -> None:
        """Rebuild the menu with the items available to `role`."""
        while self._menu_layout.count():
            child = self._menu_layout.takeAt(0)
            widget = child.widget() if child else None
            if widget is not None:
                widget.deleteLater()
        self._nav_items.clear()
        self._selected_action = None

        for entry in MENU_ITEMS.get(role, MENU_ITEMS[Role.GUEST]):
            if entry is None:
                spacer = QWidget()
                spacer.setFixedHeight(SPACING["md"])
                self._menu_layout.addWidget(spacer)
                continue

            icon, text, action = entry
            item = NavItem(icon, text, action)
            item.clicked.connect(lambda checked, a=action: self._on_item_clicked(a))
            self._nav_items.append(item)
            self._menu_layout.addWidget(item)

    def _on_item_clicked(self, action: str) -> None:
        self.select_menu_item(action)
        self.menu_clicked.emit(action)

    def select_menu_item(self, action: str) -> None:
        """Highlight the item for `action` without emitting a click."""
        self._selected_action = action
        for item in self._nav_items:
            item.setChecked(item.action == action)

    def selected_menu_item(self) -> Optional[str]:
        return self._selected_action

    def actions(self) -> list[str]:
        return [item.action for item in self._nav_items]

    def nav_item(self, action: str) -> Optional[NavItem]:
        for item in self._nav_items:
            if item.action == action:
                return item
        return None
