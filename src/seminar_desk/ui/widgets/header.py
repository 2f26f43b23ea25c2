"""
Window header with application title and the login/logout button.
"""

from typing import Optional

from PyQt6.QtWidgets import QFrame, QLabel, QHBoxLayout, QPushButton, QWidget
from PyQt6.QtCore import Qt, pyqtSignal

from ...models import Role, User
from ..styles import COLORS, SPACING, FONTS, ICONS, UI


class HeaderPanel(QFrame):
    """Top bar: logo, title, current user and a login/logout button."""

    login_requested = pyqtSignal()
    logout_requested = pyqtSignal()

    def __init__(
        self,
        title: str = "Seminar Management System",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setObjectName("header")
        self.setFixedHeight(UI["header_height"])
        self.setStyleSheet(f"""
            QFrame#header {{
                background-color: {COLORS["bg_surface"]};
                border-bottom: 1px solid {COLORS["border_default"]};
            }}
        """)
        self._authenticated = False

        layout = QHBoxLayout(self)
        layout.setContentsMargins(SPACING["md"], 0, SPACING["md"], 0)
        layout.setSpacing(SPACING["md"])

        logo = QLabel(ICONS["logo"])
        logo.setStyleSheet("font-size: 26px;")
        layout.addWidget(logo)

        self._title = QLabel(title)
        self._title.setStyleSheet(f"""
            font-size: {FONTS["size_xl"]}px;
            font-weight: {FONTS["weight_bold"]};
            color: {COLORS["accent_primary"]};
            letter-spacing: -0.3px;
        """)
        layout.addWidget(self._title)
        layout.addStretch()

        self._user_label = QLabel()
        self._user_label.setStyleSheet(f"""
            font-size: {FONTS["size_base"]}px;
            color: {COLORS["text_secondary"]};
        """)
        layout.addWidget(self._user_label, alignment=Qt.AlignmentFlag.AlignVCenter)

        self._button = QPushButton()
        self._button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._button.setMinimumWidth(100)
        self._button.clicked.connect(self._on_button_clicked)
        layout.addWidget(self._button)

        self.update_user_display(None, Role.GUEST)

    def _on_button_clicked(self) -> None:
        if self._authenticated:
            self.logout_requested.emit()
        else:
            self.login_requested.emit()

    def update_user_display(self, user: Optional[User], role: Role) -> None:
        """Show the user and switch the button between Login and Logout."""
        self._authenticated = user is not None
        if user is not None:
            self._user_label.setText(f"{user.name} ({role.label})")
            self._button.setText("Logout")
            self._button.setProperty("variant", "secondary")
        else:
            self._user_label.setText("Welcome, Guest")
            self._button.setText("Login")
            self._button.setProperty("variant", "primary")

        # Re-polish so the [variant=...] selector is re-evaluated
        style = self._button.style()
        if style is not None:
            style.unpolish(self._button)
            style.polish(self._button)

    def title(self) -> str:
        return self._title.text()

    def user_text(self) -> str:
        return self._user_label.text()

    def button_text(self) -> str:
        return self._button.text()
