"""
Status bar along the bottom of the window.
"""

from PyQt6.QtWidgets import QFrame, QLabel, QHBoxLayout, QWidget

from ...models import Role
from ..styles import COLORS, SPACING, FONTS, UI

COPYRIGHT_TEXT = "© 2024 FCI Seminar Management System"


class StatusBar(QFrame):
    """Current role on the left, copyright on the right."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("status-bar")
        self.setFixedHeight(UI["status_bar_height"])
        self.setStyleSheet(f"""
            QFrame#status-bar {{
                background-color: {COLORS["bg_base"]};
                border-top: 1px solid {COLORS["border_default"]};
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(SPACING["md"], 0, SPACING["md"], 0)

        self._role_label = QLabel()
        self._role_label.setStyleSheet(f"""
            font-size: {FONTS["size_sm"]}px;
            color: {COLORS["text_secondary"]};
        """)
        layout.addWidget(self._role_label)
        layout.addStretch()

        self._copyright = QLabel(COPYRIGHT_TEXT)
        self._copyright.setStyleSheet(f"""
            font-size: {FONTS["size_sm"]}px;
            color: {COLORS["text_muted"]};
        """)
        layout.addWidget(self._copyright)

        self.update_role_display(Role.GUEST)

    def update_role_display(self, role: Role) -> None:
        self._role_label.setText(f"Current Role: {role.label}")

    def text(self) -> str:
        return self._role_label.text()
