"""
Welcome panel shown at startup and after logout.
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout

from ..styles import ICONS
from ..widgets import EmptyState

WELCOME_TITLE = "Welcome to Seminar Management System"
WELCOME_SUBTITLE = "Select an option from the menu to get started"


class WelcomeSection(QWidget):
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        self._empty = EmptyState(
            icon=ICONS["logo"], title=WELCOME_TITLE, subtitle=WELCOME_SUBTITLE
        )
        layout.addWidget(self._empty)

    def title(self) -> str:
        return self._empty.title()
