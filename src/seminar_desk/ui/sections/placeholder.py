"""
Placeholder panel for menu entries without a view yet.
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout

from ..styles import SPACING
from ..widgets import EmptyState


class PlaceholderSection(QWidget):
    def __init__(self, title: str, icon: str = "○", parent: QWidget | None = None):
        super().__init__(parent)
        self._title = title

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["xl"], SPACING["xl"], SPACING["xl"], SPACING["xl"]
        )
        self._empty = EmptyState(
            icon=icon,
            title=f"{title} - Coming Soon",
            subtitle="This feature is not available yet",
        )
        layout.addWidget(self._empty)

    def text(self) -> str:
        return self._empty.title()
