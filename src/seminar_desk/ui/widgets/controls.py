"""
Layout helpers: page headers, separators and empty states.
"""

from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QHBoxLayout, QWidget
from PyQt6.QtCore import Qt

from ..styles import COLORS, SPACING, FONTS


class PageHeader(QWidget):
    """Page title with optional subtitle and right-aligned actions."""

    def __init__(
        self,
        title: str,
        subtitle: str = "",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, SPACING["md"])
        layout.setSpacing(SPACING["xs"])

        title_row = QHBoxLayout()
        title_row.setSpacing(SPACING["md"])

        self._title = QLabel(title)
        self._title.setStyleSheet(f"""
            font-size: {FONTS["size_xl"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["text_primary"]};
            letter-spacing: -0.3px;
        """)
        title_row.addWidget(self._title)
        title_row.addStretch()

        self._actions_layout = QHBoxLayout()
        self._actions_layout.setSpacing(SPACING["sm"])
        title_row.addLayout(self._actions_layout)
        layout.addLayout(title_row)

        self._subtitle = QLabel(subtitle)
        self._subtitle.setStyleSheet(f"""
            font-size: {FONTS["size_base"]}px;
            color: {COLORS["text_muted"]};
        """)
        self._subtitle.setVisible(bool(subtitle))
        layout.addWidget(self._subtitle)

    def title(self) -> str:
        return self._title.text()

    def add_action(self, widget: QWidget) -> None:
        self._actions_layout.addWidget(widget)


class Separator(QFrame):
    """One-pixel horizontal rule."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setFixedHeight(1)
        self.setStyleSheet(f"background-color: {COLORS['border_subtle']};")


class EmptyState(QWidget):
    """Centered icon and message shown when there is nothing to display."""

    def __init__(
        self,
        icon: str = "○",
        title: str = "No data",
        subtitle: str = "",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["xl"], SPACING["xl"], SPACING["xl"], SPACING["xl"]
        )
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(SPACING["sm"])

        icon_label = QLabel(icon)
        icon_label.setStyleSheet(f"""
            font-size: 36px;
            color: {COLORS["text_muted"]};
        """)
        icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(icon_label)

        self._title = QLabel(title)
        self._title.setStyleSheet(f"""
            font-size: {FONTS["size_md"]}px;
            font-weight: {FONTS["weight_medium"]};
            color: {COLORS["text_secondary"]};
        """)
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._title.setWordWrap(True)
        layout.addWidget(self._title)

        self._subtitle = QLabel(subtitle)
        self._subtitle.setStyleSheet(f"""
            font-size: {FONTS["size_base"]}px;
            color: {COLORS["text_muted"]};
        """)
        self._subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._subtitle.setWordWrap(True)
        self._subtitle.setVisible(bool(subtitle))
        layout.addWidget(self._subtitle)

    def title(self) -> str:
        return self._title.text()

    def subtitle(self) -> str:
        return self._subtitle.text()
