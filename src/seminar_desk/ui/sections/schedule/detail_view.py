"""
Read-only detail panel for the selected session.
"""

from typing import Optional

from PyQt6.QtWidgets import (
    QFrame,
    QLabel,
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    QWidget,
)
from PyQt6.QtCore import Qt

from ....models import Session
from ...styles import (
    COLORS,
    CAPACITY_COLORS,
    SPACING,
    FONTS,
    RADIUS,
    ICONS,
    UI,
    format_date,
    slots_variant,
)
from ...widgets import EmptyState, Separator, StatusBadge

PLACEHOLDER_TEXT = "Select a session to view details"

FIELD_NAMES = (
    "Date",
    "Time",
    "Venue",
    "Type",
    "Capacity",
    "Registered",
    "Available Slots",
)


class SessionDetailView(QFrame):
    """Shows every field of one session, or a placeholder."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("detail-view")
        self.setMinimumWidth(UI["detail_panel_width"])
        self.setStyleSheet(f"""
            QFrame#detail-view {{
                background-color: {COLORS["bg_surface"]};
                border: 1px solid {COLORS["border_default"]};
                border-radius: {RADIUS["lg"]}px;
            }}
        """)

        self._session: Optional[Session] = None
        self._values: dict[str, QLabel] = {}
        self._slots_variant: Optional[str] = None

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(
            SPACING["lg"], SPACING["lg"], SPACING["lg"], SPACING["lg"]
        )
        self._layout.setSpacing(SPACING["md"])

        self._placeholder = EmptyState(icon=ICONS["schedule"], title=PLACEHOLDER_TEXT)
        self._layout.addWidget(self._placeholder)

        self._content: Optional[QWidget] = None
        self.show_session(None)

    def show_session(self, session: Optional[Session]) -> None:
        """Render `session`, or the placeholder when it is None."""
        self._session = session
        if self._content is not None:
            self._layout.removeWidget(self._content)
            self._content.deleteLater()
            self._content = None
        self._values = {}
        self._slots_variant = None

        if session is None:
            self._placeholder.show()
            return

        self._placeholder.hide()
        self._content = self._build_content(session)
        self._layout.addWidget(self._content)

    def _build_content(self, session: Session) -> QWidget:
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING["md"])

        title_row = QHBoxLayout()
        title = QLabel("Session Details")
        title.setStyleSheet(f"""
            font-size: {FONTS["size_lg"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["text_primary"]};
        """)
        title_row.addWidget(title)
        title_row.addStretch()
        self._status_badge = StatusBadge(session.status)
        title_row.addWidget(self._status_badge)
        layout.addLayout(title_row)

        layout.addWidget(Separator())

        grid = QGridLayout()
        grid.setHorizontalSpacing(SPACING["md"])
        grid.setVerticalSpacing(SPACING["sm"])
        grid.setColumnMinimumWidth(0, UI["detail_label_width"])

        self._slots_variant = slots_variant(session.remaining)
        values = (
            format_date(session.date),
            session.time_range,
            session.venue,
            session.type.label,
            str(session.capacity),
            str(session.registered),
            str(session.remaining),
        )
        for row, (name, text) in enumerate(zip(FIELD_NAMES, values)):
            name_label = QLabel(f"{name}:")
            name_label.setStyleSheet(f"""
                font-size: {FONTS["size_base"]}px;
                font-weight: {FONTS["weight_semibold"]};
                color: {COLORS["text_muted"]};
            """)
            value_label = QLabel(text)
            value_label.setTextInteractionFlags(
                Qt.TextInteractionFlag.TextSelectableByMouse
            )
            color = COLORS["text_primary"]
            if name == "Available Slots":
                color = CAPACITY_COLORS[self._slots_variant]
            value_label.setStyleSheet(f"""
                font-size: {FONTS["size_base"]}px;
                color: {color};
            """)
            grid.addWidget(name_label, row, 0, Qt.AlignmentFlag.AlignTop)
            grid.addWidget(value_label, row, 1)
            self._values[name] = value_label
        layout.addLayout(grid)

        if session.description and session.description.strip():
            layout.addWidget(Separator())
            heading = QLabel("Description")
            heading.setStyleSheet(f"""
                font-size: {FONTS["size_md"]}px;
                font-weight: {FONTS["weight_semibold"]};
                color: {COLORS["text_primary"]};
            """)
            layout.addWidget(heading)
            description = QLabel(session.description)
            description.setWordWrap(True)
            description.setStyleSheet(f"""
                font-size: {FONTS["size_base"]}px;
                color: {COLORS["text_secondary"]};
            """)
            layout.addWidget(description)
            self._values["Description"] = description

        layout.addStretch()
        return content

    # ===== Accessors =====

    def session(self) -> Optional[Session]:
        return self._session

    def is_placeholder_visible(self) -> bool:
        return not self._placeholder.isHidden()

    def field_text(self, name: str) -> Optional[str]:
        label = self._values.get(name)
        return label.text() if label is not None else None

    def has_description(self) -> bool:
        return "Description" in self._values

    def slots_variant(self) -> Optional[str]:
        return self._slots_variant
