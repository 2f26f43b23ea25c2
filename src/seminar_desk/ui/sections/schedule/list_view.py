"""
Scrollable list of session cards with single selection.
"""

from typing import Iterable, Optional

from PyQt6.QtWidgets import (
    QFrame,
    QLabel,
    QVBoxLayout,
    QHBoxLayout,
    QWidget,
    QScrollArea,
)
from PyQt6.QtCore import Qt, pyqtSignal

from ....models import Session
from ....utils.logger import debug
from ...styles import (
    COLORS,
    CAPACITY_COLORS,
    SPACING,
    FONTS,
    RADIUS,
    ICONS,
    UI,
    capacity_variant,
    format_remaining,
    format_session_when,
)
from ...widgets import EmptyState, StatusBadge, TypeBadge

NO_SESSIONS_TEXT = "No sessions found"


class SessionCard(QFrame):
    """Clickable summary of one session."""

    clicked = pyqtSignal(int)  # session id

    def __init__(self, session: Session, parent: QWidget | None = None):
        super().__init__(parent)
        self._session = session
        self._selected = False
        self._hovered = False

        self.setObjectName("session-card")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setMaximumHeight(UI["session_card_max_height"])

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["md"], SPACING["sm"], SPACING["md"], SPACING["sm"]
        )
        layout.setSpacing(SPACING["xs"])

        top_row = QHBoxLayout()
        top_row.setSpacing(SPACING["sm"])
        self._when_label = QLabel(f"{ICONS['date']}  {format_session_when(session)}")
        self._when_label.setStyleSheet(f"""
            font-size: {FONTS["size_md"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["text_primary"]};
            background: transparent;
        """)
        top_row.addWidget(self._when_label)
        top_row.addStretch()
        top_row.addWidget(StatusBadge(session.status))
        layout.addLayout(top_row)

        self._venue_label = QLabel(f"{ICONS['venue']}  {session.venue}")
        self._venue_label.setStyleSheet(f"""
            font-size: {FONTS["size_base"]}px;
            color: {COLORS["text_secondary"]};
            background: transparent;
        """)
        layout.addWidget(self._venue_label)

        bottom_row = QHBoxLayout()
        bottom_row.setSpacing(SPACING["sm"])
        bottom_row.addWidget(TypeBadge(session.type))
        self._type_label = QLabel(session.type.label)
        self._type_label.setStyleSheet(f"""
            font-size: {FONTS["size_sm"]}px;
            color: {COLORS["text_muted"]};
            background: transparent;
        """)
        bottom_row.addWidget(self._type_label)
        bottom_row.addStretch()

        self._capacity_variant = capacity_variant(session.remaining)
        self._remaining_label = QLabel(format_remaining(session))
        self._remaining_label.setStyleSheet(f"""
            font-size: {FONTS["size_sm"]}px;
            font-weight: {FONTS["weight_medium"]};
            color: {CAPACITY_COLORS[self._capacity_variant]};
            background: transparent;
        """)
        bottom_row.addWidget(self._remaining_label)
        layout.addLayout(bottom_row)

        self._update_style()

    @property
    def session(self) -> Session:
        return self._session

    @property
    def session_id(self) -> int:
        return self._session.id

    @property
    def capacity_variant(self) -> str:
        return self._capacity_variant

    def remaining_text(self) -> str:
        return self._remaining_label.text()

    def is_selected(self) -> bool:
        return self._selected

    def is_hovered(self) -> bool:
        return self._hovered

    def set_selected(self, selected: bool) -> None:
        if self._selected != selected:
            self._selected = selected
            self._update_style()

    def set_hovered(self, hovered: bool) -> None:
        if self._hovered != hovered:
            self._hovered = hovered
            self._update_style()

    def _update_style(self) -> None:
        if self._selected:
            background = COLORS["bg_selected"]
            border = COLORS["border_accent"]
        elif self._hovered:
            background = COLORS["bg_hover"]
            border = COLORS["border_strong"]
        else:
            background = COLORS["bg_surface"]
            border = COLORS["border_default"]
        self.setStyleSheet(f"""
            QFrame#session-card {{
                background-color: {background};
                border: 1px solid {border};
                border-radius: {RADIUS["md"]}px;
            }}
        """)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.session_id)
        super().mousePressEvent(event)

    def enterEvent(self, event) -> None:
        self.set_hovered(True)
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:
        self.set_hovered(False)
        super().leaveEvent(event)


class SessionListView(QWidget):
    """Vertical list of SessionCards.

    At most one card is selected at a time. Every change of selection is
    reported through `selection_changed`, carrying the Session or None.
    """

    selection_changed = pyqtSignal(object)  # Optional[Session]

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._sessions: list[Session] = []
        self._cards: list[SessionCard] = []
        self._selected: Optional[Session] = None
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setHorizontalScrollBarPolicy(
            Qt.ScrollBarPolicy.ScrollBarAlwaysOff
        )
        self._scroll.setFrameShape(QScrollArea.Shape.NoFrame)

        container = QWidget()
        self._cards_layout = QVBoxLayout(container)
        self._cards_layout.setContentsMargins(0, 0, SPACING["sm"], 0)
        self._cards_layout.setSpacing(SPACING["sm"])
        self._cards_layout.addStretch()
        self._scroll.setWidget(container)
        layout.addWidget(self._scroll)

        self._empty = EmptyState(icon=ICONS["empty"], title=NO_SESSIONS_TEXT)
        self._empty.hide()
        layout.addWidget(self._empty)

    # ===== Data =====

    def set_sessions(self, sessions: Iterable[Session]) -> None:
        """Replace all cards, keeping the selection if it is still listed."""
        self._sessions = list(sessions)

        for card in self._cards:
            self._cards_layout.removeWidget(card)
            card.deleteLater()
        self._cards.clear()

        for session in self._sessions:
            card = SessionCard(session)
            card.clicked.connect(self.select)
            # Insert before the trailing stretch
            self._cards_layout.insertWidget(self._cards_layout.count() - 1, card)
            self._cards.append(card)

        has_sessions = bool(self._sessions)
        self._scroll.setVisible(has_sessions)
        self._empty.setVisible(not has_sessions)
        debug(f"[SessionList] Showing {len(self._sessions)} sessions")

        previous = self._selected
        if previous is None:
            return
        current = self._find(previous.id)
        if current is None:
            self._selected = None
            self.selection_changed.emit(None)
            return
        self._selected = current
        self._highlight(current.id)
        if current != previous:
            self.selection_changed.emit(current)

    def sessions(self) -> list[Session]:
        return list(self._sessions)

    def card_count(self) -> int:
        return len(self._cards)

    def cards(self) -> list[SessionCard]:
        return list(self._cards)

    def card(self, session_id: int) -> Optional[SessionCard]:
        for card in self._cards:
            if card.session_id == session_id:
                return card
        return None

    def is_empty_state_visible(self) -> bool:
        return not self._empty.isHidden()

    # ===== Selection =====

    def select(self, session_id: int) -> None:
        session = self._find(session_id)
        self._selected = session
        self._highlight(session.id if session else None)
        self.selection_changed.emit(session)

    def clear_selection(self) -> None:
        had_selection = self._selected is not None
        self._selected = None
        self._highlight(None)
        if had_selection:
            self.selection_changed.emit(None)

    def selected_session(self) -> Optional[Session]:
        return self._selected

    def selected_id(self) -> Optional[int]:
        return self._selected.id if self._selected else None

    def _highlight(self, session_id: Optional[int]) -> None:
        for card in self._cards:
            card.set_selected(card.session_id == session_id)

    def _find(self, session_id: int) -> Optional[Session]:
        for session in self._sessions:
            if session.id == session_id:
                return session
        return None
