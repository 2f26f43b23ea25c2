"""
Schedule section - filterable master/detail view of all sessions.
"""

from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QComboBox,
    QPushButton,
    QSplitter,
)
from PyQt6.QtCore import Qt

from ....models import Session
from ....services import (
    ALL_DATES,
    ALL_TYPES,
    TYPE_FILTER_OPTIONS,
    FilterCriteria,
    SessionStore,
    date_filter_options,
)
from ....utils.logger import debug
from ...styles import COLORS, SPACING, FONTS, UI
from ...widgets import PageHeader
from .detail_view import SessionDetailView
from .list_view import SessionListView


class ScheduleSection(QWidget):
    """Filter bar over a splitter holding the card list and detail view."""

    TITLE = "Seminar Schedule"
    SUBTITLE = "Browse sessions by date and presentation type"

    def __init__(self, store: SessionStore, parent: QWidget | None = None):
        super().__init__(parent)
        self._store = store
        self._setup_ui()
        self._connect_signals()
        self._populate_date_options()
        self._apply_filters()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["xl"], SPACING["lg"], SPACING["xl"], SPACING["lg"]
        )
        layout.setSpacing(SPACING["md"])

        self._header = PageHeader(self.TITLE, self.SUBTITLE)
        layout.addWidget(self._header)

        # Filter bar
        filter_bar = QHBoxLayout()
        filter_bar.setSpacing(SPACING["sm"])

        filter_bar.addWidget(self._filter_label("Date:"))
        self._date_combo = QComboBox()
        self._date_combo.setMinimumWidth(150)
        filter_bar.addWidget(self._date_combo)

        filter_bar.addSpacing(SPACING["md"])
        filter_bar.addWidget(self._filter_label("Type:"))
        self._type_combo = QComboBox()
        self._type_combo.addItems(TYPE_FILTER_OPTIONS)
        self._type_combo.setMinimumWidth(120)
        filter_bar.addWidget(self._type_combo)

        filter_bar.addStretch()
        self._refresh_button = QPushButton("Refresh")
        self._refresh_button.setProperty("variant", "secondary")
        self._refresh_button.setCursor(Qt.CursorShape.PointingHandCursor)
        filter_bar.addWidget(self._refresh_button)
        layout.addLayout(filter_bar)

        # Master / detail
        self._splitter = QSplitter(Qt.Orientation.Horizontal)
        self._splitter.setHandleWidth(SPACING["sm"])

        self._list = SessionListView()
        self._splitter.addWidget(self._list)

        self._detail_column = QWidget()
        detail_layout = QVBoxLayout(self._detail_column)
        detail_layout.setContentsMargins(0, 0, 0, 0)
        detail_layout.setSpacing(SPACING["sm"])
        self._detail = SessionDetailView()
        detail_layout.addWidget(self._detail)
        self._splitter.addWidget(self._detail_column)

        self._splitter.setSizes([UI["splitter_list_size"], UI["detail_panel_width"]])
        self._splitter.setStretchFactor(0, 1)
        self._splitter.setStretchFactor(1, 0)
        layout.addWidget(self._splitter, stretch=1)

    @staticmethod
    def _filter_label(text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet(f"""
            font-size: {FONTS["size_base"]}px;
            color: {COLORS["text_secondary"]};
        """)
        return label

    def _connect_signals(self) -> None:
        self._date_combo.currentTextChanged.connect(self._on_filter_changed)
        self._type_combo.currentTextChanged.connect(self._on_filter_changed)
        self._refresh_button.clicked.connect(self.refresh)
        self._list.selection_changed.connect(self._on_selection_changed)

    # ===== Filtering =====

    def criteria(self) -> FilterCriteria:
        return FilterCriteria.from_labels(
            self._date_combo.currentText(), self._type_combo.currentText()
        )

    def source_sessions(self) -> list[Session]:
        """Sessions this section can show, before filtering."""
        return self._store.get_all_sessions()

    def query_sessions(self, criteria: FilterCriteria) -> list[Session]:
        return self._store.filter_sessions(criteria.on_date, criteria.session_type)

    def _on_filter_changed(self, _text: str) -> None:
        self._apply_filters()

    def _apply_filters(self) -> None:
        criteria = self.criteria()
        sessions = self.query_sessions(criteria)
        debug(
            f"[Schedule] Filter date={criteria.on_date} "
            f"type={criteria.session_type} -> {len(sessions)} sessions"
        )
        self._list.set_sessions(sessions)

    def _populate_date_options(self, keep_current: bool = False) -> None:
        current = self._date_combo.currentText()
        self._date_combo.blockSignals(True)
        self._date_combo.clear()
        self._date_combo.addItems(date_filter_options(self.source_sessions()))
        index = self._date_combo.findText(current) if keep_current else 0
        self._date_combo.setCurrentIndex(max(index, 0))
        self._date_combo.blockSignals(False)

    def set_filters(self, date_label: str = ALL_DATES, type_label: str = ALL_TYPES) -> None:
        """Select filter values by their combo box text and re-query."""
        for combo, text in ((self._date_combo, date_label), (self._type_combo, type_label)):
            index = combo.findText(text)
            combo.blockSignals(True)
            combo.setCurrentIndex(index if index >= 0 else 0)
            combo.blockSignals(False)
        self._apply_filters()

    # ===== Selection =====

    def _on_selection_changed(self, session: Session | None) -> None:
        self._detail.show_session(session)

    # ===== Refreshable =====

    def refresh(self) -> None:
        """Reload sessions and reset filters and selection."""
        self._list.clear_selection()
        self._populate_date_options()
        self._type_combo.blockSignals(True)
        self._type_combo.setCurrentIndex(0)
        self._type_combo.blockSignals(False)
        self._apply_filters()
        self._detail.show_session(None)
        debug("[Schedule] Refreshed")

    # ===== Accessors =====

    @property
    def list_view(self) -> SessionListView:
        return self._list

    @property
    def detail_view(self) -> SessionDetailView:
        return self._detail

    def date_options(self) -> list[str]:
        return [self._date_combo.itemText(i) for i in range(self._date_combo.count())]

    def type_options(self) -> list[str]:
        return [self._type_combo.itemText(i) for i in range(self._type_combo.count())]

    def current_filters(self) -> tuple[str, str]:
        return self._date_combo.currentText(), self._type_combo.currentText()
