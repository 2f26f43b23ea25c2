"""
Coordinator dashboard - session totals by status and type.
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QPushButton
from PyQt6.QtCore import Qt

from ...models import SessionStatus, SessionType
from ...services import SessionStatsStore
from ...utils.logger import debug
from ..styles import SPACING
from ..widgets import MetricsRow, PageHeader, Separator


class CoordinatorDashboard(QWidget):
    """Metric cards summarising the schedule."""

    def __init__(self, store: SessionStatsStore, parent: QWidget | None = None):
        super().__init__(parent)
        self._store = store
        self._setup_ui()
        self.refresh()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["xl"], SPACING["lg"], SPACING["xl"], SPACING["lg"]
        )
        layout.setSpacing(SPACING["md"])

        header = PageHeader("Coordinator Dashboard", "Overview of all seminar sessions")
        refresh_button = QPushButton("Refresh")
        refresh_button.setProperty("variant", "secondary")
        refresh_button.setCursor(Qt.CursorShape.PointingHandCursor)
        refresh_button.clicked.connect(self.refresh)
        header.add_action(refresh_button)
        layout.addWidget(header)

        self._status_metrics = MetricsRow()
        self._status_metrics.add_metric("total", "0", "Sessions", "primary")
        self._status_metrics.add_metric("open", "0", "Open", "success")
        self._status_metrics.add_metric("full", "0", "Full", "error")
        self._status_metrics.add_metric("approval", "0", "Needs Approval", "warning")
        self._status_metrics.add_metric("closed", "0", "Closed", "muted")
        self._status_metrics.add_stretch()
        layout.addWidget(self._status_metrics)

        layout.addWidget(Separator())

        self._type_metrics = MetricsRow()
        self._type_metrics.add_metric("oral", "0", "Oral", "primary")
        self._type_metrics.add_metric("poster", "0", "Poster", "primary")
        self._type_metrics.add_metric("registered", "0", "Registered", "success")
        self._type_metrics.add_metric("remaining", "0", "Open Slots", "muted")
        self._type_metrics.add_stretch()
        layout.addWidget(self._type_metrics)

        layout.addStretch()

    def refresh(self) -> None:
        store = self._store
        sessions = store.get_all_sessions()

        self._status_metrics.update_metric("total", str(store.count()))
        self._status_metrics.update_metric(
            "open", str(store.count_by_status(SessionStatus.OPEN))
        )
        self._status_metrics.update_metric(
            "full", str(store.count_by_status(SessionStatus.FULL))
        )
        self._status_metrics.update_metric(
            "approval", str(store.count_by_status(SessionStatus.REQUIRES_APPROVAL))
        )
        self._status_metrics.update_metric(
            "closed", str(store.count_by_status(SessionStatus.CLOSED))
        )

        self._type_metrics.update_metric(
            "oral", str(store.count_by_type(SessionType.ORAL))
        )
        self._type_metrics.update_metric(
            "poster", str(store.count_by_type(SessionType.POSTER))
        )
        self._type_metrics.update_metric(
            "registered", str(sum(s.registered for s in sessions))
        )
        self._type_metrics.update_metric(
            "remaining", str(sum(s.remaining for s in sessions if s.has_available_slots))
        )
        debug(f"[Dashboard] Refreshed with {len(sessions)} sessions")

    def metric(self, key: str) -> str:
        for row in (self._status_metrics, self._type_metrics):
            try:
                return row.metric(key)
            except KeyError:
                continue
        raise KeyError(key)
