"""
Registration section - the student's view of sessions that still take
registrations, with a Register action.
"""

from typing import Callable, Optional

from PyQt6.QtWidgets import QLabel, QMessageBox, QPushButton, QWidget
from PyQt6.QtCore import Qt

from ....errors import SeminarError
from ....models import Session
from ....services import AuthService, FilterCriteria, RegistrationStore
from ....utils.logger import info, warn
from ...styles import COLORS, FONTS
from .section import ScheduleSection

Notifier = Callable[[str, str], None]


def _warning_box(title: str, text: str) -> None:
    QMessageBox.warning(None, title, text)


class RegistrationSection(ScheduleSection):
    """Schedule restricted to sessions with open slots.

    The logged-in user from `auth` is the one registered; each user holds
    at most one registration.
    """

    TITLE = "Session Registration"
    SUBTITLE = "Pick an open session and register for it"

    def __init__(
        self,
        store: RegistrationStore,
        auth: AuthService,
        notify: Optional[Notifier] = None,
        parent: QWidget | None = None,
    ):
        self._auth = auth
        self._notify = notify or _warning_box
        super().__init__(store, parent)
        self._show_registration()

    def _setup_ui(self) -> None:
        super()._setup_ui()
        column = self._detail_column.layout()

        self._register_button = QPushButton("Register")
        self._register_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._register_button.setEnabled(False)
        column.addWidget(self._register_button)

        self._feedback = QLabel()
        self._feedback.setWordWrap(True)
        self._feedback.setStyleSheet(f"""
            font-size: {FONTS["size_sm"]}px;
            color: {COLORS["success"]};
        """)
        self._feedback.hide()
        column.addWidget(self._feedback)

    def _connect_signals(self) -> None:
        super()._connect_signals()
        self._register_button.clicked.connect(self.register_selected)

    def source_sessions(self) -> list[Session]:
        return [s for s in super().source_sessions() if s.has_available_slots]

    def query_sessions(self, criteria: FilterCriteria) -> list[Session]:
        return [s for s in super().query_sessions(criteria) if s.has_available_slots]

    def _on_selection_changed(self, session: Session | None) -> None:
        super()._on_selection_changed(session)
        self._register_button.setEnabled(
            session is not None and self.registered_session() is None
        )

    def register_selected(self) -> Optional[Session]:
        """Register for the selected session.

        Errors from the store are reported through the notifier; the
        current view is left as it was.
        """
        session_id = self._list.selected_id()
        if session_id is None:
            return None

        user = self._auth.current_user()
        try:
            updated = self._store.register(
                session_id, user.username if user is not None else None
            )
        except SeminarError as e:
            warn(f"[Registration] Registration failed: {e}")
            self._notify("Registration Failed", str(e))
            return None

        info(f"[Registration] Registered for session {updated.id}")
        self._populate_date_options(keep_current=True)
        self._apply_filters()
        self._show_registration()
        return updated

    def _show_registration(self) -> None:
        session = self.registered_session()
        if session is None:
            self._feedback.clear()
            self._feedback.hide()
            return
        self._feedback.setText(
            f"Registered for {session.date.isoformat()} at {session.venue}"
        )
        self._feedback.show()
        self._register_button.setEnabled(False)

    def refresh(self) -> None:
        super().refresh()
        self._show_registration()

    def registered_session(self) -> Optional[Session]:
        """The current user's registered session, if any."""
        user = self._auth.current_user()
        if user is None:
            return None
        session_id = self._store.registration_for(user.username)
        return None if session_id is None else self._store.get_session(session_id)

    def can_register(self) -> bool:
        return self._register_button.isEnabled()

    def feedback_text(self) -> str:
        return self._feedback.text()
