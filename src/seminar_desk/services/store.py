"""
Session store - read/query access to the seminar sessions.

The views depend only on the SessionStore protocol. InMemorySessionStore is
the implementation the application ships with; it holds immutable Session
records and swaps a record whenever its registration count changes.
"""

from dataclasses import replace
from typing import Iterable, Optional, Protocol, runtime_checkable

from ..errors import RegistrationError, SessionNotFoundError
from ..models import Session, SessionStatus, SessionType
from ..utils.logger import info
from .filters import DateCriterion, TypeCriterion, filter_sessions


@runtime_checkable
class SessionStore(Protocol):
    def get_all_sessions(self) -> list[Session]:
        """Return every session, ordered by date then start time."""
        ...

    def filter_sessions(
        self, date: DateCriterion = None, session_type: TypeCriterion = None
    ) -> list[Session]:
        """Return the sessions matching the optional date and type."""
        ...

    def get_session(self, session_id: int) -> Optional[Session]:
        """Return one session, or None if the id is unknown."""
        ...


class InMemorySessionStore:
    """SessionStore backed by a dict keyed by session id.

    Registrations are kept as username -> session id; a user holds at most
    one registration.
    """

    def __init__(self, sessions: Iterable[Session] = ()):
        self._sessions: dict[int, Session] = {}
        self._registrations: dict[str, int] = {}
        for session in sessions:
            self.save(session)

    def save(self, session: Session) -> Session:
        self._sessions[session.id] = session
        return session

    def get_all_sessions(self) -> list[Session]:
        return sorted(
            self._sessions.values(), key=lambda s: (s.date, s.start_time, s.id)
        )

    def filter_sessions(
        self, date: DateCriterion = None, session_type: TypeCriterion = None
    ) -> list[Session]:
        return filter_sessions(self.get_all_sessions(), date, session_type)

    def get_session(self, session_id: int) -> Optional[Session]:
        return self._sessions.get(session_id)

    def get_available_sessions(self) -> list[Session]:
        return [s for s in self.get_all_sessions() if s.has_available_slots]

    def registration_for(self, username: str) -> Optional[int]:
        """Session id the user is registered for, if any."""
        return self._registrations.get(username)

    def register(self, session_id: int, username: Optional[str]) -> Session:
        """Take one slot in a session for `username`, marking it FULL when it
        fills up.

        Raises:
            RegistrationError: if there is no user, the user is already
                registered, or the session is not open or has no slots
            SessionNotFoundError: if the id is unknown
        """
        if not username or not username.strip():
            raise RegistrationError("You must be logged in to register")

        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)

        existing = self._registrations.get(username)
        if existing is not None:
            raise RegistrationError(
                f"{username} is already registered for session {existing}"
            )
        if not session.has_available_slots:
            raise RegistrationError(
                f"Session on {session.date.isoformat()} at {session.venue} "
                "is not accepting registrations"
            )

        registered = session.registered + 1
        status = (
            SessionStatus.FULL if registered >= session.capacity else session.status
        )
        updated = self.save(replace(session, registered=registered, status=status))
        self._registrations[username] = session_id
        info(
            f"[Store] Registered {username} in session {session_id} "
            f"({updated.registered}/{updated.capacity})"
        )
        return updated

    def count(self) -> int:
        return len(self._sessions)

    def count_by_status(self, status: SessionStatus) -> int:
        return sum(1 for s in self._sessions.values() if s.status == status)

    def count_by_type(self, session_type: SessionType) -> int:
        return sum(1 for s in self._sessions.values() if s.type == session_type)


@runtime_checkable
class RegistrationStore(SessionStore, Protocol):
    def register(self, session_id: int, username: Optional[str]) -> Session:
        """Take one slot in a session for a user and return the updated record."""
        ...

    def registration_for(self, username: str) -> Optional[int]:
        ...


@runtime_checkable
class SessionStatsStore(SessionStore, Protocol):
    """Totals read by the coordinator dashboard."""

    def count(self) -> int: ...

    def count_by_status(self, status: SessionStatus) -> int: ...

    def count_by_type(self, session_type: SessionType) -> int: ...


@runtime_checkable
class SeminarStore(RegistrationStore, SessionStatsStore, Protocol):
    """Everything the shell window hands on to its panels."""
