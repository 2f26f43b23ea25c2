"""
Exceptions raised by Seminar Desk services.
"""


class SeminarError(Exception):
    """Base class for errors shown to the user at an action boundary."""


class SessionNotFoundError(SeminarError):
    def __init__(self, session_id: int):
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class RegistrationError(SeminarError):
    """Registration rejected: no user, already registered, or no free slot."""
