"""
Authentication for Seminar Desk.

AuthService keeps the logged-in user and role for the running application.
It is constructed once at startup and passed to the window, not looked up
globally.
"""

from typing import Iterable, Optional

from ..models import Role, User
from ..utils.logger import info, warn


class AuthService:
    """Tracks the current user; the role is GUEST until a login succeeds."""

    def __init__(self, users: Iterable[User] = ()):
        self._users: dict[tuple[str, Role], User] = {
            (u.username, u.role): u for u in users
        }
        self._current_user: Optional[User] = None
        self._current_role = Role.GUEST

    def login(self, username: str, password: str, role: Role) -> bool:
        """Authenticate a user under a role.

        A GUEST login always succeeds and drops any current user. Failed
        attempts leave the current state untouched.
        """
        if role == Role.GUEST:
            self.logout()
            return True

        if not username or not username.strip() or not password or not password.strip():
            return False

        user = self._users.get((username.strip(), role))
        if user is None or user.password != password:
            warn(f"[Auth] Failed login for {username!r} as {role.label}")
            return False

        self._current_user = user
        self._current_role = user.role
        info(f"[Auth] {user.username} logged in as {user.role.label}")
        return True

    def logout(self) -> None:
        if self._current_user is not None:
            info(f"[Auth] {self._current_user.username} logged out")
        self._current_user = None
        self._current_role = Role.GUEST

    def current_role(self) -> Role:
        return self._current_role

    def current_user(self) -> Optional[User]:
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None
