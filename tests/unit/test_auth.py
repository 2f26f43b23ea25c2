"""
Tests for seminar_desk.services.auth
"""

import pytest

from seminar_desk.models import Role
from seminar_desk.services import AuthService


class TestLogin:
    def test_starts_as_guest(self, auth):
        assert auth.current_role() == Role.GUEST
        assert auth.current_user() is None
        assert not auth.is_authenticated

    @pytest.mark.parametrize(
        "username,password,role",
        [
            ("student", "student123", Role.STUDENT),
            ("evaluator", "eval123", Role.EVALUATOR),
            ("coordinator", "coord123", Role.COORDINATOR),
        ],
    )
    def test_valid_credentials(self, auth, username, password, role):
        assert auth.login(username, password, role)
        assert auth.current_role() == role
        assert auth.current_user().username == username
        assert auth.is_authenticated

    def test_username_is_trimmed(self, auth):
        assert auth.login("  student ", "student123", Role.STUDENT)

    @pytest.mark.parametrize(
        "username,password,role",
        [
            ("student", "wrong", Role.STUDENT),
            ("student", "student123", Role.COORDINATOR),
            ("nobody", "student123", Role.STUDENT),
            ("", "student123", Role.STUDENT),
            ("student", "", Role.STUDENT),
            ("   ", "   ", Role.STUDENT),
        ],
    )
    def test_invalid_attempt_keeps_state(self, student_auth, username, password, role):
        assert not student_auth.login(username, password, role)
        assert student_auth.current_role() == Role.STUDENT
        assert student_auth.current_user().username == "student"

    def test_guest_login_always_succeeds_and_logs_out(self, student_auth):
        assert student_auth.login("", "", Role.GUEST)
        assert student_auth.current_role() == Role.GUEST
        assert student_auth.current_user() is None

    def test_factory_users(self, user_factory):
        user = user_factory(role=Role.EVALUATOR)
        auth = AuthService([user])
        assert auth.login(user.username, user.password, Role.EVALUATOR)
        assert auth.current_user() is user


class TestLogout:
    def test_logout_resets_to_guest(self, student_auth):
        student_auth.logout()
        assert student_auth.current_role() == Role.GUEST
        assert not student_auth.is_authenticated

    def test_logout_when_guest_is_noop(self, auth):
        auth.logout()
        assert auth.current_role() == Role.GUEST
