"""
Pytest configuration and shared fixtures for seminar_desk tests.

This module provides:
- Headless Qt platform and isolated log directory
- Services seeded with demo data
- factory_boy factories (see factories.py) exposed as fixtures
"""

import os
import sys
from pathlib import Path

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

# Add src and tests directories to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
sys.path.insert(0, str(Path(__file__).parent))

from seminar_desk.models import Role  # noqa: E402
from seminar_desk.services import (  # noqa: E402
    AuthService,
    InMemorySessionStore,
    demo_sessions,
    demo_users,
)
from seminar_desk.utils.logger import (  # noqa: E402
    LogConfig,
    setup_logging,
    uninstall_crash_handler,
)

from factories import SessionFactory, UserFactory  # noqa: E402


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def isolated_logging(tmp_path_factory):
    """Route application logs to a temporary directory.

    The crash handler is removed again so pytest-qt keeps ownership of
    sys.excepthook.
    """
    log_dir = tmp_path_factory.mktemp("logs")
    setup_logging(LogConfig(log_dir=log_dir))
    uninstall_crash_handler()
    yield log_dir


# =============================================================================
# Services
# =============================================================================


@pytest.fixture
def sessions():
    return demo_sessions()


@pytest.fixture
def store(sessions) -> InMemorySessionStore:
    return InMemorySessionStore(sessions)


@pytest.fixture
def auth() -> AuthService:
    return AuthService(demo_users())


@pytest.fixture
def student_auth(auth) -> AuthService:
    assert auth.login("student", "student123", Role.STUDENT)
    return auth


# =============================================================================
# Factories
# =============================================================================


@pytest.fixture
def session_factory():
    """The SessionFactory class; call it or use .build_batch()."""
    SessionFactory.reset_sequence(1)
    return SessionFactory


@pytest.fixture
def user_factory():
    return UserFactory
