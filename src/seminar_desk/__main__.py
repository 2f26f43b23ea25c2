"""
Application entry point.

Usage: python -m seminar_desk
"""

import sys

from PyQt6.QtWidgets import QApplication

from .services import AuthService, InMemorySessionStore, demo_sessions, demo_users
from .ui.styles import get_stylesheet
from .ui.window import ShellWindow
from .utils.logger import exception, info, setup_logging
from .utils.settings import Settings, get_settings


def build_window(settings: Settings) -> ShellWindow:
    """Create the services and the window, showing the signed-out shell.

    The window starts in whatever role AuthService reports, which is GUEST
    until someone logs in.
    """
    auth = AuthService(demo_users())
    store = InMemorySessionStore(demo_sessions())
    window = ShellWindow(auth, store, settings=settings)
    window.update_for_role(auth.current_role())
    info(f"[App] Loaded {store.count()} sessions")
    return window


def main():
    """Run Seminar Desk as a standalone Qt application."""
    setup_logging()
    settings = get_settings()

    app = QApplication(sys.argv)
    app.setApplicationName("Seminar Desk")
    app.setStyleSheet(get_stylesheet())

    try:
        window = build_window(settings)
    except Exception:
        exception("[App] Startup failed")
        raise

    window.show()
    info("[App] Started")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
