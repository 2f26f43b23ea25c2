"""
Main application window.

Layout:
- Header with title, current user and the login/logout button
- Sidebar whose menu depends on the current role
- Content area showing one panel at a time
- Status bar with the current role

Panels are created lazily per menu action and cached until the role
changes. Services are passed in by the caller; the window does not look
anything up globally.
"""

from typing import Callable, Optional

from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QStackedWidget,
    QFrame,
    QMessageBox,
    QDialog,
)
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QCloseEvent, QKeySequence, QShortcut

from ...models import Role
from ...services import AuthService, SeminarStore
from ...utils.logger import debug, info, warn
from ...utils.settings import Settings
from ..dialogs import LoginDialog
from ..sections import Refreshable, WelcomeSection
from ..styles import COLORS, UI, get_stylesheet
from ..widgets import HeaderPanel, Sidebar, StatusBar
from .panels import PanelFactory, default_menu_item, panel_factory

ConfirmCallback = Callable[[str, str], bool]
LoginDialogFactory = Callable[[AuthService, QWidget], QDialog]

LOGOUT_TITLE = "Confirm Logout"
LOGOUT_TEXT = "Are you sure you want to logout?"


def ask_question(title: str, text: str) -> bool:
    """Yes/No message box; True when the user answers Yes."""
    answer = QMessageBox.question(
        None,
        title,
        text,
        QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        QMessageBox.StandardButton.No,
    )
    return answer == QMessageBox.StandardButton.Yes


class ShellWindow(QMainWindow):
    """Top-level window: header, sidebar, content panel and status bar."""

    role_changed = pyqtSignal(object)  # Role

    def __init__(
        self,
        auth: AuthService,
        store: SeminarStore,
        settings: Optional[Settings] = None,
        confirm: Optional[ConfirmCallback] = None,
        login_dialog_factory: Optional[LoginDialogFactory] = None,
        notify: Optional[Callable[[str, str], None]] = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._auth = auth
        self._store = store
        self._settings = settings
        self._confirm = confirm or ask_question
        self._login_dialog_factory = login_dialog_factory or LoginDialog
        self._notify = notify

        self._panel_cache: dict[str, QWidget] = {}
        self._current_panel: Optional[QWidget] = None
        self._current_key: Optional[str] = None

        self._setup_window()
        self._setup_ui()
        self._connect_signals()
        self.show_welcome()

    def _setup_window(self) -> None:
        self.setWindowTitle("Seminar Management System")
        self.setMinimumSize(UI["window_min_width"], UI["window_min_height"])
        if self._settings is not None:
            self.resize(self._settings.window_width, self._settings.window_height)
        self.setStyleSheet(get_stylesheet())

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)

        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._header = HeaderPanel()
        root.addWidget(self._header)

        body = QHBoxLayout()
        body.setContentsMargins(0, 0, 0, 0)
        body.setSpacing(0)

        self._sidebar = Sidebar()
        body.addWidget(self._sidebar)

        content_frame = QFrame()
        content_frame.setObjectName("content-area")
        content_frame.setStyleSheet(f"""
            QFrame#content-area {{
                background-color: {COLORS["bg_base"]};
            }}
        """)
        content_layout = QVBoxLayout(content_frame)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(0)

        self._pages = QStackedWidget()
        content_layout.addWidget(self._pages)
        body.addWidget(content_frame, stretch=1)
        root.addLayout(body, stretch=1)

        self._status_bar = StatusBar()
        root.addWidget(self._status_bar)

    def _connect_signals(self) -> None:
        self._sidebar.menu_clicked.connect(self.handle_menu_action)
        self._header.login_requested.connect(self.show_login)
        self._header.logout_requested.connect(self.handle_logout)

        refresh_shortcut = QShortcut(QKeySequence("F5"), self)
        refresh_shortcut.activated.connect(self.refresh_current_panel)

    # ===== Panel switching =====

    def switch_panel(self, panel: QWidget) -> None:
        """Make `panel` the only visible content panel."""
        previous = self._current_panel
        if self._pages.indexOf(panel) < 0:
            self._pages.addWidget(panel)
        self._pages.setCurrentWidget(panel)
        self._current_panel = panel

        # Panels outside the cache are single-use
        if (
            previous is not None
            and previous is not panel
            and previous not in self._panel_cache.values()
        ):
            self._pages.removeWidget(previous)
            previous.deleteLater()

    def switch_to_panel(self, key: str, factory: PanelFactory) -> QWidget:
        """Show the cached panel for `key`, creating it with `factory` once."""
        panel = self._panel_cache.get(key)
        if panel is None:
            panel = factory()
            self._panel_cache[key] = panel
            debug(f"[Window] Created panel {key}")
        self._current_key = key
        self.switch_panel(panel)
        return panel

    def show_welcome(self) -> None:
        self._current_key = None
        self.switch_panel(WelcomeSection())

    def _clear_panel_cache(self) -> None:
        stale = list(self._panel_cache.values())
        self._panel_cache.clear()
        for panel in stale:
            if panel is not self._current_panel:
                self._pages.removeWidget(panel)
                panel.deleteLater()

    def refresh_current_panel(self) -> None:
        panel = self._current_panel
        if isinstance(panel, Refreshable):
            debug(f"[Window] Refreshing {type(panel).__name__}")
            panel.refresh()

    # ===== Roles and navigation =====

    def update_for_role(self, role: Role) -> None:
        """Rebuild navigation for `role` and show its default panel."""
        info(f"[Window] Role changed to {role.label}")
        self._sidebar.update_menu_for_role(role)
        self._header.update_user_display(self._auth.current_user(), role)
        self._status_bar.update_role_display(role)
        self._clear_panel_cache()
        self.role_changed.emit(role)

        target = default_menu_item(role)
        self._sidebar.select_menu_item(target)
        self.handle_menu_action(target)

    def handle_menu_action(self, action: str) -> None:
        if action == "LOGIN":
            self.show_login()
            return
        if action == "LOGOUT":
            self.handle_logout()
            return

        factory = panel_factory(
            action, self._store, self._auth, notify=self._notify
        )
        if factory is None:
            warn(f"[Window] Unknown menu action: {action}")
            return
        self._sidebar.select_menu_item(action)
        self.switch_to_panel(action, factory)

    def show_login(self) -> bool:
        dialog = self._login_dialog_factory(self._auth, self)
        if dialog.exec() != QDialog.DialogCode.Accepted.value:
            debug("[Window] Login cancelled")
            return False
        self.update_for_role(self._auth.current_role())
        return True

    def handle_logout(self) -> bool:
        """Log out after confirmation and return to the welcome panel."""
        ask = self._settings is None or self._settings.confirm_logout
        if ask and not self._confirm(LOGOUT_TITLE, LOGOUT_TEXT):
            debug("[Window] Logout cancelled")
            return False

        self._auth.logout()
        self.update_for_role(Role.GUEST)
        self.show_welcome()
        return True

    # ===== Accessors =====

    @property
    def auth(self) -> AuthService:
        return self._auth

    @property
    def sidebar(self) -> Sidebar:
        return self._sidebar

    @property
    def header(self) -> HeaderPanel:
        return self._header

    @property
    def status_bar_widget(self) -> StatusBar:
        return self._status_bar

    def current_panel(self) -> Optional[QWidget]:
        return self._current_panel

    def current_panel_key(self) -> Optional[str]:
        return self._current_key

    def cached_panel(self, key: str) -> Optional[QWidget]:
        return self._panel_cache.get(key)

    def closeEvent(self, event: QCloseEvent | None) -> None:
        if self._settings is not None:
            self._settings.window_width = self.width()
            self._settings.window_height = self.height()
            try:
                self._settings.save()
            except OSError as e:
                warn(f"[Window] Could not save settings: {e}")
        if event is not None:
            event.accept()
