"""
Login dialog.
"""

from PyQt6.QtWidgets import (
    QDialog,
    QLabel,
    QLineEdit,
    QComboBox,
    QPushButton,
    QFormLayout,
    QVBoxLayout,
    QHBoxLayout,
    QWidget,
)
from PyQt6.QtCore import Qt

from ...models import Role
from ...services import AuthService
from ..styles import COLORS, SPACING, FONTS, get_stylesheet

LOGIN_ROLES = (Role.STUDENT, Role.EVALUATOR, Role.COORDINATOR)

MISSING_USERNAME = "Please enter your username"
MISSING_PASSWORD = "Please enter your password"
INVALID_CREDENTIALS = "Invalid username or password"


class LoginDialog(QDialog):
    """Collects credentials and a role, and authenticates through AuthService."""

    def __init__(self, auth: AuthService, parent: QWidget | None = None):
        super().__init__(parent)
        self._auth = auth
        self.setWindowTitle("Login")
        self.setModal(True)
        self.setMinimumWidth(360)
        self.setStyleSheet(get_stylesheet())
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["lg"], SPACING["lg"], SPACING["lg"], SPACING["lg"]
        )
        layout.setSpacing(SPACING["md"])

        title = QLabel("Sign in")
        title.setStyleSheet(f"""
            font-size: {FONTS["size_xl"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["text_primary"]};
        """)
        layout.addWidget(title)

        form = QFormLayout()
        form.setSpacing(SPACING["sm"])

        self._username = QLineEdit()
        self._username.setPlaceholderText("Username")
        form.addRow("Username:", self._username)

        self._password = QLineEdit()
        self._password.setPlaceholderText("Password")
        self._password.setEchoMode(QLineEdit.EchoMode.Password)
        self._password.returnPressed.connect(self.attempt_login)
        form.addRow("Password:", self._password)

        self._role = QComboBox()
        for role in LOGIN_ROLES:
            self._role.addItem(role.label, role)
        form.addRow("Role:", self._role)
        layout.addLayout(form)

        self._error = QLabel("")
        self._error.setStyleSheet(f"""
            font-size: {FONTS["size_sm"]}px;
            color: {COLORS["error"]};
        """)
        layout.addWidget(self._error)

        buttons = QHBoxLayout()
        buttons.addStretch()
        cancel = QPushButton("Cancel")
        cancel.setProperty("variant", "secondary")
        cancel.clicked.connect(self.reject)
        buttons.addWidget(cancel)

        self._login_button = QPushButton("Login")
        self._login_button.setDefault(True)
        self._login_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._login_button.clicked.connect(self.attempt_login)
        buttons.addWidget(self._login_button)
        layout.addLayout(buttons)

    def set_credentials(self, username: str, password: str, role: Role) -> None:
        self._username.setText(username)
        self._password.setText(password)
        index = self._role.findData(role)
        if index >= 0:
            self._role.setCurrentIndex(index)

    def selected_role(self) -> Role:
        return self._role.currentData()

    def error_text(self) -> str:
        return self._error.text()

    def attempt_login(self) -> bool:
        """Validate input and log in; accept the dialog on success."""
        self._error.setText("")
        username = self._username.text().strip()
        password = self._password.text()

        if not username:
            self._error.setText(MISSING_USERNAME)
            self._username.setFocus()
            return False
        if not password:
            self._error.setText(MISSING_PASSWORD)
            self._password.setFocus()
            return False

        if not self._auth.login(username, password, self.selected_role()):
            self._error.setText(INVALID_CREDENTIALS)
            self._password.clear()
            self._password.setFocus()
            return False

        self.accept()
        return True
