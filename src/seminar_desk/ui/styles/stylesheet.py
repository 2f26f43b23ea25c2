"""
Application QSS stylesheet.

Only widgets the shell actually uses are styled here; per-widget colours
(cards, badges, nav items) live with the widgets themselves.
"""

from .colors import COLORS
from .dimensions import SPACING, RADIUS, FONTS


def get_stylesheet() -> str:
    """Get the complete QSS stylesheet for the application."""
    return f"""
/* ===== Base ===== */

QWidget {{
    font-family: {FONTS["family"]};
    font-size: {FONTS["size_base"]}px;
    color: {COLORS["text_primary"]};
    background-color: transparent;
}}

QMainWindow, QDialog, QMessageBox {{
    background-color: {COLORS["bg_base"]};
}}

/* ===== Session list ===== */

QScrollArea {{
    border: none;
}}

QScrollBar:vertical {{
    width: 8px;
    background-color: transparent;
}}

QScrollBar::handle:vertical {{
    background-color: {COLORS["border_strong"]};
    min-height: 40px;
    border-radius: 4px;
}}

QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
    height: 0px;
}}

/* List / detail divider */
QSplitter::handle {{
    background-color: {COLORS["border_default"]};
    margin: 40px 3px;
}}

/* ===== Buttons: Register, Login (primary), Refresh, Logout (secondary) ===== */

QPushButton {{
    background-color: {COLORS["accent_primary"]};
    color: white;
    border: none;
    border-radius: {RADIUS["sm"]}px;
    padding: {SPACING["sm"]}px {SPACING["md"]}px;
    font-weight: {FONTS["weight_medium"]};
    font-size: {FONTS["size_sm"]}px;
    min-height: 32px;
}}

QPushButton:hover {{
    background-color: {COLORS["accent_primary_hover"]};
}}

QPushButton:disabled {{
    background-color: {COLORS["bg_elevated"]};
    color: {COLORS["text_muted"]};
}}

QPushButton[variant="secondary"] {{
    background-color: {COLORS["bg_elevated"]};
    color: {COLORS["text_primary"]};
    border: 1px solid {COLORS["border_default"]};
}}

QPushButton[variant="secondary"]:hover {{
    background-color: {COLORS["bg_hover"]};
}}

/* ===== Filter combos and login fields ===== */

QComboBox, QLineEdit {{
    background-color: {COLORS["bg_elevated"]};
    border: 1px solid {COLORS["border_default"]};
    border-radius: {RADIUS["sm"]}px;
    padding: {SPACING["xs"]}px {SPACING["sm"]}px;
    min-height: 28px;
    font-size: {FONTS["size_sm"]}px;
}}

QComboBox:focus, QLineEdit:focus {{
    border-color: {COLORS["accent_primary"]};
}}

QComboBox QAbstractItemView {{
    background-color: {COLORS["bg_surface"]};
    border: 1px solid {COLORS["border_default"]};
    selection-background-color: {COLORS["bg_hover"]};
    selection-color: {COLORS["text_primary"]};
}}
"""
