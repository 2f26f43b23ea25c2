"""
Main window package.
"""

from .main import ShellWindow, ask_question, LOGOUT_TITLE, LOGOUT_TEXT
from .panels import default_menu_item, panel_factory, PLACEHOLDER_PANELS

__all__ = [
    "ShellWindow",
    "ask_question",
    "LOGOUT_TITLE",
    "LOGOUT_TEXT",
    "default_menu_item",
    "panel_factory",
    "PLACEHOLDER_PANELS",
]
