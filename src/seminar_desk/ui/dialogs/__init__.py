"""
Modal dialogs.
"""

from .login import LoginDialog, LOGIN_ROLES

__all__ = ["LoginDialog", "LOGIN_ROLES"]
