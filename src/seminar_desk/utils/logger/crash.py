"""
Crash handler for Seminar Desk.

PyQt6 aborts the process when an exception escapes a slot and no excepthook
is set, so the application installs one that logs the traceback first.
"""

import logging
import sys
from types import TracebackType
from typing import Any, Callable, Optional, Type

ExceptHook = Callable[
    [Type[BaseException], BaseException, Optional[TracebackType]], Any
]

_original_excepthook: Optional[ExceptHook] = None
_crash_logger: Optional[logging.Logger] = None


def crash_handler(
    exc_type: Type[BaseException],
    exc_value: BaseException,
    exc_traceback: Optional[TracebackType],
) -> None:
    """Log an uncaught exception, then defer to the original hook."""
    if not issubclass(exc_type, KeyboardInterrupt) and _crash_logger is not None:
        _crash_logger.critical(
            "Unhandled exception",
            exc_info=(exc_type, exc_value, exc_traceback),
        )

    if _original_excepthook is not None:
        _original_excepthook(exc_type, exc_value, exc_traceback)


def install_crash_handler(logger: logging.Logger) -> None:
    global _original_excepthook, _crash_logger

    if _original_excepthook is None:
        _original_excepthook = sys.excepthook

    _crash_logger = logger
    sys.excepthook = crash_handler


def uninstall_crash_handler() -> None:
    """Restore the original sys.excepthook (used by tests)."""
    global _original_excepthook, _crash_logger

    if _original_excepthook is not None:
        sys.excepthook = _original_excepthook
        _original_excepthook = None

    _crash_logger = None
