"""
Logging for Seminar Desk.

Simple API:
    from seminar_desk.utils.logger import debug, info, warn, error

    info("Window ready")

Component loggers:
    from seminar_desk.utils.logger import get_logger

    logger = get_logger("ui")  # logs as "seminar.ui"
    logger.debug("Panel switched")
"""

import logging
from typing import Any, Optional

from .config import LogConfig, ensure_log_directory, get_config
from .crash import install_crash_handler, uninstall_crash_handler
from .handlers import setup_handlers

ROOT_LOGGER_NAME = "seminar"

_initialized = False
_root_logger: Optional[logging.Logger] = None


def setup_logging(config: Optional[LogConfig] = None) -> logging.Logger:
    """Initialize the logging system; call once at application startup.

    Args:
        config: Optional LogConfig. If not provided, reads from environment.

    Returns:
        The configured root application logger.
    """
    global _initialized, _root_logger

    if config is None:
        config = get_config()

    ensure_log_directory(config)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    setup_handlers(logger, config)
    install_crash_handler(logger)
    logger.propagate = False

    _initialized = True
    _root_logger = logger
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the root application logger or a named child of it.

    The logging system is initialized on first use.
    """
    if not _initialized:
        setup_logging()

    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return _root_logger or logging.getLogger(ROOT_LOGGER_NAME)


def debug(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().debug(msg, *args, **kwargs)


def info(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().info(msg, *args, **kwargs)


def warn(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().warning(msg, *args, **kwargs)


def error(msg: str, *args: Any, **kwargs: Any) -> None:
    get_logger().error(msg, *args, **kwargs)


def exception(msg: str, *args: Any, **kwargs: Any) -> None:
    """Log an error with the active exception's traceback.

    Call from an exception handler.
    """
    get_logger().exception(msg, *args, **kwargs)


__all__ = [
    "debug",
    "info",
    "warn",
    "error",
    "exception",
    "setup_logging",
    "get_logger",
    "LogConfig",
    "get_config",
    "ROOT_LOGGER_NAME",
    "install_crash_handler",
    "uninstall_crash_handler",
]
