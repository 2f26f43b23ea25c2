"""
Log handlers for Seminar Desk.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import LogConfig, ensure_log_directory, get_config
from .formatters import HumanFormatter, JsonFormatter


def _rotating_handler(
    config: LogConfig, path, formatter: logging.Formatter
) -> RotatingFileHandler:
    ensure_log_directory(config)
    handler = RotatingFileHandler(
        filename=path,
        maxBytes=config.log_max_bytes,
        backupCount=config.log_backup_count,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)  # Files get everything the logger passes
    handler.setFormatter(formatter)
    return handler


def create_file_handler(config: LogConfig) -> RotatingFileHandler:
    return _rotating_handler(config, config.human_log_path, HumanFormatter())


def create_json_handler(config: LogConfig) -> RotatingFileHandler:
    return _rotating_handler(config, config.json_log_path, JsonFormatter())


def create_console_handler(config: LogConfig) -> logging.StreamHandler:
    """stderr handler; warnings and above unless running at debug level."""
    handler = logging.StreamHandler(sys.stderr)
    if config.default_level == logging.DEBUG:
        handler.setLevel(logging.DEBUG)
    else:
        handler.setLevel(logging.WARNING)
    handler.setFormatter(HumanFormatter())
    return handler


def setup_handlers(
    logger: logging.Logger,
    config: Optional[LogConfig] = None,
    include_console: Optional[bool] = None,
) -> None:
    """Replace the handlers of `logger` with file (and console) handlers."""
    if config is None:
        config = get_config()

    console_enabled = (
        include_console if include_console is not None else config.console_enabled
    )

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(create_file_handler(config))
    logger.addHandler(create_json_handler(config))

    if console_enabled:
        logger.addHandler(create_console_handler(config))

    logger.setLevel(config.default_level)
