"""
Logging configuration for Seminar Desk.

Settings come from environment variables so a desktop launch can be switched
to debug output without touching the settings file.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Environment variable names
DEBUG_ENV = "SEMINAR_DEBUG"
LOG_LEVEL_ENV = "SEMINAR_LOG_LEVEL"
LOG_CONSOLE_ENV = "SEMINAR_LOG_CONSOLE"
LOG_DIR_ENV = "SEMINAR_LOG_DIR"

LOG_DIR = Path.home() / ".local/state/seminar-desk/logs"

HUMAN_LOG_FILE = "seminar-desk.log"
JSON_LOG_FILE = "seminar-desk.json"
CRASH_LOG_FILE = "crash.log"

LOG_LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_TRUTHY = ("1", "true", "yes")
_FALSY = ("0", "false", "no")


@dataclass
class LogConfig:
    """Configuration for the logging system.

    Attributes:
        log_dir: Directory where log files are stored
        log_max_bytes: Size of a log file before it is rotated
        log_backup_count: Number of rotated files kept per log
        default_level: Level of the root application logger
        console_enabled: Whether records are also written to stderr
    """

    log_dir: Path = field(default_factory=lambda: LOG_DIR)
    log_max_bytes: int = 5 * 1024 * 1024  # 5MB
    log_backup_count: int = 3
    default_level: int = logging.INFO
    console_enabled: bool = False

    @property
    def human_log_path(self) -> Path:
        return self.log_dir / HUMAN_LOG_FILE

    @property
    def json_log_path(self) -> Path:
        return self.log_dir / JSON_LOG_FILE

    @property
    def crash_log_path(self) -> Path:
        return self.log_dir / CRASH_LOG_FILE


def get_config() -> LogConfig:
    """Create a LogConfig from environment variables.

    Environment variables:
        SEMINAR_DEBUG: '1', 'true' or 'yes' enables debug level and console output
        SEMINAR_LOG_LEVEL: explicit level name ('debug', 'info', ...)
        SEMINAR_LOG_CONSOLE: force console output on or off
        SEMINAR_LOG_DIR: override the log directory
    """
    config = LogConfig()

    if os.environ.get(DEBUG_ENV, "").lower() in _TRUTHY:
        config.default_level = logging.DEBUG
        config.console_enabled = True

    level = os.environ.get(LOG_LEVEL_ENV, "").lower()
    if level in LOG_LEVEL_MAP:
        config.default_level = LOG_LEVEL_MAP[level]

    console = os.environ.get(LOG_CONSOLE_ENV, "").lower()
    if console in _TRUTHY:
        config.console_enabled = True
    elif console in _FALSY:
        config.console_enabled = False

    log_dir = os.environ.get(LOG_DIR_ENV)
    if log_dir:
        config.log_dir = Path(log_dir).expanduser()

    return config


def ensure_log_directory(config: Optional[LogConfig] = None) -> Path:
    log_dir = config.log_dir if config else LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir
