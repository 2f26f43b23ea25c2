"""
Log formatters for Seminar Desk.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any


class HumanFormatter(logging.Formatter):
    """Human-readable log formatter.

    Format: YYYY-MM-DD HH:MM:SS.mmm | LEVEL | component | file:line | message
    """

    LEVEL_WIDTH = 5
    NAME_WIDTH = 20

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        time_str = timestamp.strftime("%Y-%m-%d %H:%M:%S.") + f"{int(record.msecs):03d}"

        level = record.levelname.ljust(self.LEVEL_WIDTH)
        component = self._shorten_name(record.name)
        location = f"{record.filename}:{record.lineno}"

        formatted = f"{time_str} | {level} | {component} | {location} | {record.getMessage()}"

        if record.exc_info:
            formatted = f"{formatted}\n{self.formatException(record.exc_info)}"

        return formatted

    def _shorten_name(self, name: str) -> str:
        if len(name) <= self.NAME_WIDTH:
            return name.ljust(self.NAME_WIDTH)

        # seminar.ui.window.main -> seminar...main
        parts = name.split(".")
        shortened = f"{parts[0]}...{parts[-1]}"
        if len(shortened) <= self.NAME_WIDTH:
            return shortened.ljust(self.NAME_WIDTH)

        return name[: self.NAME_WIDTH - 3] + "..."


class JsonFormatter(logging.Formatter):
    """JSON Lines log formatter, one object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            log_data["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
                "traceback": self.formatException(record.exc_info).splitlines(),
            }

        return json.dumps(log_data, ensure_ascii=False, default=str)
