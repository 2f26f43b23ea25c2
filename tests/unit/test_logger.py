"""
Tests for seminar_desk.utils.logger
"""

import json
import logging
import sys
from pathlib import Path

import pytest

from seminar_desk.utils import logger as log_module
from seminar_desk.utils.logger import (
    LogConfig,
    ROOT_LOGGER_NAME,
    get_config,
    get_logger,
    install_crash_handler,
    uninstall_crash_handler,
)
from seminar_desk.utils.logger.crash import crash_handler
from seminar_desk.utils.logger.formatters import HumanFormatter, JsonFormatter
from seminar_desk.utils.logger.handlers import setup_handlers


def make_record(msg: str = "hello", name: str = "seminar.ui", exc_info=None):
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="/src/seminar_desk/ui/window/main.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestGetConfig:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for var in (
            "SEMINAR_DEBUG",
            "SEMINAR_LOG_LEVEL",
            "SEMINAR_LOG_CONSOLE",
            "SEMINAR_LOG_DIR",
        ):
            monkeypatch.delenv(var, raising=False)

    def test_defaults(self):
        config = get_config()
        assert config.default_level == logging.INFO
        assert config.console_enabled is False

    def test_debug_enables_console(self, monkeypatch):
        monkeypatch.setenv("SEMINAR_DEBUG", "1")
        config = get_config()
        assert config.default_level == logging.DEBUG
        assert config.console_enabled is True

    def test_explicit_level(self, monkeypatch):
        monkeypatch.setenv("SEMINAR_LOG_LEVEL", "warning")
        assert get_config().default_level == logging.WARNING

    def test_unknown_level_ignored(self, monkeypatch):
        monkeypatch.setenv("SEMINAR_LOG_LEVEL", "chatty")
        assert get_config().default_level == logging.INFO

    def test_console_can_be_forced_off(self, monkeypatch):
        monkeypatch.setenv("SEMINAR_DEBUG", "true")
        monkeypatch.setenv("SEMINAR_LOG_CONSOLE", "0")
        assert get_config().console_enabled is False

    def test_log_dir_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SEMINAR_LOG_DIR", str(tmp_path))
        config = get_config()
        assert config.log_dir == tmp_path
        assert config.human_log_path == tmp_path / "seminar-desk.log"
        assert config.json_log_path == tmp_path / "seminar-desk.json"


class TestFormatters:
    def test_human_format(self):
        line = HumanFormatter().format(make_record())
        parts = [p.strip() for p in line.split("|")]
        assert parts[1] == "INFO"
        assert parts[2] == "seminar.ui"
        assert parts[3] == "main.py:42"
        assert parts[4] == "hello"

    def test_human_shortens_long_names(self):
        formatter = HumanFormatter()
        line = formatter.format(make_record(name="seminar.ui.sections.schedule.list_view"))
        component = line.split("|")[2].strip()
        assert len(component) <= HumanFormatter.NAME_WIDTH
        assert component.startswith("seminar")

    def test_json_format(self):
        data = json.loads(JsonFormatter().format(make_record("registered")))
        assert data["level"] == "INFO"
        assert data["logger"] == "seminar.ui"
        assert data["message"] == "registered"
        assert data["line"] == 42

    def test_json_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record(exc_info=sys.exc_info())
        data = json.loads(JsonFormatter().format(record))
        assert data["exception"]["type"] == "ValueError"
        assert data["exception"]["message"] == "boom"


class TestHandlers:
    def test_setup_handlers_writes_files(self, tmp_path):
        config = LogConfig(log_dir=tmp_path / "logs")
        logger = logging.getLogger("seminar-test-handlers")
        logger.propagate = False

        setup_handlers(logger, config)
        logger.info("written")
        for handler in logger.handlers:
            handler.flush()

        assert "written" in config.human_log_path.read_text()
        assert json.loads(config.json_log_path.read_text().splitlines()[0])[
            "message"
        ] == "written"

        # Calling again replaces handlers instead of stacking them
        setup_handlers(logger, config)
        assert len(logger.handlers) == 2

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def test_console_handler_optional(self, tmp_path):
        config = LogConfig(log_dir=tmp_path, console_enabled=True)
        logger = logging.getLogger("seminar-test-console")
        setup_handlers(logger, config)
        assert len(logger.handlers) == 3
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


class TestLoggerApi:
    def test_get_logger_children(self):
        assert get_logger("ui").name == f"{ROOT_LOGGER_NAME}.ui"
        assert get_logger().name == ROOT_LOGGER_NAME

    def test_module_functions_log_to_root(self, isolated_logging):
        log_module.info("module level message")
        for handler in get_logger().handlers:
            handler.flush()
        text = (Path(isolated_logging) / "seminar-desk.log").read_text()
        assert "module level message" in text


class TestCrashHandler:
    def test_install_and_uninstall(self):
        original = sys.excepthook
        logger = logging.getLogger("seminar-test-crash")
        try:
            install_crash_handler(logger)
            assert sys.excepthook is crash_handler
        finally:
            uninstall_crash_handler()
        assert sys.excepthook is original

    def test_crash_handler_logs_and_chains(self, caplog):
        calls = []
        logger = logging.getLogger("seminar-test-chain")
        logger.propagate = True
        original = sys.excepthook
        sys.excepthook = lambda *args: calls.append(args)
        try:
            install_crash_handler(logger)
            with caplog.at_level(logging.CRITICAL, logger="seminar-test-chain"):
                try:
                    raise RuntimeError("unhandled")
                except RuntimeError:
                    crash_handler(*sys.exc_info())
        finally:
            uninstall_crash_handler()
            sys.excepthook = original

        assert len(calls) == 1
        assert "Unhandled exception" in caplog.text
