"""
Tests for seminar_desk.ui.styles helpers.
"""

from datetime import date, time

import pytest

from seminar_desk.models import Session, SessionType
from seminar_desk.ui.styles import (
    CAPACITY_COLORS,
    COLORS,
    capacity_variant,
    format_date,
    format_remaining,
    format_session_when,
    get_stylesheet,
    slots_variant,
)


@pytest.fixture
def session():
    return Session(
        id=7,
        date=date(2024, 1, 10),
        start_time=time(9, 0),
        end_time=time(11, 0),
        venue="Room A",
        type=SessionType.ORAL,
        capacity=30,
        registered=30,
    )


class TestFormatting:
    def test_format_date(self):
        assert format_date(date(2024, 1, 5)) == "2024-01-05"

    def test_format_session_when(self, session):
        assert format_session_when(session) == "2024-01-10  09:00 - 11:00"

    def test_format_remaining(self, session):
        assert format_remaining(session) == "Remaining: 0/30"


class TestVariants:
    @pytest.mark.parametrize(
        "remaining,expected", [(-1, "danger"), (0, "danger"), (1, "neutral"), (15, "neutral")]
    )
    def test_capacity_variant(self, remaining, expected):
        assert capacity_variant(remaining) == expected

    @pytest.mark.parametrize(
        "remaining,expected", [(0, "danger"), (1, "success"), (40, "success")]
    )
    def test_slots_variant(self, remaining, expected):
        assert slots_variant(remaining) == expected

    def test_capacity_colors(self):
        assert CAPACITY_COLORS["danger"] == COLORS["error"]
        assert CAPACITY_COLORS["neutral"] == COLORS["text_secondary"]
        assert CAPACITY_COLORS["success"] == COLORS["success"]


class TestStylesheet:
    def test_contains_base_rules(self):
        qss = get_stylesheet()
        assert "QMainWindow" in qss
        assert 'QPushButton[variant="secondary"]' in qss
        assert COLORS["bg_base"] in qss

    def test_styles_only_widgets_in_use(self):
        qss = get_stylesheet()
        for selector in ("QSplitter::handle", "QComboBox", "QLineEdit", "QScrollBar"):
            assert selector in qss
        assert "QToolTip" not in qss
        assert "QTabBar" not in qss
