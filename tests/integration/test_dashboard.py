"""
Tests for the coordinator dashboard and the static panels.
"""

import pytest

from seminar_desk.ui.sections import (
    WELCOME_TITLE,
    CoordinatorDashboard,
    PlaceholderSection,
    Refreshable,
    WelcomeSection,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def dashboard(qtbot, store):
    widget = CoordinatorDashboard(store)
    qtbot.addWidget(widget)
    return widget


class TestCoordinatorDashboard:
    @pytest.mark.parametrize(
        "key,expected",
        [
            ("total", "5"),
            ("open", "2"),
            ("full", "1"),
            ("approval", "1"),
            ("closed", "1"),
            ("oral", "3"),
            ("poster", "2"),
            ("registered", "73"),
            ("remaining", "43"),
        ],
    )
    def test_demo_metrics(self, dashboard, key, expected):
        assert dashboard.metric(key) == expected

    def test_unknown_metric(self, dashboard):
        with pytest.raises(KeyError):
            dashboard.metric("cancelled")

    def test_refresh_picks_up_store_changes(self, dashboard, store, session_factory):
        store.register(2, "student")
        store.save(session_factory(id=40, capacity=10, registered=0))

        # Values are only recomputed on refresh
        assert dashboard.metric("total") == "5"
        dashboard.refresh()

        assert dashboard.metric("total") == "6"
        assert dashboard.metric("open") == "3"
        assert dashboard.metric("registered") == "74"
        assert dashboard.metric("remaining") == "52"

    def test_is_refreshable(self, dashboard):
        assert isinstance(dashboard, Refreshable)


class TestStaticPanels:
    def test_placeholder_text(self, qtbot):
        panel = PlaceholderSection("My Status")
        qtbot.addWidget(panel)
        assert panel.text() == "My Status - Coming Soon"
        assert not isinstance(panel, Refreshable)

    def test_welcome(self, qtbot):
        panel = WelcomeSection()
        qtbot.addWidget(panel)
        assert panel.title() == WELCOME_TITLE
