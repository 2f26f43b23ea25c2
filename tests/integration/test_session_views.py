"""
Tests for the session list and detail views.
"""

import pytest
from PyQt6.QtCore import Qt

from seminar_desk.ui.sections.schedule import (
    NO_SESSIONS_TEXT,
    PLACEHOLDER_TEXT,
    SessionDetailView,
    SessionListView,
)

pytestmark = pytest.mark.integration


@pytest.fixture
def list_view(qtbot, sessions):
    view = SessionListView()
    qtbot.addWidget(view)
    view.set_sessions(sessions)
    view.show()
    return view


@pytest.fixture
def detail_view(qtbot):
    view = SessionDetailView()
    qtbot.addWidget(view)
    return view


class TestSessionListView:
    def test_one_card_per_session(self, list_view, sessions):
        assert list_view.card_count() == len(sessions)
        assert [c.session_id for c in list_view.cards()] == [s.id for s in sessions]
        assert not list_view.is_empty_state_visible()

    def test_empty_list_shows_message(self, list_view):
        list_view.set_sessions([])
        assert list_view.card_count() == 0
        assert list_view.is_empty_state_visible()
        assert list_view._empty.title() == NO_SESSIONS_TEXT

    def test_card_capacity_styling(self, list_view):
        full = list_view.card(1)
        open_ = list_view.card(2)
        assert full.remaining_text() == "Remaining: 0/30"
        assert full.capacity_variant == "danger"
        assert open_.remaining_text() == "Remaining: 28/40"
        assert open_.capacity_variant == "neutral"

    def test_select_highlights_exactly_one(self, qtbot, list_view):
        with qtbot.waitSignal(list_view.selection_changed, timeout=1000) as blocker:
            list_view.select(3)

        assert blocker.args[0].id == 3
        assert list_view.selected_id() == 3
        highlighted = [c.session_id for c in list_view.cards() if c.is_selected()]
        assert highlighted == [3]

    def test_select_absent_id_clears(self, qtbot, list_view):
        list_view.select(3)
        with qtbot.waitSignal(list_view.selection_changed, timeout=1000) as blocker:
            list_view.select(999)

        assert blocker.args == [None]
        assert list_view.selected_session() is None
        assert not any(c.is_selected() for c in list_view.cards())

    def test_click_selects_card(self, qtbot, list_view):
        card = list_view.card(4)
        with qtbot.waitSignal(list_view.selection_changed, timeout=1000):
            qtbot.mouseClick(card, Qt.MouseButton.LeftButton)
        assert list_view.selected_id() == 4
        assert card.is_selected()

    def test_hover_does_not_change_selection(self, list_view):
        list_view.select(2)
        other = list_view.card(5)

        other.set_hovered(True)

        assert other.is_hovered()
        assert not other.is_selected()
        assert list_view.selected_id() == 2
        other.set_hovered(False)
        assert not other.is_hovered()

    def test_clear_selection(self, qtbot, list_view):
        list_view.select(2)
        with qtbot.waitSignal(list_view.selection_changed, timeout=1000) as blocker:
            list_view.clear_selection()
        assert blocker.args == [None]
        assert list_view.selected_id() is None

    def test_clear_without_selection_is_silent(self, qtbot, list_view):
        with qtbot.assertNotEmitted(list_view.selection_changed):
            list_view.clear_selection()

    def test_reload_keeps_listed_selection(self, qtbot, list_view, sessions):
        list_view.select(2)
        with qtbot.assertNotEmitted(list_view.selection_changed):
            list_view.set_sessions(sessions[1:3])
        assert list_view.selected_id() == 2
        assert list_view.card(2).is_selected()

    def test_reload_drops_stale_selection(self, qtbot, list_view, sessions):
        list_view.select(1)
        with qtbot.waitSignal(list_view.selection_changed, timeout=1000) as blocker:
            list_view.set_sessions(sessions[1:])
        assert blocker.args == [None]
        assert list_view.selected_session() is None

    def test_reload_reports_changed_record(self, qtbot, list_view, store):
        list_view.select(2)
        store.register(2, "student")
        with qtbot.waitSignal(list_view.selection_changed, timeout=1000) as blocker:
            list_view.set_sessions(store.get_all_sessions())
        assert blocker.args[0].registered == 13

    def test_sessions_returns_copy(self, list_view):
        list_view.sessions().clear()
        assert list_view.card_count() == 5
        assert len(list_view.sessions()) == 5


class TestSessionDetailView:
    def test_placeholder_by_default(self, detail_view):
        assert detail_view.is_placeholder_visible()
        assert detail_view._placeholder.title() == PLACEHOLDER_TEXT
        assert detail_view.field_text("Date") is None

    def test_shows_all_fields(self, detail_view, store):
        session = store.get_session(3)
        detail_view.show_session(session)

        assert not detail_view.is_placeholder_visible()
        assert detail_view.field_text("Date") == "2024-01-11"
        assert detail_view.field_text("Time") == "09:30 - 12:00"
        assert detail_view.field_text("Venue") == "Seminar Room B"
        assert detail_view.field_text("Type") == "Oral Presentation"
        assert detail_view.field_text("Capacity") == "25"
        assert detail_view.field_text("Registered") == "18"
        assert detail_view.field_text("Available Slots") == "7"
        assert detail_view.slots_variant() == "success"
        assert detail_view.has_description()
        assert detail_view._status_badge.text() == "REQUIRES APPROVAL"

    def test_full_session_uses_danger(self, detail_view, store):
        detail_view.show_session(store.get_session(1))
        assert detail_view.field_text("Available Slots") == "0"
        assert detail_view.slots_variant() == "danger"

    def test_no_description_section_when_empty(self, detail_view, store):
        detail_view.show_session(store.get_session(2))
        assert not detail_view.has_description()

    def test_blank_description_is_treated_as_empty(
        self, detail_view, session_factory
    ):
        detail_view.show_session(session_factory(description="  \n\t "))
        assert not detail_view.has_description()
        assert detail_view.field_text("Description") is None

    def test_none_returns_to_placeholder(self, detail_view, store):
        detail_view.show_session(store.get_session(2))
        detail_view.show_session(None)
        assert detail_view.is_placeholder_visible()
        assert detail_view.session() is None
        assert detail_view.slots_variant() is None

    def test_does_not_mutate_session(self, detail_view, store):
        session = store.get_session(4)
        before = session.to_dict()
        detail_view.show_session(session)
        assert session.to_dict() == before
