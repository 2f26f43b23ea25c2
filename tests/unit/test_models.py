"""
Tests for seminar_desk.models
"""

from datetime import date, time

import pytest

from seminar_desk.models import Role, Session, SessionStatus, SessionType, User


def make_session(**overrides) -> Session:
    fields = dict(
        id=1,
        date=date(2024, 1, 10),
        start_time=time(9, 0),
        end_time=time(11, 0),
        venue="Room A",
        type=SessionType.ORAL,
        capacity=30,
    )
    fields.update(overrides)
    return Session(**fields)


class TestSession:
    """Tests for the Session dataclass"""

    def test_defaults(self):
        s = make_session()
        assert s.registered == 0
        assert s.status == SessionStatus.OPEN
        assert s.description is None

    @pytest.mark.parametrize(
        "capacity,registered,expected",
        [(30, 30, 0), (20, 5, 15), (0, 0, 0), (10, 0, 10)],
    )
    def test_remaining(self, capacity, registered, expected):
        s = make_session(capacity=capacity, registered=registered)
        assert s.remaining == expected

    def test_has_available_slots_requires_open_status(self):
        assert make_session(registered=5).has_available_slots
        assert not make_session(registered=30).has_available_slots
        assert not make_session(status=SessionStatus.CLOSED).has_available_slots
        assert not make_session(
            status=SessionStatus.REQUIRES_APPROVAL
        ).has_available_slots

    def test_time_range(self):
        s = make_session(start_time=time(9, 5), end_time=time(14, 30))
        assert s.time_range == "09:05 - 14:30"

    def test_is_immutable(self):
        s = make_session()
        with pytest.raises(AttributeError):
            s.registered = 3  # type: ignore[misc]

    def test_end_before_start_rejected(self):
        with pytest.raises(ValueError, match="end time"):
            make_session(start_time=time(11, 0), end_time=time(9, 0))

    def test_equal_start_and_end_rejected(self):
        with pytest.raises(ValueError):
            make_session(start_time=time(9, 0), end_time=time(9, 0))

    def test_negative_capacity_rejected(self):
        with pytest.raises(ValueError, match="capacity"):
            make_session(capacity=-1)

    @pytest.mark.parametrize("registered", [-1, 31])
    def test_registered_out_of_range_rejected(self, registered):
        with pytest.raises(ValueError, match="registered"):
            make_session(capacity=30, registered=registered)

    def test_to_dict(self):
        s = make_session(registered=12, description="Opening")
        data = s.to_dict()
        assert data["date"] == "2024-01-10"
        assert data["start_time"] == "09:00"
        assert data["type"] == "oral"
        assert data["remaining"] == 18
        assert data["status"] == "open"
        assert data["description"] == "Opening"

    def test_to_dict_empty_description(self):
        assert make_session().to_dict()["description"] == ""

    def test_factory_builds_valid_sessions(self, session_factory):
        batch = session_factory.build_batch(20)
        assert len({s.id for s in batch}) == 20
        assert all(s.end_time > s.start_time for s in batch)


class TestSessionType:
    def test_labels(self):
        assert SessionType.ORAL.label == "Oral Presentation"
        assert SessionType.POSTER.label == "Poster Presentation"

    def test_short_labels(self):
        assert SessionType.ORAL.short_label == "Oral"
        assert SessionType.POSTER.short_label == "Poster"


class TestSessionStatus:
    @pytest.mark.parametrize(
        "status,label,variant",
        [
            (SessionStatus.OPEN, "Open", "success"),
            (SessionStatus.FULL, "Full", "error"),
            (SessionStatus.CLOSED, "Closed", "neutral"),
            (SessionStatus.REQUIRES_APPROVAL, "Requires Approval", "warning"),
        ],
    )
    def test_label_and_variant(self, status, label, variant):
        assert status.label == label
        assert status.variant == variant


class TestRole:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("student", Role.STUDENT),
            ("  Coordinator ", Role.COORDINATOR),
            ("EVALUATOR", Role.EVALUATOR),
            ("guest", Role.GUEST),
            ("admin", Role.GUEST),
            ("", Role.GUEST),
        ],
    )
    def test_parse(self, value, expected):
        assert Role.parse(value) == expected

    def test_parse_non_string_falls_back(self):
        assert Role.parse(None) == Role.GUEST  # type: ignore[arg-type]

    def test_label(self):
        assert Role.COORDINATOR.label == "Coordinator"


class TestUser:
    def test_factory(self, user_factory):
        user = user_factory(role=Role.STUDENT)
        assert isinstance(user, User)
        assert user.role == Role.STUDENT
        assert user.username
