"""
Session filtering for the schedule views.

Filters are built from the text shown in the filter combo boxes. Anything
that cannot be parsed into a date or a session type is treated as "no
constraint": a bad filter value never hides the schedule or raises.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Union

from ..models import Session, SessionType
from ..utils.logger import debug

ALL_DATES = "All Dates"
ALL_TYPES = "All Types"
DATE_FORMAT = "%Y-%m-%d"

TYPE_FILTER_OPTIONS = [ALL_TYPES] + [t.short_label for t in SessionType]

DateCriterion = Union[date, str, None]
TypeCriterion = Union[SessionType, str, None]


def parse_date_filter(value: DateCriterion) -> Optional[date]:
    """Convert a date filter value into a date, or None for no constraint."""
    if value is None or isinstance(value, date):
        return value
    text = str(value).strip()
    if not text or text == ALL_DATES:
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        debug(f"[Filters] Ignoring unparseable date filter: {text!r}")
        return None


def parse_type_filter(value: TypeCriterion) -> Optional[SessionType]:
    """Convert a type filter value into a SessionType, or None."""
    if value is None or isinstance(value, SessionType):
        return value
    text = str(value).strip()
    if not text or text == ALL_TYPES:
        return None
    try:
        return SessionType[text.upper()]
    except KeyError:
        debug(f"[Filters] Ignoring unknown type filter: {text!r}")
        return None


@dataclass(frozen=True)
class FilterCriteria:
    """Typed filter built from one interaction with the filter bar."""

    on_date: Optional[date] = None
    session_type: Optional[SessionType] = None

    @classmethod
    def from_labels(
        cls, date_label: Optional[str], type_label: Optional[str]
    ) -> "FilterCriteria":
        return cls(parse_date_filter(date_label), parse_type_filter(type_label))

    @property
    def is_empty(self) -> bool:
        return self.on_date is None and self.session_type is None

    def apply(self, sessions: Iterable[Session]) -> list[Session]:
        return filter_sessions(sessions, self.on_date, self.session_type)


def filter_sessions(
    sessions: Iterable[Session],
    date: DateCriterion = None,
    session_type: TypeCriterion = None,
) -> list[Session]:
    """Return the sessions matching date and type, in input order."""
    wanted_date = parse_date_filter(date)
    wanted_type = parse_type_filter(session_type)
    return [
        s
        for s in sessions
        if (wanted_date is None or s.date == wanted_date)
        and (wanted_type is None or s.type == wanted_type)
    ]


def available_dates(sessions: Iterable[Session]) -> list[date]:
    """Distinct session dates in ascending order."""
    return sorted({s.date for s in sessions})


def date_filter_options(sessions: Iterable[Session]) -> list[str]:
    """Items for the date combo box: the sentinel first, then ISO dates."""
    return [ALL_DATES] + [d.strftime(DATE_FORMAT) for d in available_dates(sessions)]
