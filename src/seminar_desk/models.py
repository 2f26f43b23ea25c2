"""
Data models for Seminar Desk
"""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Optional


class SessionType(Enum):
    ORAL = "oral"
    POSTER = "poster"

    @property
    def label(self) -> str:
        """Human label shown on cards and in the detail view."""
        if self is SessionType.ORAL:
            return "Oral Presentation"
        return "Poster Presentation"

    @property
    def short_label(self) -> str:
        """Label used by the type filter."""
        return self.name.capitalize()


class SessionStatus(Enum):
    OPEN = "open"
    FULL = "full"
    CLOSED = "closed"
    REQUIRES_APPROVAL = "requires_approval"

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def variant(self) -> str:
        """Badge variant used to colour the status."""
        return {
            SessionStatus.OPEN: "success",
            SessionStatus.FULL: "error",
            SessionStatus.CLOSED: "neutral",
            SessionStatus.REQUIRES_APPROVAL: "warning",
        }[self]


class Role(Enum):
    GUEST = "guest"
    STUDENT = "student"
    EVALUATOR = "evaluator"
    COORDINATOR = "coordinator"

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: str) -> "Role":
        """Parse a role name, falling back to GUEST for unknown values."""
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError):
            return cls.GUEST


@dataclass(frozen=True)
class Session:
    """A scheduled seminar time slot"""

    id: int
    date: date
    start_time: time
    end_time: time
    venue: str
    type: SessionType
    capacity: int
    registered: int = 0
    status: SessionStatus = SessionStatus.OPEN
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if self.end_time <= self.start_time:
            raise ValueError(
                f"Session {self.id}: end time must be after start time"
            )
        if self.capacity < 0:
            raise ValueError(f"Session {self.id}: capacity cannot be negative")
        if not 0 <= self.registered <= self.capacity:
            raise ValueError(
                f"Session {self.id}: registered must be between 0 and capacity"
            )

    @property
    def remaining(self) -> int:
        return self.capacity - self.registered

    @property
    def has_available_slots(self) -> bool:
        return self.remaining > 0 and self.status == SessionStatus.OPEN

    @property
    def time_range(self) -> str:
        return (
            f"{self.start_time.strftime('%H:%M')} - {self.end_time.strftime('%H:%M')}"
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "start_time": self.start_time.strftime("%H:%M"),
            "end_time": self.end_time.strftime("%H:%M"),
            "venue": self.venue,
            "type": self.type.value,
            "capacity": self.capacity,
            "registered": self.registered,
            "remaining": self.remaining,
            "status": self.status.value,
            "description": self.description or "",
        }


@dataclass
class User:
    """An account that can log in under a role"""

    username: str
    password: str
    name: str
    role: Role
