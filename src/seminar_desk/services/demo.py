"""
Seed data for running the application without an external data source.
"""

from datetime import date, time

from ..models import Role, Session, SessionStatus, SessionType, User


def demo_sessions() -> list[Session]:
    return [
        Session(
            id=1,
            date=date(2024, 1, 10),
            start_time=time(9, 0),
            end_time=time(11, 0),
            venue="Seminar Room A, FCI Building",
            type=SessionType.ORAL,
            capacity=30,
            registered=30,
            status=SessionStatus.FULL,
            description="Opening oral session: machine learning and data science.",
        ),
        Session(
            id=2,
            date=date(2024, 1, 10),
            start_time=time(14, 0),
            end_time=time(16, 0),
            venue="Main Hall",
            type=SessionType.POSTER,
            capacity=40,
            registered=12,
        ),
        Session(
            id=3,
            date=date(2024, 1, 11),
            start_time=time(9, 30),
            end_time=time(12, 0),
            venue="Seminar Room B",
            type=SessionType.ORAL,
            capacity=25,
            registered=18,
            status=SessionStatus.REQUIRES_APPROVAL,
            description="Networks, security and distributed systems.",
        ),
        Session(
            id=4,
            date=date(2024, 1, 11),
            start_time=time(13, 0),
            end_time=time(15, 0),
            venue="Main Hall",
            type=SessionType.POSTER,
            capacity=20,
            registered=5,
        ),
        Session(
            id=5,
            date=date(2024, 1, 12),
            start_time=time(10, 0),
            end_time=time(12, 0),
            venue="Seminar Room A, FCI Building",
            type=SessionType.ORAL,
            capacity=30,
            registered=8,
            status=SessionStatus.CLOSED,
        ),
    ]


def demo_users() -> list[User]:
    return [
        User("student", "student123", "Aisyah Rahman", Role.STUDENT),
        User("evaluator", "eval123", "Dr. Lim Wei Jie", Role.EVALUATOR),
        User("coordinator", "coord123", "Prof. Tan Mei Ling", Role.COORDINATOR),
    ]
