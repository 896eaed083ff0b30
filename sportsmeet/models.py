"""Data model for the sports meet document.

Nothing here touches the database: events and results live in one JSON
document (see :mod:`sportsmeet.store`). The ``to_dict``/``from_dict`` pairs
use the field names of the stored document so existing blobs stay readable.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from django.db import models


class Category(models.TextChoices):
    ATHLETICS = "Athletics", "Athletics"
    GAMES = "Games", "Games"


class TeamColor(models.TextChoices):
    GREEN = "Green", "Green"
    RED = "Red", "Red"
    BLUE = "Blue", "Blue"


class Placement(models.IntegerChoices):
    FIRST = 1, "1st Place"
    SECOND = 2, "2nd Place"
    THIRD = 3, "3rd Place"


POINTS: dict[int, int] = {
    Placement.FIRST: 10,
    Placement.SECOND: 5,
    Placement.THIRD: 3,
}


@dataclass
class Event:
    """A competition item students can place in."""

    id: str
    name: str
    category: str
    is_completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.category,
            "isCompleted": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Event":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            category=data["type"],
            is_completed=bool(data.get("isCompleted", False)),
        )


@dataclass
class Result:
    """A recorded placement of a student in an event."""

    id: str
    event_id: str
    student_name: str
    register_number: str
    team_color: str
    placement: int
    points: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "eventId": self.event_id,
            "studentName": self.student_name,
            "studentRegisterNumber": self.register_number,
            "group": self.team_color,
            "position": self.placement,
            "points": self.points,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Result":
        if data["group"] not in TeamColor.values:
            raise ValueError(f"Unknown group {data['group']!r}")
        placement = int(data["position"])
        if placement not in POINTS:
            raise ValueError(f"Unknown position {placement!r}")
        return cls(
            id=str(data["id"]),
            event_id=str(data["eventId"]),
            student_name=data["studentName"],
            register_number=data["studentRegisterNumber"],
            team_color=data["group"],
            placement=placement,
            points=int(data["points"]),
        )


@dataclass
class GroupScore:
    """Leaderboard row for one team colour. Derived, never stored."""

    team_color: str
    total_points: int = 0
    golds: int = 0
    silvers: int = 0
    bronzes: int = 0


@dataclass(frozen=True)
class FeedEntry:
    """A result enriched with the name and category of its event."""

    result: Result
    event_name: str
    event_category: str


@dataclass
class Document:
    """The complete persisted dataset, read and written as one unit."""

    events: list[Event] = field(default_factory=list)
    results: list[Result] = field(default_factory=list)

    def find_event(self, event_id: str) -> Event | None:
        return next((event for event in self.events if event.id == event_id), None)

    def ids(self) -> set[str]:
        return {event.id for event in self.events} | {result.id for result in self.results}

    def to_dict(self) -> dict[str, Any]:
        return {
            "events": [event.to_dict() for event in self.events],
            "results": [result.to_dict() for result in self.results],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Document":
        return cls(
            events=[Event.from_dict(item) for item in data["events"]],
            results=[Result.from_dict(item) for item in data["results"]],
        )


SEED_EVENTS: tuple[tuple[str, str, str], ...] = (
    ("1", "100m Sprint", Category.ATHLETICS),
    ("2", "Football", Category.GAMES),
    ("3", "Relay 4x100", Category.ATHLETICS),
    ("4", "Volleyball", Category.GAMES),
    ("5", "Shot Put", Category.ATHLETICS),
)


def seed_document() -> Document:
    """Return the document written on first use."""

    return Document(
        events=[Event(id=pk, name=name, category=str(category)) for pk, name, category in SEED_EVENTS],
        results=[],
    )
