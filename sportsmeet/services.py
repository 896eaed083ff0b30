"""Domain operations for the sports meet: events, results and standings."""

from __future__ import annotations

import logging
from typing import Iterable

from . import models
from .exceptions import ConflictError, NotFoundError, ValidationError
from .store import MeetStore

logger = logging.getLogger(__name__)

__all__ = [
    "get_events",
    "add_event",
    "delete_event",
    "get_results",
    "add_result",
    "delete_result",
    "compute_leaderboard",
    "calculate_leaderboard",
    "results_feed",
    "reset_database",
]

ALL_FILTER = "All"
UNKNOWN_EVENT_NAME = "Unknown Event"


def _require_text(value: str | None, field: str, label: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{label} is required.", field=field)
    return text


def _require_choice(value, choices, field: str, label: str):
    if value not in choices.values:
        allowed = ", ".join(str(choice) for choice in choices.values)
        raise ValidationError(f"{label} must be one of: {allowed}.", field=field)
    return value


def get_events(store: MeetStore) -> list[models.Event]:
    return store.load().events


def add_event(store: MeetStore, name: str, category: str) -> models.Event:
    """Register a new, not yet completed event."""

    name = _require_text(name, "name", "Event name")
    category = _require_choice(category, models.Category, "type", "Event type")
    with store.transaction() as document:
        event = models.Event(
            id=store.next_id(document.ids()),
            name=name,
            category=str(models.Category(category)),
            is_completed=False,
        )
        document.events.append(event)
    logger.info("Added event %s (%s) as %s", event.name, event.category, event.id)
    return event


def delete_event(store: MeetStore, event_id: str) -> None:
    """Remove an event and every result recorded against it."""

    event_id = str(event_id)
    with store.transaction() as document:
        document.events = [event for event in document.events if event.id != event_id]
        kept = [result for result in document.results if result.event_id != event_id]
        removed = len(document.results) - len(kept)
        document.results = kept
    logger.info("Deleted event %s and %d result(s)", event_id, removed)


def get_results(store: MeetStore) -> list[models.Result]:
    return store.load().results


def add_result(
    store: MeetStore,
    event_id: str,
    student_name: str,
    register_number: str,
    team_color: str,
    placement: int,
) -> models.Result:
    """Record a placement for an event and mark the event completed."""

    student_name = _require_text(student_name, "studentName", "Student name")
    register_number = _require_text(register_number, "studentRegisterNumber", "Register number")
    team_color = _require_choice(team_color, models.TeamColor, "group", "Group")
    if isinstance(placement, bool) or placement not in models.POINTS:
        raise ValidationError("Position must be 1, 2 or 3.", field="position")
    placement = int(placement)
    event_id = str(event_id)

    with store.transaction() as document:
        event = document.find_event(event_id)
        if event is None:
            logger.warning("Rejected result for unknown event %s", event_id)
            raise NotFoundError("Event not found")
        taken = any(
            result.event_id == event_id and result.placement == placement
            for result in document.results
        )
        if taken:
            logger.warning("Rejected result for event %s: position %d already taken", event_id, placement)
            raise ConflictError(placement)

        result = models.Result(
            id=store.next_id(document.ids()),
            event_id=event_id,
            student_name=student_name,
            register_number=register_number,
            team_color=str(models.TeamColor(team_color)),
            placement=placement,
            points=models.POINTS[placement],
        )
        document.results.append(result)
        event.is_completed = True

    logger.info(
        "Recorded %s for %s (%s) in event %s: +%d",
        models.Placement(placement).label,
        result.student_name,
        result.team_color,
        event_id,
        result.points,
    )
    return result


def delete_result(store: MeetStore, result_id: str) -> None:
    """Remove a result. The owning event stays marked completed."""

    with store.transaction() as document:
        document.results = [result for result in document.results if result.id != result_id]
    logger.info("Deleted result %s", result_id)


def compute_leaderboard(results: Iterable[models.Result]) -> list[models.GroupScore]:
    """Aggregate points and medal counts per team colour.

    Always returns one row per colour. Rows are ordered by total points,
    highest first; equal totals keep the Green, Red, Blue order.
    """

    scores = {color: models.GroupScore(team_color=color) for color in models.TeamColor.values}
    for result in results:
        score = scores[result.team_color]
        score.total_points += result.points
        if result.placement == models.Placement.FIRST:
            score.golds += 1
        elif result.placement == models.Placement.SECOND:
            score.silvers += 1
        elif result.placement == models.Placement.THIRD:
            score.bronzes += 1
    return sorted(scores.values(), key=lambda score: -score.total_points)


def calculate_leaderboard(store: MeetStore) -> list[models.GroupScore]:
    return compute_leaderboard(store.load().results)


def results_feed(
    store: MeetStore,
    team_color: str | None = None,
    category: str | None = None,
) -> list[models.FeedEntry]:
    """Return results newest first, optionally filtered by colour and event type."""

    if team_color == ALL_FILTER:
        team_color = None
    if category == ALL_FILTER:
        category = None
    if team_color is not None:
        _require_choice(team_color, models.TeamColor, "group", "Group")
    if category is not None:
        _require_choice(category, models.Category, "type", "Event type")

    document = store.load()
    events = {event.id: event for event in document.events}
    feed: list[models.FeedEntry] = []
    for result in reversed(document.results):
        event = events.get(result.event_id)
        entry = models.FeedEntry(
            result=result,
            event_name=event.name if event else UNKNOWN_EVENT_NAME,
            event_category=event.category if event else str(models.Category.GAMES),
        )
        if team_color is not None and result.team_color != team_color:
            continue
        if category is not None and entry.event_category != category:
            continue
        feed.append(entry)
    return feed


def reset_database(store: MeetStore) -> None:
    store.reset()
