"""Read-only queries over an event list supplied by the caller."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, timedelta

from calendar_engine.domain.models import Event
from calendar_engine.services.intervals import overlaps, start_of_day


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def sort_by_start(events: list[Event]) -> list[Event]:
    """Return a new list ordered by start time; ties keep input order."""
    return sorted(events, key=lambda e: e.start_time)


def events_starting_on(events: list[Event], day: date | datetime) -> list[Event]:
    target = _as_date(day)
    return [e for e in events if e.start_time.date() == target]


def events_in_range(events: list[Event], start: datetime, end: datetime) -> list[Event]:
    """Events that start or end inside ``[start, end]`` or span the whole range."""
    return [
        e
        for e in events
        if start <= e.start_time <= end
        or start <= e.end_time <= end
        or (e.start_time < start and e.end_time > end)
    ]


def events_on_day(events: list[Event], day: date | datetime) -> list[Event]:
    day_start = start_of_day(day)
    day_end = day_start + timedelta(days=1) - timedelta(microseconds=1)
    return events_in_range(events, day_start, day_end)


def group_by_day(events: list[Event]) -> dict[date, list[Event]]:
    """Bucket events by the calendar day they start on, sorted within a day."""
    grouped: dict[date, list[Event]] = defaultdict(list)
    for event in sort_by_start(events):
        grouped[event.start_time.date()].append(event)
    return dict(grouped)


def overlapping_events(events: list[Event], target: Event) -> list[Event]:
    return [
        e
        for e in events
        if e.id != target.id and overlaps(e.interval, target.interval)
    ]


def search_events(events: list[Event], query: str) -> list[Event]:
    needle = query.strip().lower()
    if not needle:
        return list(events)
    return [
        e
        for e in events
        if needle in e.title.lower()
        or (e.description and needle in e.description.lower())
        or needle in e.category.lower()
    ]


def events_in_category(events: list[Event], category: str) -> list[Event]:
    return [e for e in events if e.category == category]


def is_all_day(event: Event) -> bool:
    start, end = event.start_time, event.end_time
    return (start.hour, start.minute) == (0, 0) and (end.hour, end.minute) == (23, 59)
