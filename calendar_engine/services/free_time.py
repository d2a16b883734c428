"""Service for discovering free time within business hours."""

from __future__ import annotations

import logging
from datetime import date, datetime

from calendar_engine.config import Settings, get_settings
from calendar_engine.domain.models import (
    Event,
    FreeSlot,
    FreeTimeResult,
    Interval,
)
from calendar_engine.services.intervals import (
    business_window,
    clamp_to_window,
    duration_minutes,
    time_of_day,
)
from calendar_engine.services.queries import events_starting_on, sort_by_start
from calendar_engine.services.weekly_pattern import find_weekly_pattern

logger = logging.getLogger(__name__)


def find_free_slots(
    existing_events: list[Event],
    day: date | datetime,
    min_duration_minutes: int = 60,
    *,
    settings: Settings | None = None,
) -> list[FreeSlot]:
    """Return the gaps between *day*'s events inside business hours.

    Only events that start on *day* are considered. Each event is clipped to
    the business window before the walk, so slots never leave that window.
    Gaps shorter than *min_duration_minutes* (whole minutes) are dropped.
    """
    if min_duration_minutes < 1:
        raise ValueError("min_duration_minutes must be at least 1")

    window = business_window(day, settings)
    slots: list[FreeSlot] = []
    cursor = window.start

    for event in sort_by_start(events_starting_on(existing_events, day)):
        busy = clamp_to_window(event.interval, window.start, window.end)
        if cursor < busy.start:
            _append_slot(slots, cursor, busy.start, min_duration_minutes)
        cursor = max(cursor, busy.end)

    if cursor < window.end:
        _append_slot(slots, cursor, window.end, min_duration_minutes)

    return slots


def find_free_time(
    existing_events: list[Event],
    day: date | datetime,
    min_duration_minutes: int = 60,
    *,
    settings: Settings | None = None,
) -> FreeTimeResult:
    """Summarise free time on *day*: every slot, the longest one, the first
    slot of at least an hour and the recurring weekly pattern around it."""
    settings = settings or get_settings()
    slots = find_free_slots(
        existing_events, day, min_duration_minutes, settings=settings
    )

    longest: FreeSlot | None = None
    for slot in slots:
        # Strictly greater keeps the earliest slot on ties.
        if longest is None or slot.duration_minutes > longest.duration_minutes:
            longest = slot

    next_available = next(
        (s for s in slots if s.duration_minutes >= settings.next_slot_minutes),
        None,
    )

    logger.debug("Found %d free slot(s) on %s", len(slots), day)
    return FreeTimeResult(
        longest_free_block=longest,
        next_available_slot=next_available,
        all_free_slots=slots,
        weekly_pattern=find_weekly_pattern(existing_events, day, settings=settings),
    )


def _append_slot(
    slots: list[FreeSlot], start: datetime, end: datetime, min_minutes: int
) -> None:
    minutes = int(duration_minutes(Interval(start=start, end=end)))
    if minutes >= min_minutes:
        slots.append(
            FreeSlot(
                start=start,
                end=end,
                duration_minutes=minutes,
                time_of_day=time_of_day(start),
            )
        )
