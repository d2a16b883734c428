"""Service for laying out a day's events in side-by-side display columns."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

from calendar_engine.domain.models import Event, EventPosition, Interval, LayoutEvent
from calendar_engine.services.intervals import (
    clamp_to_window,
    duration_minutes,
    start_of_day,
)
from calendar_engine.services.queries import sort_by_start

logger = logging.getLogger(__name__)

MIN_EVENT_HEIGHT = 20

# End of a day column, one millisecond before midnight.
_LAST_INSTANT = timedelta(days=1) - timedelta(milliseconds=1)


def assign_columns(events: list[Event]) -> list[tuple[Event, int]]:
    """Greedily place events, earliest first, into the first free column.

    A column is free for an event when its last event ends at or before the
    event's start. Returns ``(event, column_index)`` pairs in start order.
    """
    column_ends: list[datetime] = []
    placed: list[tuple[Event, int]] = []

    for event in sort_by_start(events):
        for index, last_end in enumerate(column_ends):
            if last_end <= event.start_time:
                column_ends[index] = event.end_time
                placed.append((event, index))
                break
        else:
            column_ends.append(event.end_time)
            placed.append((event, len(column_ends) - 1))

    return placed


def layout_day(events: list[Event]) -> list[LayoutEvent]:
    """Position one day's events for rendering.

    Every event gets the same width, ``1 / total_columns`` for the whole day,
    even where a cluster of events needs fewer columns.
    """
    placed = assign_columns(events)
    if not placed:
        return []

    total_columns = max(index for _, index in placed) + 1
    logger.debug("Laid out %d event(s) in %d column(s)", len(placed), total_columns)
    return [
        LayoutEvent(
            **event.model_dump(include=set(Event.model_fields)),
            column_index=index,
            width_fraction=1 / total_columns,
            left_offset_fraction=index / total_columns,
        )
        for event, index in placed
    ]


def event_position(
    event: Event,
    day: date | datetime,
    slot_height: float = 60,
    interval_minutes: int = 60,
) -> EventPosition:
    """Vertical offset and height of *event* in a day column.

    The event is clipped to *day*, ending at 23:59:59.999 rather than the next
    midnight, and whole minutes are counted; an event running past midnight
    therefore loses its final minute. One *interval_minutes* step spans
    *slot_height* display units.
    """
    if slot_height <= 0 or interval_minutes <= 0:
        raise ValueError("slot_height and interval_minutes must be positive")

    day_start = start_of_day(day)
    visible = clamp_to_window(event.interval, day_start, day_start + _LAST_INSTANT)
    offset = int(duration_minutes(Interval(start=day_start, end=visible.start)))
    length = int(duration_minutes(visible))
    return EventPosition(
        top=offset / interval_minutes * slot_height,
        height=max(length / interval_minutes * slot_height, MIN_EVENT_HEIGHT),
    )
