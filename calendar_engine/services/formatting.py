"""Human-readable renderings of times, ranges and free slots."""

from __future__ import annotations

from datetime import datetime

from calendar_engine.domain.models import FreeSlot


def format_clock(moment: datetime) -> str:
    """12-hour clock without a leading zero, e.g. ``9:05 AM``."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def format_time_range(start: datetime, end: datetime) -> str:
    return f"{format_clock(start)}–{format_clock(end)}"


def format_event_time(start: datetime, end: datetime) -> str:
    """``09:00 - 10:30`` on one day, ``Mar 1, 22:00 - Mar 2, 01:00`` across days."""
    if start.date() == end.date():
        return f"{start:%H:%M} - {end:%H:%M}"
    return (
        f"{start:%b} {start.day}, {start:%H:%M} - "
        f"{end:%b} {end.day}, {end:%H:%M}"
    )


def format_duration(minutes: int) -> str:
    hours, rest = divmod(minutes, 60)
    text = ""
    if hours > 0:
        text += f"{hours}h"
    if rest > 0:
        text += f"{rest}m"
    return text


def format_free_slot(slot: FreeSlot) -> str:
    return (
        f"{format_clock(slot.start)} - {format_clock(slot.end)} "
        f"({format_duration(slot.duration_minutes)})"
    )
