"""Interval primitives shared by the conflict, free-time and layout services."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from calendar_engine.config import Settings, get_settings
from calendar_engine.domain.models import Interval, TimeOfDay


def overlaps(a: Interval, b: Interval) -> bool:
    """Return True when two intervals share any time.

    Overlap rule: a.start < b.end AND b.start < a.end.
    Exact boundary touches (a.end == b.start) are NOT overlaps.
    """
    return a.start < b.end and b.start < a.end


def start_of_day(value: date | datetime) -> datetime:
    """Midnight of the value's calendar day, keeping any tzinfo."""
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time(), tzinfo=value.tzinfo)
    return datetime.combine(value, time())


def clamp_to_window(interval: Interval, start: datetime, end: datetime) -> Interval:
    """Clip *interval* to ``[start, end)``.

    An interval lying wholly outside the window collapses to a zero-length
    interval on the nearest edge.
    """
    clipped_start = min(max(interval.start, start), end)
    clipped_end = max(min(interval.end, end), clipped_start)
    return Interval(start=clipped_start, end=clipped_end)


def clamp_to_day(interval: Interval, day: date | datetime) -> Interval:
    day_start = start_of_day(day)
    return clamp_to_window(interval, day_start, day_start + timedelta(days=1))


def duration_minutes(interval: Interval) -> float:
    return (interval.end - interval.start).total_seconds() / 60


def business_window(day: date | datetime, settings: Settings | None = None) -> Interval:
    """Business hours of *day*, 08:00-18:00 with default settings."""
    settings = settings or get_settings()
    day_start = start_of_day(day)
    return Interval(
        start=day_start + timedelta(hours=settings.business_start_hour),
        end=day_start + timedelta(hours=settings.business_end_hour),
    )


def time_of_day(moment: datetime) -> TimeOfDay:
    if moment.hour < 12:
        return TimeOfDay.MORNING
    if moment.hour < 17:
        return TimeOfDay.AFTERNOON
    return TimeOfDay.EVENING
