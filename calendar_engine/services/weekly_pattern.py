"""Service for detecting hourly slots that are free on most days of a week."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

from dateutil.relativedelta import MO, relativedelta
from dateutil.rrule import DAILY, rrule

from calendar_engine.config import Settings, get_settings
from calendar_engine.domain.models import Event, FreeSlot, Interval
from calendar_engine.services.intervals import overlaps, start_of_day, time_of_day

logger = logging.getLogger(__name__)

# (start hour, end hour) probes, in output order.
PROBE_HOURS = [(9, 10), (10, 11), (11, 12), (14, 15), (15, 16), (16, 17)]


def week_days(reference_date: date | datetime) -> list[datetime]:
    """Midnights of the Monday-to-Sunday week containing *reference_date*."""
    monday = start_of_day(reference_date) + relativedelta(weekday=MO(-1))
    return list(rrule(DAILY, count=7, dtstart=monday))


def find_weekly_pattern(
    existing_events: list[Event],
    reference_date: date | datetime,
    *,
    settings: Settings | None = None,
) -> list[FreeSlot]:
    """Return one representative slot per probe hour that is free on at least
    four days of the week.

    Every probe is checked against the whole event list, so callers with large
    calendars should pass only the events of the week in question.
    """
    settings = settings or get_settings()
    days = week_days(reference_date)
    pattern: list[FreeSlot] = []

    for start_hour, end_hour in PROBE_HOURS:
        free_days = 0
        sample: FreeSlot | None = None

        for day in days:
            probe = Interval(
                start=day + timedelta(hours=start_hour),
                end=day + timedelta(hours=end_hour),
            )
            if any(overlaps(probe, event.interval) for event in existing_events):
                continue
            free_days += 1
            if sample is None:
                sample = FreeSlot(
                    start=probe.start,
                    end=probe.end,
                    duration_minutes=(end_hour - start_hour) * 60,
                    time_of_day=time_of_day(probe.start),
                )

        if sample is not None and free_days >= settings.pattern_min_free_days:
            pattern.append(sample)

    logger.debug("Weekly pattern has %d recurring slot(s)", len(pattern))
    return pattern
