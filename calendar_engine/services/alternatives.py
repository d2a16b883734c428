"""Service for proposing conflict-free start times for a candidate event."""

from __future__ import annotations

import logging
from datetime import datetime

from dateutil.rrule import MINUTELY, rrule

from calendar_engine.config import Settings, get_settings
from calendar_engine.domain.models import Event, EventDraft
from calendar_engine.services.conflicts import find_conflicts
from calendar_engine.services.intervals import business_window

logger = logging.getLogger(__name__)


def suggest_alternatives(
    candidate: EventDraft,
    existing_events: list[Event],
    exclude_id: str | None = None,
    *,
    settings: Settings | None = None,
) -> list[datetime]:
    """Return up to three start times on the candidate's day that keep its
    duration and conflict with nothing.

    Starts are probed every 30 minutes from business start; a probe is only
    accepted when it also ends by business end. Only the calendar day of
    ``candidate.start_time`` is scanned.
    """
    settings = settings or get_settings()
    duration = candidate.end_time - candidate.start_time
    window = business_window(candidate.start_time, settings)

    if duration > window.end - window.start:
        return []

    probes = rrule(
        MINUTELY,
        interval=settings.slot_step_minutes,
        dtstart=window.start,
        until=window.end,
    )

    suggestions: list[datetime] = []
    for start in probes:
        end = start + duration
        if start >= window.end or end > window.end:
            break
        probe = candidate.model_copy(update={"start_time": start, "end_time": end})
        if find_conflicts(probe, existing_events, exclude_id):
            continue
        suggestions.append(start)
        if len(suggestions) >= settings.max_suggestions:
            break

    logger.debug("Suggested %d alternative start(s)", len(suggestions))
    return suggestions
