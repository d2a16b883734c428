"""Service for detecting scheduling conflicts between events."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from calendar_engine.config import Settings
from calendar_engine.domain.models import (
    ConflictResult,
    Event,
    EventDraft,
)
from calendar_engine.services.formatting import format_time_range
from calendar_engine.services.intervals import overlaps

logger = logging.getLogger(__name__)


def find_conflicts(
    candidate: EventDraft,
    existing_events: Iterable[Event],
    exclude_id: str | None = None,
) -> list[Event]:
    """Return existing events that overlap the candidate, earliest first.

    The event whose id equals *exclude_id* is skipped so an event being edited
    never conflicts with its stored self. Ties on start time keep input order.
    """
    span = candidate.interval
    conflicts = [
        event
        for event in existing_events
        if event.id != exclude_id and overlaps(span, event.interval)
    ]
    return sorted(conflicts, key=lambda e: e.start_time)


def detect_conflicts(
    candidate: EventDraft,
    existing_events: list[Event],
    exclude_id: str | None = None,
    *,
    settings: Settings | None = None,
) -> ConflictResult:
    """Check a candidate against existing events and suggest other times."""
    # Imported here: the suggester re-uses find_conflicts from this module.
    from calendar_engine.services.alternatives import suggest_alternatives

    conflicting = find_conflicts(candidate, existing_events, exclude_id)
    if not conflicting:
        return ConflictResult()

    logger.debug(
        "Candidate %r conflicts with %d event(s)", candidate.title, len(conflicting)
    )
    return ConflictResult(
        has_conflict=True,
        conflicting_events=conflicting,
        message=_conflict_message(conflicting),
        suggested_times=suggest_alternatives(
            candidate, existing_events, exclude_id, settings=settings
        ),
    )


def _conflict_message(conflicting: list[Event]) -> str:
    first = conflicting[0]
    time_range = format_time_range(first.start_time, first.end_time)
    if len(conflicting) == 1:
        return f'You already have "{first.title}" from {time_range}'
    return (
        f"You have {len(conflicting)} conflicting events "
        f'starting with "{first.title}" at {time_range}'
    )
