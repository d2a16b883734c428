"""FastAPI application — stateless HTTP surface over the scheduling core."""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import FastAPI

from calendar_engine.config import get_settings
from calendar_engine.domain.models import (
    ConflictRequest,
    ConflictResult,
    FreeSlot,
    FreeTimeRequest,
    FreeTimeResult,
    LayoutEvent,
    LayoutRequest,
    WeeklyPatternRequest,
)
from calendar_engine.services.alternatives import suggest_alternatives
from calendar_engine.services.conflicts import detect_conflicts
from calendar_engine.services.free_time import find_free_time
from calendar_engine.services.layout import layout_day
from calendar_engine.services.weekly_pattern import find_weekly_pattern

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Calendar Scheduling Core")


# ── Routes ────────────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/conflicts", response_model=ConflictResult)
def check_conflicts(body: ConflictRequest) -> ConflictResult:
    """Report events overlapping the candidate, with alternative start times."""
    result = detect_conflicts(
        body.candidate, body.events, body.exclude_id, settings=settings
    )
    if result.has_conflict:
        logger.info(
            "Conflict for %r: %d overlapping event(s)",
            body.candidate.title,
            len(result.conflicting_events),
        )
    return result


@app.post("/alternatives", response_model=list[datetime])
def alternatives(body: ConflictRequest) -> list[datetime]:
    """Return up to three conflict-free start times on the candidate's day."""
    return suggest_alternatives(
        body.candidate, body.events, body.exclude_id, settings=settings
    )


@app.post("/free-time", response_model=FreeTimeResult)
def free_time(body: FreeTimeRequest) -> FreeTimeResult:
    """Return free slots within business hours for a single day."""
    return find_free_time(
        body.events, body.anchored_day, body.min_duration_minutes, settings=settings
    )


@app.post("/weekly-pattern", response_model=list[FreeSlot])
def weekly_pattern(body: WeeklyPatternRequest) -> list[FreeSlot]:
    """Return hourly slots free on most days of the reference week."""
    return find_weekly_pattern(
        body.events, body.anchored_date, settings=settings
    )


@app.post("/layout", response_model=list[LayoutEvent])
def layout(body: LayoutRequest) -> list[LayoutEvent]:
    """Assign display columns to one day's events."""
    return layout_day(body.events)
