"""Domain models for the calendar scheduling core."""

from __future__ import annotations

import uuid
from datetime import date, datetime, time
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

DEFAULT_COLOR = "#3b82f6"
DEFAULT_CATEGORY = "Other"


class TimeOfDay(StrEnum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"


class ConflictSeverity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _new_id() -> str:
    return str(uuid.uuid4())


def _single_frame(moments: list[datetime]) -> None:
    """Reject a mix of naive and offset-aware timestamps."""
    aware = {m.utcoffset() is not None for m in moments}
    if len(aware) > 1:
        raise ValueError("timestamps must be either all naive or all timezone-aware")


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Interval(BaseModel):
    """Half-open span ``[start, end)`` used for overlap math.

    Zero-length intervals are allowed so that clamping an interval that lies
    outside a window still yields a value.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _end_not_before_start(self) -> Interval:
        if self.end < self.start:
            raise ValueError("interval end must not be before its start")
        return self


class EventDraft(BaseModel):
    """An event as edited in a form, before it has an identifier."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    start_time: datetime
    end_time: datetime
    color: str = DEFAULT_COLOR
    category: str = DEFAULT_CATEGORY

    @model_validator(mode="after")
    def _end_after_start(self) -> EventDraft:
        _single_frame([self.start_time, self.end_time])
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        return self

    @property
    def interval(self) -> Interval:
        return Interval(start=self.start_time, end=self.end_time)


class Event(EventDraft):
    id: str = Field(default_factory=_new_id)


class LayoutEvent(Event):
    """An event positioned in a day column for side-by-side rendering."""

    column_index: int = Field(ge=0)
    width_fraction: float = Field(gt=0, le=1)
    left_offset_fraction: float = Field(ge=0, lt=1)


class FreeSlot(BaseModel):
    start: datetime
    end: datetime
    duration_minutes: int
    time_of_day: TimeOfDay


# ---------------------------------------------------------------------------
# Query results
# ---------------------------------------------------------------------------


class ConflictResult(BaseModel):
    has_conflict: bool = False
    conflicting_events: list[Event] = Field(default_factory=list)
    message: str = ""
    suggested_times: list[datetime] = Field(default_factory=list)

    @computed_field
    @property
    def severity(self) -> ConflictSeverity:
        count = len(self.conflicting_events) if self.has_conflict else 0
        if count >= 3:
            return ConflictSeverity.HIGH
        if count >= 2:
            return ConflictSeverity.MEDIUM
        return ConflictSeverity.LOW


class FreeTimeResult(BaseModel):
    longest_free_block: FreeSlot | None = None
    next_available_slot: FreeSlot | None = None
    all_free_slots: list[FreeSlot] = Field(default_factory=list)
    weekly_pattern: list[FreeSlot] = Field(default_factory=list)


class EventPosition(BaseModel):
    """Vertical placement of an event inside a day column, in display units."""

    top: float
    height: float


# ---------------------------------------------------------------------------
# Request DTOs
# ---------------------------------------------------------------------------


def _event_moments(events: list[EventDraft]) -> list[datetime]:
    return [m for e in events for m in (e.start_time, e.end_time)]


def _anchor(day: date, events: list[Event]) -> date | datetime:
    """Midnight of *day* in the events' tzinfo, or the plain date for naive events."""
    tzinfo = events[0].start_time.tzinfo if events else None
    if tzinfo is None:
        return day
    return datetime.combine(day, time(), tzinfo=tzinfo)


class ConflictRequest(BaseModel):
    candidate: EventDraft
    events: list[Event] = Field(default_factory=list)
    exclude_id: str | None = None

    @model_validator(mode="after")
    def _one_time_frame(self) -> ConflictRequest:
        _single_frame(_event_moments([self.candidate, *self.events]))
        return self


class FreeTimeRequest(BaseModel):
    events: list[Event] = Field(default_factory=list)
    day: date
    min_duration_minutes: int = Field(default=60, ge=1)

    @model_validator(mode="after")
    def _one_time_frame(self) -> FreeTimeRequest:
        _single_frame(_event_moments(self.events))
        return self

    @property
    def anchored_day(self) -> date | datetime:
        return _anchor(self.day, self.events)


class WeeklyPatternRequest(BaseModel):
    events: list[Event] = Field(default_factory=list)
    reference_date: date

    @model_validator(mode="after")
    def _one_time_frame(self) -> WeeklyPatternRequest:
        _single_frame(_event_moments(self.events))
        return self

    @property
    def anchored_date(self) -> date | datetime:
        return _anchor(self.reference_date, self.events)


class LayoutRequest(BaseModel):
    events: list[Event] = Field(default_factory=list)

    @model_validator(mode="after")
    def _one_time_frame(self) -> LayoutRequest:
        _single_frame(_event_moments(self.events))
        return self
