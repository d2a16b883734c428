"""Tests for the conflict-detection service."""

from datetime import datetime, timezone

from calendar_engine.domain.models import ConflictSeverity, Event, EventDraft
from calendar_engine.services.conflicts import (
    detect_conflicts,
    find_conflicts,
)


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 3, 10, hour, minute)


def _make_event(start: datetime, end: datetime, title: str = "Existing") -> Event:
    return Event(title=title, start_time=start, end_time=end)


def _draft(start: datetime, end: datetime, title: str = "Candidate") -> EventDraft:
    return EventDraft(title=title, start_time=start, end_time=end)


def test_no_overlap():
    """Events that don't overlap should not be returned as conflicts."""
    existing = [_make_event(_at(8), _at(9))]
    result = detect_conflicts(_draft(_at(10), _at(11)), existing)

    assert result.has_conflict is False
    assert result.conflicting_events == []
    assert result.message == ""
    assert result.suggested_times == []


def test_partial_overlap():
    """An event that partially overlaps should be returned as a conflict."""
    existing = [_make_event(_at(9), _at(10, 30))]
    conflicts = find_conflicts(_draft(_at(10), _at(11)), existing)

    assert len(conflicts) == 1
    assert conflicts[0].start_time == _at(9)


def test_exact_boundary_no_conflict():
    """When existing.end_time == candidate start, there is no conflict (boundary touch)."""
    existing = [_make_event(_at(9), _at(10))]

    assert find_conflicts(_draft(_at(10), _at(11)), existing) == []
    assert find_conflicts(_draft(_at(8), _at(9)), existing) == []


def test_standup_and_client_call():
    """A call overlapping standup reports it and suggests a free time from 10:00."""
    standup = _make_event(_at(9), _at(10), title="Standup")
    result = detect_conflicts(_draft(_at(9, 30), _at(10, 30), "Client Call"), [standup])

    assert result.has_conflict is True
    assert result.conflicting_events == [standup]
    assert result.message == 'You already have "Standup" from 9:00 AM–10:00 AM'
    assert result.suggested_times == [_at(8), _at(10), _at(10, 30)]
    assert any(t >= _at(10) for t in result.suggested_times)


def test_multiple_conflicts_are_chronological():
    """Conflicts come back earliest first and the message names the earliest one."""
    standup = _make_event(_at(9), _at(10), title="Standup")
    breakfast = _make_event(_at(8, 30), _at(9, 45), title="Breakfast")
    result = detect_conflicts(_draft(_at(9, 15), _at(9, 30)), [standup, breakfast])

    assert result.conflicting_events == [breakfast, standup]
    assert result.message == (
        'You have 2 conflicting events starting with "Breakfast" at 8:30 AM–9:45 AM'
    )


def test_same_start_keeps_input_order():
    first = _make_event(_at(9), _at(11), title="First")
    second = _make_event(_at(9), _at(10), title="Second")

    conflicts = find_conflicts(_draft(_at(9, 30), _at(9, 45)), [first, second])

    assert [e.title for e in conflicts] == ["First", "Second"]


def test_excluded_event_does_not_conflict_with_itself():
    """Editing an event against a list holding only itself reports no conflict."""
    event = _make_event(_at(9), _at(10))
    result = detect_conflicts(event, [event], exclude_id=event.id)

    assert result.has_conflict is False
    assert result.suggested_times == []


def test_exclude_id_only_skips_that_event():
    event = _make_event(_at(9), _at(10))
    other = _make_event(_at(9, 30), _at(10, 30), title="Other")

    result = detect_conflicts(event, [event, other], exclude_id=event.id)

    assert result.conflicting_events == [other]


def test_contained_event_conflicts():
    existing = [_make_event(_at(9), _at(12))]

    assert len(find_conflicts(_draft(_at(10), _at(11)), existing)) == 1
    assert len(find_conflicts(_draft(_at(8), _at(13)), existing)) == 1


def test_afternoon_times_in_message():
    lunch = _make_event(_at(12), _at(13, 5), title="Lunch")
    result = detect_conflicts(_draft(_at(12, 30), _at(13)), [lunch])

    assert result.message == 'You already have "Lunch" from 12:00 PM–1:05 PM'


def test_timezone_aware_events():
    existing = [
        _make_event(
            datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc),
            datetime(2025, 1, 1, 10, 30, tzinfo=timezone.utc),
        ),
    ]
    result = detect_conflicts(
        _draft(
            datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc),
            datetime(2025, 1, 1, 11, 0, tzinfo=timezone.utc),
        ),
        existing,
    )

    assert result.has_conflict is True
    assert result.suggested_times[0] == datetime(2025, 1, 1, 8, 0, tzinfo=timezone.utc)


def test_severity_levels():
    candidate = _draft(_at(9), _at(12))
    events = [
        _make_event(_at(9), _at(10)),
        _make_event(_at(10), _at(11)),
        _make_event(_at(11), _at(12)),
    ]

    assert detect_conflicts(candidate, []).severity == ConflictSeverity.LOW
    assert detect_conflicts(candidate, events[:1]).severity == ConflictSeverity.LOW
    assert detect_conflicts(candidate, events[:2]).severity == ConflictSeverity.MEDIUM
    assert detect_conflicts(candidate, events).severity == ConflictSeverity.HIGH
