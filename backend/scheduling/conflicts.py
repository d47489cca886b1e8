"""
Tutor availability and meeting clash checks.

``check_meeting_feasibility`` answers "can this section meet at this time?"
for the admin schedule form. It is re-run whenever the section, date, time
or duration changes, so it is pure: it reads snapshots, takes ``now`` from
the caller and reports problems as a ``FeasibilityResult`` instead of raising.

Boundaries:

* availability windows include their start and exclude their end, so a
  meeting starting exactly at a window's end time is not covered;
* meetings are half-open intervals, so back-to-back meetings do not clash;
* cancelled meetings never clash.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from .models import DayOfWeek, MeetingStatus

DAY_NAMES = [label for _, label in DayOfWeek.choices]


@dataclass
class AvailabilityWindow:
    day_of_week: int
    start_time: str
    end_time: str
    id: Optional[int] = None


@dataclass
class MeetingSnapshot:
    id: Optional[int]
    tutor_id: int
    title: str
    section_label: str
    scheduled_at: datetime
    duration: int
    status: str = MeetingStatus.SCHEDULED

    @property
    def ends_at(self) -> datetime:
        return self.scheduled_at + timedelta(minutes=self.duration)


@dataclass
class MeetingCandidate:
    """A proposed meeting: the section's tutor, their windows and the slot."""
    section_id: Optional[int]
    tutor_id: int
    tutor_name: str
    scheduled_at: datetime
    duration: int
    availability: List[AvailabilityWindow] = field(default_factory=list)
    enrolled_count: int = 0

    @property
    def ends_at(self) -> datetime:
        return self.scheduled_at + timedelta(minutes=self.duration)


@dataclass(frozen=True)
class FeasibilityResult:
    valid: bool
    message: str


def day_of_week(dt: datetime) -> int:
    """0 = Sunday ... 6 = Saturday."""
    return dt.isoweekday() % 7


def time_string(dt: datetime) -> str:
    return dt.strftime("%H:%M")


def is_tutor_available(windows: Iterable[AvailabilityWindow], dt: datetime) -> bool:
    day = day_of_week(dt)
    hhmm = time_string(dt)
    return any(
        w.day_of_week == day and w.start_time <= hhmm < w.end_time
        for w in windows
    )


def meetings_overlap(start: datetime, end: datetime, other_start: datetime, other_end: datetime) -> bool:
    return (
        (other_start <= start < other_end)
        or (other_start < end <= other_end)
        or (start <= other_start and end >= other_end)
    )


def find_conflicting_meeting(
    candidate: MeetingCandidate,
    meetings: Iterable[MeetingSnapshot],
    editing_meeting_id=None,
) -> Optional[MeetingSnapshot]:
    """First live meeting of the same tutor that overlaps the candidate."""
    for m in meetings:
        if editing_meeting_id is not None and m.id == editing_meeting_id:
            continue
        if m.status == MeetingStatus.CANCELLED:
            continue
        if m.tutor_id != candidate.tutor_id:
            continue
        if meetings_overlap(candidate.scheduled_at, candidate.ends_at, m.scheduled_at, m.ends_at):
            return m
    return None


def check_meeting_feasibility(
    candidate: MeetingCandidate,
    meetings: Iterable[MeetingSnapshot],
    editing_meeting_id=None,
    *,
    now: datetime,
) -> FeasibilityResult:
    """
    Validate a proposed meeting against the tutor's availability and the
    tutor's other meetings.

    When an existing meeting is edited to a time in the past (typically to
    attach a recording URL) the availability check is skipped, but the
    overlap check still applies.
    """
    is_past_edit = editing_meeting_id is not None and candidate.scheduled_at < now

    if not is_past_edit and not is_tutor_available(candidate.availability, candidate.scheduled_at):
        return FeasibilityResult(
            valid=False,
            message=(
                f"{candidate.tutor_name} not available on "
                f"{DAY_NAMES[day_of_week(candidate.scheduled_at)]} at {time_string(candidate.scheduled_at)}"
            ),
        )

    conflict = find_conflicting_meeting(candidate, meetings, editing_meeting_id)
    if conflict is not None:
        return FeasibilityResult(
            valid=False,
            message=f"conflicts with '{conflict.title}' in Section {conflict.section_label}",
        )

    if is_past_edit:
        return FeasibilityResult(
            valid=True,
            message="meeting already passed; recording URL may still be edited",
        )

    return FeasibilityResult(
        valid=True,
        message=f"{candidate.tutor_name} available; {candidate.enrolled_count} students enrolled",
    )


def windows_overlap(a: AvailabilityWindow, b: AvailabilityWindow) -> bool:
    if a.day_of_week != b.day_of_week:
        return False
    return (
        (b.start_time <= a.start_time < b.end_time)
        or (b.start_time < a.end_time <= b.end_time)
        or (a.start_time <= b.start_time and b.end_time <= a.end_time)
    )


def find_overlapping_window(
    window: AvailabilityWindow,
    existing: Iterable[AvailabilityWindow],
) -> Optional[AvailabilityWindow]:
    for other in existing:
        if window.id is not None and other.id == window.id:
            continue
        if windows_overlap(window, other):
            return other
    return None
