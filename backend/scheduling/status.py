"""
Meeting status as seen at a given moment.

Works on anything with ``status``, ``scheduled_at`` and ``duration``
(a ``ScheduledMeeting`` row or a ``MeetingSnapshot``).
"""
from datetime import timedelta
from typing import Dict, Iterable

from .models import MeetingStatus

UPCOMING = "UPCOMING"


def _ends_at(meeting):
    return meeting.scheduled_at + timedelta(minutes=meeting.duration)


def is_meeting_live(meeting, now) -> bool:
    if meeting.status == MeetingStatus.LIVE:
        return True
    return meeting.scheduled_at <= now <= _ends_at(meeting)


def is_meeting_past(meeting, now) -> bool:
    return meeting.status == MeetingStatus.COMPLETED or meeting.scheduled_at < now


def effective_meeting_status(meeting, now) -> str:
    """CANCELLED, UPCOMING, LIVE or COMPLETED."""
    if meeting.status == MeetingStatus.CANCELLED:
        return MeetingStatus.CANCELLED
    if now < meeting.scheduled_at:
        return UPCOMING
    if now <= _ends_at(meeting):
        return MeetingStatus.LIVE
    return MeetingStatus.COMPLETED


def summarize_meeting_statuses(meetings: Iterable) -> Dict[str, int]:
    """Counts of stored statuses, for the admin schedule header."""
    stats = {"scheduled": 0, "live": 0, "completed": 0, "cancelled": 0}
    for m in meetings:
        key = str(m.status).lower()
        if key in stats:
            stats[key] += 1
    return stats
