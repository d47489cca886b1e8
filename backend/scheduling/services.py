#scheduling/services.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from django.conf import settings
from django.db import transaction
from django.utils import timezone
from rest_framework import serializers

from programs.models import ClassSection
from .conflicts import (
    AvailabilityWindow,
    FeasibilityResult,
    MeetingCandidate,
    MeetingSnapshot,
    check_meeting_feasibility,
    find_overlapping_window,
)
from .models import MeetingStatus, ScheduledMeeting, TutorAvailability

logger = logging.getLogger(__name__)


class MeetingConflictError(serializers.ValidationError):
    """A meeting write was rejected by the availability/clash check."""

    def __init__(self, result: FeasibilityResult):
        self.result = result
        super().__init__({"detail": result.message})


def default_duration() -> int:
    return getattr(settings, "SCHEDULING", {}).get("DEFAULT_MEETING_DURATION", 90)


def _local(dt: datetime) -> datetime:
    # Availability windows are wall-clock times in the platform time zone.
    if timezone.is_aware(dt):
        return timezone.localtime(dt)
    return dt


def availability_windows(tutor) -> List[AvailabilityWindow]:
    return [
        AvailabilityWindow(id=a.pk, day_of_week=a.day_of_week, start_time=a.start_time, end_time=a.end_time)
        for a in TutorAvailability.objects.filter(tutor=tutor)
    ]


def candidate_for_section(section: ClassSection, scheduled_at: datetime, duration: int) -> MeetingCandidate:
    return MeetingCandidate(
        section_id=section.pk,
        tutor_id=section.tutor_id,
        tutor_name=section.tutor.get_full_name(),
        scheduled_at=_local(scheduled_at),
        duration=duration,
        availability=availability_windows(section.tutor),
        enrolled_count=section.current_enrollments,
    )


def meeting_snapshots_for_tutor(tutor_id) -> List[MeetingSnapshot]:
    qs = (ScheduledMeeting.objects
          .filter(section__tutor_id=tutor_id)
          .exclude(status=MeetingStatus.CANCELLED)
          .select_related("section"))
    return [
        MeetingSnapshot(
            id=m.pk,
            tutor_id=tutor_id,
            title=m.title,
            section_label=m.section.section_label,
            scheduled_at=_local(m.scheduled_at),
            duration=m.duration,
            status=m.status,
        )
        for m in qs
    ]


def check_meeting(
    section: ClassSection,
    scheduled_at: datetime,
    duration: int,
    editing: Optional[ScheduledMeeting] = None,
    now: Optional[datetime] = None,
) -> FeasibilityResult:
    """Run the feasibility check for a meeting of ``section`` against the database state."""
    candidate = candidate_for_section(section, scheduled_at, duration)
    return check_meeting_feasibility(
        candidate,
        meeting_snapshots_for_tutor(section.tutor_id),
        editing_meeting_id=editing.pk if editing is not None else None,
        now=_local(now or timezone.now()),
    )


def lock_tutor_sections(tutor_id) -> None:
    """Row-lock every section of a tutor so concurrent writes for that tutor are checked one at a time."""
    list(ClassSection.objects.select_for_update().filter(tutor_id=tutor_id).values_list("pk", flat=True))


def create_meeting(
    section: ClassSection,
    title: str,
    scheduled_at: datetime,
    duration: Optional[int] = None,
    created_by=None,
    now: Optional[datetime] = None,
    **extra,
) -> ScheduledMeeting:
    duration = duration or default_duration()
    with transaction.atomic():
        lock_tutor_sections(section.tutor_id)
        result = check_meeting(section, scheduled_at, duration, now=now)
        if not result.valid:
            logger.warning("Rejected meeting for section %s at %s: %s", section.pk, scheduled_at, result.message)
            raise MeetingConflictError(result)

        meeting = ScheduledMeeting.objects.create(
            section=section,
            title=title,
            scheduled_at=scheduled_at,
            duration=duration,
            created_by=created_by,
            **extra,
        )
    logger.info("Scheduled meeting %s for section %s at %s", meeting.pk, section.pk, scheduled_at)
    return meeting


# Changing any of these re-runs the feasibility check.
SLOT_FIELDS = ("section", "scheduled_at", "duration")


def update_meeting(meeting: ScheduledMeeting, now: Optional[datetime] = None, **changes) -> ScheduledMeeting:
    """
    Apply ``changes`` to ``meeting``. Moving the meeting (section, time or
    duration) must pass the same check as a new meeting, with the meeting
    itself excluded from the clash search.
    """
    if meeting.status == MeetingStatus.CANCELLED:
        raise serializers.ValidationError({"detail": "Cancelled meetings cannot be edited."})

    moves = any(f in changes and changes[f] != getattr(meeting, f) for f in SLOT_FIELDS)
    with transaction.atomic():
        if moves:
            section = changes.get("section", meeting.section)
            scheduled_at = changes.get("scheduled_at", meeting.scheduled_at)
            duration = changes.get("duration", meeting.duration)
            lock_tutor_sections(section.tutor_id)
            result = check_meeting(section, scheduled_at, duration, editing=meeting, now=now)
            if not result.valid:
                logger.warning("Rejected move of meeting %s: %s", meeting.pk, result.message)
                raise MeetingConflictError(result)

        for field_name, value in changes.items():
            setattr(meeting, field_name, value)
        meeting.save()
    return meeting


def cancel_meeting(meeting: ScheduledMeeting) -> ScheduledMeeting:
    if meeting.status != MeetingStatus.CANCELLED:
        meeting.status = MeetingStatus.CANCELLED
        meeting.save(update_fields=["status", "updated_at"])
        logger.info("Cancelled meeting %s", meeting.pk)
    return meeting


def add_availability(tutor, day_of_week: int, start_time: str, end_time: str) -> TutorAvailability:
    """Add a weekly window for ``tutor``; windows of one tutor may not overlap."""
    if start_time >= end_time:
        raise serializers.ValidationError({"end_time": "End time must be after start time."})

    window = AvailabilityWindow(day_of_week=day_of_week, start_time=start_time, end_time=end_time)
    clash = find_overlapping_window(window, availability_windows(tutor))
    if clash is not None:
        raise serializers.ValidationError({
            "detail": f"Slot overlaps with existing availability {clash.start_time}-{clash.end_time}"
        })

    slot = TutorAvailability.objects.create(
        tutor=tutor, day_of_week=day_of_week, start_time=start_time, end_time=end_time
    )
    logger.info("Added availability %s for tutor %s", slot.pk, tutor.pk)
    return slot
