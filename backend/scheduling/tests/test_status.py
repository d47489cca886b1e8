"""
Test meeting status at a given moment.
"""
from datetime import datetime, timedelta

from django.test import SimpleTestCase

from scheduling.conflicts import MeetingSnapshot
from scheduling.models import MeetingStatus
from scheduling.status import (
    UPCOMING,
    effective_meeting_status,
    is_meeting_live,
    is_meeting_past,
    summarize_meeting_statuses,
)

START = datetime(2026, 11, 2, 15, 0)


def meeting(status=MeetingStatus.SCHEDULED, duration=90):
    return MeetingSnapshot(
        id=1, tutor_id=1, title="Aljabar", section_label="A",
        scheduled_at=START, duration=duration, status=status,
    )


class EffectiveMeetingStatusTestCase(SimpleTestCase):

    def test_upcoming(self):
        self.assertEqual(effective_meeting_status(meeting(), START - timedelta(minutes=1)), UPCOMING)

    def test_live_from_start_to_end(self):
        self.assertEqual(effective_meeting_status(meeting(), START), MeetingStatus.LIVE)
        self.assertEqual(effective_meeting_status(meeting(), START + timedelta(minutes=90)), MeetingStatus.LIVE)

    def test_completed_after_end(self):
        self.assertEqual(
            effective_meeting_status(meeting(), START + timedelta(minutes=91)), MeetingStatus.COMPLETED
        )

    def test_cancelled_wins(self):
        self.assertEqual(
            effective_meeting_status(meeting(MeetingStatus.CANCELLED), START), MeetingStatus.CANCELLED
        )


class LiveAndPastTestCase(SimpleTestCase):

    def test_stored_live_is_live(self):
        self.assertTrue(is_meeting_live(meeting(MeetingStatus.LIVE), START - timedelta(hours=1)))

    def test_live_inside_slot(self):
        self.assertTrue(is_meeting_live(meeting(), START + timedelta(minutes=30)))
        self.assertFalse(is_meeting_live(meeting(), START - timedelta(minutes=1)))

    def test_past(self):
        self.assertTrue(is_meeting_past(meeting(), START + timedelta(seconds=1)))
        self.assertFalse(is_meeting_past(meeting(), START - timedelta(seconds=1)))
        self.assertTrue(is_meeting_past(meeting(MeetingStatus.COMPLETED), START - timedelta(days=1)))


class SummarizeMeetingStatusesTestCase(SimpleTestCase):

    def test_counts(self):
        meetings = [
            meeting(), meeting(), meeting(MeetingStatus.LIVE), meeting(MeetingStatus.CANCELLED),
        ]
        self.assertEqual(
            summarize_meeting_statuses(meetings),
            {"scheduled": 2, "live": 1, "completed": 0, "cancelled": 1},
        )
