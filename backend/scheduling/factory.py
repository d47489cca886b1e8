"""
Factory classes for availability windows and meetings.
"""
from datetime import timedelta

import factory
from django.utils import timezone
from factory.django import DjangoModelFactory

from programs.factory import ClassSectionFactory
from users.factory import TutorUserFactory
from scheduling.models import MeetingStatus, ScheduledMeeting, TutorAvailability


class TutorAvailabilityFactory(DjangoModelFactory):
    class Meta:
        model = TutorAvailability

    tutor = factory.SubFactory(TutorUserFactory)
    day_of_week = 1
    start_time = "14:00"
    end_time = "21:00"


class ScheduledMeetingFactory(DjangoModelFactory):
    class Meta:
        model = ScheduledMeeting

    section = factory.SubFactory(ClassSectionFactory)
    title = factory.Sequence(lambda n: f"Meeting {n}")
    scheduled_at = factory.LazyFunction(lambda: timezone.now() + timedelta(days=1))
    duration = 90
    status = MeetingStatus.SCHEDULED
