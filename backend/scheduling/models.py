#scheduling/models.py
import re
from datetime import timedelta

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator, RegexValidator
from django.db import models

from programs.models import ClassSection

HHMM_RX = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

hhmm_validator = RegexValidator(HHMM_RX, "Time must be in 24-hour HH:MM format.")


class DayOfWeek(models.IntegerChoices):
    SUNDAY = 0, 'Sunday'
    MONDAY = 1, 'Monday'
    TUESDAY = 2, 'Tuesday'
    WEDNESDAY = 3, 'Wednesday'
    THURSDAY = 4, 'Thursday'
    FRIDAY = 5, 'Friday'
    SATURDAY = 6, 'Saturday'


class MeetingStatus(models.TextChoices):
    SCHEDULED = 'SCHEDULED', 'Scheduled'
    LIVE = 'LIVE', 'Live'
    COMPLETED = 'COMPLETED', 'Completed'
    CANCELLED = 'CANCELLED', 'Cancelled'


class TutorAvailability(models.Model):
    """
    A recurring weekly window in which a tutor can be scheduled.

    Times are wall-clock "HH:MM" strings in the platform time zone, so they
    compare correctly as strings.
    """
    tutor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='availability',
    )
    day_of_week = models.PositiveSmallIntegerField(
        choices=DayOfWeek.choices,
        validators=[MinValueValidator(0), MaxValueValidator(6)],
        help_text="0 = Sunday ... 6 = Saturday"
    )
    start_time = models.CharField(max_length=5, validators=[hhmm_validator], help_text="HH:MM, inclusive")
    end_time = models.CharField(max_length=5, validators=[hhmm_validator], help_text="HH:MM, exclusive")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tutor_availability'
        ordering = ['tutor', 'day_of_week', 'start_time']
        verbose_name = 'Tutor Availability'
        verbose_name_plural = 'Tutor Availability'
        indexes = [
            models.Index(fields=['tutor', 'day_of_week'], name='tutor_avail_tutor_i_3c1f0e_idx'),
        ]

    def __str__(self):
        return f"{self.tutor} - {self.get_day_of_week_display()} {self.start_time}-{self.end_time}"

    def clean(self):
        if self.start_time and self.end_time and self.start_time >= self.end_time:
            raise ValidationError({"end_time": "End time must be after start time."})


class ScheduledMeeting(models.Model):
    """
    A live meeting of a section. The tutor is always the section's tutor.
    """
    section = models.ForeignKey(
        ClassSection,
        on_delete=models.CASCADE,
        related_name='meetings',
    )
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    scheduled_at = models.DateTimeField()
    duration = models.PositiveIntegerField(
        default=90,
        validators=[MinValueValidator(1)],
        help_text="Duration in minutes"
    )
    status = models.CharField(
        max_length=20,
        choices=MeetingStatus.choices,
        default=MeetingStatus.SCHEDULED,
    )
    meeting_url = models.URLField(blank=True, default="")
    recording_url = models.URLField(blank=True, default="")
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='created_meetings',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'scheduled_meetings'
        ordering = ['scheduled_at']
        verbose_name = 'Scheduled Meeting'
        verbose_name_plural = 'Scheduled Meetings'
        indexes = [
            models.Index(fields=['section', 'scheduled_at'], name='scheduled_m_section_5a2b7d_idx'),
            models.Index(fields=['status'], name='scheduled_m_status_8e4c1a_idx'),
        ]

    def __str__(self):
        return f"{self.title} ({self.section}) @ {self.scheduled_at:%Y-%m-%d %H:%M}"

    @property
    def tutor(self):
        return self.section.tutor

    @property
    def ends_at(self):
        return self.scheduled_at + timedelta(minutes=self.duration)
