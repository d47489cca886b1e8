#programs/models.py
import math

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone


class SectionStatus(models.TextChoices):
    ACTIVE = 'ACTIVE', 'Active'
    FULL = 'FULL', 'Full'
    ARCHIVED = 'ARCHIVED', 'Archived'


class EnrollmentStatus(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    ACTIVE = 'ACTIVE', 'Active'
    EXPIRED = 'EXPIRED', 'Expired'
    CANCELLED = 'CANCELLED', 'Cancelled'


# Enrollments that occupy a seat in a section.
SEAT_HOLDING_STATUSES = (EnrollmentStatus.ACTIVE, EnrollmentStatus.PENDING)


class ClassTemplate(models.Model):
    """
    A program: the reusable course definition (price, capacity, cadence)
    that sections are instantiated from.
    """
    name = models.CharField(max_length=255, help_text="Program name (e.g., Matematika SMA Kelas XII)")
    subject = models.CharField(max_length=100, help_text="Subject (e.g., Mathematics)")
    grade_level = models.CharField(max_length=50, blank=True)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    max_students_per_section = models.PositiveIntegerField(
        default=10,
        validators=[MinValueValidator(1)],
        help_text="Capacity inherited by every section of this program"
    )
    meetings_per_period = models.PositiveIntegerField(
        default=8,
        help_text="Meetings included in one enrollment period"
    )
    duration_days = models.PositiveIntegerField(
        default=30,
        help_text="Length of one enrollment period in days"
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'class_templates'
        ordering = ['name']
        verbose_name = 'Program'
        verbose_name_plural = 'Programs'

    def __str__(self):
        return self.name


class ClassSection(models.Model):
    """
    A scheduled instance of a program, run by one tutor.
    """
    template = models.ForeignKey(
        ClassTemplate,
        on_delete=models.CASCADE,
        related_name='sections',
    )
    section_label = models.CharField(max_length=10, help_text="A, B, ..., Z, AA, ...")
    tutor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='tutored_sections',
    )
    status = models.CharField(
        max_length=20,
        choices=SectionStatus.choices,
        default=SectionStatus.ACTIVE,
    )
    current_enrollments = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'class_sections'
        ordering = ['template__name', 'section_label']
        verbose_name = 'Section'
        verbose_name_plural = 'Sections'
        constraints = [
            models.UniqueConstraint(
                fields=['template', 'section_label'],
                name='unique_template_section_label'
            )
        ]

    def __str__(self):
        return f"{self.template.name} - Section {self.section_label}"

    def clean(self):
        if self.section_label:
            self.section_label = self.section_label.upper().strip()

    @property
    def max_students(self):
        return self.template.max_students_per_section

    @property
    def enrollment_percentage(self):
        if self.max_students > 0:
            return (self.current_enrollments / self.max_students) * 100
        return 0


class Enrollment(models.Model):
    student = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='enrollments',
    )
    section = models.ForeignKey(
        ClassSection,
        on_delete=models.CASCADE,
        related_name='enrollments',
    )
    status = models.CharField(
        max_length=20,
        choices=EnrollmentStatus.choices,
        default=EnrollmentStatus.PENDING,
    )
    start_date = models.DateTimeField(null=True, blank=True)
    expiry_date = models.DateTimeField(null=True, blank=True)
    meetings_remaining = models.PositiveIntegerField(default=0)
    total_meetings = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'enrollments'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['student', 'section'],
                name='unique_student_section'
            )
        ]

    def __str__(self):
        return f"{self.student} → {self.section} ({self.status})"

    def clean(self):
        if self.start_date and self.expiry_date and self.expiry_date < self.start_date:
            raise ValidationError({"expiry_date": "Expiry date cannot be before the start date."})
        if self.meetings_remaining > self.total_meetings:
            raise ValidationError({"meetings_remaining": "Cannot exceed total meetings."})

    def days_remaining(self, now=None):
        """Whole days until expiry, rounded up and never negative; None without an expiry date."""
        if self.expiry_date is None:
            return None
        now = now or timezone.now()
        seconds = (self.expiry_date - now).total_seconds()
        return max(0, math.ceil(seconds / 86400))
