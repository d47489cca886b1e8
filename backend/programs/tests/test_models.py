"""
Test models for the programs app.
"""
from datetime import timedelta

from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.test import TestCase
from django.utils import timezone

from programs.factory import ClassSectionFactory, ClassTemplateFactory, EnrollmentFactory


class ClassSectionModelTestCase(TestCase):

    def test_str(self):
        section = ClassSectionFactory(template__name="Matematika XII", section_label="B")
        self.assertEqual(str(section), "Matematika XII - Section B")

    def test_label_unique_per_program(self):
        section = ClassSectionFactory(section_label="A")
        with self.assertRaises(IntegrityError):
            ClassSectionFactory(template=section.template, section_label="A")

    def test_capacity_properties(self):
        section = ClassSectionFactory(template__max_students_per_section=8, current_enrollments=2)
        self.assertEqual(section.max_students, 8)
        self.assertEqual(section.enrollment_percentage, 25)

    def test_clean_upper_cases_label(self):
        section = ClassSectionFactory.build(section_label=" c ")
        section.clean()
        self.assertEqual(section.section_label, "C")


class EnrollmentModelTestCase(TestCase):

    def setUp(self):
        self.now = timezone.now()

    def test_days_remaining_rounds_up(self):
        enrollment = EnrollmentFactory(expiry_date=self.now + timedelta(days=2, hours=1))
        self.assertEqual(enrollment.days_remaining(self.now), 3)

    def test_days_remaining_never_negative(self):
        enrollment = EnrollmentFactory(expiry_date=self.now - timedelta(days=5))
        self.assertEqual(enrollment.days_remaining(self.now), 0)

    def test_days_remaining_without_expiry(self):
        self.assertIsNone(EnrollmentFactory(expiry_date=None).days_remaining(self.now))

    def test_clean_rejects_expiry_before_start(self):
        enrollment = EnrollmentFactory.build(start_date=self.now, expiry_date=self.now - timedelta(days=1))
        with self.assertRaises(ValidationError):
            enrollment.clean()

    def test_clean_rejects_too_many_remaining_meetings(self):
        enrollment = EnrollmentFactory.build(total_meetings=4, meetings_remaining=5)
        with self.assertRaises(ValidationError):
            enrollment.clean()

    def test_template_factory_defaults(self):
        template = ClassTemplateFactory()
        self.assertEqual(template.max_students_per_section, 10)
        self.assertTrue(template.is_active)
