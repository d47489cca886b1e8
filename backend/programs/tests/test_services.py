"""
Test the section write path.
"""
from django.test import TestCase
from rest_framework import serializers

from programs.factory import ClassSectionFactory, ClassTemplateFactory, EnrollmentFactory
from programs.models import EnrollmentStatus, SectionStatus
from programs.services import create_section, program_snapshots, sync_enrollment_counts
from users.factory import TutorUserFactory


class CreateSectionTestCase(TestCase):

    def setUp(self):
        self.template = ClassTemplateFactory()
        self.tutor = TutorUserFactory()

    def test_first_section_is_a(self):
        section = create_section(self.template, self.tutor)
        self.assertEqual(section.section_label, "A")
        self.assertEqual(section.status, SectionStatus.ACTIVE)

    def test_next_label_follows_existing(self):
        ClassSectionFactory(template=self.template, section_label="A")
        ClassSectionFactory(template=self.template, section_label="B")
        self.assertEqual(create_section(self.template, self.tutor).section_label, "C")

    def test_explicit_label(self):
        section = create_section(self.template, self.tutor, label="f")
        self.assertEqual(section.section_label, "F")

    def test_duplicate_label_rejected(self):
        ClassSectionFactory(template=self.template, section_label="A")
        with self.assertRaises(serializers.ValidationError):
            create_section(self.template, self.tutor, label="A")

    def test_logs_creation(self):
        with self.assertLogs("programs.services", level="INFO") as logs:
            create_section(self.template, self.tutor)
        self.assertIn("Created section A", logs.output[0])


class SyncEnrollmentCountsTestCase(TestCase):

    def test_counts_seat_holding_enrollments(self):
        section = ClassSectionFactory(template__max_students_per_section=3, current_enrollments=0)
        EnrollmentFactory(section=section, status=EnrollmentStatus.ACTIVE)
        EnrollmentFactory(section=section, status=EnrollmentStatus.PENDING)
        EnrollmentFactory(section=section, status=EnrollmentStatus.CANCELLED)

        updates = sync_enrollment_counts()

        section.refresh_from_db()
        self.assertEqual(section.current_enrollments, 2)
        self.assertEqual(section.status, SectionStatus.ACTIVE)
        self.assertEqual(len(updates), 1)
        self.assertEqual(updates[0]["old_count"], 0)
        self.assertEqual(updates[0]["new_count"], 2)

    def test_marks_full_sections(self):
        section = ClassSectionFactory(template__max_students_per_section=2)
        EnrollmentFactory.create_batch(2, section=section)

        sync_enrollment_counts()

        section.refresh_from_db()
        self.assertEqual(section.status, SectionStatus.FULL)

    def test_unchanged_sections_are_not_reported(self):
        ClassSectionFactory(current_enrollments=0)
        self.assertEqual(sync_enrollment_counts(), [])

    def test_archived_sections_stay_archived(self):
        section = ClassSectionFactory(template__max_students_per_section=1, status=SectionStatus.ARCHIVED)
        EnrollmentFactory(section=section)

        sync_enrollment_counts()

        section.refresh_from_db()
        self.assertEqual(section.status, SectionStatus.ARCHIVED)
        self.assertEqual(section.current_enrollments, 1)


class ProgramSnapshotsTestCase(TestCase):

    def test_inactive_programs_are_skipped(self):
        active = ClassTemplateFactory(name="Aktif")
        ClassTemplateFactory(name="Lama", is_active=False)
        ClassSectionFactory(template=active, section_label="A", current_enrollments=4)

        snapshots = program_snapshots()

        self.assertEqual([p.name for p in snapshots], ["Aktif"])
        self.assertEqual(snapshots[0].sections[0].label, "A")
        self.assertEqual(snapshots[0].sections[0].current_enrollments, 4)
