"""
Test submissions, grading and the student coursework lists.
"""
from datetime import timedelta

from django.test import TestCase
from django.utils import timezone
from rest_framework import serializers
from rest_framework.exceptions import PermissionDenied

from coursework.factory import (
    AssignmentFactory,
    AssignmentSubmissionFactory,
    QuizAttemptFactory,
    QuizFactory,
)
from coursework.models import PublishStatus, SubmissionStatus
from coursework.services import grade_submission, student_assignment_rows, student_quiz_rows, submit_assignment
from programs.factory import ClassSectionFactory, EnrollmentFactory
from programs.models import EnrollmentStatus
from users.factory import StudentUserFactory


class SubmitAssignmentTestCase(TestCase):

    def setUp(self):
        self.now = timezone.now()
        self.section = ClassSectionFactory()
        self.student = StudentUserFactory()
        EnrollmentFactory(student=self.student, section=self.section)
        self.assignment = AssignmentFactory(section=self.section, due_date=self.now + timedelta(days=1))

    def test_on_time(self):
        submission = submit_assignment(self.assignment, self.student, "https://files.example.com/a.pdf", now=self.now)
        self.assertEqual(submission.status, SubmissionStatus.SUBMITTED)
        self.assertEqual(submission.submitted_at, self.now)

    def test_late(self):
        later = self.now + timedelta(days=2)
        submission = submit_assignment(self.assignment, self.student, "https://files.example.com/a.pdf", now=later)
        self.assertEqual(submission.status, SubmissionStatus.LATE)

    def test_resubmit_before_due_date_replaces(self):
        submit_assignment(self.assignment, self.student, "https://files.example.com/v1.pdf", now=self.now)
        later = self.now + timedelta(hours=2)
        submission = submit_assignment(self.assignment, self.student, "https://files.example.com/v2.pdf", now=later)

        self.assertEqual(self.assignment.submissions.count(), 1)
        self.assertEqual(submission.file_url, "https://files.example.com/v2.pdf")
        self.assertEqual(submission.status, SubmissionStatus.SUBMITTED)
        self.assertEqual(submission.submitted_at, later)

    def test_resubmit_after_due_date_rejected(self):
        first = submit_assignment(self.assignment, self.student, "https://files.example.com/v1.pdf", now=self.now)
        later = self.now + timedelta(days=2)

        with self.assertRaises(serializers.ValidationError):
            submit_assignment(self.assignment, self.student, "https://files.example.com/v2.pdf", now=later)

        first.refresh_from_db()
        self.assertEqual(first.status, SubmissionStatus.SUBMITTED)
        self.assertEqual(first.file_url, "https://files.example.com/v1.pdf")

    def test_graded_submission_is_final(self):
        AssignmentSubmissionFactory(assignment=self.assignment, student=self.student, status=SubmissionStatus.GRADED)
        with self.assertRaises(serializers.ValidationError):
            submit_assignment(self.assignment, self.student, "https://files.example.com/a.pdf", now=self.now)

    def test_draft_rejected(self):
        draft = AssignmentFactory(section=self.section, status=PublishStatus.DRAFT)
        with self.assertRaises(serializers.ValidationError):
            submit_assignment(draft, self.student, "https://files.example.com/a.pdf", now=self.now)

    def test_not_enrolled(self):
        with self.assertRaises(PermissionDenied):
            submit_assignment(self.assignment, StudentUserFactory(), "https://files.example.com/a.pdf", now=self.now)

    def test_cancelled_enrollment(self):
        student = StudentUserFactory()
        EnrollmentFactory(student=student, section=self.section, status=EnrollmentStatus.CANCELLED)
        with self.assertRaises(PermissionDenied):
            submit_assignment(self.assignment, student, "https://files.example.com/a.pdf", now=self.now)


class GradeSubmissionTestCase(TestCase):

    def setUp(self):
        self.submission = AssignmentSubmissionFactory(assignment__max_points=50, status=SubmissionStatus.LATE)

    def test_grade(self):
        submission = grade_submission(self.submission, 45, "Bagus")
        self.assertEqual(submission.status, SubmissionStatus.GRADED)
        self.assertEqual(submission.score, 45)
        self.assertIsNotNone(submission.graded_at)

    def test_score_above_max_rejected(self):
        with self.assertRaises(serializers.ValidationError):
            grade_submission(self.submission, 51)
        self.submission.refresh_from_db()
        self.assertEqual(self.submission.status, SubmissionStatus.LATE)


class StudentAssignmentRowsTestCase(TestCase):

    def setUp(self):
        self.now = timezone.now()
        self.student = StudentUserFactory()
        self.section = ClassSectionFactory()
        EnrollmentFactory(student=self.student, section=self.section)

    def test_rows_and_stats(self):
        overdue = AssignmentFactory(section=self.section, due_date=self.now - timedelta(days=1))
        pending = AssignmentFactory(section=self.section, due_date=self.now + timedelta(days=1))
        done = AssignmentFactory(section=self.section, due_date=self.now - timedelta(days=2))
        AssignmentSubmissionFactory(
            assignment=done, student=self.student, submitted_at=self.now - timedelta(days=3)
        )
        AssignmentFactory(section=self.section, status=PublishStatus.DRAFT)
        AssignmentFactory()  # another section

        data = student_assignment_rows(self.student, now=self.now)

        statuses = {row["id"]: row["effective_status"] for row in data["assignments"]}
        self.assertEqual(statuses, {overdue.id: "OVERDUE", pending.id: "PENDING", done.id: "SUBMITTED"})
        self.assertEqual(data["stats"], {"total": 3, "pending": 1, "submitted": 1, "graded": 0, "late": 1})

        done_row = next(r for r in data["assignments"] if r["id"] == done.id)
        self.assertTrue(done_row["can_view"])
        self.assertFalse(done_row["can_resubmit"])


class StudentQuizRowsTestCase(TestCase):

    def test_rows(self):
        now = timezone.now()
        student = StudentUserFactory()
        section = ClassSectionFactory()
        EnrollmentFactory(student=student, section=section)
        taken = QuizFactory(section=section, max_attempts=2)
        QuizAttemptFactory(quiz=taken, student=student, submitted_at=now, score=80)
        missed = QuizFactory(section=section, end_date=now - timedelta(hours=1))

        rows = {r["id"]: r for r in student_quiz_rows(student, now=now)}

        self.assertEqual(rows[taken.id]["effective_status"], "COMPLETED")
        self.assertEqual(rows[taken.id]["best_score"], 80)
        self.assertTrue(rows[taken.id]["can_retry"])
        self.assertEqual(rows[missed.id]["effective_status"], "MISSED")
