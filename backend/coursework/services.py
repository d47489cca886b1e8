#coursework/services.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from django.db import transaction
from django.utils import timezone
from rest_framework import serializers
from rest_framework.exceptions import PermissionDenied

from programs.models import Enrollment, EnrollmentStatus
from .models import Assignment, AssignmentSubmission, PublishStatus, Quiz, SubmissionStatus
from .status import (
    assignment_actions,
    best_score,
    can_retry_quiz,
    derive_assignment_status,
    derive_quiz_status,
    stamp_submission_status,
    summarize_assignment_statuses,
)

logger = logging.getLogger(__name__)


def _active_section_ids(student) -> List[int]:
    return list(
        Enrollment.objects
        .filter(student=student, status=EnrollmentStatus.ACTIVE)
        .values_list("section_id", flat=True)
    )


def submit_assignment(assignment: Assignment, student, file_url: str, now=None) -> AssignmentSubmission:
    """
    Hand in (or replace) a student's submission and stamp SUBMITTED or LATE.
    A submission can only be replaced until the due date, which clears any
    previous grading; graded work is final.
    """
    now = now or timezone.now()
    if assignment.section_id not in _active_section_ids(student):
        raise PermissionDenied("You are not enrolled in this class.")
    if assignment.status != PublishStatus.PUBLISHED:
        raise serializers.ValidationError({"detail": "This assignment is not available."})

    status = stamp_submission_status(assignment.due_date, now)
    with transaction.atomic():
        submission = (AssignmentSubmission.objects
                      .select_for_update()
                      .filter(assignment=assignment, student=student)
                      .first())
        if submission is None:
            submission = AssignmentSubmission.objects.create(
                assignment=assignment,
                student=student,
                file_url=file_url,
                status=status,
                submitted_at=now,
            )
        else:
            if submission.status == SubmissionStatus.GRADED:
                raise serializers.ValidationError({"detail": "Graded submissions cannot be replaced."})
            if now > assignment.due_date:
                raise serializers.ValidationError({"detail": "Submissions cannot be replaced after the due date."})
            submission.file_url = file_url
            submission.status = status
            submission.submitted_at = now
            submission.score = None
            submission.feedback = ""
            submission.graded_at = None
            submission.save()

    logger.info("Student %s submitted assignment %s (%s)", student.pk, assignment.pk, status)
    return submission


def grade_submission(submission: AssignmentSubmission, score: int, feedback: str = "", now=None) -> AssignmentSubmission:
    max_points = submission.assignment.max_points
    if score < 0 or score > max_points:
        raise serializers.ValidationError({"score": f"Score must be between 0 and {max_points}."})

    submission.score = score
    submission.feedback = feedback
    submission.status = SubmissionStatus.GRADED
    submission.graded_at = now or timezone.now()
    submission.save(update_fields=["score", "feedback", "status", "graded_at"])
    logger.info("Graded submission %s: %s/%s", submission.pk, score, max_points)
    return submission


def student_assignment_rows(student, now=None) -> Dict:
    """
    Every published assignment in the student's active sections, with its
    effective status, the allowed actions and the header stats.
    """
    now = now or timezone.now()
    assignments = (Assignment.objects
                   .filter(section_id__in=_active_section_ids(student), status=PublishStatus.PUBLISHED)
                   .select_related("section", "section__template")
                   .order_by("due_date", "-created_at"))
    submissions = {
        s.assignment_id: s
        for s in AssignmentSubmission.objects.filter(student=student, assignment__in=assignments)
    }

    rows = []
    for a in assignments:
        submission: Optional[AssignmentSubmission] = submissions.get(a.pk)
        effective = derive_assignment_status(a, submission, now)
        actions = assignment_actions(effective, a.due_date, now)
        rows.append({
            "id": a.pk,
            "title": a.title,
            "program_name": a.section.template.name,
            "section_label": a.section.section_label,
            "due_date": a.due_date,
            "max_points": a.max_points,
            "effective_status": effective,
            "can_submit": actions.can_submit,
            "can_view": actions.can_view,
            "can_resubmit": actions.can_resubmit,
            "submission": None if submission is None else {
                "id": submission.pk,
                "status": submission.status,
                "score": submission.score,
                "feedback": submission.feedback,
                "submitted_at": submission.submitted_at,
                "graded_at": submission.graded_at,
            },
        })

    return {
        "assignments": rows,
        "stats": summarize_assignment_statuses(r["effective_status"] for r in rows),
    }


def student_quiz_rows(student, now=None) -> List[Dict]:
    now = now or timezone.now()
    quizzes = (Quiz.objects
               .filter(section_id__in=_active_section_ids(student), status=PublishStatus.PUBLISHED)
               .select_related("section", "section__template")
               .order_by("end_date", "-created_at"))

    rows = []
    for quiz in quizzes:
        attempts = list(quiz.attempts.filter(student=student))
        rows.append({
            "id": quiz.pk,
            "title": quiz.title,
            "program_name": quiz.section.template.name,
            "start_date": quiz.start_date,
            "end_date": quiz.end_date,
            "time_limit": quiz.time_limit,
            "passing_grade": quiz.passing_grade,
            "attempt_count": len(attempts),
            "max_attempts": quiz.max_attempts,
            "best_score": best_score(attempts),
            "effective_status": derive_quiz_status(quiz, attempts, now),
            "can_retry": can_retry_quiz(quiz, attempts, now),
        })
    return rows
