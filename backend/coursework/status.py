"""
Effective status of coursework from a student's point of view.

Two separate paths:

* write time: ``stamp_submission_status`` decides SUBMITTED or LATE when the
  work is handed in, and grading stamps GRADED. The stamp is stored.
* read time: ``derive_assignment_status`` only fills in PENDING / OVERDUE
  for assignments without a submission and otherwise reports the stored
  stamp verbatim, so work handed in late stays LATE and work handed in on
  time never becomes OVERDUE.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from .models import SubmissionStatus

PENDING = "PENDING"
OVERDUE = "OVERDUE"
SUBMITTED = SubmissionStatus.SUBMITTED.value
LATE = SubmissionStatus.LATE.value
GRADED = SubmissionStatus.GRADED.value

EFFECTIVE_STATUSES = (PENDING, SUBMITTED, GRADED, LATE, OVERDUE)

# Quiz display buckets
QUIZ_COMPLETED = "COMPLETED"
QUIZ_IN_PROGRESS = "IN_PROGRESS"
QUIZ_MISSED = "MISSED"
QUIZ_UPCOMING = "UPCOMING"
QUIZ_AVAILABLE = "AVAILABLE"


@dataclass(frozen=True)
class AssignmentActions:
    can_submit: bool
    can_view: bool
    can_resubmit: bool


def stamp_submission_status(due_date, submitted_at) -> str:
    """Status stored on a new or replaced submission."""
    return LATE if submitted_at > due_date else SUBMITTED


def derive_assignment_status(assignment, submission, now) -> str:
    if submission is None:
        if now > assignment.due_date:
            return OVERDUE
        return PENDING
    return str(submission.status)


def assignment_actions(status: str, due_date, now) -> AssignmentActions:
    """What the student can do with an assignment in ``status``."""
    if status in (PENDING, OVERDUE):
        return AssignmentActions(can_submit=True, can_view=False, can_resubmit=False)
    if status in (SUBMITTED, LATE):
        return AssignmentActions(can_submit=False, can_view=True, can_resubmit=now <= due_date)
    return AssignmentActions(can_submit=False, can_view=True, can_resubmit=False)


def summarize_assignment_statuses(statuses: Iterable[str]) -> Dict[str, int]:
    """
    Header counts for the student assignment page. ``late`` covers both LATE
    and OVERDUE, which reporting treats as the same thing.
    """
    stats = {"total": 0, "pending": 0, "submitted": 0, "graded": 0, "late": 0}
    for status in statuses:
        stats["total"] += 1
        if status == PENDING:
            stats["pending"] += 1
        elif status == SUBMITTED:
            stats["submitted"] += 1
        elif status == GRADED:
            stats["graded"] += 1
        elif status in (LATE, OVERDUE):
            stats["late"] += 1
    return stats


def derive_quiz_status(quiz, attempts, now) -> str:
    attempts = list(attempts)
    if any(a.submitted_at is not None for a in attempts):
        return QUIZ_COMPLETED
    if attempts:
        return QUIZ_IN_PROGRESS
    if quiz.end_date is not None and quiz.end_date < now:
        return QUIZ_MISSED
    if quiz.start_date is not None and quiz.start_date > now:
        return QUIZ_UPCOMING
    return QUIZ_AVAILABLE


def can_retry_quiz(quiz, attempts, now) -> bool:
    past_due = quiz.end_date is not None and quiz.end_date < now
    return len(list(attempts)) < quiz.max_attempts and not past_due


def best_score(attempts) -> Optional[float]:
    scores = [a.score for a in attempts if a.submitted_at is not None and a.score is not None]
    return max(scores) if scores else None
