"""
Factory classes for assignments, submissions and quizzes.
"""
from datetime import timedelta

import factory
from django.utils import timezone
from factory.django import DjangoModelFactory

from programs.factory import ClassSectionFactory
from users.factory import StudentUserFactory
from coursework.models import (
    Assignment,
    AssignmentSubmission,
    PublishStatus,
    Quiz,
    QuizAttempt,
    SubmissionStatus,
)


class AssignmentFactory(DjangoModelFactory):
    class Meta:
        model = Assignment

    section = factory.SubFactory(ClassSectionFactory)
    title = factory.Sequence(lambda n: f"Assignment {n}")
    due_date = factory.LazyFunction(lambda: timezone.now() + timedelta(days=1))
    max_points = 100
    status = PublishStatus.PUBLISHED


class AssignmentSubmissionFactory(DjangoModelFactory):
    class Meta:
        model = AssignmentSubmission

    assignment = factory.SubFactory(AssignmentFactory)
    student = factory.SubFactory(StudentUserFactory)
    file_url = "https://files.example.com/answer.pdf"
    status = SubmissionStatus.SUBMITTED
    submitted_at = factory.LazyFunction(timezone.now)


class QuizFactory(DjangoModelFactory):
    class Meta:
        model = Quiz

    section = factory.SubFactory(ClassSectionFactory)
    title = factory.Sequence(lambda n: f"Quiz {n}")
    start_date = factory.LazyFunction(lambda: timezone.now() - timedelta(days=1))
    end_date = factory.LazyFunction(lambda: timezone.now() + timedelta(days=1))
    max_attempts = 1
    status = PublishStatus.PUBLISHED


class QuizAttemptFactory(DjangoModelFactory):
    class Meta:
        model = QuizAttempt

    quiz = factory.SubFactory(QuizFactory)
    student = factory.SubFactory(StudentUserFactory)
    started_at = factory.LazyFunction(timezone.now)
