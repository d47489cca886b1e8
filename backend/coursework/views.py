# coursework/views.py
import logging

from django.shortcuts import get_object_or_404
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import generics, status
from rest_framework.exceptions import PermissionDenied
from rest_framework.response import Response
from rest_framework.views import APIView

from users.models import Role
from users.permissions import IsStudentRole, IsTutorRole, role_name
from .models import Assignment, AssignmentSubmission
from .serializers import (
    GradeSubmissionSerializer,
    StudentAssignmentRowSerializer,
    StudentQuizRowSerializer,
    SubmissionSerializer,
    SubmitAssignmentSerializer,
)
from .services import grade_submission, student_assignment_rows, student_quiz_rows, submit_assignment

logger = logging.getLogger(__name__)


class StudentAssignmentListView(APIView):
    """
    The signed-in student's assignments with effective status, allowed
    actions and header stats.
    """
    permission_classes = [IsStudentRole]

    @extend_schema(responses={200: dict})
    def get(self, request):
        data = student_assignment_rows(request.user, now=timezone.now())
        return Response({
            "assignments": StudentAssignmentRowSerializer(data["assignments"], many=True).data,
            "stats": data["stats"],
        }, status=status.HTTP_200_OK)


class SubmitAssignmentView(APIView):
    permission_classes = [IsStudentRole]

    @extend_schema(request=SubmitAssignmentSerializer, responses={201: SubmissionSerializer})
    def post(self, request, pk):
        assignment = get_object_or_404(Assignment, pk=pk)
        serializer = SubmitAssignmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        submission = submit_assignment(assignment, request.user, serializer.validated_data["file_url"])
        return Response(SubmissionSerializer(submission).data, status=status.HTTP_201_CREATED)


class AssignmentSubmissionListView(generics.ListAPIView):
    """Submissions for one assignment, for its tutor or an admin."""
    serializer_class = SubmissionSerializer
    permission_classes = [IsTutorRole]

    def get_queryset(self):
        assignment = get_object_or_404(Assignment.objects.select_related("section"), pk=self.kwargs["pk"])
        if role_name(self.request.user) != Role.ADMIN and assignment.section.tutor_id != self.request.user.pk:
            raise PermissionDenied("You do not teach this section.")
        return assignment.submissions.select_related("student", "assignment")


class GradeSubmissionView(APIView):
    permission_classes = [IsTutorRole]

    @extend_schema(request=GradeSubmissionSerializer, responses={200: SubmissionSerializer})
    def post(self, request, pk):
        submission = get_object_or_404(
            AssignmentSubmission.objects.select_related("assignment", "assignment__section", "student"), pk=pk
        )
        if role_name(request.user) != Role.ADMIN and submission.assignment.section.tutor_id != request.user.pk:
            logger.warning("User %s refused grading of submission %s", request.user.pk, submission.pk)
            raise PermissionDenied("You do not teach this section.")
        serializer = GradeSubmissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        submission = grade_submission(
            submission,
            serializer.validated_data["score"],
            serializer.validated_data.get("feedback", ""),
        )
        return Response(SubmissionSerializer(submission).data, status=status.HTTP_200_OK)


class StudentQuizListView(APIView):
    permission_classes = [IsStudentRole]

    @extend_schema(responses={200: StudentQuizRowSerializer(many=True)})
    def get(self, request):
        rows = student_quiz_rows(request.user, now=timezone.now())
        return Response(StudentQuizRowSerializer(rows, many=True).data, status=status.HTTP_200_OK)
