# programs/views.py
from dataclasses import asdict
import logging

from django.db.models import Q
from django.shortcuts import get_object_or_404
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import AdminWriteOrReadOnly, IsAdminRole, IsStudentRole
from .capacity import find_section_suggestion
from .models import ClassSection, ClassTemplate, Enrollment
from .serializers import (
    ClassSectionSerializer,
    ClassTemplateSerializer,
    EnrollmentSerializer,
    SectionCreateSerializer,
    SectionSuggestionSerializer,
)
from .services import create_section, program_snapshots, sync_enrollment_counts

logger = logging.getLogger(__name__)

TRUTHY = {"1", "true", "yes", "on"}


class ProgramListCreateView(generics.ListCreateAPIView):
    """
    Programs with their sections. Everyone signed in can read; admins create.
    """
    serializer_class = ClassTemplateSerializer
    permission_classes = [AdminWriteOrReadOnly]

    def get_queryset(self):
        qs = ClassTemplate.objects.prefetch_related("sections", "sections__tutor")
        q = self.request.query_params.get("q")
        if q:
            qs = qs.filter(Q(name__icontains=q) | Q(subject__icontains=q))
        return qs.order_by("name")


class ProgramDetailView(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = ClassTemplateSerializer
    permission_classes = [AdminWriteOrReadOnly]
    queryset = ClassTemplate.objects.prefetch_related("sections", "sections__tutor")


class SectionCreateView(APIView):
    """
    Create a section. Omitting ``section_label`` picks the next label in sequence.
    """
    permission_classes = [IsAdminRole]

    @extend_schema(request=SectionCreateSerializer, responses={201: ClassSectionSerializer})
    def post(self, request):
        serializer = SectionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        section = create_section(
            serializer.validated_data["template"],
            serializer.validated_data["tutor"],
            serializer.validated_data.get("section_label"),
        )
        return Response(ClassSectionSerializer(section).data, status=status.HTTP_201_CREATED)


class SectionDetailView(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = ClassSectionSerializer
    permission_classes = [AdminWriteOrReadOnly]
    queryset = ClassSection.objects.select_related("template", "tutor")


class SectionSuggestionView(APIView):
    """
    The first program that needs a new section, if any.

    The admin UI owns the "dismissed" flag and passes it back as
    ``?dismissed=1`` for the rest of the session.
    """
    permission_classes = [IsAdminRole]

    @extend_schema(
        parameters=[OpenApiParameter("dismissed", bool, description="Suggestion was dismissed this session")],
        responses={200: SectionSuggestionSerializer},
    )
    def get(self, request):
        dismissed = (request.query_params.get("dismissed") or "").lower() in TRUTHY
        suggestion = find_section_suggestion(program_snapshots(), dismissed=dismissed)
        data = SectionSuggestionSerializer(asdict(suggestion)).data if suggestion else None
        return Response({"suggestion": data}, status=status.HTTP_200_OK)


class SyncEnrollmentsView(APIView):
    """Recount seats for every section and refresh ACTIVE/FULL status."""
    permission_classes = [IsAdminRole]

    @extend_schema(request=None, responses={200: dict})
    def post(self, request):
        updates = sync_enrollment_counts()
        logger.info("Admin %s synced %d section(s)", request.user.pk, len(updates))
        return Response({
            "message": f"Synced {len(updates)} section(s)",
            "updated_count": len(updates),
            "updates": updates,
        }, status=status.HTTP_200_OK)


class StudentEnrollmentListView(generics.ListAPIView):
    """The signed-in student's enrollments with days remaining."""
    serializer_class = EnrollmentSerializer
    permission_classes = [IsStudentRole]

    def get_queryset(self):
        return (Enrollment.objects
                .filter(student=self.request.user)
                .select_related("section", "section__template", "section__tutor"))


class SectionEnrollmentListView(generics.ListAPIView):
    serializer_class = EnrollmentSerializer
    permission_classes = [IsAdminRole]

    def get_queryset(self):
        section = get_object_or_404(ClassSection, pk=self.kwargs["pk"])
        return section.enrollments.select_related("section", "section__template", "section__tutor")
