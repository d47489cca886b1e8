# scheduling/views.py
import logging

from django.db.models import Q
from django.shortcuts import get_object_or_404
from django.utils import timezone
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import IsAdminOrTutor, IsAdminRole, IsTutorRole, role_name
from users.models import Role
from .models import ScheduledMeeting, TutorAvailability
from .serializers import (
    FeasibilityResultSerializer,
    MeetingCheckSerializer,
    MeetingWriteSerializer,
    ScheduledMeetingSerializer,
    TutorAvailabilitySerializer,
)
from .services import add_availability, cancel_meeting, check_meeting, create_meeting, default_duration, update_meeting
from .status import summarize_meeting_statuses

logger = logging.getLogger(__name__)


class AvailabilityListCreateView(generics.ListCreateAPIView):
    """
    Weekly availability windows. Admins see everyone (optionally
    ``?tutor_id=``) and add windows; tutors see their own.
    """
    serializer_class = TutorAvailabilitySerializer
    permission_classes = [IsAdminOrTutor]

    def get_queryset(self):
        qs = TutorAvailability.objects.select_related("tutor")
        if role_name(self.request.user) == Role.TUTOR:
            return qs.filter(tutor=self.request.user)
        tutor_id = self.request.query_params.get("tutor_id")
        if tutor_id:
            qs = qs.filter(tutor_id=tutor_id)
        return qs

    def create(self, request, *args, **kwargs):
        if role_name(request.user) != Role.ADMIN:
            return Response({"detail": "Only admins can edit availability."}, status=status.HTTP_403_FORBIDDEN)
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        slot = add_availability(
            serializer.validated_data["tutor"],
            serializer.validated_data["day_of_week"],
            serializer.validated_data["start_time"],
            serializer.validated_data["end_time"],
        )
        return Response(self.get_serializer(slot).data, status=status.HTTP_201_CREATED)


class AvailabilityDetailView(generics.RetrieveDestroyAPIView):
    serializer_class = TutorAvailabilitySerializer
    permission_classes = [IsAdminRole]
    queryset = TutorAvailability.objects.select_related("tutor")


class MeetingListCreateView(APIView):
    """
    Admin schedule: every meeting (filter with ``?status=`` and ``?q=``)
    plus per-status counts; POST schedules a new meeting.
    """
    permission_classes = [IsAdminRole]

    @extend_schema(
        parameters=[
            OpenApiParameter("status", str, description="SCHEDULED, LIVE, COMPLETED or CANCELLED"),
            OpenApiParameter("q", str, description="Search in title or program name"),
        ],
        responses={200: dict},
    )
    def get(self, request):
        all_meetings = ScheduledMeeting.objects.select_related("section", "section__template", "section__tutor")
        qs = all_meetings
        status_filter = request.query_params.get("status")
        if status_filter and status_filter.upper() != "ALL":
            qs = qs.filter(status=status_filter.upper())
        q = request.query_params.get("q")
        if q:
            qs = qs.filter(Q(title__icontains=q) | Q(section__template__name__icontains=q))

        context = {"now": timezone.now()}
        return Response({
            "meetings": ScheduledMeetingSerializer(qs, many=True, context=context).data,
            "stats": summarize_meeting_statuses(all_meetings),
        }, status=status.HTTP_200_OK)

    @extend_schema(request=MeetingWriteSerializer, responses={201: ScheduledMeetingSerializer})
    def post(self, request):
        serializer = MeetingWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        meeting = create_meeting(
            data.pop("section"),
            data.pop("title"),
            data.pop("scheduled_at"),
            duration=data.pop("duration", None),
            created_by=request.user,
            **data,
        )
        return Response(ScheduledMeetingSerializer(meeting).data, status=status.HTTP_201_CREATED)


class MeetingDetailView(APIView):
    """Read, edit (re-checked when moved) or cancel a meeting."""
    permission_classes = [IsAdminRole]

    def _get(self, pk):
        return get_object_or_404(
            ScheduledMeeting.objects.select_related("section", "section__template", "section__tutor"), pk=pk
        )

    @extend_schema(responses={200: ScheduledMeetingSerializer})
    def get(self, request, pk):
        return Response(ScheduledMeetingSerializer(self._get(pk)).data)

    @extend_schema(request=MeetingWriteSerializer, responses={200: ScheduledMeetingSerializer})
    def patch(self, request, pk):
        meeting = self._get(pk)
        serializer = MeetingWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        meeting = update_meeting(meeting, **serializer.validated_data)
        return Response(ScheduledMeetingSerializer(meeting).data)

    @extend_schema(responses={200: ScheduledMeetingSerializer})
    def delete(self, request, pk):
        meeting = cancel_meeting(self._get(pk))
        return Response(ScheduledMeetingSerializer(meeting).data)


class MeetingCheckView(APIView):
    """
    Dry-run of the schedule form: is the tutor available and free?
    Always answers 200 with ``{valid, message}``.
    """
    permission_classes = [IsAdminRole]

    @extend_schema(request=MeetingCheckSerializer, responses={200: FeasibilityResultSerializer})
    def post(self, request):
        serializer = MeetingCheckSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = check_meeting(
            data["section"],
            data["scheduled_at"],
            data.get("duration") or default_duration(),
            editing=data.get("editing"),
        )
        if not result.valid:
            logger.info("Meeting check failed for section %s: %s", data["section"].pk, result.message)
        return Response({"valid": result.valid, "message": result.message}, status=status.HTTP_200_OK)


class TutorMeetingListView(generics.ListAPIView):
    """The signed-in tutor's meetings with their effective status."""
    serializer_class = ScheduledMeetingSerializer
    permission_classes = [IsTutorRole]

    def get_queryset(self):
        return (ScheduledMeeting.objects
                .filter(section__tutor=self.request.user)
                .select_related("section", "section__template", "section__tutor"))

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["now"] = timezone.now()
        return context
