# backend/scheduling/serializers.py
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework import serializers

from programs.models import ClassSection
from users.models import Role
from users.serializers import UserSummarySerializer
from .models import HHMM_RX, DayOfWeek, ScheduledMeeting, TutorAvailability
from .status import effective_meeting_status, is_meeting_live, is_meeting_past

User = get_user_model()


def _validate_hhmm(value):
    value = (value or "").strip()
    if not HHMM_RX.match(value):
        raise serializers.ValidationError("Time must be in 24-hour HH:MM format.")
    return value


class TutorAvailabilitySerializer(serializers.ModelSerializer):
    tutor = UserSummarySerializer(read_only=True)
    tutor_id = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(role=Role.TUTOR), source="tutor", write_only=True
    )
    day_name = serializers.CharField(source="get_day_of_week_display", read_only=True)
    day_of_week = serializers.ChoiceField(choices=DayOfWeek.choices)

    class Meta:
        model = TutorAvailability
        fields = ['id', 'tutor', 'tutor_id', 'day_of_week', 'day_name', 'start_time', 'end_time', 'created_at']
        read_only_fields = ['id', 'created_at']

    def validate_start_time(self, value):
        return _validate_hhmm(value)

    def validate_end_time(self, value):
        return _validate_hhmm(value)

    def validate(self, attrs):
        if attrs["start_time"] >= attrs["end_time"]:
            raise serializers.ValidationError({"end_time": "End time must be after start time."})
        return attrs


class ScheduledMeetingSerializer(serializers.ModelSerializer):
    """Read payload; ``effective_status`` is computed against ``context['now']``."""
    section_label = serializers.CharField(source="section.section_label", read_only=True)
    program_name = serializers.CharField(source="section.template.name", read_only=True)
    tutor = UserSummarySerializer(source="section.tutor", read_only=True)
    effective_status = serializers.SerializerMethodField()
    is_live = serializers.SerializerMethodField()
    is_past = serializers.SerializerMethodField()

    class Meta:
        model = ScheduledMeeting
        fields = [
            'id', 'section', 'section_label', 'program_name', 'tutor',
            'title', 'description', 'scheduled_at', 'duration', 'status',
            'effective_status', 'is_live', 'is_past',
            'meeting_url', 'recording_url', 'created_at', 'updated_at',
        ]

    def _now(self):
        return self.context.get("now") or timezone.now()

    def get_effective_status(self, obj):
        return str(effective_meeting_status(obj, self._now()))

    def get_is_live(self, obj):
        return is_meeting_live(obj, self._now())

    def get_is_past(self, obj):
        return is_meeting_past(obj, self._now())


class MeetingWriteSerializer(serializers.Serializer):
    section_id = serializers.PrimaryKeyRelatedField(
        queryset=ClassSection.objects.select_related("tutor"), source="section"
    )
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    scheduled_at = serializers.DateTimeField()
    duration = serializers.IntegerField(min_value=1, required=False)
    meeting_url = serializers.URLField(required=False, allow_blank=True)
    recording_url = serializers.URLField(required=False, allow_blank=True)


class MeetingCheckSerializer(serializers.Serializer):
    section_id = serializers.PrimaryKeyRelatedField(
        queryset=ClassSection.objects.select_related("tutor"), source="section"
    )
    scheduled_at = serializers.DateTimeField()
    duration = serializers.IntegerField(min_value=1, required=False)
    meeting_id = serializers.PrimaryKeyRelatedField(
        queryset=ScheduledMeeting.objects.all(), source="editing", required=False, allow_null=True
    )


class FeasibilityResultSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
    message = serializers.CharField()
