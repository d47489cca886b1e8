import re

from django.contrib.auth import get_user_model
from rest_framework import serializers

from users.models import Role
from users.serializers import UserSummarySerializer
from .models import ClassSection, ClassTemplate, Enrollment

User = get_user_model()

SECTION_LABEL_RX = re.compile(r"^[A-Z]+$")


class ClassSectionSerializer(serializers.ModelSerializer):
    """Serializer for ClassSection model."""
    tutor = UserSummarySerializer(read_only=True)
    max_students = serializers.IntegerField(read_only=True)
    enrollment_percentage = serializers.FloatField(read_only=True)

    class Meta:
        model = ClassSection
        fields = [
            'id', 'template', 'section_label', 'tutor', 'status',
            'current_enrollments', 'max_students', 'enrollment_percentage',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'template', 'current_enrollments', 'created_at', 'updated_at']

    def validate_section_label(self, value):
        value = (value or "").upper().strip()
        if not SECTION_LABEL_RX.match(value):
            raise serializers.ValidationError("Section label must be letters only (A, B, ..., AA).")
        if self.instance is not None:
            clash = (ClassSection.objects
                     .filter(template=self.instance.template, section_label=value)
                     .exclude(pk=self.instance.pk))
            if clash.exists():
                raise serializers.ValidationError(f"Section {value} already exists for this program.")
        return value


class ClassTemplateSerializer(serializers.ModelSerializer):
    """Program with its sections."""
    sections = ClassSectionSerializer(many=True, read_only=True)

    class Meta:
        model = ClassTemplate
        fields = [
            'id', 'name', 'subject', 'grade_level', 'description', 'price',
            'max_students_per_section', 'meetings_per_period', 'duration_days',
            'is_active', 'sections', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'sections', 'created_at', 'updated_at']


class SectionCreateSerializer(serializers.Serializer):
    template_id = serializers.PrimaryKeyRelatedField(queryset=ClassTemplate.objects.all(), source="template")
    tutor_id = serializers.PrimaryKeyRelatedField(queryset=User.objects.filter(role=Role.TUTOR), source="tutor")
    section_label = serializers.CharField(max_length=10, required=False, allow_blank=True)

    def validate_section_label(self, value):
        value = (value or "").upper().strip()
        if value and not SECTION_LABEL_RX.match(value):
            raise serializers.ValidationError("Section label must be letters only (A, B, ..., AA).")
        return value


class SectionSuggestionSerializer(serializers.Serializer):
    program_id = serializers.IntegerField(allow_null=True)
    program_name = serializers.CharField()
    section_label = serializers.CharField()
    reason = serializers.CharField()


class EnrollmentSerializer(serializers.ModelSerializer):
    section = ClassSectionSerializer(read_only=True)
    program_name = serializers.CharField(source='section.template.name', read_only=True)
    days_remaining = serializers.SerializerMethodField()

    class Meta:
        model = Enrollment
        fields = [
            'id', 'section', 'program_name', 'status', 'start_date', 'expiry_date',
            'meetings_remaining', 'total_meetings', 'days_remaining',
        ]

    def get_days_remaining(self, obj):
        return obj.days_remaining(self.context.get("now"))
