# backend/coursework/serializers.py
from rest_framework import serializers

from users.serializers import UserSummarySerializer
from .models import Assignment, AssignmentSubmission, Quiz


class AssignmentSerializer(serializers.ModelSerializer):
    program_name = serializers.CharField(source="section.template.name", read_only=True)
    section_label = serializers.CharField(source="section.section_label", read_only=True)

    class Meta:
        model = Assignment
        fields = [
            'id', 'section', 'program_name', 'section_label', 'title', 'instructions',
            'due_date', 'max_points', 'status', 'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class SubmissionSerializer(serializers.ModelSerializer):
    student = UserSummarySerializer(read_only=True)
    assignment_title = serializers.CharField(source="assignment.title", read_only=True)

    class Meta:
        model = AssignmentSubmission
        fields = [
            'id', 'assignment', 'assignment_title', 'student', 'file_url', 'status',
            'score', 'feedback', 'submitted_at', 'graded_at',
        ]
        read_only_fields = fields


class SubmitAssignmentSerializer(serializers.Serializer):
    file_url = serializers.CharField(max_length=500)


class GradeSubmissionSerializer(serializers.Serializer):
    score = serializers.IntegerField(min_value=0)
    feedback = serializers.CharField(required=False, allow_blank=True, default="")


class QuizSerializer(serializers.ModelSerializer):
    class Meta:
        model = Quiz
        fields = [
            'id', 'section', 'title', 'description', 'start_date', 'end_date',
            'time_limit', 'passing_grade', 'max_attempts', 'status',
        ]


class StudentSubmissionSummarySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    status = serializers.CharField()
    score = serializers.IntegerField(allow_null=True)
    feedback = serializers.CharField(allow_blank=True)
    submitted_at = serializers.DateTimeField()
    graded_at = serializers.DateTimeField(allow_null=True)


class StudentAssignmentRowSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    program_name = serializers.CharField()
    section_label = serializers.CharField()
    due_date = serializers.DateTimeField()
    max_points = serializers.IntegerField()
    effective_status = serializers.CharField()
    can_submit = serializers.BooleanField()
    can_view = serializers.BooleanField()
    can_resubmit = serializers.BooleanField()
    submission = StudentSubmissionSummarySerializer(allow_null=True)


class StudentQuizRowSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    program_name = serializers.CharField()
    start_date = serializers.DateTimeField(allow_null=True)
    end_date = serializers.DateTimeField(allow_null=True)
    time_limit = serializers.IntegerField(allow_null=True)
    passing_grade = serializers.IntegerField()
    attempt_count = serializers.IntegerField()
    max_attempts = serializers.IntegerField()
    best_score = serializers.FloatField(allow_null=True)
    effective_status = serializers.CharField()
    can_retry = serializers.BooleanField()
