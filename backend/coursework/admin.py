from django.contrib import admin
from .models import Assignment, AssignmentSubmission, Quiz, QuizAttempt


class SubmissionInline(admin.TabularInline):
    model = AssignmentSubmission
    extra = 0
    fields = ('student', 'status', 'score', 'submitted_at', 'graded_at')
    readonly_fields = ('status', 'submitted_at', 'graded_at')


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ['title', 'section', 'due_date', 'max_points', 'status']
    list_filter = ['status', 'section__template']
    search_fields = ['title', 'section__template__name']
    ordering = ['-due_date']
    inlines = [SubmissionInline]


@admin.register(AssignmentSubmission)
class AssignmentSubmissionAdmin(admin.ModelAdmin):
    list_display = ['assignment', 'student', 'status', 'score', 'submitted_at']
    list_filter = ['status']
    search_fields = ['assignment__title', 'student__email']
    readonly_fields = ('submitted_at', 'graded_at')


@admin.register(Quiz)
class QuizAdmin(admin.ModelAdmin):
    list_display = ['title', 'section', 'start_date', 'end_date', 'max_attempts', 'status']
    list_filter = ['status']
    search_fields = ['title']


@admin.register(QuizAttempt)
class QuizAttemptAdmin(admin.ModelAdmin):
    list_display = ['quiz', 'student', 'started_at', 'submitted_at', 'score']
    search_fields = ['quiz__title', 'student__email']
