from django.contrib import admin
from django.utils.html import format_html
from django.utils import timezone
from .models import TutorAvailability, ScheduledMeeting, MeetingStatus
from .status import effective_meeting_status


@admin.register(TutorAvailability)
class TutorAvailabilityAdmin(admin.ModelAdmin):
    list_display = ['tutor', 'day_of_week', 'start_time', 'end_time']
    list_filter = ['day_of_week']
    search_fields = ['tutor__email', 'tutor__first_name', 'tutor__last_name']
    ordering = ['tutor', 'day_of_week', 'start_time']


@admin.register(ScheduledMeeting)
class ScheduledMeetingAdmin(admin.ModelAdmin):
    list_display = ['title', 'section', 'scheduled_at', 'duration', 'status', 'effective_status_display']
    list_filter = ['status', 'section__template']
    search_fields = ['title', 'section__template__name']
    ordering = ['-scheduled_at']
    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        ('Meeting', {
            'fields': ('section', 'title', 'description')
        }),
        ('Scheduling', {
            'fields': ('scheduled_at', 'duration', 'status')
        }),
        ('Links', {
            'fields': ('meeting_url', 'recording_url')
        }),
        ('Timestamps', {
            'fields': ('created_by', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def effective_status_display(self, obj):
        effective = effective_meeting_status(obj, timezone.now())
        color = {
            MeetingStatus.LIVE: 'green',
            MeetingStatus.CANCELLED: 'red',
            MeetingStatus.COMPLETED: 'gray',
        }.get(effective, 'blue')
        return format_html('<span style="color: {};">{}</span>', color, effective)
    effective_status_display.short_description = 'Now'
