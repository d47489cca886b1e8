from django.contrib import admin
from django.utils.html import format_html
from .models import ClassTemplate, ClassSection, Enrollment


class ClassSectionInline(admin.TabularInline):
    model = ClassSection
    extra = 0
    fields = ['section_label', 'tutor', 'status', 'current_enrollments']
    readonly_fields = ['current_enrollments']


@admin.register(ClassTemplate)
class ClassTemplateAdmin(admin.ModelAdmin):
    list_display = ['name', 'subject', 'grade_level', 'price', 'max_students_per_section', 'is_active']
    list_filter = ['subject', 'is_active']
    search_fields = ['name', 'subject']
    inlines = [ClassSectionInline]


@admin.register(ClassSection)
class ClassSectionAdmin(admin.ModelAdmin):
    list_display = ['template', 'section_label', 'tutor', 'status', 'enrollment_display']
    list_filter = ['status', 'template']
    search_fields = ['template__name', 'section_label', 'tutor__email']
    ordering = ['template__name', 'section_label']

    def enrollment_display(self, obj):
        percentage = obj.enrollment_percentage
        color = 'green' if percentage < 90 else 'orange' if percentage < 100 else 'red'
        return format_html(
            '<span style="color: {};">{}/{} ({}%)</span>',
            color, obj.current_enrollments, obj.max_students, round(percentage)
        )
    enrollment_display.short_description = 'Enrollment'


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = ['student', 'section', 'status', 'start_date', 'expiry_date', 'meetings_remaining']
    list_filter = ['status']
    search_fields = ['student__email', 'section__template__name']
