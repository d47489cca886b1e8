from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ['email', 'first_name', 'last_name', 'role', 'is_active', 'is_staff', 'created_at']
    list_filter = ['role', 'is_active', 'is_staff', 'created_at']
    search_fields = ['email', 'first_name', 'last_name']
    ordering = ['email']
    readonly_fields = ('created_at', 'updated_at', 'last_login')

    fieldsets = (
        ('Account', {
            'fields': ('email', 'first_name', 'last_name', 'phone')
        }),
        ('Access', {
            'fields': ('role', 'is_active', 'is_staff')
        }),
        ('Timestamps', {
            'fields': ('last_login', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
