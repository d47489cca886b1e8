from django.apps import AppConfig
from django.contrib import admin


class UsersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "users"
    verbose_name = "Users"

    def ready(self) -> None:
        """Configure admin site when the app is ready"""
        from django.conf import settings

        admin.site.site_header = getattr(
            settings, "ADMIN_SITE_HEADER", "Tutorhub Administration"
        )
        admin.site.site_title = getattr(
            settings, "ADMIN_SITE_TITLE", "Tutorhub Admin"
        )
        admin.site.index_title = getattr(
            settings, "ADMIN_INDEX_TITLE", "Welcome to Tutorhub Administration"
        )
