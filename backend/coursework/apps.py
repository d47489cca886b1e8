from django.apps import AppConfig


class CourseworkConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "coursework"
    verbose_name = "Assignments & Quizzes"
