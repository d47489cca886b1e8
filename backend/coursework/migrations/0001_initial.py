from django.conf import settings
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("programs", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Assignment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("instructions", models.TextField(blank=True, default="")),
                ("due_date", models.DateTimeField()),
                ("max_points", models.PositiveIntegerField(
                    default=100, validators=[django.core.validators.MinValueValidator(1)]
                )),
                ("status", models.CharField(
                    choices=[("DRAFT", "Draft"), ("PUBLISHED", "Published")], default="DRAFT", max_length=20
                )),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("section", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="assignments",
                    to="programs.classsection",
                )),
            ],
            options={
                "db_table": "assignments",
                "ordering": ["due_date", "-created_at"],
            },
        ),
        migrations.CreateModel(
            name="AssignmentSubmission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("file_url", models.CharField(blank=True, default="", max_length=500)),
                ("status", models.CharField(
                    choices=[("SUBMITTED", "Submitted"), ("LATE", "Late"), ("GRADED", "Graded")],
                    default="SUBMITTED",
                    max_length=20,
                )),
                ("score", models.PositiveIntegerField(blank=True, null=True)),
                ("feedback", models.TextField(blank=True, default="")),
                ("submitted_at", models.DateTimeField()),
                ("graded_at", models.DateTimeField(blank=True, null=True)),
                ("assignment", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="submissions",
                    to="coursework.assignment",
                )),
                ("student", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="assignment_submissions",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "db_table": "assignment_submissions",
                "ordering": ["-submitted_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="assignmentsubmission",
            constraint=models.UniqueConstraint(fields=("assignment", "student"), name="unique_assignment_student"),
        ),
        migrations.CreateModel(
            name="Quiz",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("start_date", models.DateTimeField(blank=True, null=True)),
                ("end_date", models.DateTimeField(blank=True, null=True)),
                ("time_limit", models.PositiveIntegerField(blank=True, help_text="Minutes", null=True)),
                ("passing_grade", models.PositiveIntegerField(
                    default=70,
                    validators=[
                        django.core.validators.MinValueValidator(0),
                        django.core.validators.MaxValueValidator(100),
                    ],
                )),
                ("max_attempts", models.PositiveIntegerField(
                    default=1, validators=[django.core.validators.MinValueValidator(1)]
                )),
                ("status", models.CharField(
                    choices=[("DRAFT", "Draft"), ("PUBLISHED", "Published")], default="DRAFT", max_length=20
                )),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("section", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="quizzes",
                    to="programs.classsection",
                )),
            ],
            options={
                "db_table": "quizzes",
                "ordering": ["end_date", "-created_at"],
                "verbose_name_plural": "Quizzes",
            },
        ),
        migrations.CreateModel(
            name="QuizAttempt",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("started_at", models.DateTimeField()),
                ("submitted_at", models.DateTimeField(blank=True, null=True)),
                ("score", models.FloatField(blank=True, null=True)),
                ("quiz", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="attempts",
                    to="coursework.quiz",
                )),
                ("student", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="quiz_attempts",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "db_table": "quiz_attempts",
                "ordering": ["-started_at"],
            },
        ),
    ]
