from django.conf import settings
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("programs", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="TutorAvailability",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("day_of_week", models.PositiveSmallIntegerField(
                    choices=[
                        (0, "Sunday"), (1, "Monday"), (2, "Tuesday"), (3, "Wednesday"),
                        (4, "Thursday"), (5, "Friday"), (6, "Saturday"),
                    ],
                    help_text="0 = Sunday ... 6 = Saturday",
                    validators=[
                        django.core.validators.MinValueValidator(0),
                        django.core.validators.MaxValueValidator(6),
                    ],
                )),
                ("start_time", models.CharField(
                    help_text="HH:MM, inclusive",
                    max_length=5,
                    validators=[django.core.validators.RegexValidator(
                        "^([01]\\d|2[0-3]):[0-5]\\d$", "Time must be in 24-hour HH:MM format."
                    )],
                )),
                ("end_time", models.CharField(
                    help_text="HH:MM, exclusive",
                    max_length=5,
                    validators=[django.core.validators.RegexValidator(
                        "^([01]\\d|2[0-3]):[0-5]\\d$", "Time must be in 24-hour HH:MM format."
                    )],
                )),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("tutor", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="availability",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "verbose_name": "Tutor Availability",
                "verbose_name_plural": "Tutor Availability",
                "db_table": "tutor_availability",
                "ordering": ["tutor", "day_of_week", "start_time"],
                "indexes": [models.Index(fields=["tutor", "day_of_week"], name="tutor_avail_tutor_i_3c1f0e_idx")],
            },
        ),
        migrations.CreateModel(
            name="ScheduledMeeting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("scheduled_at", models.DateTimeField()),
                ("duration", models.PositiveIntegerField(
                    default=90,
                    help_text="Duration in minutes",
                    validators=[django.core.validators.MinValueValidator(1)],
                )),
                ("status", models.CharField(
                    choices=[
                        ("SCHEDULED", "Scheduled"), ("LIVE", "Live"),
                        ("COMPLETED", "Completed"), ("CANCELLED", "Cancelled"),
                    ],
                    default="SCHEDULED",
                    max_length=20,
                )),
                ("meeting_url", models.URLField(blank=True, default="")),
                ("recording_url", models.URLField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="created_meetings",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("section", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="meetings",
                    to="programs.classsection",
                )),
            ],
            options={
                "verbose_name": "Scheduled Meeting",
                "verbose_name_plural": "Scheduled Meetings",
                "db_table": "scheduled_meetings",
                "ordering": ["scheduled_at"],
                "indexes": [
                    models.Index(fields=["section", "scheduled_at"], name="scheduled_m_section_5a2b7d_idx"),
                    models.Index(fields=["status"], name="scheduled_m_status_8e4c1a_idx"),
                ],
            },
        ),
    ]
