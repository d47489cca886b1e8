from django.conf import settings
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ClassTemplate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(help_text="Program name (e.g., Matematika SMA Kelas XII)", max_length=255)),
                ("subject", models.CharField(help_text="Subject (e.g., Mathematics)", max_length=100)),
                ("grade_level", models.CharField(blank=True, max_length=50)),
                ("description", models.TextField(blank=True, default="")),
                ("price", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("max_students_per_section", models.PositiveIntegerField(
                    default=10,
                    help_text="Capacity inherited by every section of this program",
                    validators=[django.core.validators.MinValueValidator(1)],
                )),
                ("meetings_per_period", models.PositiveIntegerField(default=8, help_text="Meetings included in one enrollment period")),
                ("duration_days", models.PositiveIntegerField(default=30, help_text="Length of one enrollment period in days")),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Program",
                "verbose_name_plural": "Programs",
                "db_table": "class_templates",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="ClassSection",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("section_label", models.CharField(help_text="A, B, ..., Z, AA, ...", max_length=10)),
                ("status", models.CharField(
                    choices=[("ACTIVE", "Active"), ("FULL", "Full"), ("ARCHIVED", "Archived")],
                    default="ACTIVE",
                    max_length=20,
                )),
                ("current_enrollments", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("template", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="sections",
                    to="programs.classtemplate",
                )),
                ("tutor", models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="tutored_sections",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "verbose_name": "Section",
                "verbose_name_plural": "Sections",
                "db_table": "class_sections",
                "ordering": ["template__name", "section_label"],
            },
        ),
        migrations.AddConstraint(
            model_name="classsection",
            constraint=models.UniqueConstraint(fields=("template", "section_label"), name="unique_template_section_label"),
        ),
        migrations.CreateModel(
            name="Enrollment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("status", models.CharField(
                    choices=[("PENDING", "Pending"), ("ACTIVE", "Active"), ("EXPIRED", "Expired"), ("CANCELLED", "Cancelled")],
                    default="PENDING",
                    max_length=20,
                )),
                ("start_date", models.DateTimeField(blank=True, null=True)),
                ("expiry_date", models.DateTimeField(blank=True, null=True)),
                ("meetings_remaining", models.PositiveIntegerField(default=0)),
                ("total_meetings", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("section", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="enrollments",
                    to="programs.classsection",
                )),
                ("student", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="enrollments",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "db_table": "enrollments",
                "ordering": ["-created_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="enrollment",
            constraint=models.UniqueConstraint(fields=("student", "section"), name="unique_student_section"),
        ),
    ]
