"""
Test the availability CSV import.
"""
import os
import tempfile
from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from scheduling.imports import import_availability_csv
from scheduling.models import TutorAvailability
from users.factory import StudentUserFactory, TutorUserFactory


class ImportAvailabilityTestCase(TestCase):

    def setUp(self):
        self.tutor = TutorUserFactory(email="budi@example.com")

    def test_import_rows(self):
        csv = StringIO(
            "tutor_email,day_of_week,start_time,end_time\n"
            "budi@example.com,Monday,14:00,21:00\n"
            "BUDI@example.com,2,9:00,12:00:00\n"
        )
        stats = import_availability_csv(csv)

        self.assertEqual(stats.ok, 2)
        self.assertEqual(stats.err, 0)
        slot = TutorAvailability.objects.get(tutor=self.tutor, day_of_week=2)
        self.assertEqual((slot.start_time, slot.end_time), ("09:00", "12:00"))

    def test_header_synonyms_and_indonesian_days(self):
        csv = StringIO("Email,Hari,Start,End\nbudi@example.com,Senin,14:00,21:00\n")
        stats = import_availability_csv(csv)
        self.assertEqual(stats.ok, 1)
        self.assertEqual(TutorAvailability.objects.get().day_of_week, 1)

    def test_padded_headers(self):
        csv = StringIO(" tutor_email ,day_of_week , Start,end_time\nbudi@example.com,Monday,14:00,21:00\n")
        stats = import_availability_csv(csv)
        self.assertEqual(stats.ok, 1)
        self.assertEqual(TutorAvailability.objects.get().start_time, "14:00")

    def test_bad_rows_are_reported(self):
        StudentUserFactory(email="siswa@example.com")
        csv = StringIO(
            "tutor_email,day_of_week,start_time,end_time\n"
            "siswa@example.com,Monday,14:00,21:00\n"
            "budi@example.com,Someday,14:00,21:00\n"
            "budi@example.com,Monday,14:00,21:00\n"
            "budi@example.com,Monday,20:00,22:00\n"
        )
        stats = import_availability_csv(csv)

        self.assertEqual(stats.ok, 1)
        self.assertEqual(stats.err, 3)
        self.assertTrue(stats.errors[0].startswith("line 2: unknown tutor"))
        self.assertTrue(stats.errors[1].startswith("line 3: invalid day or time"))
        self.assertTrue(stats.errors[2].startswith("line 5:"))

    def test_dry_run_writes_nothing(self):
        csv = StringIO("tutor_email,day_of_week,start_time,end_time\nbudi@example.com,Monday,14:00,21:00\n")
        stats = import_availability_csv(csv, dry_run=True)
        self.assertEqual(stats.ok, 1)
        self.assertFalse(TutorAvailability.objects.exists())

    def test_missing_columns(self):
        with self.assertRaises(ValueError):
            import_availability_csv(StringIO("tutor_email,day_of_week\nbudi@example.com,1\n"))

    def test_management_command(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "availability.csv")
            with open(path, "w", encoding="utf-8") as f:
                f.write("tutor_email,day_of_week,start_time,end_time\nbudi@example.com,Monday,14:00,21:00\n")
            call_command("import_availability", file=path)
        self.assertEqual(TutorAvailability.objects.count(), 1)
