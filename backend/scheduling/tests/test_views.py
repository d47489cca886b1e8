"""
Test views for the scheduling app.
"""
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from programs.factory import ClassSectionFactory
from scheduling.factory import ScheduledMeetingFactory, TutorAvailabilityFactory
from scheduling.models import MeetingStatus, ScheduledMeeting
from scheduling.tests.test_services import monday_at
from users.factory import AdminUserFactory, StudentUserFactory, TutorUserFactory


class MeetingCheckViewTestCase(APITestCase):

    def setUp(self):
        self.url = reverse('scheduling:meeting_check')
        self.tutor = TutorUserFactory(first_name="Budi", last_name="Santoso")
        TutorAvailabilityFactory(tutor=self.tutor)
        self.section = ClassSectionFactory(tutor=self.tutor)
        self.client.force_authenticate(user=AdminUserFactory())

    def test_valid_slot(self):
        response = self.client.post(self.url, {
            'section_id': self.section.id, 'scheduled_at': monday_at(14).isoformat(), 'duration': 90,
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['valid'])

    def test_invalid_slot_still_answers_200(self):
        with self.assertLogs("scheduling.views", level="INFO") as logs:
            response = self.client.post(self.url, {
                'section_id': self.section.id, 'scheduled_at': monday_at(21).isoformat(),
            }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['valid'])
        self.assertEqual(response.data['message'], "Budi Santoso not available on Monday at 21:00")
        self.assertIn("Meeting check failed", logs.output[0])

    def test_editing_excludes_the_meeting(self):
        meeting = ScheduledMeetingFactory(section=self.section, scheduled_at=monday_at(15))
        response = self.client.post(self.url, {
            'section_id': self.section.id, 'scheduled_at': monday_at(15, 30).isoformat(), 'meeting_id': meeting.id,
        }, format='json')
        self.assertTrue(response.data['valid'])

    def test_tutor_forbidden(self):
        self.client.force_authenticate(user=self.tutor)
        response = self.client.post(self.url, {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class MeetingListCreateViewTestCase(APITestCase):

    def setUp(self):
        self.url = reverse('scheduling:meeting_list')
        self.tutor = TutorUserFactory()
        TutorAvailabilityFactory(tutor=self.tutor)
        self.section = ClassSectionFactory(tutor=self.tutor)
        self.client.force_authenticate(user=AdminUserFactory())

    def test_create(self):
        response = self.client.post(self.url, {
            'section_id': self.section.id, 'title': 'Aljabar', 'scheduled_at': monday_at(14).isoformat(),
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['duration'], 90)
        self.assertEqual(response.data['effective_status'], 'UPCOMING')

    def test_create_rejected_with_400(self):
        ScheduledMeetingFactory(section=self.section, title='Aljabar', scheduled_at=monday_at(15))
        response = self.client.post(self.url, {
            'section_id': self.section.id, 'title': 'Geometri', 'scheduled_at': monday_at(16).isoformat(),
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("conflicts with 'Aljabar'", str(response.data['detail']))
        self.assertEqual(ScheduledMeeting.objects.count(), 1)

    def test_list_with_stats_and_filter(self):
        ScheduledMeetingFactory(section=self.section, scheduled_at=monday_at(15))
        ScheduledMeetingFactory(section=self.section, scheduled_at=monday_at(18), status=MeetingStatus.CANCELLED)

        response = self.client.get(self.url, {'status': 'cancelled'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['meetings']), 1)
        self.assertEqual(response.data['stats']['scheduled'], 1)
        self.assertEqual(response.data['stats']['cancelled'], 1)


class MeetingDetailViewTestCase(APITestCase):

    def setUp(self):
        tutor = TutorUserFactory()
        TutorAvailabilityFactory(tutor=tutor)
        self.meeting = ScheduledMeetingFactory(section=ClassSectionFactory(tutor=tutor), scheduled_at=monday_at(15))
        self.url = reverse('scheduling:meeting_detail', args=[self.meeting.id])
        self.client.force_authenticate(user=AdminUserFactory())

    def test_patch_move_rejected(self):
        response = self.client.patch(self.url, {'scheduled_at': monday_at(23).isoformat()}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_delete_cancels(self):
        response = self.client.delete(self.url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], MeetingStatus.CANCELLED)
        self.assertTrue(ScheduledMeeting.objects.filter(pk=self.meeting.pk).exists())


class AvailabilityViewTestCase(APITestCase):

    def setUp(self):
        self.url = reverse('scheduling:availability_list')
        self.tutor = TutorUserFactory()

    def test_admin_adds_window(self):
        self.client.force_authenticate(user=AdminUserFactory())
        response = self.client.post(self.url, {
            'tutor_id': self.tutor.id, 'day_of_week': 1, 'start_time': '14:00', 'end_time': '21:00',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['day_name'], 'Monday')

    def test_malformed_time_rejected(self):
        self.client.force_authenticate(user=AdminUserFactory())
        response = self.client.post(self.url, {
            'tutor_id': self.tutor.id, 'day_of_week': 1, 'start_time': '2pm', 'end_time': '21:00',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('start_time', response.data)

    def test_tutor_sees_own_windows_only(self):
        TutorAvailabilityFactory(tutor=self.tutor)
        TutorAvailabilityFactory()
        self.client.force_authenticate(user=self.tutor)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

    def test_tutor_cannot_add(self):
        self.client.force_authenticate(user=self.tutor)
        response = self.client.post(self.url, {
            'tutor_id': self.tutor.id, 'day_of_week': 1, 'start_time': '14:00', 'end_time': '21:00',
        }, format='json')
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_student_forbidden(self):
        self.client.force_authenticate(user=StudentUserFactory())
        self.assertEqual(self.client.get(self.url).status_code, status.HTTP_403_FORBIDDEN)


class TutorMeetingListViewTestCase(APITestCase):

    def test_lists_own_meetings(self):
        tutor = TutorUserFactory()
        ScheduledMeetingFactory(section=ClassSectionFactory(tutor=tutor))
        ScheduledMeetingFactory()
        self.client.force_authenticate(user=tutor)

        response = self.client.get(reverse('scheduling:my_meetings'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
