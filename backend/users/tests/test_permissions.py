"""
Test the DRF role gates.
"""
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase
from rest_framework.test import APIRequestFactory

from users.factory import AdminUserFactory, StudentUserFactory, TutorUserFactory
from users.models import Role
from users.permissions import (
    AdminWriteOrReadOnly,
    IsAdminOrTutor,
    IsAdminRole,
    IsStudentRole,
    IsTutorRole,
    role_name,
)


class RoleGateTestCase(TestCase):

    def setUp(self):
        self.factory = APIRequestFactory()
        self.admin = AdminUserFactory()
        self.tutor = TutorUserFactory()
        self.student = StudentUserFactory()

    def _allowed(self, permission, user, method='get'):
        request = getattr(self.factory, method)('/')
        request.user = user
        return permission().has_permission(request, None)

    def test_role_name(self):
        self.assertEqual(role_name(self.tutor), Role.TUTOR)
        self.assertEqual(role_name(self.admin), Role.ADMIN)
        self.assertIsNone(role_name(AnonymousUser()))

    def test_anonymous_is_rejected(self):
        self.assertFalse(self._allowed(IsAdminOrTutor, AnonymousUser()))
        self.assertFalse(self._allowed(AdminWriteOrReadOnly, AnonymousUser()))

    def test_admin_gate(self):
        self.assertTrue(self._allowed(IsAdminRole, self.admin))
        self.assertFalse(self._allowed(IsAdminRole, self.tutor))
        self.assertFalse(self._allowed(IsAdminRole, self.student))

    def test_tutor_gate_lets_admins_through(self):
        self.assertTrue(self._allowed(IsTutorRole, self.tutor))
        self.assertTrue(self._allowed(IsTutorRole, self.admin))
        self.assertFalse(self._allowed(IsTutorRole, self.student))

    def test_student_gate(self):
        self.assertTrue(self._allowed(IsStudentRole, self.student))
        self.assertFalse(self._allowed(IsStudentRole, self.tutor))

    def test_admin_write_or_read_only(self):
        self.assertTrue(self._allowed(AdminWriteOrReadOnly, self.student))
        self.assertFalse(self._allowed(AdminWriteOrReadOnly, self.student, method='post'))
        self.assertTrue(self._allowed(AdminWriteOrReadOnly, self.admin, method='post'))
