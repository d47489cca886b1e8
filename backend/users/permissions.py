# backend/users/permissions.py
from rest_framework.permissions import BasePermission, SAFE_METHODS

from .models import Role


def role_name(user):
    return getattr(user, "get_active_role_name", lambda: None)() if user and user.is_authenticated else None


class IsAuthenticatedAndHasRole(BasePermission):
    required_roles = ()  # override per subclass

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        # Staff bypass = treat as admin
        if request.user.is_staff:
            return True
        rn = role_name(request.user)
        return rn in self.required_roles if self.required_roles else True


# ---- Role gates ---------------------------------------------------------------

class IsAdminRole(IsAuthenticatedAndHasRole):
    required_roles = (Role.ADMIN,)

class IsTutorRole(IsAuthenticatedAndHasRole):
    required_roles = (Role.TUTOR, Role.ADMIN)

class IsStudentRole(IsAuthenticatedAndHasRole):
    required_roles = (Role.STUDENT,)

class IsAdminOrTutor(IsAuthenticatedAndHasRole):
    required_roles = (Role.ADMIN, Role.TUTOR)


# ---- Composable behavior guards ----------------------------------------------

class AdminWriteOrReadOnly(BasePermission):
    """
    Any authenticated user may read; only admins may write.
    """
    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            return False
        if request.method in SAFE_METHODS:
            return True
        return request.user.is_staff or role_name(request.user) == Role.ADMIN
