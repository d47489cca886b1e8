# backend/users/models.py
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
from django.utils import timezone
import logging

logger = logging.getLogger(__name__)


class Role(models.TextChoices):
    ADMIN = "ADMIN", "Admin"
    TUTOR = "TUTOR", "Tutor"
    STUDENT = "STUDENT", "Student"


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    def create_user(self, email, password=None, role=Role.STUDENT, **extra_fields):
        if not email:
            raise ValueError("The email field must be set")

        extra_fields.setdefault('is_active', True)
        email = self.normalize_email(email)

        user = self.model(email=email, role=role, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        logger.info("Created user %s with role %s", email, role)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_active', True)
        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        return self.create_user(email, password, role=Role.ADMIN, **extra_fields)

    def tutors(self):
        return self.filter(role=Role.TUTOR, is_active=True)

    def students(self):
        return self.filter(role=Role.STUDENT, is_active=True)


class User(AbstractBaseUser):
    """
    Platform account. A single role decides which dashboard the user sees:
    admins manage programs/sections/schedules, tutors run sections,
    students enroll in sections.
    """
    email       = models.EmailField(unique=True)
    first_name  = models.CharField(max_length=150, blank=True)
    last_name   = models.CharField(max_length=150, blank=True)
    role        = models.CharField(max_length=20, choices=Role.choices, default=Role.STUDENT)
    phone       = models.CharField(max_length=30, blank=True)
    is_active   = models.BooleanField(default=True)
    is_staff    = models.BooleanField(default=False)
    created_at  = models.DateTimeField(default=timezone.now)
    updated_at  = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD  = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        ordering = ['email']
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return f"{self.get_full_name()} ({self.get_role_display()})"

    def get_full_name(self):
        full_name = f'{self.first_name} {self.last_name}'.strip()
        return full_name or self.email

    def get_short_name(self):
        return self.first_name or self.email

    # Required methods for Django admin compatibility without PermissionsMixin
    def has_perm(self, perm, obj=None):
        return self.is_staff

    def has_module_perms(self, app_label):
        return self.is_staff

    def get_active_role_name(self):
        """Role name used by the DRF role gates."""
        if self.is_staff:
            return Role.ADMIN
        return self.role

    @property
    def is_admin(self):
        return self.is_staff or self.role == Role.ADMIN

    @property
    def is_tutor(self):
        return self.role == Role.TUTOR

    @property
    def is_student(self):
        return self.role == Role.STUDENT
