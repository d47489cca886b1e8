"""
Factory classes for generating test data using Factory Boy and Faker.
"""
import factory
from factory.django import DjangoModelFactory
from django.contrib.auth import get_user_model

from users.models import Role

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Factory for creating User instances."""

    class Meta:
        model = User
        django_get_or_create = ('email',)

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    role = Role.STUDENT
    is_active = True
    is_staff = False

    @factory.post_generation
    def password(self, create, extracted, **kwargs):
        """Set password for the user."""
        if not create:
            return
        password = extracted or 'defaultpass123'
        self.set_password(password)
        self.save()


class AdminUserFactory(UserFactory):
    """Factory for creating admin users."""

    email = factory.Sequence(lambda n: f"admin{n}@example.com")
    role = Role.ADMIN
    is_staff = True


class TutorUserFactory(UserFactory):
    """Factory for creating tutor users."""

    email = factory.Sequence(lambda n: f"tutor{n}@example.com")
    role = Role.TUTOR


class StudentUserFactory(UserFactory):
    """Factory for creating student users."""

    email = factory.Sequence(lambda n: f"student{n}@example.com")
    role = Role.STUDENT
