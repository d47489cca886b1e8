"""
Factory classes for programs, sections and enrollments.
"""
import factory
from factory.django import DjangoModelFactory

from users.factory import StudentUserFactory, TutorUserFactory
from programs.models import ClassSection, ClassTemplate, Enrollment, EnrollmentStatus, SectionStatus


class ClassTemplateFactory(DjangoModelFactory):
    class Meta:
        model = ClassTemplate

    name = factory.Sequence(lambda n: f"Program {n}")
    subject = factory.Faker('random_element', elements=['Mathematics', 'Physics', 'Chemistry', 'English'])
    grade_level = "XII"
    price = 500000
    max_students_per_section = 10
    meetings_per_period = 8
    duration_days = 30


class ClassSectionFactory(DjangoModelFactory):
    class Meta:
        model = ClassSection

    template = factory.SubFactory(ClassTemplateFactory)
    section_label = factory.Sequence(lambda n: chr(ord('A') + n % 26))
    tutor = factory.SubFactory(TutorUserFactory)
    status = SectionStatus.ACTIVE
    current_enrollments = 0


class EnrollmentFactory(DjangoModelFactory):
    class Meta:
        model = Enrollment

    student = factory.SubFactory(StudentUserFactory)
    section = factory.SubFactory(ClassSectionFactory)
    status = EnrollmentStatus.ACTIVE
    total_meetings = 8
    meetings_remaining = 8
