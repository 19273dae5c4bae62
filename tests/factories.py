"""
Test factories for creating test data using factory_boy.
"""
import factory
from factory.django import DjangoModelFactory
from factory import Faker, SubFactory, LazyAttribute
from datetime import date
from decimal import Decimal
from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.billing.models import PaymentRecord
from apps.grades.models import Grade
from apps.students.models import Student

User = get_user_model()


class UserFactory(DjangoModelFactory):
    """Factory for creating test users."""

    class Meta:
        model = User
        django_get_or_create = ('username',)

    username = factory.Sequence(lambda n: f"student{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    first_name = Faker('first_name')
    last_name = Faker('last_name')
    is_active = True


class AdminUserFactory(UserFactory):
    """Factory for staff users allowed to use the billing admin API."""
    username = factory.Sequence(lambda n: f"admin{n}")
    is_staff = True


class GradeFactory(DjangoModelFactory):
    """Factory for creating grades; reuses an existing grade with the same level."""

    class Meta:
        model = Grade
        django_get_or_create = ('level',)

    level = factory.Sequence(lambda n: 20 + n)
    name = LazyAttribute(lambda obj: f"Grade {obj.level}")
    monthly_fee = Decimal('4500.00')


class StudentFactory(DjangoModelFactory):
    """Factory for active, approved students."""

    class Meta:
        model = Student

    user = SubFactory(UserFactory)
    grade = SubFactory(GradeFactory)
    is_active = True
    locked_due_to_payment = False
    approval_status = Student.APPROVAL_APPROVED
    approved_at = factory.LazyFunction(timezone.now)


class PaymentRecordFactory(DjangoModelFactory):
    """Factory for payment records; amount defaults to the student's grade fee."""

    class Meta:
        model = PaymentRecord

    student = SubFactory(StudentFactory)
    year = 2025
    month = 3
    amount = LazyAttribute(lambda obj: obj.student.grade.monthly_fee)
    status = PaymentRecord.STATUS_UNPAID
    due_date = LazyAttribute(lambda obj: date(obj.year, obj.month, 15))
    paid_date = None
