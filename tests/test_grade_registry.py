"""
Tests for grade lookups, fee changes and the grade seed command.
"""
import pytest
from decimal import Decimal
from io import StringIO
from django.core.management import call_command

from apps.common.exceptions import NotFound, ValidationError
from apps.grades.models import Grade
from apps.grades.services import GradeRegistry, coerce_fee


pytestmark = pytest.mark.django_db


class TestGradeRegistry:

    def test_list_grades_ordered_by_level(self, grades):
        levels = list(GradeRegistry.list_grades().values_list('level', flat=True))
        assert levels == [6, 7, 8, 9, 10, 11]

    def test_get_fee(self, grade_7):
        assert GradeRegistry.get_fee(grade_7.id) == Decimal('4500.00')

    def test_get_unknown_grade(self):
        with pytest.raises(NotFound):
            GradeRegistry.get_grade(999999)

    def test_get_grade_requires_id(self):
        with pytest.raises(ValidationError):
            GradeRegistry.get_grade(None)

    def test_set_fee(self, grade_7):
        grade = GradeRegistry.set_fee(grade_7.id, '4750.50')
        assert grade.monthly_fee == Decimal('4750.50')
        grade_7.refresh_from_db()
        assert grade_7.monthly_fee == Decimal('4750.50')

    def test_set_fee_to_zero_allowed(self, grade_7):
        assert GradeRegistry.set_fee(grade_7.id, 0).monthly_fee == Decimal('0.00')

    def test_negative_fee_rejected(self, grade_7):
        with pytest.raises(ValidationError):
            GradeRegistry.set_fee(grade_7.id, Decimal('-1'))
        grade_7.refresh_from_db()
        assert grade_7.monthly_fee == Decimal('4500.00')

    def test_set_fee_unknown_grade(self):
        with pytest.raises(NotFound):
            GradeRegistry.set_fee(999999, 100)

    def test_set_fee_does_not_touch_payment_records(self, grade_7, student_factory, payment_factory):
        record = payment_factory(student=student_factory(grade=grade_7))
        GradeRegistry.set_fee(grade_7.id, 9000)
        record.refresh_from_db()
        assert record.amount == Decimal('4500.00')

    def test_level_is_immutable(self, grade_7):
        grade_7.level = 12
        with pytest.raises(ValidationError):
            grade_7.save()


class TestCoerceFee:

    @pytest.mark.parametrize('value', [None, True, 'abc', 'NaN', 'Infinity', '-0.01'])
    def test_rejects(self, value):
        with pytest.raises(ValidationError):
            coerce_fee(value)

    def test_quantizes_to_cents(self):
        assert coerce_fee('12.345') == Decimal('12.34')
        assert coerce_fee(4000) == Decimal('4000.00')

    def test_error_names_the_field(self):
        with pytest.raises(ValidationError) as excinfo:
            coerce_fee(-5, field='amount', label='Amount')
        assert 'amount' in excinfo.value.details
        assert excinfo.value.message == 'Amount must not be negative'


class TestSetupGradesCommand:

    def test_seeds_default_grades(self):
        out = StringIO()
        call_command('setup_grades', stdout=out)

        fees = dict(Grade.objects.values_list('level', 'monthly_fee'))
        assert fees == {
            6: Decimal('4000.00'),
            7: Decimal('4500.00'),
            8: Decimal('5000.00'),
            9: Decimal('5500.00'),
            10: Decimal('6000.00'),
            11: Decimal('6500.00'),
        }
        assert '6 created' in out.getvalue()

    def test_existing_fees_left_alone(self, grade_7):
        GradeRegistry.set_fee(grade_7.id, 4800)
        call_command('setup_grades', stdout=StringIO())
        grade_7.refresh_from_db()
        assert grade_7.monthly_fee == Decimal('4800.00')
        assert Grade.objects.count() == 6
