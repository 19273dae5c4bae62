"""
Tests for monthly batch generation of payment records.
"""
import pytest
from datetime import date
from decimal import Decimal
from django.db import DatabaseError

from apps.billing.models import PaymentRecord
from apps.billing.period import BillingPeriod
from apps.billing.services import BatchGenerator, BillingLedger
from apps.common.exceptions import DuplicateRecord
from apps.grades.services import GradeRegistry
from apps.students.models import Student


pytestmark = pytest.mark.django_db


class FlakyLedger(BillingLedger):
    """Ledger whose create fails for chosen students"""

    def __init__(self, errors, **kwargs):
        super().__init__(**kwargs)
        self.errors = errors

    def create(self, student, period, amount=None, due_date=None):
        error = self.errors.get(student.id)
        if error is not None:
            raise error
        return super().create(student, period, amount=amount, due_date=due_date)


class TestBatchGenerator:

    def test_bills_every_eligible_student(self, batch_generator, grades, student_factory, march_2025):
        students = [student_factory(grade=grades[6]), student_factory(grade=grades[9])]

        result = batch_generator.generate(march_2025)

        assert result.created == 2
        assert result.already_existed == 0
        assert result.failed == []
        for student in students:
            record = PaymentRecord.objects.get(student=student, year=2025, month=3)
            assert record.status == PaymentRecord.STATUS_UNPAID
            assert record.amount == student.grade.monthly_fee
            assert record.due_date == date(2025, 3, 15)

    def test_skips_inactive_and_unapproved(self, batch_generator, grade_7, student_factory, march_2025):
        student_factory(grade=grade_7, is_active=False)
        student_factory(grade=grade_7, approval_status=Student.APPROVAL_PENDING)
        student_factory(grade=grade_7, approval_status=Student.APPROVAL_REJECTED)
        eligible = student_factory(grade=grade_7)

        result = batch_generator.generate(march_2025)

        assert result.created == 1
        assert list(PaymentRecord.objects.values_list('student_id', flat=True)) == [eligible.id]

    def test_second_run_creates_nothing(self, batch_generator, grades, student_factory, march_2025):
        for level in (6, 7, 8):
            student_factory(grade=grades[level])
        batch_generator.generate(march_2025)
        before = list(PaymentRecord.objects.order_by('id').values_list('id', 'amount', 'status'))

        result = batch_generator.generate(march_2025)

        assert result.created == 0
        assert result.already_existed == 3
        assert list(PaymentRecord.objects.order_by('id').values_list('id', 'amount', 'status')) == before

    def test_existing_manual_record_is_kept(self, batch_generator, grade_7, student_factory, payment_factory,
                                            march_2025):
        student = student_factory(grade=grade_7)
        manual = payment_factory(student=student, amount=Decimal('100.00'))

        result = batch_generator.generate(march_2025)

        assert result.created == 0
        assert result.already_existed == 1
        manual.refresh_from_db()
        assert manual.amount == Decimal('100.00')

    def test_uses_current_fee(self, batch_generator, grade_7, student_factory, march_2025):
        student = student_factory(grade=grade_7)
        GradeRegistry.set_fee(grade_7.id, 4800)

        batch_generator.generate(march_2025)

        assert PaymentRecord.objects.get(student=student).amount == Decimal('4800.00')

    def test_per_grade_totals(self, batch_generator, grades, student_factory, march_2025):
        student_factory(grade=grades[6])
        student_factory(grade=grades[6])
        student_factory(grade=grades[8])

        result = batch_generator.generate(march_2025)

        assert result.per_grade == {
            'Grade 6': {'created': 2, 'amount': Decimal('8000.00')},
            'Grade 8': {'created': 1, 'amount': Decimal('5000.00')},
        }
        assert result.as_dict()['period'] == '2025-03'

    def test_concurrent_duplicate_counts_as_existing(self, billing_config, grade_7, student_factory, march_2025):
        raced = student_factory(grade=grade_7)
        other = student_factory(grade=grade_7)
        ledger = FlakyLedger({raced.id: DuplicateRecord()}, config=billing_config)

        result = BatchGenerator(ledger=ledger, config=billing_config).generate(march_2025)

        assert result.created == 1
        assert result.already_existed == 1
        assert result.failed == []
        assert PaymentRecord.objects.filter(student=other).exists()

    def test_store_failure_is_reported_and_batch_continues(self, billing_config, grade_7, student_factory,
                                                           march_2025):
        broken = student_factory(grade=grade_7)
        fine = student_factory(grade=grade_7)
        ledger = FlakyLedger({broken.id: DatabaseError('connection reset')}, config=billing_config)

        result = BatchGenerator(ledger=ledger, config=billing_config).generate(march_2025)

        assert result.created == 1
        assert result.failed_count == 1
        assert result.failed == [{'student_id': broken.id, 'error': 'connection reset'}]
        assert PaymentRecord.objects.filter(student=fine).exists()
        assert not PaymentRecord.objects.filter(student=broken).exists()

    def test_due_date_follows_grace_period(self, grade_7, student_factory):
        from apps.billing.config import BillingConfig
        config = BillingConfig(grace_period_days=5)
        student = student_factory(grade=grade_7)

        BatchGenerator(config=config).generate(BillingPeriod(2025, 6))

        assert PaymentRecord.objects.get(student=student).due_date == date(2025, 6, 6)
