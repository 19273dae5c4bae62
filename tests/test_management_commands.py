"""
Tests for the scheduler entry points.
"""
import pytest
from io import StringIO
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.billing.models import PaymentRecord
from apps.billing.period import BillingPeriod
from apps.students.models import Student


pytestmark = pytest.mark.django_db


class TestGeneratePaymentsCommand:

    def test_generates_for_given_period(self, grades, student_factory):
        student_factory(grade=grades[6])
        student_factory(grade=grades[11])
        out = StringIO()

        call_command('generate_payments', '--month', '3', '--year', '2025', stdout=out)

        assert PaymentRecord.objects.filter(year=2025, month=3).count() == 2
        output = out.getvalue()
        assert 'Grade 6: 1 record(s), 4000.00' in output
        assert '2 created, 0 already existed, 0 failed' in output

    def test_defaults_to_current_period(self, grade_7, student_factory):
        student_factory(grade=grade_7)
        period = BillingPeriod.current()

        call_command('generate_payments', stdout=StringIO())

        assert PaymentRecord.objects.filter(year=period.year, month=period.month).count() == 1

    def test_rerun_is_safe(self, grade_7, student_factory):
        student_factory(grade=grade_7)
        call_command('generate_payments', '--month', '3', '--year', '2025', stdout=StringIO())
        out = StringIO()

        call_command('generate_payments', '--month', '3', '--year', '2025', stdout=out)

        assert PaymentRecord.objects.count() == 1
        assert '0 created, 1 already existed' in out.getvalue()

    def test_month_without_year(self):
        with pytest.raises(CommandError):
            call_command('generate_payments', '--month', '3', stdout=StringIO())

    def test_invalid_month(self):
        with pytest.raises(CommandError):
            call_command('generate_payments', '--month', '13', '--year', '2025', stdout=StringIO())


class TestSweepOverduePaymentsCommand:

    def test_locks_overdue_students(self, payment_factory):
        record = payment_factory()
        out = StringIO()

        call_command(
            'sweep_overdue_payments', '--month', '3', '--year', '2025',
            '--now', '2025-03-20T08:00:00Z', stdout=out,
        )

        assert Student.objects.get(pk=record.student_id).locked_due_to_payment is True
        assert '1 locked, 0 unlocked' in out.getvalue()

    def test_period_defaults_to_month_of_now(self, payment_factory):
        record = payment_factory()

        call_command('sweep_overdue_payments', '--now', '2025-03-16T08:00:00', stdout=StringIO())

        assert Student.objects.get(pk=record.student_id).locked_due_to_payment is True

    def test_reports_healed_accounts(self, student_factory):
        student_factory(locked_due_to_payment=True)
        out = StringIO()

        call_command('sweep_overdue_payments', '--now', '2025-03-20T08:00:00Z', stdout=out)

        assert 'Healed 1 account(s)' in out.getvalue()

    def test_invalid_now(self):
        with pytest.raises(CommandError):
            call_command('sweep_overdue_payments', '--now', 'yesterday', stdout=StringIO())
