"""
Billing ledger: the authoritative store of per-student, per-period payment records.
"""
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Optional
import logging

from django.db import IntegrityError, transaction
from django.db.models import Count, Q, Sum
from django.utils import timezone

from apps.common.exceptions import DuplicateRecord, NotFound, ValidationError
from apps.grades.services import coerce_fee
from apps.students.models import Student
from apps.students.services import StudentDirectory
from ..config import BillingConfig
from ..models import PaymentRecord
from ..period import BillingPeriod, as_local_date
from .access_gate import AccessGate
from .grace_period import period_due_date

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


@dataclass
class PeriodSummary:
    period: BillingPeriod
    total_records: int
    paid_count: int
    unpaid_count: int
    total_amount: Decimal
    paid_amount: Decimal
    outstanding_amount: Decimal

    def as_dict(self):
        data = asdict(self)
        data['period'] = self.period.label
        return data


@dataclass
class StudentPaymentSummary:
    student_id: int
    total_records: int
    paid_count: int
    unpaid_count: int
    total_amount: Decimal
    paid_amount: Decimal
    paid_ratio: int

    def as_dict(self):
        return asdict(self)


def _totals(queryset):
    paid = Q(status=PaymentRecord.STATUS_PAID)
    totals = queryset.aggregate(
        total_records=Count('id'),
        paid_count=Count('id', filter=paid),
        total_amount=Sum('amount'),
        paid_amount=Sum('amount', filter=paid),
    )
    totals['total_amount'] = totals['total_amount'] or ZERO
    totals['paid_amount'] = totals['paid_amount'] or ZERO
    totals['unpaid_count'] = totals['total_records'] - totals['paid_count']
    return totals


def normalize_status(value):
    status = str(value or '').strip().upper()
    if status not in dict(PaymentRecord.STATUS_CHOICES):
        raise ValidationError(f"Invalid payment status: {value!r}", status=value)
    return status


class BillingLedger:
    """Service class for payment record creation, status changes and queries"""

    def __init__(self, config: Optional[BillingConfig] = None, clock=None, transition_hook=None):
        self.config = config or BillingConfig.from_settings()
        self.clock = clock or timezone.now
        self.transition_hook = transition_hook or AccessGate(config=self.config, clock=self.clock)

    def create(self, student, period: BillingPeriod, amount=None, due_date=None) -> PaymentRecord:
        """
        Create the UNPAID record for a student and period.

        `student` may be a Student or its id. The amount defaults to the grade's
        current fee and the due date to the period's grace-period due date.

        Raises:
            NotFound: unknown student
            ValidationError: negative or malformed amount
            DuplicateRecord: a record already exists for the period
        """
        if not isinstance(student, Student):
            student = StudentDirectory.get_account(student)

        if amount is None:
            amount = student.grade.monthly_fee
        amount = coerce_fee(amount, field='amount', label='Amount')

        if due_date is None:
            due_date = period_due_date(period, self.config)
        else:
            due_date = as_local_date(due_date)

        if PaymentRecord.objects.filter(student_id=student.id, year=period.year, month=period.month).exists():
            raise DuplicateRecord(
                f"Payment record already exists for student {student.id} in {period}",
                student_id=student.id,
                period=period.label,
            )

        try:
            with transaction.atomic():
                record = PaymentRecord.objects.create(
                    student=student,
                    year=period.year,
                    month=period.month,
                    amount=amount,
                    due_date=due_date,
                    status=PaymentRecord.STATUS_UNPAID,
                )
        except IntegrityError:
            raise DuplicateRecord(
                f"Payment record already exists for student {student.id} in {period}",
                student_id=student.id,
                period=period.label,
            )

        logger.info(f"Created payment record {record.id} for student {student.id} in {period}: {amount}")
        return record

    def set_status(self, record_id, new_status, now=None) -> PaymentRecord:
        """
        Mark a record PAID or UNPAID and run the transition hook.

        The hook runs inside the same transaction as the status write, so a payment
        and the unlock it causes commit together. Setting the current status again
        is allowed and re-runs the hook. A record that stays PAID keeps its original
        paid date.
        """
        new_status = normalize_status(new_status)
        now = now or self.clock()

        with transaction.atomic():
            try:
                record = PaymentRecord.objects.select_for_update().get(pk=record_id)
            except (PaymentRecord.DoesNotExist, ValueError):
                raise NotFound(f"Payment record {record_id} not found", record_id=record_id)

            previous_status = record.status
            record.status = new_status
            if new_status == PaymentRecord.STATUS_PAID:
                if previous_status != PaymentRecord.STATUS_PAID or record.paid_date is None:
                    record.paid_date = now
            else:
                record.paid_date = None
            record.save(update_fields=['status', 'paid_date', 'updated_at'])

            effect = self.transition_hook.on_status_change(record, previous_status, now)

        logger.info(
            f"Payment record {record.id} {previous_status} -> {new_status}"
            + (f" ({effect})" if effect else "")
        )
        return record

    @staticmethod
    def get_record(record_id) -> PaymentRecord:
        try:
            return PaymentRecord.objects.select_related('student__grade', 'student__user').get(pk=record_id)
        except (PaymentRecord.DoesNotExist, ValueError):
            raise NotFound(f"Payment record {record_id} not found", record_id=record_id)

    @staticmethod
    def get_period_record(student_id, period: BillingPeriod) -> Optional[PaymentRecord]:
        return PaymentRecord.objects.filter(
            student_id=student_id,
            year=period.year,
            month=period.month,
        ).first()

    @staticmethod
    def search(period: Optional[BillingPeriod] = None, grade_id=None, student_id=None):
        """Records filtered by any combination of period, grade and student"""
        records = PaymentRecord.objects.select_related('student__grade', 'student__user')
        if period is not None:
            records = records.filter(year=period.year, month=period.month)
        if grade_id is not None:
            records = records.filter(student__grade_id=grade_id)
        if student_id is not None:
            records = records.filter(student_id=student_id)
        return records.order_by('-year', '-month', 'student__grade__level', 'student_id', 'id')

    @staticmethod
    def list_by_period(period: BillingPeriod, grade_id=None):
        """Records of a period ordered by grade level, then student"""
        return BillingLedger.search(period=period, grade_id=grade_id)

    @staticmethod
    def period_summary(period: BillingPeriod) -> PeriodSummary:
        totals = _totals(PaymentRecord.objects.filter(year=period.year, month=period.month))
        return PeriodSummary(
            period=period,
            total_records=totals['total_records'],
            paid_count=totals['paid_count'],
            unpaid_count=totals['unpaid_count'],
            total_amount=totals['total_amount'],
            paid_amount=totals['paid_amount'],
            outstanding_amount=totals['total_amount'] - totals['paid_amount'],
        )

    @staticmethod
    def student_history(student_id):
        """All records of a student, newest period first"""
        student = StudentDirectory.get_account(student_id)
        return PaymentRecord.objects.filter(student_id=student.id).order_by('-year', '-month')

    @staticmethod
    def student_summary(student_id) -> StudentPaymentSummary:
        student = StudentDirectory.get_account(student_id)
        totals = _totals(PaymentRecord.objects.filter(student_id=student.id))
        ratio = 0
        if totals['total_records']:
            ratio = round(totals['paid_count'] * 100 / totals['total_records'])
        return StudentPaymentSummary(
            student_id=student.id,
            total_records=totals['total_records'],
            paid_count=totals['paid_count'],
            unpaid_count=totals['unpaid_count'],
            total_amount=totals['total_amount'],
            paid_amount=totals['paid_amount'],
            paid_ratio=ratio,
        )
