"""
Access gate: keeps each student's locked-for-nonpayment flag in step with the ledger.

Two paths write the flag. The status-change hook unlocks immediately when the
current period's record is paid; the periodic overdue sweep locks accounts whose
record is past due and repairs any drift.
"""
from dataclasses import asdict, dataclass
from typing import Optional
import logging

from django.db import transaction
from django.utils import timezone

from apps.common.exceptions import InconsistentStateError
from apps.students.models import Student
from apps.students.services import StudentDirectory
from ..config import BillingConfig
from ..models import PaymentRecord
from ..period import BillingPeriod, as_local_date

logger = logging.getLogger(__name__)

UNLOCKED = 'unlocked'


class StatusTransitionHook:
    """
    Called by the ledger inside the status-change transaction.

    Implementations may return a short description of the side effect, or None.
    """

    def on_status_change(self, record, previous_status, now):
        return None


@dataclass
class SweepResult:
    period: BillingPeriod
    locked: int = 0
    unlocked: int = 0
    healed: int = 0

    def as_dict(self):
        data = asdict(self)
        data['period'] = self.period.label
        return data


@dataclass
class AccessStatus:
    student_id: int
    has_access: bool
    is_paid: bool
    is_locked: bool
    is_active: bool
    grade_name: str
    period: BillingPeriod

    def as_dict(self):
        data = asdict(self)
        data['period'] = self.period.label
        return data


class AccessGate(StatusTransitionHook):
    """Service class for lock and unlock decisions"""

    def __init__(self, config: Optional[BillingConfig] = None, clock=None, directory=None):
        self.config = config or BillingConfig.from_settings()
        self.clock = clock or timezone.now
        self.directory = directory or StudentDirectory()

    def on_status_change(self, record, previous_status, now):
        """
        Unlock on payment of the current period's record.

        Marking a record UNPAID never locks by itself; locking waits for the sweep
        so the grace period is honoured.
        """
        if record.status != PaymentRecord.STATUS_PAID:
            return None
        if record.period != BillingPeriod.from_date(now):
            return None

        student = self.directory.lock_for_update(record.student_id)
        if not student.locked_due_to_payment:
            return None

        if self.directory.set_locked(student.id, False):
            logger.info(
                f"Student {student.id} unlocked after payment of {record.period} "
                f"(was {previous_status})"
            )
            return UNLOCKED
        return None

    def sweep_overdue(self, period: BillingPeriod, now=None) -> SweepResult:
        """
        Reconcile lock flags for a period.

        Locks accounts with an overdue unpaid record in the period, unlocks accounts
        whose record in the period is paid, and heals any locked account that has no
        overdue unpaid record at all. Each flip runs in its own transaction, so
        concurrent sweeps converge and a repeated sweep reports zero changes.
        """
        now = now or self.clock()
        today = as_local_date(now)
        result = SweepResult(period=period)

        overdue_ids = list(
            PaymentRecord.objects.filter(
                year=period.year,
                month=period.month,
                status=PaymentRecord.STATUS_UNPAID,
                due_date__lt=today,
                student__locked_due_to_payment=False,
            ).values_list('id', flat=True)
        )
        for record_id in overdue_ids:
            if self._lock_if_overdue(record_id, now):
                result.locked += 1

        paid_ids = list(
            PaymentRecord.objects.filter(
                year=period.year,
                month=period.month,
                status=PaymentRecord.STATUS_PAID,
                student__locked_due_to_payment=True,
            ).values_list('id', flat=True)
        )
        for record_id in paid_ids:
            if self._unlock_if_paid(record_id):
                result.unlocked += 1

        for student_id in self._orphan_lock_ids(today):
            if self._heal(student_id, today):
                result.healed += 1
                result.unlocked += 1

        logger.info(
            f"Overdue sweep {period}: locked={result.locked} "
            f"unlocked={result.unlocked} healed={result.healed}"
        )
        return result

    def has_access(self, student_id, now=None) -> bool:
        return self.get_account_access(student_id, now).has_access

    def get_account_access(self, student_id, now=None) -> AccessStatus:
        """Active, not locked, and the current period's record is paid"""
        now = now or self.clock()
        student = self.directory.get_account(student_id)
        period = BillingPeriod.from_date(now)

        record = PaymentRecord.objects.filter(
            student_id=student.id,
            year=period.year,
            month=period.month,
        ).first()
        is_paid = record is not None and record.is_paid
        is_locked = student.locked_due_to_payment

        return AccessStatus(
            student_id=student.id,
            has_access=student.is_active and not is_locked and is_paid,
            is_paid=is_paid,
            is_locked=is_locked,
            is_active=student.is_active,
            grade_name=student.grade.name,
            period=period,
        )

    def _lock_if_overdue(self, record_id, now):
        with transaction.atomic():
            record = PaymentRecord.objects.select_for_update().filter(pk=record_id).first()
            if record is None or not record.is_overdue_at(now):
                return False
            student = self.directory.lock_for_update(record.student_id)
            if student.locked_due_to_payment:
                return False
            return self.directory.set_locked(student.id, True)

    def _unlock_if_paid(self, record_id):
        with transaction.atomic():
            record = PaymentRecord.objects.select_for_update().filter(pk=record_id).first()
            if record is None or not record.is_paid:
                return False
            student = self.directory.lock_for_update(record.student_id)
            if not student.locked_due_to_payment:
                return False
            return self.directory.set_locked(student.id, False)

    @staticmethod
    def _overdue_unpaid(today):
        return PaymentRecord.objects.filter(
            status=PaymentRecord.STATUS_UNPAID,
            due_date__lt=today,
        )

    def _orphan_lock_ids(self, today):
        """Locked students with no overdue unpaid record in any period"""
        return list(
            Student.objects.filter(locked_due_to_payment=True)
            .exclude(pk__in=self._overdue_unpaid(today).values('student_id'))
            .values_list('id', flat=True)
        )

    def _heal(self, student_id, today):
        with transaction.atomic():
            student = self.directory.lock_for_update(student_id)
            if not student.locked_due_to_payment:
                return False
            if self._overdue_unpaid(today).filter(student_id=student_id).exists():
                return False

            error = InconsistentStateError(
                f"Student {student_id} is locked without an overdue unpaid record",
                student_id=student_id,
            )
            logger.warning(f"Healing lock state: {error.message}")
            return self.directory.set_locked(student_id, False)
