"""
Monthly batch generation of payment records.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional
import logging

from django.db import DatabaseError

from apps.common.exceptions import DuplicateRecord
from apps.students.services import StudentDirectory
from ..config import BillingConfig
from ..models import PaymentRecord
from ..period import BillingPeriod
from .grace_period import period_due_date
from .ledger_service import BillingLedger

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    period: BillingPeriod
    created: int = 0
    already_existed: int = 0
    failed: list = field(default_factory=list)
    per_grade: dict = field(default_factory=dict)

    @property
    def failed_count(self):
        return len(self.failed)

    def add_created(self, record, grade_name):
        self.created += 1
        totals = self.per_grade.setdefault(grade_name, {'created': 0, 'amount': Decimal('0.00')})
        totals['created'] += 1
        totals['amount'] += record.amount

    def as_dict(self):
        return {
            'period': self.period.label,
            'created': self.created,
            'already_existed': self.already_existed,
            'failed': self.failed,
            'per_grade': self.per_grade,
        }


class BatchGenerator:
    """
    Creates one UNPAID record per eligible student for a period.

    Safe to re-run: students already billed for the period are counted, not
    re-billed. A failure on one student is recorded and the batch moves on.
    """

    def __init__(self, ledger: Optional[BillingLedger] = None, config: Optional[BillingConfig] = None,
                 directory=None):
        self.config = config or BillingConfig.from_settings()
        self.ledger = ledger or BillingLedger(config=self.config)
        self.directory = directory or StudentDirectory()

    def generate(self, period: BillingPeriod) -> BatchResult:
        result = BatchResult(period=period)
        due = period_due_date(period, self.config)

        billed = set(
            PaymentRecord.objects.filter(year=period.year, month=period.month)
            .values_list('student_id', flat=True)
        )

        for student in self.directory.list_eligible_accounts():
            if student.id in billed:
                result.already_existed += 1
                continue

            try:
                record = self.ledger.create(student, period, due_date=due)
            except DuplicateRecord:
                result.already_existed += 1
            except DatabaseError as e:
                logger.error(f"Failed to bill student {student.id} for {period}: {e}")
                result.failed.append({'student_id': student.id, 'error': str(e)})
            else:
                result.add_created(record, student.grade.name)

        logger.info(
            f"Batch {period}: created={result.created} "
            f"already_existed={result.already_existed} failed={result.failed_count}"
        )
        return result
