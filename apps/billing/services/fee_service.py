"""
Fee propagation: a grade fee change reprices every unpaid record of that grade.
"""
from dataclasses import dataclass
import logging

from django.db import transaction

from apps.grades.models import Grade
from apps.grades.services import GradeRegistry
from apps.students.models import Student
from ..models import PaymentRecord

logger = logging.getLogger(__name__)


@dataclass
class FeeUpdateResult:
    grade: Grade
    records_updated: int


class FeePropagator:
    """Service class for fee changes that cascade to outstanding charges"""

    def __init__(self, registry=None):
        self.registry = registry or GradeRegistry()

    def update_fee_and_propagate(self, grade_id, new_fee) -> FeeUpdateResult:
        """
        Set the grade fee and reprice its UNPAID records in one transaction.

        PAID records keep the amount they were paid at. The repricing is a single
        conditional UPDATE, so a record paid concurrently is either repriced before
        the payment or left alone after it.
        """
        with transaction.atomic():
            grade = self.registry.set_fee(grade_id, new_fee)
            updated = PaymentRecord.objects.filter(
                status=PaymentRecord.STATUS_UNPAID,
                student_id__in=Student.objects.filter(grade_id=grade.id).values('id'),
            ).update(amount=grade.monthly_fee)

        logger.info(f"Grade {grade.name} fee set to {grade.monthly_fee}; {updated} unpaid record(s) repriced")
        return FeeUpdateResult(grade=grade, records_updated=updated)
