"""
Grade registry: the pricing tiers and their current monthly fees.
"""
from decimal import Decimal, InvalidOperation
import logging

from django.db import transaction

from apps.common.exceptions import NotFound, ValidationError
from ..models import Grade

logger = logging.getLogger(__name__)


def coerce_fee(value, field='monthly_fee', label='Monthly fee'):
    """Convert a fee or amount to Decimal, rejecting malformed and negative values"""
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{label} is required", **{field: value})
    try:
        fee = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid {label.lower()}: {value!r}", **{field: str(value)})
    if not fee.is_finite():
        raise ValidationError(f"Invalid {label.lower()}: {value!r}", **{field: str(value)})
    if fee < 0:
        raise ValidationError(f"{label} must not be negative", **{field: str(value)})
    return fee.quantize(Decimal('0.01'))


class GradeRegistry:
    """Service class for grade lookups and fee changes"""

    @staticmethod
    def list_grades():
        """All grades, lowest level first"""
        return Grade.objects.order_by('level')

    @staticmethod
    def get_grade(grade_id):
        if grade_id in (None, ''):
            raise ValidationError("Grade id is required")
        try:
            return Grade.objects.get(pk=grade_id)
        except (Grade.DoesNotExist, ValueError):
            raise NotFound(f"Grade {grade_id} not found", grade_id=grade_id)

    @staticmethod
    def get_fee(grade_id):
        """Current monthly fee of a grade"""
        return GradeRegistry.get_grade(grade_id).monthly_fee

    @staticmethod
    def set_fee(grade_id, new_fee):
        """
        Set a grade's monthly fee.

        Does not touch existing payment records; FeePropagator cascades the change
        to unpaid records.
        """
        fee = coerce_fee(new_fee)

        with transaction.atomic():
            try:
                grade = Grade.objects.select_for_update().get(pk=grade_id)
            except (Grade.DoesNotExist, ValueError):
                raise NotFound(f"Grade {grade_id} not found", grade_id=grade_id)

            old_fee = grade.monthly_fee
            grade.monthly_fee = fee
            grade.save(update_fields=['monthly_fee', 'updated_at'])

        logger.info(f"Grade {grade.name} fee changed {old_fee} -> {fee}")
        return grade
