"""
Student directory: the account store the billing core reads eligibility from
and writes lock flags to.
"""
import logging

from apps.common.exceptions import NotFound, ValidationError
from ..models import Student

logger = logging.getLogger(__name__)


class StudentDirectory:
    """Service class for student account lookups and lock flag writes"""

    @staticmethod
    def list_eligible_accounts(grade_id=None):
        """Active, approved students ordered by grade level"""
        students = Student.objects.select_related('grade').filter(
            is_active=True,
            approval_status=Student.APPROVAL_APPROVED,
        )
        if grade_id is not None:
            students = students.filter(grade_id=grade_id)
        return students.order_by('grade__level', 'id')

    @staticmethod
    def get_account(student_id):
        if student_id in (None, ''):
            raise ValidationError("Student id is required")
        try:
            return Student.objects.select_related('grade', 'user').get(pk=student_id)
        except (Student.DoesNotExist, ValueError):
            raise NotFound(f"Student {student_id} not found", student_id=student_id)

    @staticmethod
    def get_for_user(user):
        """Student profile of an authenticated user"""
        try:
            return Student.objects.select_related('grade').get(user=user)
        except Student.DoesNotExist:
            raise NotFound("Student profile not found")

    @staticmethod
    def lock_for_update(student_id):
        """Fetch a student row locked for the current transaction"""
        try:
            return Student.objects.select_for_update().get(pk=student_id)
        except (Student.DoesNotExist, ValueError):
            raise NotFound(f"Student {student_id} not found", student_id=student_id)

    @staticmethod
    def set_locked(student_id, locked):
        """
        Set the locked-for-nonpayment flag.

        Returns True only when the flag actually changed, so callers can count transitions.
        """
        changed = Student.objects.filter(
            pk=student_id,
            locked_due_to_payment=not locked,
        ).update(locked_due_to_payment=locked)

        if changed:
            logger.info(f"Student {student_id} {'locked' if locked else 'unlocked'} for payment")
        return bool(changed)
