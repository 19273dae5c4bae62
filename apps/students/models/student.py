from django.db import models
from django.conf import settings


class Student(models.Model):
    """Enrolled student whose access to gated content depends on payment compliance"""
    APPROVAL_PENDING = 'PENDING'
    APPROVAL_APPROVED = 'APPROVED'
    APPROVAL_REJECTED = 'REJECTED'

    APPROVAL_CHOICES = [
        (APPROVAL_PENDING, 'Pending'),
        (APPROVAL_APPROVED, 'Approved'),
        (APPROVAL_REJECTED, 'Rejected'),
    ]

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='student_profile')
    grade = models.ForeignKey('grades.Grade', on_delete=models.PROTECT, related_name='students')
    is_active = models.BooleanField(default=False)
    # Written only by the access gate
    locked_due_to_payment = models.BooleanField(default=False)
    approval_status = models.CharField(max_length=20, choices=APPROVAL_CHOICES, default=APPROVAL_PENDING)
    enrollment_date = models.DateTimeField(auto_now_add=True)
    approved_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'students'
        ordering = ['grade__level', 'id']
        indexes = [
            models.Index(fields=['approval_status', 'is_active'], name='students_approval_active_idx'),
            models.Index(fields=['locked_due_to_payment'], name='students_locked_idx'),
        ]

    def __str__(self):
        return f"{self.user} ({self.grade})"

    @property
    def is_approved(self):
        return self.approval_status == self.APPROVAL_APPROVED
