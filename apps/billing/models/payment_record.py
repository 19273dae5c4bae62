from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.common.constants import MAX_BILLING_YEAR, MIN_BILLING_YEAR


class PaymentRecord(models.Model):
    """One student's tuition charge for one calendar month"""

    STATUS_UNPAID = 'UNPAID'
    STATUS_PAID = 'PAID'

    STATUS_CHOICES = [
        (STATUS_UNPAID, 'Unpaid'),
        (STATUS_PAID, 'Paid'),
    ]

    student = models.ForeignKey(
        'students.Student',
        on_delete=models.PROTECT,
        related_name='payments',
    )
    month = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(12)]
    )
    year = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_BILLING_YEAR), MaxValueValidator(MAX_BILLING_YEAR)]
    )
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        help_text="Grade fee at creation; follows fee changes while unpaid",
    )
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_UNPAID)
    due_date = models.DateField(help_text="First day of the period plus the grace period")
    paid_date = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'payment_records'
        ordering = ['-year', '-month', 'id']
        constraints = [
            models.UniqueConstraint(
                fields=['student', 'year', 'month'],
                name='unique_student_payment_period',
            ),
        ]
        indexes = [
            models.Index(fields=['year', 'month', 'status'], name='payment_period_status_idx'),
            models.Index(fields=['status', 'due_date'], name='payment_status_due_idx'),
        ]

    def __str__(self):
        return f"Payment {self.student_id} {self.year:04d}-{self.month:02d} - {self.status}"

    @property
    def period(self):
        from ..period import BillingPeriod
        return BillingPeriod(year=self.year, month=self.month)

    @property
    def is_paid(self):
        return self.status == self.STATUS_PAID

    def is_overdue_at(self, now):
        """Unpaid and strictly past its due date at `now`"""
        from ..services.grace_period import is_overdue
        return self.status == self.STATUS_UNPAID and is_overdue(self.due_date, now)
