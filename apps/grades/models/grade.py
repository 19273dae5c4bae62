from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal


class Grade(models.Model):
    """Grade level acting as the pricing tier for monthly tuition"""
    name = models.CharField(max_length=50, unique=True)
    level = models.PositiveSmallIntegerField(unique=True, help_text="Ordinal level, immutable once set")
    monthly_fee = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Current monthly fee; existing payment records keep the fee captured at creation"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'grades'
        ordering = ['level']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        from apps.common.exceptions import ValidationError
        if self.pk:
            stored_level = type(self).objects.filter(pk=self.pk).values_list('level', flat=True).first()
            if stored_level is not None and stored_level != self.level:
                raise ValidationError(
                    f"Grade level is immutable ({stored_level} -> {self.level})",
                    grade_id=self.pk
                )
        super().save(*args, **kwargs)
