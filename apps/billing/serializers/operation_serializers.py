"""
Request and response serializers for batch, sweep, summary and access operations.
"""
from rest_framework import serializers

from apps.common.validators import validate_month, validate_year
from ..period import BillingPeriod


class PeriodSerializer(serializers.Serializer):
    """
    Serializer for a billing period.
    Used for: POST /api/payments/batch/, GET /api/payments/summary/
    """
    month = serializers.IntegerField(validators=[validate_month])
    year = serializers.IntegerField(validators=[validate_year])

    def to_period(self):
        return BillingPeriod(year=self.validated_data['year'], month=self.validated_data['month'])


class SweepRequestSerializer(PeriodSerializer):
    """
    Serializer for overdue sweep requests.
    Used for: POST /api/payments/sweep/
    """
    now = serializers.DateTimeField(
        required=False,
        help_text="Evaluation time; defaults to the server clock"
    )


class PaymentListQuerySerializer(serializers.Serializer):
    """Query parameters for GET /api/payments/"""
    month = serializers.IntegerField(required=False, validators=[validate_month])
    year = serializers.IntegerField(required=False, validators=[validate_year])
    grade_id = serializers.IntegerField(required=False, min_value=1)
    student_id = serializers.IntegerField(required=False, min_value=1)

    def validate(self, attrs):
        if ('month' in attrs) != ('year' in attrs):
            raise serializers.ValidationError("month and year must be given together.")
        return attrs

    def to_period(self):
        if 'month' not in self.validated_data:
            return None
        return BillingPeriod(year=self.validated_data['year'], month=self.validated_data['month'])


class PeriodSummarySerializer(serializers.Serializer):
    """Serializer for period summary responses"""
    period = serializers.CharField()
    total_records = serializers.IntegerField()
    paid_count = serializers.IntegerField()
    unpaid_count = serializers.IntegerField()
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    paid_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    outstanding_amount = serializers.DecimalField(max_digits=14, decimal_places=2)


class AccessStatusSerializer(serializers.Serializer):
    """Serializer for account access responses"""
    student_id = serializers.IntegerField()
    has_access = serializers.BooleanField()
    is_paid = serializers.BooleanField()
    is_locked = serializers.BooleanField()
    is_active = serializers.BooleanField()
    grade_name = serializers.CharField()
    period = serializers.CharField()
