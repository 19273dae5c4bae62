"""
Payment record serializers for list, detail, create, and status operations.
"""
from rest_framework import serializers

from apps.common.validators import validate_fee_amount, validate_month, validate_year
from ..models import PaymentRecord


class PaymentRecordSerializer(serializers.ModelSerializer):
    """
    Serializer for payment record list and detail views.
    Used for: GET /api/payments/, GET /api/students/{id}/payments/
    """
    student_id = serializers.IntegerField(read_only=True)
    student_name = serializers.SerializerMethodField()
    grade_name = serializers.CharField(source='student.grade.name', read_only=True)
    grade_level = serializers.IntegerField(source='student.grade.level', read_only=True)
    period = serializers.SerializerMethodField()

    class Meta:
        model = PaymentRecord
        fields = [
            'id', 'student_id', 'student_name', 'grade_name', 'grade_level',
            'month', 'year', 'period', 'amount', 'status', 'due_date',
            'paid_date', 'created_at'
        ]
        read_only_fields = fields

    def get_student_name(self, obj):
        user = obj.student.user
        return user.get_full_name() or user.username

    def get_period(self, obj):
        return obj.period.label


class StudentPaymentRecordSerializer(serializers.ModelSerializer):
    """Serializer for a single student's history, without the student columns"""
    period = serializers.SerializerMethodField()

    class Meta:
        model = PaymentRecord
        fields = ['id', 'month', 'year', 'period', 'amount', 'status', 'due_date', 'paid_date']
        read_only_fields = fields

    def get_period(self, obj):
        return obj.period.label


class PaymentCreateSerializer(serializers.Serializer):
    """
    Serializer for creating a single payment record.
    Used for: POST /api/payments/
    """
    student_id = serializers.IntegerField(min_value=1)
    month = serializers.IntegerField(validators=[validate_month])
    year = serializers.IntegerField(validators=[validate_year])
    amount = serializers.DecimalField(
        max_digits=10, decimal_places=2, required=False,
        validators=[validate_fee_amount],
        help_text="Defaults to the student's current grade fee"
    )
    due_date = serializers.DateField(
        required=False,
        help_text="Defaults to the period's due date under the grace period"
    )


class PaymentStatusUpdateSerializer(serializers.Serializer):
    """
    Serializer for marking a record paid or unpaid.
    Used for: PATCH /api/payments/{id}/status/
    """
    status = serializers.ChoiceField(choices=PaymentRecord.STATUS_CHOICES)
