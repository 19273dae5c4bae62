"""
Grade serializers.
"""
from rest_framework import serializers

from apps.common.validators import validate_fee_amount
from ..models import Grade


class GradeSerializer(serializers.ModelSerializer):
    """
    Serializer for grade information.
    Used for: GET /api/grades/ and nested serialization in fee updates.
    """
    class Meta:
        model = Grade
        fields = ['id', 'name', 'level', 'monthly_fee']
        read_only_fields = fields


class GradeFeeUpdateSerializer(serializers.Serializer):
    """
    Serializer for changing a grade's monthly fee.
    Used for: PATCH /api/grades/{id}/fee/
    """
    monthly_fee = serializers.DecimalField(max_digits=10, decimal_places=2)

    def validate_monthly_fee(self, value):
        return validate_fee_amount(value)
