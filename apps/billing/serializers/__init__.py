"""
Billing serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .payment_serializers import (
    PaymentRecordSerializer, StudentPaymentRecordSerializer,
    PaymentCreateSerializer, PaymentStatusUpdateSerializer
)
from .operation_serializers import (
    PeriodSerializer, SweepRequestSerializer, PaymentListQuerySerializer,
    PeriodSummarySerializer, AccessStatusSerializer
)

__all__ = [
    'PaymentRecordSerializer',
    'StudentPaymentRecordSerializer',
    'PaymentCreateSerializer',
    'PaymentStatusUpdateSerializer',
    'PeriodSerializer',
    'SweepRequestSerializer',
    'PaymentListQuerySerializer',
    'PeriodSummarySerializer',
    'AccessStatusSerializer',
]
