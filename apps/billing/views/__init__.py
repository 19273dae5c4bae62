"""
Billing views module.

All views are exported from this module to maintain backward compatibility.
"""
from .payment_views import (
    payment_records, payment_record_detail, update_payment_status
)
from .operation_views import generate_batch, sweep_overdue, period_summary

__all__ = [
    'payment_records',
    'payment_record_detail',
    'update_payment_status',
    'generate_batch',
    'sweep_overdue',
    'period_summary',
]
