"""
Student views module.

All views are exported from this module to maintain backward compatibility.
"""
from .student_views import (
    StudentPaymentHistoryView, StudentAccessView, MyPaymentHistoryView, MyAccessView
)

__all__ = [
    'StudentPaymentHistoryView',
    'StudentAccessView',
    'MyPaymentHistoryView',
    'MyAccessView',
]
