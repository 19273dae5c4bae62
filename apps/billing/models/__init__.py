"""
Billing models module.

All models are exported from this module to maintain backward compatibility.
"""
from .payment_record import PaymentRecord

__all__ = [
    'PaymentRecord',
]
