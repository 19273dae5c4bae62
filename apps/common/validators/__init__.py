"""
Common validators module.

All validators are exported from this module to maintain backward compatibility.
"""
from .fee_validators import validate_fee_amount
from .period_validators import (
    validate_month, validate_year, MIN_BILLING_YEAR, MAX_BILLING_YEAR
)

__all__ = [
    'validate_fee_amount',
    'validate_month',
    'validate_year',
    'MIN_BILLING_YEAR',
    'MAX_BILLING_YEAR',
]
