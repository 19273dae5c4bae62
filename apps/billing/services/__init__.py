"""
Billing services module.

All services are exported from this module to maintain backward compatibility.
"""
from .grace_period import due_date, period_due_date, is_overdue
from .access_gate import AccessGate, AccessStatus, StatusTransitionHook, SweepResult
from .ledger_service import BillingLedger, PeriodSummary, StudentPaymentSummary, normalize_status
from .batch_service import BatchGenerator, BatchResult
from .fee_service import FeePropagator, FeeUpdateResult

__all__ = [
    'due_date',
    'period_due_date',
    'is_overdue',
    'AccessGate',
    'AccessStatus',
    'StatusTransitionHook',
    'SweepResult',
    'BillingLedger',
    'PeriodSummary',
    'StudentPaymentSummary',
    'normalize_status',
    'BatchGenerator',
    'BatchResult',
    'FeePropagator',
    'FeeUpdateResult',
]
