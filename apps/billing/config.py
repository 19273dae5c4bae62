"""
Billing configuration, read from settings.BILLING.
"""
from dataclasses import dataclass

from django.conf import settings

from apps.common.exceptions import ValidationError

DEFAULT_GRACE_PERIOD_DAYS = 14


@dataclass(frozen=True)
class BillingConfig:
    grace_period_days: int = DEFAULT_GRACE_PERIOD_DAYS

    def __post_init__(self):
        days = self.grace_period_days
        if isinstance(days, bool) or not isinstance(days, int) or days < 0:
            raise ValidationError(
                "Grace period must be a non-negative number of days",
                grace_period_days=days,
            )

    @classmethod
    def from_settings(cls):
        billing = getattr(settings, 'BILLING', None) or {}
        return cls(grace_period_days=billing.get('GRACE_PERIOD_DAYS', DEFAULT_GRACE_PERIOD_DAYS))
