"""
Grace period arithmetic: when a period's charge falls due, and whether it is overdue.
"""
from datetime import timedelta

from apps.common.exceptions import ValidationError
from ..period import BillingPeriod, as_local_date


def due_date(year, month, grace_period_days):
    """First day of the period plus the grace period, as a calendar date"""
    if isinstance(grace_period_days, bool) or not isinstance(grace_period_days, int):
        raise ValidationError("Grace period must be a whole number of days", grace_period_days=grace_period_days)
    if grace_period_days < 0:
        raise ValidationError("Grace period must not be negative", grace_period_days=grace_period_days)
    period = BillingPeriod(year=year, month=month)
    return period.start_date + timedelta(days=grace_period_days)


def period_due_date(period, config):
    return due_date(period.year, period.month, config.grace_period_days)


def is_overdue(due, now):
    """
    Strictly after the due date.

    A record due on the 15th is not overdue at any time on the 15th; it becomes
    overdue on the 16th. Both arguments may be dates or datetimes; aware
    datetimes are read as dates in settings.TIME_ZONE, so the answer for a
    datetime near midnight depends on that setting.
    """
    return as_local_date(now) > as_local_date(due)
