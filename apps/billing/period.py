"""
Billing period value object and date helpers shared by the billing services.
"""
import calendar
from dataclasses import dataclass
from datetime import date, datetime

from django.utils import timezone

from apps.common.exceptions import ValidationError
from apps.common.constants import MAX_BILLING_YEAR, MIN_BILLING_YEAR


def as_local_date(value):
    """
    Calendar date of a date or datetime.

    Aware datetimes are converted to the configured TIME_ZONE first, so the
    day boundary follows local time rather than UTC.
    """
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            return timezone.localtime(value).date()
        return value.date()
    if isinstance(value, date):
        return value
    raise ValidationError(f"Expected a date or datetime, got {value!r}")


def _coerce_int(value, field):
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field}: {value!r}", **{field: value})
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}: {value!r}", **{field: value})


@dataclass(frozen=True, order=True)
class BillingPeriod:
    """A calendar (year, month) pair; at most one payment record per student per period"""
    year: int
    month: int

    def __post_init__(self):
        year = _coerce_int(self.year, 'year')
        month = _coerce_int(self.month, 'month')
        if not 1 <= month <= 12:
            raise ValidationError("Month must be between 1 and 12", month=month)
        if not MIN_BILLING_YEAR <= year <= MAX_BILLING_YEAR:
            raise ValidationError(
                f"Year must be between {MIN_BILLING_YEAR} and {MAX_BILLING_YEAR}",
                year=year,
            )
        object.__setattr__(self, 'year', year)
        object.__setattr__(self, 'month', month)

    @classmethod
    def from_date(cls, value):
        """Period containing a date or datetime"""
        day = as_local_date(value)
        return cls(year=day.year, month=day.month)

    @classmethod
    def current(cls, now=None):
        return cls.from_date(now or timezone.now())

    @property
    def start_date(self):
        return date(self.year, self.month, 1)

    @property
    def end_date(self):
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    @property
    def label(self):
        return f"{self.year:04d}-{self.month:02d}"

    def __str__(self):
        return self.label
