from django.core.management.base import CommandError
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from apps.common.exceptions import BillingError
from apps.billing.period import BillingPeriod


def add_period_arguments(parser):
    parser.add_argument('--month', type=int, help='Billing month (1-12); defaults to the current month')
    parser.add_argument('--year', type=int, help='Billing year; defaults to the current year')


def period_from_options(options, now=None):
    month = options.get('month')
    year = options.get('year')
    if (month is None) != (year is None):
        raise CommandError('--month and --year must be given together')

    try:
        if month is None:
            return BillingPeriod.current(now)
        return BillingPeriod(year=year, month=month)
    except BillingError as e:
        raise CommandError(e.message)


def parse_now(value):
    """Parse an ISO-8601 timestamp; naive values are taken in the current time zone"""
    if not value:
        return None
    moment = parse_datetime(value)
    if moment is None:
        raise CommandError(f'Invalid --now timestamp: {value}')
    if timezone.is_naive(moment):
        moment = timezone.make_aware(moment)
    return moment
