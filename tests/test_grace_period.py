"""
Tests for due-date arithmetic and the billing period value object.
"""
import pytest
from datetime import date, datetime, timedelta
from django.test import override_settings
from hypothesis import given, strategies as st, settings

from apps.billing.period import BillingPeriod, as_local_date
from apps.billing.services.grace_period import due_date, is_overdue
from apps.common.exceptions import ValidationError
from tests.helpers import at


class TestDueDate:

    def test_march_with_fourteen_day_grace(self):
        assert due_date(2025, 3, 14) == date(2025, 3, 15)

    def test_zero_grace_is_first_of_month(self):
        assert due_date(2025, 7, 0) == date(2025, 7, 1)

    def test_grace_can_cross_month_end(self):
        # February 2025 has 28 days
        assert due_date(2025, 2, 30) == date(2025, 3, 3)

    def test_negative_grace_rejected(self):
        with pytest.raises(ValidationError):
            due_date(2025, 3, -1)

    def test_non_integer_grace_rejected(self):
        with pytest.raises(ValidationError):
            due_date(2025, 3, 1.5)

    @pytest.mark.parametrize('year,month', [(2025, 0), (2025, 13), (2019, 5), (2101, 5)])
    def test_out_of_range_period_rejected(self, year, month):
        with pytest.raises(ValidationError):
            due_date(year, month, 14)

    @given(
        year=st.integers(min_value=2020, max_value=2100),
        month=st.integers(min_value=1, max_value=12),
        days=st.integers(min_value=0, max_value=90),
    )
    @settings(max_examples=100, deadline=None)
    def test_due_date_is_period_start_plus_grace(self, year, month, days):
        due = due_date(year, month, days)
        assert due - date(year, month, 1) == timedelta(days=days)


class TestIsOverdue:

    def test_not_overdue_on_due_date(self):
        due = date(2025, 3, 15)
        assert is_overdue(due, due) is False

    def test_overdue_day_after(self):
        due = date(2025, 3, 15)
        assert is_overdue(due, due + timedelta(days=1)) is True

    def test_not_overdue_before_due_date(self):
        assert is_overdue(date(2025, 3, 15), date(2025, 3, 1)) is False

    def test_late_on_due_date_is_not_overdue(self):
        assert is_overdue(date(2025, 3, 15), at(2025, 3, 15, hour=23)) is False

    def test_naive_datetime_uses_its_date(self):
        assert is_overdue(date(2025, 3, 15), datetime(2025, 3, 16, 0, 1)) is True

    def test_aware_datetime_is_read_in_configured_time_zone(self):
        late_evening_utc = at(2025, 3, 15, hour=23)
        assert is_overdue(date(2025, 3, 15), late_evening_utc) is False
        with override_settings(TIME_ZONE='Asia/Shanghai'):
            # 23:00 UTC is already 07:00 on the 16th in UTC+8
            assert is_overdue(date(2025, 3, 15), late_evening_utc) is True

    @given(
        due=st.dates(min_value=date(2020, 1, 1), max_value=date(2100, 12, 30)),
    )
    @settings(max_examples=100, deadline=None)
    def test_overdue_boundary_is_strict(self, due):
        assert not is_overdue(due, due)
        assert is_overdue(due, due + timedelta(days=1))


class TestBillingPeriod:

    def test_label(self):
        assert BillingPeriod(year=2025, month=3).label == '2025-03'
        assert str(BillingPeriod(year=2025, month=11)) == '2025-11'

    def test_start_and_end_dates(self):
        period = BillingPeriod(year=2024, month=2)
        assert period.start_date == date(2024, 2, 1)
        assert period.end_date == date(2024, 2, 29)

    def test_from_date(self):
        assert BillingPeriod.from_date(date(2025, 3, 31)) == BillingPeriod(2025, 3)
        assert BillingPeriod.from_date(at(2025, 4, 1)) == BillingPeriod(2025, 4)

    def test_ordering(self):
        periods = [BillingPeriod(2025, 3), BillingPeriod(2024, 12), BillingPeriod(2025, 1)]
        assert sorted(periods) == [BillingPeriod(2024, 12), BillingPeriod(2025, 1), BillingPeriod(2025, 3)]

    def test_numeric_strings_are_coerced(self):
        assert BillingPeriod(year='2025', month='3') == BillingPeriod(2025, 3)

    @pytest.mark.parametrize('year,month', [(2025, 13), (2025, 0), (1999, 1), (2025, 'March'), (2025, True)])
    def test_invalid_period_rejected(self, year, month):
        with pytest.raises(ValidationError):
            BillingPeriod(year=year, month=month)

    def test_as_local_date_rejects_other_types(self):
        with pytest.raises(ValidationError):
            as_local_date('2025-03-15')
