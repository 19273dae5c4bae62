"""
Test configuration for the tuition billing server.
"""
import pytest
from decimal import Decimal
from rest_framework.test import APIClient

from apps.billing.config import BillingConfig
from apps.billing.period import BillingPeriod
from apps.billing.services import AccessGate, BatchGenerator, BillingLedger, FeePropagator
from tests.helpers import FixedClock, at

DEFAULT_FEES = {
    6: Decimal('4000.00'),
    7: Decimal('4500.00'),
    8: Decimal('5000.00'),
    9: Decimal('5500.00'),
    10: Decimal('6000.00'),
    11: Decimal('6500.00'),
}


@pytest.fixture
def grades(db):
    """Grades 6 to 11 with their default fees, keyed by level."""
    from tests.factories import GradeFactory
    return {
        level: GradeFactory(level=level, name=f"Grade {level}", monthly_fee=fee)
        for level, fee in DEFAULT_FEES.items()
    }


@pytest.fixture
def grade_7(grades):
    return grades[7]


@pytest.fixture
def student_factory():
    from tests.factories import StudentFactory
    return StudentFactory


@pytest.fixture
def payment_factory():
    from tests.factories import PaymentRecordFactory
    return PaymentRecordFactory


@pytest.fixture
def march_2025():
    return BillingPeriod(year=2025, month=3)


@pytest.fixture
def billing_config():
    return BillingConfig(grace_period_days=14)


@pytest.fixture
def clock():
    """Clock pinned to 10 March 2025, inside the March grace period."""
    return FixedClock(at(2025, 3, 10))


@pytest.fixture
def access_gate(billing_config, clock):
    return AccessGate(config=billing_config, clock=clock)


@pytest.fixture
def ledger(billing_config, clock, access_gate):
    return BillingLedger(config=billing_config, clock=clock, transition_hook=access_gate)


@pytest.fixture
def batch_generator(ledger, billing_config):
    return BatchGenerator(ledger=ledger, config=billing_config)


@pytest.fixture
def fee_propagator():
    return FeePropagator()


@pytest.fixture
def admin_user(db):
    from tests.factories import AdminUserFactory
    return AdminUserFactory()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client
