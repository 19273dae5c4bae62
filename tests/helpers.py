"""
Clock helpers for pinning "now" in billing tests.
"""
from datetime import datetime, timezone as dt_timezone


def at(year, month, day, hour=12):
    """Aware UTC timestamp for pinning the clock in tests."""
    return datetime(year, month, day, hour, tzinfo=dt_timezone.utc)


class FixedClock:
    """Injectable clock whose time tests can move forward."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now
