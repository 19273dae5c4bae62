"""
Billing period validators.
"""
from rest_framework import serializers

from ..constants import MIN_BILLING_YEAR, MAX_BILLING_YEAR


def validate_month(value):
    """
    Validate billing month is between 1 and 12.

    Raises:
        serializers.ValidationError: If month is out of range
    """
    if value < 1 or value > 12:
        raise serializers.ValidationError("Month must be between 1 and 12.")
    return value


def validate_year(value):
    """
    Validate billing year is within the supported range.

    Raises:
        serializers.ValidationError: If year is out of range
    """
    if value < MIN_BILLING_YEAR or value > MAX_BILLING_YEAR:
        raise serializers.ValidationError(
            f"Year must be between {MIN_BILLING_YEAR} and {MAX_BILLING_YEAR}."
        )
    return value
