"""
Fee and amount validators.
"""
from rest_framework import serializers


def validate_fee_amount(value, min_value=0, max_value=None):
    """
    Validate a monthly fee or payment amount is within acceptable range.

    Args:
        value: Amount decimal
        min_value: Minimum allowed amount (default: 0)
        max_value: Maximum allowed amount (optional)

    Raises:
        serializers.ValidationError: If amount is outside valid range

    Returns:
        decimal.Decimal: Validated amount
    """
    if value is None:
        raise serializers.ValidationError("Amount is required.")

    if value < min_value:
        raise serializers.ValidationError(f"Amount must be at least {min_value}.")

    if max_value is not None and value > max_value:
        raise serializers.ValidationError(f"Amount must not exceed {max_value}.")

    return value
