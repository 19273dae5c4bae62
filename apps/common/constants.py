"""
Shared billing bounds.
"""
MIN_BILLING_YEAR = 2020
MAX_BILLING_YEAR = 2100
