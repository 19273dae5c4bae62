"""
Grade services module.

All services are exported from this module to maintain backward compatibility.
"""
from .grade_registry import GradeRegistry, coerce_fee

__all__ = [
    'GradeRegistry',
    'coerce_fee',
]
