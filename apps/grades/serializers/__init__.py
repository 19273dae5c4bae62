"""
Grade serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .grade_serializers import GradeSerializer, GradeFeeUpdateSerializer

__all__ = [
    'GradeSerializer',
    'GradeFeeUpdateSerializer',
]
