"""
Grade views module.

All views are exported from this module to maintain backward compatibility.
"""
from .grade_views import GradeListView, GradeFeeUpdateView

__all__ = [
    'GradeListView',
    'GradeFeeUpdateView',
]
