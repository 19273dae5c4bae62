"""
Grade models module.

All models are exported from this module to maintain backward compatibility.
"""
from .grade import Grade

__all__ = [
    'Grade',
]
