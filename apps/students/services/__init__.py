"""
Student services module.
"""
from .directory import StudentDirectory

__all__ = [
    'StudentDirectory',
]
