"""
Student models module.
"""
from .student import Student

__all__ = [
    'Student',
]
