"""
Identifier classification and generation.
"""

from .classifier import is_six_digits, is_ten_digits, needs_assignment
from .generator import current_stamp, increment, next_candidate

__all__ = [
    "needs_assignment",
    "is_six_digits",
    "is_ten_digits",
    "current_stamp",
    "increment",
    "next_candidate",
]
