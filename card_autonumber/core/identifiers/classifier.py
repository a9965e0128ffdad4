"""
Identifier classification.

Card identifiers come in three shapes:

- placeholder: empty, or six digits (``YYMMDD``); the card needs a new id
- resolved: ten digits (``YYMMDDHHmm``); final, never reassigned
- anything else: left alone
"""

import re
from re import Pattern

SIX_DIGITS: Pattern = re.compile(r"[0-9]{6}")
TEN_DIGITS: Pattern = re.compile(r"[0-9]{10}")


def is_six_digits(value: str) -> bool:
    return SIX_DIGITS.fullmatch(value) is not None


def is_ten_digits(value: str) -> bool:
    return TEN_DIGITS.fullmatch(value) is not None


def needs_assignment(identifier: str) -> bool:
    """
    Check whether an identifier is a placeholder awaiting assignment.

    Args:
        identifier: Current value of the card's ``id`` field

    Returns:
        True for the empty string or exactly six ASCII digits
    """
    if identifier == "":
        return True
    return is_six_digits(identifier)

