"""
Identifier generation.

Resolved identifiers are ``YYMMDDHHmm`` stamps. A new card either continues
from the previous card's identifier (one minute later) or, when there is no
usable previous identifier, takes the current wall-clock stamp.
"""

from datetime import datetime

from .classifier import is_ten_digits


def current_stamp(now: datetime) -> str:
    """
    Format a local timestamp as a ten-digit identifier.

    Args:
        now: Local wall-clock time

    Returns:
        ``YYMMDDHHmm`` with the year taken modulo 100
    """
    return (
        f"{now.year % 100:02d}{now.month:02d}{now.day:02d}"
        f"{now.hour:02d}{now.minute:02d}"
    )


def increment(identifier: str) -> str:
    """
    Advance a resolved identifier by one minute.

    Minute 59 rolls over into the hour. The hour is not wrapped and never
    carries into the day, so ``2501012359`` becomes ``2501012400``.
    Anything that is not exactly ten digits is returned unchanged.

    Args:
        identifier: Ten-digit ``YYMMDDHHmm`` identifier

    Returns:
        The next identifier
    """
    if not is_ten_digits(identifier):
        return identifier

    date_part = identifier[:6]
    hour = int(identifier[6:8])
    minute = int(identifier[8:10])

    if minute == 59:
        minute = 0
        hour += 1
    else:
        minute += 1

    return f"{date_part}{hour:02d}{minute:02d}"


def next_candidate(previous: str, now: datetime) -> str:
    """
    Propose an identifier for the next card needing one.

    Args:
        previous: Identifier of the preceding card in file order ("" for none)
        now: Run timestamp, sampled once per run

    Returns:
        ``increment(previous)`` when previous is resolved, else the current stamp
    """
    if not is_ten_digits(previous):
        return current_stamp(now)
    return increment(previous)
