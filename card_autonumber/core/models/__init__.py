"""
Core data models for card-autonumber.

All models use Pydantic for runtime validation and type safety.
"""

from .autonumber_config import STDIN_SOURCE, AutoNumberConfig
from .card_record import BarebonesCard, CardRecord
from .numbering_result import Assignment, NumberingResult
from .output_message import OutputMessage

__all__ = [
    "CardRecord",
    "BarebonesCard",
    "OutputMessage",
    "Assignment",
    "NumberingResult",
    "AutoNumberConfig",
    "STDIN_SOURCE",
]
