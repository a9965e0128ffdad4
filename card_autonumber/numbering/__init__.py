"""
Identifier assignment and document rewriting.
"""

from .engine import MAX_COLLISION_ATTEMPTS, NumberingEngine
from .pipeline import AutoNumberPipeline, load_cards

__all__ = [
    "NumberingEngine",
    "MAX_COLLISION_ATTEMPTS",
    "AutoNumberPipeline",
    "load_cards",
]
