"""
Deck source reading, card extraction and card parsing.
"""

from .card_extractor import RawCardBlock, extract_card_blocks
from .card_parser import parse_card
from .source_reader import read_source

__all__ = [
    "RawCardBlock",
    "extract_card_blocks",
    "parse_card",
    "read_source",
]
