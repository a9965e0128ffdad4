"""
card-autonumber: assigns chronological identifiers to cards in Typst deck files.
"""

__version__ = "0.1.0"
