"""
Exception hierarchy for card-autonumber.

Fatal errors (``AutoNumberError`` subclasses) abort a run before any output
is produced. Card errors (``CardError`` subclasses) are reported per card and
only exclude that card from the batch.
"""


class AutoNumberError(Exception):
    """Base class for errors that abort a numbering run."""
    pass


class ConfigurationError(AutoNumberError):
    """Raised when configuration is missing, unreadable or malformed."""
    pass


class SourceReadError(AutoNumberError):
    """Raised when the deck source cannot be read or decoded."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class CardError(ValueError):
    """Base class for per-card failures."""

    def __init__(self, message: str, offset: int | None = None):
        self.message = message
        self.offset = offset
        location = f" (at offset {offset})" if offset is not None else ""
        super().__init__(f"{message}{location}")


class CardParseError(CardError):
    """Raised when a raw ``#card(...)`` block cannot be parsed into a record."""
    pass


class CardReductionError(CardError):
    """Raised when a non-empty card cannot be reduced to its barebones form."""
    pass
