"""
OutputMessage model for diagnostics sent to a message sink.
"""

from typing import Literal

from pydantic import BaseModel, Field


class OutputMessage(BaseModel):
    """
    A single diagnostic emitted during a run.

    Attributes:
        kind: "parsing_error", "warning" or "info"
        text: Human-readable description
        source: Label of the deck source (file path or "stdin")
        offset: Character offset of the offending card, when known
    """

    kind: Literal["parsing_error", "warning", "info"]
    text: str = Field(..., min_length=1)
    source: str | None = None
    offset: int | None = Field(None, ge=0)

    @classmethod
    def parsing_error(cls, text: str, source: str | None = None, offset: int | None = None) -> "OutputMessage":
        return cls(kind="parsing_error", text=text, source=source, offset=offset)

    def render(self) -> str:
        """Format the message as a single line for terminal output."""
        location = self.source or "<input>"
        if self.offset is not None:
            location = f"{location}@{self.offset}"
        return f"{location}: {self.text}"
