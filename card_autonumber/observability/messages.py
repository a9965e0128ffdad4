"""
Message sinks for per-card diagnostics.

A sink is anything with a ``report(message)`` method. The numbering pipeline
holds one for the duration of a run and reports each card it had to skip.
"""

import logging
from collections import Counter
from typing import List, Protocol

from card_autonumber.core.models import OutputMessage

from .logger import get_logger

_KIND_LEVELS = {
    "parsing_error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
}


class MessageSink(Protocol):
    def report(self, message: OutputMessage) -> None:
        ...


class LoggingMessageSink:
    """
    Sink that writes each message to the application logger.

    Counts messages by kind so the CLI can summarize a run.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or get_logger("messages")
        self.counts: Counter = Counter()

    def report(self, message: OutputMessage) -> None:
        self.counts[message.kind] += 1
        self.logger.log(
            _KIND_LEVELS[message.kind],
            message.render(),
            extra={"kind": message.kind, "source": message.source, "offset": message.offset},
        )

    @property
    def error_count(self) -> int:
        return self.counts["parsing_error"]


class CollectingMessageSink:
    """Sink that keeps messages in memory."""

    def __init__(self):
        self.messages: List[OutputMessage] = []

    def report(self, message: OutputMessage) -> None:
        self.messages.append(message)

    def of_kind(self, kind: str) -> List[OutputMessage]:
        return [m for m in self.messages if m.kind == kind]
