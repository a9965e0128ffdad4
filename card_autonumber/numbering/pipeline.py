"""
Numbering pipeline orchestration.

Coordinates the flow: extract → parse → reduce → number
"""

from typing import List

from pydantic import ValidationError

from card_autonumber.core.errors import CardError
from card_autonumber.core.models import CardRecord, NumberingResult, OutputMessage
from card_autonumber.observability.logger import get_logger, log_operation
from card_autonumber.observability.messages import MessageSink
from card_autonumber.parsing import extract_card_blocks, parse_card

from .engine import NumberingEngine

logger = get_logger(__name__)


def load_cards(text: str, sink: MessageSink, source: str | None = None) -> List[CardRecord]:
    """
    Extract and parse every card in a document.

    Cards that fail to parse, or that have content but cannot be reduced to
    a question/answer pair, are reported to ``sink`` and left out.

    Args:
        text: Document text
        sink: Receives one parsing_error message per skipped card
        source: Label for messages (file path or "stdin")

    Returns:
        Parsed cards in file order
    """
    cards: List[CardRecord] = []

    for block in extract_card_blocks(text):
        try:
            card = parse_card(block)
        except (CardError, ValidationError) as e:
            sink.report(OutputMessage.parsing_error(
                f"Error parsing card for auto_number: {e}",
                source=source,
                offset=block.start,
            ))
            continue

        if not card.is_empty:
            try:
                card.to_barebones()
            except CardError as e:
                sink.report(OutputMessage.parsing_error(
                    f"Error converting card to barebones for auto_number: {e}",
                    source=source,
                    offset=block.start,
                ))
                continue

        cards.append(card)

    return cards


class AutoNumberPipeline:
    """
    Numbers the cards of one deck source.

    Flow:
    1. Extract ``#card(...)`` blocks
    2. Parse each block, reporting failures to the sink
    3. Reduce non-empty cards to question/answer form, reporting failures
    4. Assign identifiers and rewrite the text
    """

    def __init__(self, sink: MessageSink, engine: NumberingEngine | None = None):
        """
        Initialize the pipeline.

        Args:
            sink: Receives per-card diagnostics
            engine: Numbering engine (default: wall-clock engine)
        """
        self.sink = sink
        self.engine = engine or NumberingEngine()

    def process(self, text: str, source: str | None = None) -> NumberingResult:
        """
        Number every eligible card in ``text``.

        Args:
            text: Document text
            source: Label of the document for diagnostics

        Returns:
            NumberingResult
        """
        with log_operation("Numbering cards", logger=logger, source=source):
            cards = load_cards(text, self.sink, source=source)
            result = self.engine.number_document(text, cards)

        logger.info(
            f"Numbered {len(result.assignments)} of {result.cards_seen} cards",
            extra={"source": source, "assigned": len(result.assignments)},
        )
        return result
