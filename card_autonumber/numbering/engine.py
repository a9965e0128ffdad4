"""
Numbering engine: assigns identifiers to cards and rewrites the document.

Cards are processed in file order. Each card whose ``id`` is a placeholder
and that has content gets the next identifier in the chain (previous card's
id plus one minute, or the run timestamp when there is no resolved previous
id), bumped forward until it clashes with no identifier in the batch.
"""

from datetime import datetime
from typing import Callable, List, Sequence

from card_autonumber.core.identifiers import increment, needs_assignment, next_candidate
from card_autonumber.core.models import Assignment, CardRecord, NumberingResult
from card_autonumber.observability.logger import get_logger

logger = get_logger(__name__)

MAX_COLLISION_ATTEMPTS = 1000


def id_pattern(identifier: str) -> str:
    """Literal text of an ``id`` argument as it appears in the source."""
    return f'id: "{identifier}"'


class NumberingEngine:
    """
    Assigns chronological identifiers to the eligible cards of one document.

    The clock is sampled once per run, so every fallback stamp in a run is
    the same minute.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        max_attempts: int = MAX_COLLISION_ATTEMPTS,
    ):
        """
        Initialize the engine.

        Args:
            clock: Returns the current local time
            max_attempts: Bound on collision-resolution increments
        """
        self.clock = clock
        self.max_attempts = max_attempts

    def resolve_collision(self, candidate: str, records: Sequence[CardRecord]) -> str:
        """
        Bump a candidate forward until no card in the batch holds it.

        Gives up after ``max_attempts`` increments and returns the last value.
        """
        for _ in range(self.max_attempts):
            if not any(r.identifier == candidate for r in records):
                return candidate
            candidate = increment(candidate)

        logger.warning(
            f"Collision resolution gave up after {self.max_attempts} attempts, using {candidate}",
            extra={"candidate": candidate},
        )
        return candidate

    def number_document(self, document: str, records: List[CardRecord]) -> NumberingResult:
        """
        Assign identifiers and rewrite the document.

        ``records`` are updated in place: assigned cards carry their new
        identifier afterwards.

        Args:
            document: Original document text
            records: Parsed cards in file order

        Returns:
            NumberingResult with the rewritten text and the assignments made
        """
        now = self.clock()
        text = document
        assignments: List[Assignment] = []
        previous_identifier = ""

        for record in records:
            if not record.is_empty and needs_assignment(record.identifier):
                old_identifier = record.identifier
                candidate = next_candidate(previous_identifier, now)
                new_identifier = self.resolve_collision(candidate, records)

                text = text.replace(id_pattern(old_identifier), id_pattern(new_identifier), 1)
                record.identifier = new_identifier

                assignments.append(
                    Assignment(
                        old_identifier=old_identifier,
                        new_identifier=new_identifier,
                        deck=record.deck,
                        offset=record.source_span[0],
                    )
                )
                logger.debug(
                    f"Assigned {new_identifier} to card at offset {record.source_span[0]}",
                    extra={"deck": record.deck, "old_identifier": old_identifier},
                )

            previous_identifier = record.identifier

        return NumberingResult(text=text, assignments=assignments, cards_seen=len(records))

    def run(self, document: str, records: List[CardRecord]) -> str:
        """Assign identifiers and return the rewritten document."""
        return self.number_document(document, records).text
