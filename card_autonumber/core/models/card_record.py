"""
CardRecord model representing a single card parsed from a deck source (ephemeral).
"""

from typing import Tuple

from pydantic import BaseModel, field_validator

from card_autonumber.core.errors import CardReductionError


class BarebonesCard(BaseModel):
    """
    Lightweight question/answer form of a non-empty card.

    Attributes:
        identifier: Card id as written in the source
        deck: Target deck label
        question: Question content (raw markup)
        answer: Answer content (raw markup)
    """

    identifier: str
    deck: str
    question: str
    answer: str


class CardRecord(BaseModel):
    """
    A single card extracted from a deck source.

    Note: CardRecord lives only for one run. Its identifier is updated in
    memory when the numbering engine assigns a new one.

    Attributes:
        identifier: Value of the ``id`` argument (may be empty or a placeholder)
        deck: Value of the ``target-deck`` argument, empty when absent
        question: Raw content of the ``q`` argument, None when absent
        answer: Raw content of the ``a`` argument, None when absent
        source_span: (start, end) offsets of the block in the original text
    """

    identifier: str
    deck: str = ""
    question: str | None = None
    answer: str | None = None
    source_span: Tuple[int, int] = (0, 0)

    @field_validator("source_span")
    @classmethod
    def check_span_order(cls, v):
        """Validate that the span is non-negative and ordered."""
        start, end = v
        if start < 0 or end < start:
            raise ValueError(f"invalid source span {v}")
        return v

    @property
    def is_empty(self) -> bool:
        """True when the card carries no question and no answer content."""
        return not (self.question or "").strip() and not (self.answer or "").strip()

    def to_barebones(self) -> BarebonesCard:
        """
        Reduce the card to its question/answer form.

        Raises:
            CardReductionError: If a non-empty card lacks its question or answer
        """
        if self.question is None or not self.question.strip():
            raise CardReductionError(
                f"card '{self.identifier}' has an answer but no question",
                offset=self.source_span[0],
            )
        if self.answer is None or not self.answer.strip():
            raise CardReductionError(
                f"card '{self.identifier}' has a question but no answer",
                offset=self.source_span[0],
            )
        return BarebonesCard(
            identifier=self.identifier,
            deck=self.deck,
            question=self.question,
            answer=self.answer,
        )

    class Config:
        validate_assignment = True
        json_schema_extra = {
            "example": {
                "identifier": "2506011430",
                "deck": "Biology::Cells",
                "question": "What is the powerhouse of the cell?",
                "answer": "The mitochondria",
                "source_span": [120, 245],
            }
        }
