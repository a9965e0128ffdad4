"""
NumberingResult model representing the outcome of one numbering run (ephemeral).
"""

from typing import List

from pydantic import BaseModel, Field


class Assignment(BaseModel):
    """
    One identifier rewrite performed by the numbering engine.

    Attributes:
        old_identifier: Placeholder value found in the source ("" or YYMMDD)
        new_identifier: Resolved YYMMDDHHmm value written in its place
        deck: Deck label of the rewritten card
        offset: Start offset of the card in the original text
    """

    old_identifier: str
    new_identifier: str
    deck: str = ""
    offset: int = Field(0, ge=0)


class NumberingResult(BaseModel):
    """
    Rewritten document plus the list of assignments that produced it.

    Attributes:
        text: Fully rewritten document
        assignments: Rewrites in file order
        cards_seen: Number of cards that took part in the batch
    """

    text: str
    assignments: List[Assignment] = Field(default_factory=list)
    cards_seen: int = Field(0, ge=0)

    @property
    def changed(self) -> bool:
        return bool(self.assignments)

    class Config:
        json_schema_extra = {
            "example": {
                "text": '#card(id: "2506011430", target-deck: "Math", q: [1+1], a: [2])\n',
                "assignments": [
                    {
                        "old_identifier": "",
                        "new_identifier": "2506011430",
                        "deck": "Math",
                        "offset": 0,
                    }
                ],
                "cards_seen": 1,
            }
        }
