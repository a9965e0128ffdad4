"""
Card parsing: turns a raw ``#card(...)`` block into a CardRecord.

Only named arguments are understood. The fields the numbering pass needs are:

- ``id``: string literal, required
- ``target-deck``: string literal, optional
- ``q`` / ``a``: content block, string or any other expression
"""

import re
from typing import Dict, List, Tuple

from pydantic import ValidationError

from card_autonumber.core.errors import CardParseError
from card_autonumber.core.models import CardRecord

from .card_extractor import CARD_OPENER, RawCardBlock, advance

_ARG_NAME = re.compile(r"([A-Za-z_][A-Za-z0-9_\-]*)\s*:")
_STRING_ESCAPE = re.compile(r'\\(u\{([0-9A-Fa-f]+)\}|.)', re.DOTALL)
_SIMPLE_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "r": "\r", "t": "\t"}

ID_FIELD = "id"
DECK_FIELD = "target-deck"
QUESTION_FIELD = "q"
ANSWER_FIELD = "a"


def _strip_trivia(text: str) -> str:
    """Drop leading whitespace and comments."""
    while True:
        stripped = text.lstrip()
        if stripped.startswith("//"):
            eol = stripped.find("\n")
            text = "" if eol == -1 else stripped[eol + 1:]
        elif stripped.startswith("/*"):
            close = stripped.find("*/")
            text = "" if close == -1 else stripped[close + 2:]
        else:
            return stripped


def split_arguments(body: str) -> List[Tuple[str, int]]:
    """
    Split a call body on its top-level commas.

    Returns:
        (argument text, offset within body) pairs, trivia-only parts dropped
    """
    parts: List[Tuple[str, int]] = []
    stack: List[str] = []
    start = 0
    i = 0
    n = len(body)
    while i < n:
        if not stack and body[i] == ",":
            parts.append((body[start:i], start))
            start = i + 1
            i += 1
            continue
        i = advance(body, i, stack)
    parts.append((body[start:], start))
    return [(text, offset) for text, offset in parts if _strip_trivia(text)]


def decode_string(literal: str) -> str:
    """Decode a double-quoted string literal, quotes included."""

    def replace(m: re.Match) -> str:
        if m.group(2) is not None:
            return chr(int(m.group(2), 16))
        return _SIMPLE_ESCAPES.get(m.group(1), m.group(0))

    return _STRING_ESCAPE.sub(replace, literal[1:-1])


def parse_value(raw: str) -> Tuple[str, str]:
    """
    Classify an argument value.

    Returns:
        (kind, value) where kind is "string", "content" or "expression";
        strings are decoded, content is the text between the brackets
    """
    value = _strip_trivia(raw)

    if value.startswith('"'):
        stack: List[str] = []
        end = advance(value, 0, stack)
        if end <= len(value) and value[end - 1] == '"' and end > 1 and not _strip_trivia(value[end:]):
            return "string", decode_string(value[:end])

    if value.startswith("["):
        stack = []
        i = 0
        while i < len(value):
            i = advance(value, i, stack)
            if not stack:
                break
        if not stack and not _strip_trivia(value[i:]):
            return "content", value[1:i - 1]

    return "expression", value.rstrip()


def parse_arguments(body: str, base_offset: int) -> Dict[str, Tuple[str, str]]:
    """
    Parse the named arguments of a card call.

    Raises:
        CardParseError: On positional or duplicate arguments
    """
    arguments: Dict[str, Tuple[str, str]] = {}
    for text, offset in split_arguments(body):
        arg = _strip_trivia(text)
        m = _ARG_NAME.match(arg)
        if not m:
            raise CardParseError(
                f"expected a named argument, found '{arg[:30]}'",
                offset=base_offset + offset,
            )
        name = m.group(1)
        if name in arguments:
            raise CardParseError(f"duplicate argument '{name}'", offset=base_offset + offset)
        arguments[name] = parse_value(arg[m.end():])
    return arguments


def parse_card(block: RawCardBlock) -> CardRecord:
    """
    Parse a raw card block into a CardRecord.

    Args:
        block: Block produced by the card extractor

    Returns:
        CardRecord with identifier, deck, question and answer

    Raises:
        CardParseError: If the block is malformed or lacks a string ``id``
    """
    if not block.terminated:
        raise CardParseError("unterminated #card( call", offset=block.start)

    body_offset = block.start + len(CARD_OPENER)
    body = block.text[len(CARD_OPENER):-1]
    arguments = parse_arguments(body, body_offset)

    if ID_FIELD not in arguments:
        raise CardParseError("card has no 'id' argument", offset=block.start)
    id_kind, identifier = arguments[ID_FIELD]
    if id_kind != "string":
        raise CardParseError("card 'id' must be a string literal", offset=block.start)

    deck = ""
    if DECK_FIELD in arguments:
        deck_kind, deck = arguments[DECK_FIELD]
        if deck_kind != "string":
            raise CardParseError("card 'target-deck' must be a string literal", offset=block.start)

    question = arguments.get(QUESTION_FIELD, (None, None))[1]
    answer = arguments.get(ANSWER_FIELD, (None, None))[1]

    try:
        return CardRecord(
            identifier=identifier,
            deck=deck,
            question=question,
            answer=answer,
            source_span=(block.start, block.end),
        )
    except ValidationError as e:
        raise CardParseError(f"invalid card: {e}", offset=block.start) from e
