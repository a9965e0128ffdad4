"""
Card extraction from Typst deck sources.

Finds every ``#card(...)`` call in a document and returns the raw text of
each call with its offsets. Calls inside comments and raw blocks are ignored.
"""

import re
from typing import List

from pydantic import BaseModel, Field

CARD_OPENER = "#card("

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_.\-]*")

# Keywords whose statement runs to the end of the line in code context
_STATEMENT_KEYWORDS = {"let", "set", "show", "import", "include"}


class RawCardBlock(BaseModel):
    """
    Raw text of one ``#card(...)`` call.

    Attributes:
        text: Source text from ``#card(`` up to and including the closing paren
        start: Offset of ``#`` in the document
        end: Offset just past the block
        terminated: False when the call has no matching close paren
    """

    text: str
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    terminated: bool = True


def _skip_raw(text: str, i: int) -> int:
    """Skip a backtick raw span starting at ``i``."""
    n = len(text)
    j = i
    while j < n and text[j] == "`":
        j += 1
    fence = text[i:j]
    close = text.find(fence, j)
    return n if close == -1 else close + len(fence)


def _skip_comment(text: str, i: int) -> int | None:
    """Return the index after a comment starting at ``i``, or None if there is none."""
    if text.startswith("//", i):
        eol = text.find("\n", i)
        return len(text) if eol == -1 else eol
    if text.startswith("/*", i):
        close = text.find("*/", i + 2)
        return len(text) if close == -1 else close + 2
    return None


def _skip_string(text: str, i: int) -> int:
    """Skip a double-quoted code string starting at ``i``."""
    n = len(text)
    j = i + 1
    while j < n:
        if text[j] == "\\":
            j += 2
            continue
        if text[j] == '"':
            return j + 1
        j += 1
    return n


def advance(text: str, i: int, stack: List[str]) -> int:
    """
    Consume one token of a card call body.

    ``stack`` holds the open delimiters; ``[`` on top means markup context,
    anything else (or an empty stack) means code context.

    Returns:
        Index of the next unconsumed character
    """
    ch = text[i]

    in_markup = bool(stack) and stack[-1] == "["
    # "https://" inside markup is a link, not a comment
    if not (in_markup and i > 0 and text[i - 1] == ":"):
        skipped = _skip_comment(text, i)
        if skipped is not None:
            return skipped

    if ch == "`":
        return _skip_raw(text, i)

    if in_markup:
        if ch == "\\":
            return i + 2
        if ch == "#":
            nxt = text[i + 1:i + 2]
            if nxt in ("{", "("):
                stack.append(nxt)
                return i + 2
            m = _IDENT.match(text, i + 1)
            if m and m.group() in _STATEMENT_KEYWORDS:
                return skip_statement(text, m.end(), "\n;]")
            if m and m.end() < len(text) and text[m.end()] == "(":
                stack.append("(")
                return m.end() + 1
            return i + 1
        if ch == "[":
            stack.append("[")
        elif ch == "]":
            stack.pop()
        return i + 1

    if ch == '"':
        return _skip_string(text, i)
    if ch in "([{":
        stack.append(ch)
    elif ch in ")]}":
        if stack:
            stack.pop()
    return i + 1


def find_call_end(text: str, open_paren: int) -> int | None:
    """
    Find the end of a call whose opening paren is at ``open_paren``.

    Returns:
        Index just past the matching close paren, or None if unterminated
    """
    stack = ["("]
    i = open_paren + 1
    n = len(text)
    while i < n:
        i = advance(text, i, stack)
        if not stack:
            return i
    return None


def skip_statement(text: str, i: int, stops: str) -> int:
    """
    Skip a code statement such as ``#let x = "..."`` starting at ``i``.

    The statement ends at the first character of ``stops`` found outside
    strings and brackets; that character is not consumed.
    """
    stack: List[str] = []
    n = len(text)
    while i < n:
        if not stack and text[i] in stops:
            return i
        i = advance(text, i, stack)
    return n


def skip_code_expression(text: str, i: int) -> int | None:
    """
    Skip the code part of a ``#`` expression in markup; ``i`` points past ``#``.

    Call arguments, ``#{...}`` and ``#(...)`` blocks and keyword statements
    are skipped. Trailing ``[...]`` content stays markup so cards inside it
    are still found.

    Returns:
        Index after the code part, or None if ``i`` starts no code expression
    """
    n = len(text)
    if i < n and text[i] in "{(":
        stack = [text[i]]
        j = i + 1
        while j < n and stack:
            j = advance(text, j, stack)
        return j

    m = _IDENT.match(text, i)
    if not m:
        return None
    if m.group() in _STATEMENT_KEYWORDS:
        return skip_statement(text, m.end(), "\n;")

    j = m.end()
    while j < n and text[j] == "(":
        end = find_call_end(text, j)
        if end is None:
            return n
        j = end
    return j


def extract_card_blocks(text: str) -> List[RawCardBlock]:
    """
    Split a deck source into raw card blocks, in file order.

    Args:
        text: Full document text

    Returns:
        List of RawCardBlock; an unterminated call runs to end of text
    """
    blocks: List[RawCardBlock] = []
    n = len(text)
    i = 0

    while i < n:
        skipped = _skip_comment(text, i)
        if skipped is not None and not (i > 0 and text[i - 1] == ":"):
            i = skipped
            continue

        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "`":
            i = _skip_raw(text, i)
            continue

        if text.startswith(CARD_OPENER, i):
            open_paren = i + len(CARD_OPENER) - 1
            end = find_call_end(text, open_paren)
            if end is None:
                blocks.append(RawCardBlock(text=text[i:], start=i, end=n, terminated=False))
                break
            blocks.append(RawCardBlock(text=text[i:end], start=i, end=end))
            i = end
            continue

        if ch == "#":
            end = skip_code_expression(text, i + 1)
            if end is not None:
                i = end
                continue

        i += 1

    return blocks
