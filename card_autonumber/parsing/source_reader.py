"""
Deck source reader for files and standard input.
"""

import sys
from pathlib import Path
from typing import TextIO

from card_autonumber.core.errors import SourceReadError
from card_autonumber.core.models import STDIN_SOURCE


def read_source(source: str, stdin: TextIO | None = None) -> str:
    """
    Read an entire deck source into memory.

    Args:
        source: File path, or "stdin" for standard input
        stdin: Stream to use instead of ``sys.stdin``

    Returns:
        Document text

    Raises:
        SourceReadError: If the path is missing, unreadable or not valid UTF-8
    """
    if source == STDIN_SOURCE:
        stream = stdin if stdin is not None else sys.stdin
        # Decode the raw bytes ourselves: sys.stdin may use surrogateescape
        buffer = getattr(stream, "buffer", None)
        try:
            if buffer is not None:
                return buffer.read().decode("utf-8")
            return stream.read()
        except UnicodeDecodeError as e:
            raise SourceReadError(source, f"Standard input is not valid UTF-8 text: {e}") from e
        except OSError as e:
            raise SourceReadError(source, f"Failed to read standard input: {e}") from e

    path = Path(source)
    if not path.is_file():
        raise SourceReadError(source, "Failed to read file contents: no such file")

    try:
        # newline="" keeps \r\n intact so the rewrite stays byte-for-byte
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise SourceReadError(source, f"File is not valid UTF-8 text: {e}") from e
    except OSError as e:
        raise SourceReadError(source, f"Failed to read file contents: {e}") from e
