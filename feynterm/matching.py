"""Reading answer lists and counting matches between them."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path

_LINE_LIMIT = 1023
_C_SPACE = " \t\n\v\f\r"
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class AnswerCountError(ValueError):
    """Raised when either answer list is empty."""


def _read_chunks(data: bytes) -> Iterator[bytes]:
    """Yield lines as a fixed-size line reader would, splitting overlong lines."""
    start = 0
    while start < len(data):
        newline = data.find(b"\n", start, start + _LINE_LIMIT)
        end = newline + 1 if newline != -1 else min(start + _LINE_LIMIT, len(data))
        yield data[start:end]
        start = end


def _clean(chunk: bytes) -> str:
    text = chunk.decode("latin-1")
    for stop in ("\r", "\n"):
        text = text.split(stop, 1)[0]
    return text.strip(_C_SPACE).translate(_ASCII_LOWER)


def read_answers(filename: str | Path) -> list[str]:
    """Read one answer per line, trimmed and lower-cased.

    Raises ``OSError`` if the file cannot be opened.
    """
    data = Path(filename).read_bytes()
    return [_clean(chunk) for chunk in _read_chunks(data)]


def count_matches(key: Sequence[str], user: Sequence[str]) -> int:
    """Count the user's answers that occur anywhere in the key.

    Raises ``AnswerCountError`` if either list is empty.
    """
    if not key or not user:
        raise AnswerCountError("answer counts don't match")
    known = set(key)
    return sum(1 for answer in user if answer in known)