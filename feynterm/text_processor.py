"""Turn free text into one-word-per-line CSV files used for grading."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

from feynterm.stopwords import is_ignored

MAX_WORDS = 100
MAX_WORD_LENGTH = 50
MAX_FILENAME_LENGTH = 100

MAX_TEXT_LENGTH = MAX_WORDS * MAX_WORD_LENGTH - 1

REFERENCE_CSV = "reference.csv"
USER_CSV = "user_input.csv"


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _iter_raw_words(text: str) -> Iterator[str]:
    text = text.split("\0", 1)[0]
    word: list[str] = []
    for ch in text:
        if _is_word_char(ch):
            if len(word) < MAX_WORD_LENGTH - 1:
                word.append(ch.lower())
        elif word:
            yield "".join(word)
            word = []
    if word:
        yield "".join(word)


def extract_words(text: str) -> list[str]:
    """Split ``text`` into lower-case alphanumeric words, dropping ignored words.

    Words longer than ``MAX_WORD_LENGTH - 1`` characters are truncated.
    """
    return [word for word in _iter_raw_words(text) if not is_ignored(word)]


def write_csv(filename: str | Path, text: str) -> None:
    """Write the significant words of ``text`` to ``filename``, one per line."""
    with open(filename, "w", encoding="utf-8", newline="\n") as out:
        for word in extract_words(text):
            out.write(f"{word}\n")


def read_text_file(filename: str | Path) -> str:
    """Read at most ``MAX_TEXT_LENGTH`` bytes of ``filename`` as text."""
    with open(filename, "rb") as src:
        data = src.read(MAX_TEXT_LENGTH)
    return data.decode("latin-1")


def manual_input_mode(ask: Callable[[str], str] = input) -> tuple[Path, Path]:
    """Ask for the reference and the user's answer and write both CSV files."""
    reference = ask("Enter the Reference input:\n")[:MAX_TEXT_LENGTH]
    user = ask("Enter the user's answer:\n")[:MAX_TEXT_LENGTH]

    write_csv(REFERENCE_CSV, reference)
    write_csv(USER_CSV, user)

    print(f"\nCSV files '{REFERENCE_CSV}' and '{USER_CSV}' created successfully.")
    return Path(REFERENCE_CSV), Path(USER_CSV)


def file_input_mode(ask: Callable[[str], str] = input) -> tuple[Path, Path]:
    """Ask for two text file names, read them and write both CSV files.

    Raises ``OSError`` if either file cannot be read.
    """
    reference_file = ask("Enter the filename for the reference text: ")[: MAX_FILENAME_LENGTH - 1]
    user_file = ask("Enter the filename for the user's answer: ")[: MAX_FILENAME_LENGTH - 1]

    reference = read_text_file(reference_file)
    user = read_text_file(user_file)

    write_csv(REFERENCE_CSV, reference)
    write_csv(USER_CSV, user)

    print(f"\nCSV files '{REFERENCE_CSV}' and '{USER_CSV}' created successfully.")
    return Path(REFERENCE_CSV), Path(USER_CSV)