"""Splitting binarised PGM page images into lines, words and letters."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

PAD = 2
WORD_BLANK_COLUMNS = 5
LETTER_BLANK_COLUMNS = 1
LETTER_SIZE = 20


@dataclass(frozen=True)
class PgmImage:
    """A plain (P2) grey-scale image; black pixels have the value 0."""

    width: int
    height: int
    maxval: int
    pixels: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(int(value) for value in row) for row in self.pixels)
        if len(rows) != self.height or any(len(row) != self.width for row in rows):
            raise ValueError(
                f"pixel data does not match a {self.width}x{self.height} image"
            )
        object.__setattr__(self, "pixels", rows)


def read_pgm(path: str | Path) -> PgmImage:
    """Read a plain P2 PGM file.

    Raises ``ValueError`` if the file is not a complete P2 image.
    """
    tokens = Path(path).read_text(encoding="latin-1").split()
    if not tokens or tokens[0] != "P2":
        raise ValueError(f"{path}: not a plain PGM (P2) image")
    try:
        width, height, maxval = (int(token) for token in tokens[1:4])
        values = [int(token) for token in tokens[4 : 4 + width * height]]
    except ValueError as exc:
        raise ValueError(f"{path}: malformed PGM data") from exc
    if len(tokens) < 4 or len(values) != width * height:
        raise ValueError(f"{path}: truncated PGM data")
    rows = tuple(
        tuple(values[start : start + width]) for start in range(0, width * height, width)
    ) if width else tuple(() for _ in range(height))
    return PgmImage(width, height, maxval, rows)


def write_pgm(path: str | Path, image: PgmImage) -> None:
    """Write ``image`` as a plain P2 PGM file."""
    with open(path, "w", encoding="ascii", newline="\n") as out:
        out.write(f"P2\n{image.width} {image.height}\n{image.maxval}\n")
        for row in image.pixels:
            out.write("".join(f"{value} " for value in row))
            out.write("\n")


def _window(
    image: PgmImage,
    rows: tuple[int, int],
    cols: tuple[int, int],
    bounds: tuple[int, int, int, int],
) -> PgmImage:
    """Cut rows/cols (inclusive) with PAD extra pixels on each side.

    Pixels inside ``bounds`` (first row, last row, first col, last col) are
    copied from the image; everything else is filled with ``maxval``.
    """
    top, bottom = rows
    left, right = cols
    row_min, row_max, col_min, col_max = bounds
    out_rows = []
    for r in range(top - PAD, bottom + PAD + 1):
        row_inside = row_min <= r <= row_max
        out_rows.append(
            tuple(
                image.pixels[r][c] if row_inside and col_min <= c <= col_max else image.maxval
                for c in range(left - PAD, right + PAD + 1)
            )
        )
    return PgmImage(
        right - left + 1 + 2 * PAD, bottom - top + 1 + 2 * PAD, image.maxval, out_rows
    )


def _column_spans(flags: Sequence[bool], blank_threshold: int) -> Iterator[tuple[int, int]]:
    """Yield (first, last) column of each run of black columns.

    A run ends after ``blank_threshold`` blank columns; a run still open at
    the right edge extends to the last column.
    """
    in_span = False
    start = 0
    blanks = 0
    for col, black in enumerate(flags):
        if black:
            if not in_span:
                in_span = True
                start = col
            blanks = 0
        elif in_span:
            blanks += 1
            if blanks >= blank_threshold:
                yield start, col - blanks
                in_span = False
                blanks = 0
    if in_span:
        yield start, len(flags) - 1


def _black_columns(image: PgmImage) -> list[bool]:
    if image.height == 0:
        return [False] * image.width
    return [0 in column for column in zip(*image.pixels)]


def _segment_columns(image: PgmImage, blank_threshold: int) -> list[PgmImage]:
    bounds = (0, image.height - 1, 0, image.width - 1)
    return [
        _window(image, (0, image.height - 1), span, bounds)
        for span in _column_spans(_black_columns(image), blank_threshold)
    ]


def segment_lines(image: PgmImage) -> list[PgmImage]:
    """Split a page into text lines, each padded with white on all sides.

    A line needs a blank row after it to be emitted.
    """
    lines = []
    in_line = False
    start = 0
    for row_index, row in enumerate(image.pixels):
        black = 0 in row
        if black and not in_line:
            start = row_index
            in_line = True
        elif not black and in_line:
            in_line = False
            end = row_index - 1
            bounds = (start, end, 0, image.width - 1)
            lines.append(_window(image, (start, end), (0, image.width - 1), bounds))
    return lines


def segment_words(image: PgmImage) -> list[PgmImage]:
    """Split a line into words separated by at least five blank columns."""
    return _segment_columns(image, WORD_BLANK_COLUMNS)


def segment_letters(image: PgmImage) -> list[PgmImage]:
    """Split a word into letters separated by at least one blank column."""
    return _segment_columns(image, LETTER_BLANK_COLUMNS)


def rescale(image: PgmImage, size: int = LETTER_SIZE) -> PgmImage:
    """Resize ``image`` to ``size`` x ``size`` by bilinear interpolation."""
    if image.width == 0 or image.height == 0:
        raise ValueError("cannot rescale an empty image")
    if size <= 0:
        raise ValueError("size must be positive")
    px = image.pixels
    x_ratio = (image.width - 1) / size
    y_ratio = (image.height - 1) / size
    rows = []
    for i in range(size):
        gy = i * y_ratio
        y = int(gy)
        dy = gy - y
        row = []
        for j in range(size):
            gx = j * x_ratio
            x = int(gx)
            dx = gx - x
            a = px[y][x]
            b = px[y][x + 1] if x + 1 < image.width else a
            c = px[y + 1][x] if y + 1 < image.height else a
            d = px[y + 1][x + 1] if x + 1 < image.width and y + 1 < image.height else a
            value = (
                a * (1 - dx) * (1 - dy)
                + b * dx * (1 - dy)
                + c * (1 - dx) * dy
                + d * dx * dy
            )
            row.append(int(value + 0.5))
        rows.append(tuple(row))
    return PgmImage(size, size, image.maxval, rows)


def _ensure_dir(directory: str | Path) -> Path:
    path = Path(directory)
    path.mkdir(mode=0o700, exist_ok=True)
    return path


def _load_or_report(path: str | Path) -> PgmImage | None:
    try:
        return read_pgm(path)
    except FileNotFoundError:
        print(f"File Not Found! Continuing with other files..: {path}", file=sys.stderr)
        return None


def _write_numbered(
    pieces: Iterable[PgmImage], directory: Path, prefix: str, written: list[Path]
) -> int:
    count = 0
    for piece in pieces:
        out_path = directory / f"{prefix}_{len(written) + 1}.pgm"
        write_pgm(out_path, piece)
        written.append(out_path)
        count += 1
    return count


def line_segmentation(
    page_files: Iterable[str | Path], lines_dir: str | Path = "Lines"
) -> list[Path]:
    """Write the lines of every page as ``line_<n>.pgm``; return their paths."""
    directory = _ensure_dir(lines_dir)
    written: list[Path] = []
    for page in page_files:
        image = _load_or_report(page)
        if image is not None:
            _write_numbered(segment_lines(image), directory, "line", written)
    return written


def word_segmentation(
    line_files: Iterable[str | Path], words_dir: str | Path = "Words"
) -> list[Path]:
    """Write the words of every line as ``word_<n>.pgm``; return their paths."""
    directory = _ensure_dir(words_dir)
    written: list[Path] = []
    for line in line_files:
        image = _load_or_report(line)
        if image is not None:
            _write_numbered(segment_words(image), directory, "word", written)
    return written


def letter_segmentation(
    word_files: Iterable[str | Path], letters_dir: str | Path = "Letters"
) -> tuple[list[Path], list[int]]:
    """Write the letters of every word as ``letter_<n>.pgm``.

    Returns the written paths and the number of letters in each word
    (zero for a word file that could not be found).
    """
    directory = _ensure_dir(letters_dir)
    written: list[Path] = []
    letters_per_word: list[int] = []
    for word in word_files:
        image = _load_or_report(word)
        if image is None:
            letters_per_word.append(0)
            continue
        letters_per_word.append(
            _write_numbered(segment_letters(image), directory, "letter", written)
        )
    return written, letters_per_word


def rescale_letters(letter_files: Iterable[str | Path]) -> list[Path]:
    """Rescale every letter image in place to 20x20; return the rescaled paths."""
    rescaled: list[Path] = []
    for letter in letter_files:
        try:
            image = read_pgm(letter)
        except FileNotFoundError:
            print(f"Failed to open input file: {letter}", file=sys.stderr)
            continue
        write_pgm(letter, rescale(image))
        rescaled.append(Path(letter))
    return rescaled