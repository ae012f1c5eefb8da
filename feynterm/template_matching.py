"""Recognising letter images by comparing them with character templates."""

from __future__ import annotations

import math
import os
import shutil
from collections.abc import Mapping, Sequence
from pathlib import Path

GRID = 20
MAX_POINTS = GRID * GRID
VALID_CODES = range(33, 127)
MATCH_LIMIT = 3.5
TEMPLATE_DIR = "CharacterTemplates"

Point = tuple[int, int]


def extract_points(pixels: Sequence[Sequence[int]]) -> list[Point]:
    """Return the ``(x, y)`` coordinates of black pixels, row by row."""
    points = [
        (x, y)
        for y, row in enumerate(pixels)
        for x, value in enumerate(row)
        if value == 0
    ]
    return points[:MAX_POINTS]


def _read_grid(path: str | Path) -> list[list[int]]:
    """Read the first 20x20 values after a PGM header, ignoring its size."""
    tokens = Path(path).read_text(encoding="latin-1").split()
    values = [int(token) for token in tokens[4 : 4 + MAX_POINTS]]
    if len(values) < MAX_POINTS:
        raise ValueError(f"{path}: expected {MAX_POINTS} pixel values")
    return [values[start : start + GRID] for start in range(0, MAX_POINTS, GRID)]


def load_templates(template_dir: str | Path = TEMPLATE_DIR) -> dict[str, list[Point]]:
    """Load ``template_ord<code>.pgm`` for every printable character present.

    Returns a mapping from character to its black-pixel points, in code order.
    """
    directory = Path(template_dir)
    templates = {}
    for code in VALID_CODES:
        try:
            grid = _read_grid(directory / f"template_ord{code}.pgm")
        except FileNotFoundError:
            continue
        templates[chr(code)] = extract_points(grid)
    return templates


def _mean_nearest(source: Sequence[Point], target: Sequence[Point]) -> float:
    total = sum(
        min(math.hypot(sx - tx, sy - ty) for tx, ty in target) for sx, sy in source
    )
    return total / len(source)


def modified_hausdorff(a: Sequence[Point], b: Sequence[Point]) -> float:
    """Return the modified Hausdorff distance between two point sets."""
    if not a or not b:
        raise ValueError("point sets must not be empty")
    return max(_mean_nearest(a, b), _mean_nearest(b, a))


def match_letter(points: Sequence[Point], templates: Mapping[str, Sequence[Point]]) -> str:
    """Return the closest template character, or ``'?'`` if none is close enough."""
    if not points:
        return "?"
    best_dist = math.inf
    best_char = "?"
    for char, template_points in templates.items():
        if not template_points:
            continue
        distance = modified_hausdorff(points, template_points)
        if distance < best_dist:
            best_dist = distance
            best_char = char
    return best_char if best_dist < MATCH_LIMIT else "?"


def template_matching(
    letter_files: Sequence[str | Path],
    letters_per_word: Sequence[int],
    templates: Mapping[str, Sequence[Point]],
    output_path: str | Path,
    fallback_path: str | Path,
) -> str | None:
    """Recognise every letter image and write the text to ``output_path``.

    If ``output_path`` does not exist yet, ``fallback_path`` (the text dumped
    from the PDF) is moved there instead and ``None`` is returned. Otherwise
    the recognised text, with a space after each word, is written and returned.
    """
    output = Path(output_path)
    if not output.exists():
        fallback = Path(fallback_path)
        if fallback.exists():
            os.replace(fallback, output)
        return None

    pieces = []
    word_idx = 0
    char_idx = 0
    for letter in letter_files:
        try:
            points = extract_points(_read_grid(letter))
        except (OSError, ValueError):
            pieces.append("?")
            continue
        if not points:
            pieces.append("?")
            continue

        pieces.append(match_letter(points, templates))
        char_idx += 1
        if word_idx < len(letters_per_word) and char_idx >= letters_per_word[word_idx]:
            pieces.append(" ")
            word_idx += 1
            char_idx = 0

    text = "".join(pieces)
    output.write_text(text, encoding="latin-1")
    return text


def cleanup(workdir: str | Path = ".") -> list[Path]:
    """Remove intermediate images and segmentation folders; return what was removed."""
    directory = Path(workdir)
    removed = []
    for name in ("output_1.png", "output_1.pgm", "tmp_resources.txt"):
        path = directory / name
        try:
            path.unlink()
        except FileNotFoundError:
            continue
        except OSError:
            continue
        removed.append(path)
    for name in ("Letters", "Lines", "Words"):
        path = directory / name
        if not path.exists():
            continue
        try:
            shutil.rmtree(path)
        except OSError:
            print(f"Failed to delete {name} folder")
            continue
        removed.append(path)
    return removed