"""Letter grades from a percentage of correct answers."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class GradeBoundary:
    """A grade letter awarded at or above ``min_percentage``."""

    grade: str
    min_percentage: int


_DEFAULT_SCALE = (
    GradeBoundary("S", 90),
    GradeBoundary("A", 80),
    GradeBoundary("B", 70),
    GradeBoundary("C", 60),
    GradeBoundary("D", 50),
    GradeBoundary("F", 0),
)

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def default_grading_scale() -> list[GradeBoundary]:
    """Return a fresh copy of the default grading scale."""
    return list(_DEFAULT_SCALE)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def configure_grading_scale(
    scale: Sequence[GradeBoundary], ask: Callable[[str], str] = input
) -> list[GradeBoundary]:
    """Interactively relabel ``scale`` and return the new scale.

    For each band the grade letter is asked for; for all but the last band
    the minimum percentage of the next band is asked for as well.
    """
    print("\nConfigure Grading Scale (enter grades in descending order):")
    bands = list(scale)
    for i, band in enumerate(bands):
        letter = ask(f"Enter grade letter for {band.min_percentage}%+: ")[:1].upper()
        bands[i] = GradeBoundary(letter, band.min_percentage)
        if i < len(bands) - 1:
            minimum = _atoi(ask(f"Enter minimum percentage for {letter} grade: "))
            bands[i + 1] = GradeBoundary(bands[i + 1].grade, minimum)
    return bands


def calculate_grade(correct: int, total: int, scale: Sequence[GradeBoundary]) -> str:
    """Return the grade for ``correct`` out of ``total``, or ``'?'`` when total is zero."""
    if total == 0:
        return "?"
    percentage = int(correct * 100 / total)
    for band in scale:
        if percentage >= band.min_percentage:
            return band.grade
    return scale[-1].grade