"""Command that grades a user's answer CSV against an answer key."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from feynterm.grading import (
    GradeBoundary,
    calculate_grade,
    configure_grading_scale,
    default_grading_scale,
)
from feynterm.matching import AnswerCountError, count_matches, read_answers

_FILENAME_LIMIT = 255


def _ask(prompt: str) -> str:
    """Prompt for a line, treating end of input as an empty answer."""
    try:
        return input(prompt)
    except EOFError:
        return ""


def _print_results(
    key_file: str | Path, user_file: str | Path, scale: Sequence[GradeBoundary]
) -> None:
    try:
        key = read_answers(key_file)
        user = read_answers(user_file)
    except OSError:
        print("Error reading files!")
        return
    try:
        matches = count_matches(key, user)
    except AnswerCountError:
        print("Error: Answer counts don't match!")
        return
    print("\nResults:")
    print(f"Correct answers: {matches}/{len(key)}")
    print(f"Percentage: {matches * 100 // len(key)}%")
    print(f"Grade: {calculate_grade(matches, len(key), scale)}")


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for a grading scale and two CSV files, then print the result."""
    parser = argparse.ArgumentParser(
        prog="feynterm-grade", description="Grade an answer CSV against a key."
    )
    parser.parse_args(argv)

    scale = default_grading_scale()
    print("Grading System")
    print("1. Use default grading scale")
    print("2. Configure custom grading scale")
    option = _ask("Choose option: ")[:1]
    if option == "2":
        scale = configure_grading_scale(scale, _ask)

    key_file = _ask("\nEnter answer key CSV filename: ")[:_FILENAME_LIMIT]
    user_file = _ask("Enter user answer CSV filename: ")[:_FILENAME_LIMIT]

    _print_results(key_file, user_file, scale)
    return 0