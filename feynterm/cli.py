"""Interactive command: build answer CSVs from text, files or a PDF and grade them."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence

from feynterm.grader_cli import _ask, _print_results
from feynterm.grading import configure_grading_scale, default_grading_scale
from feynterm.img_processing import DEFAULT_MUTOOL, DEFAULT_PDF, PdfProcessingError
from feynterm.pdf_processor import pdf_input_mode
from feynterm.template_matching import TEMPLATE_DIR
from feynterm.text_processor import (
    REFERENCE_CSV,
    USER_CSV,
    file_input_mode,
    manual_input_mode,
)

LOGO = r"""
    ______               ______                  
   / ____/__  __  ______/_  __/__  _________ ___ 
  / /_  / _ \/ / / / __ \/ / / _ \/ ___/ __ `__ \
 / __/ /  __/ /_/ / / / / / /  __/ /  / / / / / /
/_/    \___/\__, /_/ /_/_/  \___/_/  /_/ /_/ /_/ 
           /____/                                  
    
"""

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def logo() -> str:
    """Print the program banner and return it."""
    print(LOGO)
    return LOGO


def _run_file_mode() -> None:
    try:
        file_input_mode(_ask)
    except OSError as exc:
        print(f"Error opening file {exc.filename} for reading!")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="feynterm", description="Compare a user's answer with a reference and grade it."
    )
    parser.add_argument("--pdf", default=DEFAULT_PDF, help="PDF used in PDF input mode")
    parser.add_argument("--mutool", default=DEFAULT_MUTOOL, help="path of the mutool program")
    parser.add_argument("--templates", default=TEMPLATE_DIR, help="character template folder")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive answer checker; return the exit status."""
    args = _parse_args(argv)
    logo()

    print("Choose input method:")
    print("1. Manual input (type text)")
    print("2. File input (provide text files)")
    print("3. PDF input mode (provide a pdf)\n")
    match = _LEADING_INT.match(_ask("Enter your choice (1 or 2 or 3): "))
    choice = int(match.group(1)) if match else None

    if choice == 1:
        manual_input_mode(_ask)
    elif choice == 2:
        _run_file_mode()
    elif choice == 3:
        try:
            pdf_input_mode(args.pdf, ".", args.mutool, args.templates)
        except (PdfProcessingError, OSError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
        _run_file_mode()
    else:
        print("Invalid choice. Exiting.")
        return 1

    scale = default_grading_scale()
    print("\nGrading System")
    print("1. Use default grading scale")
    print("2. Configure custom grading scale")
    option = _ask("Choose option: ").strip()[:1]
    if option == "2":
        scale = configure_grading_scale(scale, _ask)

    _print_results(REFERENCE_CSV, USER_CSV, scale)
    return 0