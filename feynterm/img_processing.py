"""Rendering PDF pages with mutool and binarising the rendered images."""

from __future__ import annotations

import itertools
import math
import os
import re
import subprocess
from pathlib import Path

from PIL import Image

from feynterm.segmentation import PgmImage, write_pgm

THRESHOLD = 120
DEFAULT_PDF = "input.pdf"
DEFAULT_MUTOOL = str(
    Path("Image_Processing_And_OCR") / ("mutool.exe" if os.name == "nt" else "mutool")
)
TEXT_DUMP = "tmp_resources.txt"

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class PdfProcessingError(RuntimeError):
    """Raised when a PDF cannot be inspected, rendered or converted."""


def parse_page_count(text: str) -> int:
    """Return the number after the first ``Pages:`` line of mutool's info output.

    Raises ``PdfProcessingError`` if no page count can be found.
    """
    for line in text.splitlines():
        stripped = line.lstrip(" \t")
        if stripped[:6].lower() == "pages:":
            match = _LEADING_INT.match(stripped, 6)
            if match:
                return int(match.group(1))
            break
    raise PdfProcessingError("Failed to extract page count from output")


def get_pdf_page_count(pdf_file: str | Path = DEFAULT_PDF, mutool: str = DEFAULT_MUTOOL) -> int:
    """Ask mutool for the number of pages in ``pdf_file``."""
    try:
        result = subprocess.run(
            [mutool, "info", str(pdf_file)], capture_output=True, text=True, check=False
        )
    except OSError as exc:
        raise PdfProcessingError(f"mutool command failed: {exc}") from exc
    if result.returncode != 0:
        raise PdfProcessingError("mutool command failed!")
    return parse_page_count(result.stdout or "")


def render_pdf_pages_to_png(
    pdf_file: str | Path = DEFAULT_PDF,
    page_count: int = 1,
    mutool: str = DEFAULT_MUTOOL,
    workdir: str | Path = ".",
) -> list[Path]:
    """Dump the PDF text to ``tmp_resources.txt`` and render each page to PNG.

    Returns the paths of the rendered ``output_<n>.png`` files.
    """
    directory = Path(workdir)
    try:
        subprocess.run(
            [mutool, "draw", "-F", "txt", "-o", str(directory / TEXT_DUMP), str(pdf_file)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        pass

    rendered = []
    for page in range(1, page_count + 1):
        png = directory / f"output_{page}.png"
        try:
            result = subprocess.run(
                [mutool, "draw", "-o", str(png), str(pdf_file), str(page)], check=False
            )
        except OSError as exc:
            raise PdfProcessingError(f"Failed to render page {page}: {exc}") from exc
        if result.returncode != 0:
            raise PdfProcessingError(f"Failed to render page {page}")
        rendered.append(png)
    return rendered


def _load_rgb(path: str | Path) -> Image.Image:
    with Image.open(path) as img:
        return img.convert("RGB")


def _gray(rgb: tuple[int, int, int]) -> int:
    red, green, blue = rgb
    return math.floor(0.299 * red + 0.587 * green + 0.114 * blue + 0.5)


def _binarize(img: Image.Image) -> PgmImage:
    width, height = img.size
    px = img.load()
    rows = tuple(
        tuple(255 if _gray(px[x, y]) >= THRESHOLD else 0 for x in range(width))
        for y in range(height)
    )
    return PgmImage(width, height, 255, rows)


def binarize_png(png_path: str | Path, pgm_path: str | Path) -> PgmImage:
    """Convert a PNG to a black-and-white P2 PGM file and return the image.

    Raises ``OSError`` if the PNG cannot be loaded or the PGM written.
    """
    image = _binarize(_load_rgb(png_path))
    write_pgm(pgm_path, image)
    return image


def png_to_pgm_format(workdir: str | Path = ".") -> list[Path]:
    """Binarise ``output_1.png``, ``output_2.png``, ... until one is missing."""
    directory = Path(workdir)
    written = []
    for count in itertools.count(1):
        png = directory / f"output_{count}.png"
        try:
            img = _load_rgb(png)
        except OSError:
            break
        pgm = directory / f"output_{count}.pgm"
        try:
            write_pgm(pgm, _binarize(img))
        except OSError as exc:
            raise PdfProcessingError(f"Failed to open {pgm} for writing.") from exc
        written.append(pgm)
    return written