"""Running the full OCR pipeline over a PDF document."""

from __future__ import annotations

from pathlib import Path

from feynterm.img_processing import (
    DEFAULT_MUTOOL,
    DEFAULT_PDF,
    TEXT_DUMP,
    PdfProcessingError,
    get_pdf_page_count,
    png_to_pgm_format,
    render_pdf_pages_to_png,
)
from feynterm.segmentation import (
    letter_segmentation,
    line_segmentation,
    rescale_letters,
    word_segmentation,
)
from feynterm.template_matching import TEMPLATE_DIR, cleanup, load_templates, template_matching

OUTPUT_TEXT = "output.txt"


def pdf_input_mode(
    pdf_file: str | Path = DEFAULT_PDF,
    workdir: str | Path = ".",
    mutool: str = DEFAULT_MUTOOL,
    template_dir: str | Path = TEMPLATE_DIR,
) -> Path:
    """Render, segment and recognise ``pdf_file``; return the path of the text.

    Raises ``PdfProcessingError`` if the PDF cannot be processed.
    """
    directory = Path(workdir)
    page_count = get_pdf_page_count(pdf_file, mutool)
    if page_count <= 0:
        raise PdfProcessingError("Invalid PDF page count")

    render_pdf_pages_to_png(pdf_file, page_count, mutool, directory)
    png_to_pgm_format(directory)

    pages = [directory / f"output_{page}.pgm" for page in range(1, page_count + 1)]
    lines = line_segmentation(pages, directory / "Lines")
    words = word_segmentation(lines, directory / "Words")
    letters, letters_per_word = letter_segmentation(words, directory / "Letters")
    rescale_letters(letters)

    templates = load_templates(template_dir)
    output = directory / OUTPUT_TEXT
    template_matching(letters, letters_per_word, templates, output, directory / TEXT_DUMP)

    cleanup(directory)

    print(f"OCR completed successfully. Results saved to {OUTPUT_TEXT}\n")
    return output