"""Keyword-based answer grading from text or files, with a template-matching OCR pipeline for PDFs."""

__version__ = "0.1.0"