"""
PDF loading into positioned text pages.

Main function:
    load_pdf: Open a resume PDF with pdfplumber, convert words to TextItems,
              rebuild reading-order text, and attach layout signals.

Helper functions:
    words_to_items: pdfplumber word dicts -> TextItems.
    build_page: Assemble a Page with reading-order text.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import pdfplumber

from atslens.contexts.parsing.exceptions import PdfParseError
from atslens.contexts.parsing.layout_analysis import analyze_layout
from atslens.contexts.parsing.logger import log_parser_warning, log_pdf_loaded
from atslens.contexts.parsing.page_data_structure import Page, PdfLayoutSignals, TextItem
from atslens.utils.pdf_processing import cluster_by_y_tolerance, join_lines

MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_PAGES = 20

# Items within this many units vertically are read as one line
READING_ORDER_TOLERANCE = 5.0

# Below this many characters the PDF is probably scanned or image-based
LOW_TEXT_THRESHOLD = 50


@dataclass(frozen=True)
class ParserWarning:
    """Non-fatal issue found while loading a document."""

    code: str
    message: str
    page_number: Optional[int] = None


@dataclass
class ExtractedDocument:
    """A loaded resume: pages of positioned text plus document-level signals."""

    file_name: str
    file_size_bytes: int
    page_count: int
    pages: List[Page] = field(default_factory=list)
    extracted_text: str = ""
    warnings: List[ParserWarning] = field(default_factory=list)
    layout_signals: PdfLayoutSignals = field(default_factory=PdfLayoutSignals)

    @property
    def char_count(self) -> int:
        return len(self.extracted_text)


def words_to_items(words: List[dict]) -> List[TextItem]:
    """
    Convert pdfplumber word dicts into TextItems.

    Coordinates use pdfplumber's top-left origin: x from x0, y from top.
    """
    return [
        TextItem(
            text=word["text"],
            x=float(word["x0"]),
            y=float(word["top"]),
            width=float(word["x1"]) - float(word["x0"]),
            height=float(word["bottom"]) - float(word["top"]),
            font_name=word.get("fontname"),
        )
        for word in words
    ]


def build_page(page_number: int, words: List[dict], width: float, height: float) -> Page:
    """Build a Page from pdfplumber words, with text in top-to-bottom, left-to-right order."""
    items = words_to_items(words)
    lines = cluster_by_y_tolerance(items, tolerance=READING_ORDER_TOLERANCE, y=lambda item: item.y)
    text = join_lines(lines, x=lambda item: item.x, text=lambda item: item.text)
    return Page(page_number=page_number, items=items, width=float(width), height=float(height), text=text)


def _classify_open_error(error: Exception) -> PdfParseError:
    """Map a pdfplumber/pdfminer failure to a PdfParseError code."""
    message = str(error)
    error_names = {type(error).__name__, type(error.__cause__).__name__ if error.__cause__ else ""}

    if "password" in message.lower() or any("Password" in name for name in error_names):
        return PdfParseError(
            "This PDF is password-protected. Please upload an unlocked version.",
            "PASSWORD_PROTECTED",
            error,
        )
    if "really a PDF" in message or any("Syntax" in name for name in error_names):
        return PdfParseError(
            "This file appears to be corrupted or is not a valid PDF.", "INVALID_PDF", error
        )
    return PdfParseError(f"Failed to parse PDF: {message}", "PARSE_ERROR", error)


def load_pdf(
    pdf_path: Union[str, Path],
    max_pages: int = DEFAULT_MAX_PAGES,
    max_file_size: int = MAX_FILE_SIZE,
) -> ExtractedDocument:
    """
    Load a resume PDF into pages of positioned text and analyze its layout.

    Args:
        pdf_path: Path to PDF file
        max_pages: Maximum pages to extract (the rest are reported as truncated)
        max_file_size: Maximum accepted file size in bytes

    Returns:
        ExtractedDocument with pages, combined text, warnings and layout signals

    Raises:
        FileNotFoundError: If the PDF does not exist
        PdfParseError: If the file is not a loadable PDF
    """
    pdf_path = Path(pdf_path) if isinstance(pdf_path, str) else pdf_path
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    if pdf_path.suffix.lower() != ".pdf":
        raise PdfParseError("Invalid file type. Please upload a PDF file.", "INVALID_TYPE")

    file_size = pdf_path.stat().st_size
    if file_size > max_file_size:
        raise PdfParseError(
            f"File is too large. Please upload a PDF under {max_file_size // (1024 * 1024)}MB.",
            "FILE_TOO_LARGE",
        )

    pages: List[Page] = []
    warnings: List[ParserWarning] = []

    try:
        with pdfplumber.open(pdf_path) as pdf:
            total_pages = len(pdf.pages)
            for page_number, page in enumerate(pdf.pages[:max_pages], start=1):
                words = page.extract_words(extra_attrs=["fontname"])
                pages.append(build_page(page_number, words, page.width, page.height))
    except Exception as e:
        raise _classify_open_error(e) from e

    if total_pages > max_pages:
        warnings.append(
            ParserWarning(
                code="PAGES_TRUNCATED",
                message=f"Only processing first {max_pages} pages of {total_pages} total pages.",
            )
        )

    extracted_text = "\n\n".join(page.text for page in pages)
    if len(extracted_text.strip()) < LOW_TEXT_THRESHOLD:
        warnings.append(
            ParserWarning(
                code="LOW_TEXT_CONTENT",
                message="Very little text was extracted. This PDF may be image-based or scanned.",
            )
        )

    for warning in warnings:
        log_parser_warning(warning.code, warning.message)
    log_pdf_loaded(pdf_path.name, total_pages, len(pages), len(extracted_text))

    return ExtractedDocument(
        file_name=pdf_path.name,
        file_size_bytes=file_size,
        page_count=total_pages,
        pages=pages,
        extracted_text=extracted_text,
        warnings=warnings,
        layout_signals=analyze_layout(pages, file_size),
    )
