"""
Parsing context logger.

Provides logging interface for parsing context with automatic [parse] prefix.
All parsing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from atslens.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[parse]"


def setup_parsing_logger(log_dir: Path, pdf_path: Optional[Path] = None, verbose: bool = False) -> Path:
    """
    Setup logger for parsing context.

    Args:
        log_dir: Directory for this session
        pdf_path: Resume being analyzed, recorded in the provenance header
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="parse",
        log_dir=log_dir,
        extra_provenance={"Resume": pdf_path} if pdf_path else None,
        verbose=verbose,
    )


# Wrapper functions with automatic [parse] prefix


def _log_info(message: str) -> None:
    """Log info message with [parse] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [parse] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level parsing-specific logging helpers


def log_pdf_loaded(file_name: str, page_count: int, pages_loaded: int, char_count: int) -> None:
    """Log a completed PDF load."""
    _log_info(f"Loaded {file_name}: {pages_loaded}/{page_count} pages, {char_count} chars")


def log_parser_warning(code: str, message: str) -> None:
    """Log a non-fatal extraction warning."""
    _log_warning(f"{code}: {message}")


def log_page_columns(page_number: int, columns: int, risk: str, row_ratio: float, right_ratio: float) -> None:
    """Log the per-page column decision and the ratios that drove it."""
    _log_debug(
        f"Page {page_number}: {columns} column(s), {risk} risk "
        f"(multi-column rows {row_ratio:.2f}, right half {right_ratio:.2f})"
    )


def log_layout_signals(signals, pages_checked: int) -> None:
    """
    Log the aggregated layout signals.

    Args:
        signals: PdfLayoutSignals from analyze_layout()
        pages_checked: Number of pages that contributed to the column decision
    """
    _log_debug(
        f"Layout over {pages_checked} page(s): {signals.estimated_columns} column(s), "
        f"merge risk {signals.column_merge_risk.value}, "
        f"header risk {signals.header_contact_risk.value}, "
        f"density {signals.text_density.value}"
    )


def log_contact_info(found: bool) -> None:
    """Log whether contact details appeared in the extracted text."""
    _log_debug("Contact info present in extracted text" if found else "No contact info in extracted text")


def log_layout_fallback(error: Exception) -> None:
    """Log that layout analysis fell back to the default signals."""
    _log_warning(f"Layout analysis fell back to defaults: {error}")
