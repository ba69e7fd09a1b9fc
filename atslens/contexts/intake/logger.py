"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from atslens.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path, job_path: Optional[Path] = None, verbose: bool = False) -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this session
        job_path: Job description file, recorded in the provenance header
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Job description": job_path} if job_path else None,
        verbose=verbose,
    )


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_keyword_extraction(
    char_count: int, zone_chars: int, candidate_terms: int, ranked_terms: int
) -> None:
    """Log the size of each keyword extraction stage."""
    _log_debug(
        f"Extracted keywords from {char_count} chars: "
        f"{zone_chars} chars in requirement zones, "
        f"{candidate_terms} candidate terms, {ranked_terms} after deduplication"
    )
