"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[target]"


def log_coverage(score: int, found: int, total: int, optional_found: int, soft_skills: int) -> None:
    """Log a coverage result and the matches that produced it."""
    logger.debug(
        f"{CONTEXT_PREFIX} Coverage {score}: {found}/{total} critical, "
        f"{optional_found} optional, {soft_skills} soft skills"
    )
