"""
Guidance context logger.

Provides logging interface for guidance context with automatic [guide] prefix.
"""

from typing import List

from loguru import logger

CONTEXT_PREFIX = "[guide]"


def log_guidance(item_ids: List[str]) -> None:
    """Log which guidance rules fired, in order."""
    logger.debug(f"{CONTEXT_PREFIX} {len(item_ids)} item(s): {', '.join(item_ids) or '(none)'}")
