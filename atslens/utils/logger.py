"""
Session logging for analysis runs.

Each run writes to its own directory (outs/logs/{run}_{YYYYmmdd_HHMMSS}/ by
default, root overridable with ATSLENS_LOGS_PATH). The file sink keeps DEBUG
detail from every context; the console sink shows INFO and above unless the
caller asks for verbose output.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

import atslens

load_dotenv()

LOGS_PATH = Path(os.getenv("ATSLENS_LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def session_log_dir(run_name: str, root: Optional[Path] = None) -> Path:
    """Timestamped directory for one run, e.g. outs/logs/analyze_20260101_120000."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return (root or LOGS_PATH) / f"{run_name}_{timestamp}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    verbose: bool = False,
) -> Path:
    """
    Route loguru output to {log_dir}/{context_name}.log and the console.

    Replaces any previously configured sinks, so call once per run.

    Args:
        context_name: Context identifier ("parse", "intake", ...), used as the file name
        log_dir: Directory for this run, created if missing
        extra_provenance: Additional key-value pairs for the provenance header
        verbose: Show DEBUG messages on the console as well

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level="DEBUG" if verbose else "INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def setup_console_logger(level: str = "WARNING") -> None:
    """Console-only logging for runs without a log directory."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Write a provenance header: command line, environment, and config overrides.

    Config overrides are listed so a log can be matched to the thresholds and
    vocabulary that produced it.
    """
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]} | atslens {atslens.__version__}")

    for env_var in ("ATSLENS_LAYOUT_CONFIG_PATH", "ATSLENS_VOCABULARY_PATH"):
        if os.getenv(env_var):
            logger.info(f"{env_var}: {os.getenv(env_var)}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
