"""
Shared utilities for ATSLens.

Common functionality used across contexts:
- Logger setup with provenance
- Configuration loading
- Positioned-text line clustering
- Shared contact regexes (patterns.py)
"""

from atslens.utils.config import load_config
from atslens.utils.pdf_processing import cluster_by_y_tolerance

__all__ = ["cluster_by_y_tolerance", "load_config"]
