"""
Regex patterns shared across contexts.

Pattern classes follow the frozen-dataclass convention: class-level compiled
patterns, grouped by what they recognize.
"""

import re
from dataclasses import dataclass

# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Contact details found in resumes and job postings.
    """

    EMAIL: re.Pattern = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
    PHONE: re.Pattern = re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
    URL: re.Pattern = re.compile(r"https?://\S+")
    PROFESSIONAL_NETWORK: re.Pattern = re.compile(r"linkedin\.com", re.IGNORECASE)
