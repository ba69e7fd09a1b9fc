"""
Page data structures for the Parsing context.

TextItem and Page carry the positioned text produced by a PDF extractor.
PdfLayoutSignals is the stable output contract consumed by downstream scoring.

Coordinates follow a single origin convention per document; the layout
heuristics only compare positions within a page, so either top-left or
bottom-left origin works as long as it is consistent.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RiskLevel(str, Enum):
    """Qualitative risk tier. Ordered LOW < MEDIUM < HIGH."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _RISK_RANK[self]


_RISK_RANK = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}


class TextDensity(str, Enum):
    """Extracted characters per file byte, bucketed. LOW may indicate an image-based PDF."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class TextItem:
    """One fragment of extracted text with its position on the page."""

    text: str
    x: float
    y: float
    width: float
    height: float
    font_name: Optional[str] = None


@dataclass
class Page:
    """Ordered text items belonging to one page, plus the page's reading-order text."""

    page_number: int
    items: List[TextItem] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0
    text: str = ""


@dataclass(frozen=True)
class PdfLayoutSignals:
    """
    Layout signals derived from the first pages of a document.

    Attributes:
        estimated_columns: 1, 2, or 3
        column_merge_risk: Likelihood that linear extraction interleaves columns
        header_contact_risk: Risk that contact info sits in an unparsed header
        text_density: Extracted characters relative to file size
    """

    estimated_columns: int = 1
    column_merge_risk: RiskLevel = RiskLevel.LOW
    header_contact_risk: RiskLevel = RiskLevel.LOW
    text_density: TextDensity = TextDensity.LOW

    def to_dict(self) -> dict:
        return {
            "estimated_columns": self.estimated_columns,
            "column_merge_risk": self.column_merge_risk.value,
            "header_contact_risk": self.header_contact_risk.value,
            "text_density": self.text_density.value,
        }
