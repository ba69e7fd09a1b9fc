"""
Parsing Context

Responsibilities:
- Loads PDF pages into positioned text items
- Infers multi-column structure, header-placement risk, and text density
- Summarizes layout signals as a 0-100 layout sub-score

Owns: Page data structures, layout heuristics, PDF loading
Never: Interprets job descriptions or produces user guidance
"""

from atslens.contexts.parsing.exceptions import PdfParseError
from atslens.contexts.parsing.layout_analysis import (
    analyze_layout,
    calculate_layout_score,
    detect_columns,
)
from atslens.contexts.parsing.page_data_structure import (
    Page,
    PdfLayoutSignals,
    RiskLevel,
    TextDensity,
    TextItem,
)
from atslens.contexts.parsing.pdf_loader import ExtractedDocument, ParserWarning, load_pdf

__all__ = [
    "ExtractedDocument",
    "Page",
    "ParserWarning",
    "PdfLayoutSignals",
    "PdfParseError",
    "RiskLevel",
    "TextDensity",
    "TextItem",
    "analyze_layout",
    "calculate_layout_score",
    "detect_columns",
    "load_pdf",
]
