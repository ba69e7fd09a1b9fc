"""
Layout analysis for resume PDFs.

Infers column structure, header/contact placement risk, and text density from
the positioned text items of the first pages of a document.

Column detection works in three passes per page:
1. Margin clustering: group item left edges (x) with a tolerance of 2% of page
   width. Clusters with at least 3 members are candidate left margins.
2. Row grouping: bucket items by y with a 12-unit tolerance into pseudo-rows.
3. Column streams: a row with two or more items is a "true column row" when any
   gap between neighbours (next x minus previous x + width) exceeds 15% of page
   width. The share of such rows, plus the share of items starting right of the
   page midpoint, decides between 1, 2 and 3 columns.

Bullet indentation and right-aligned dates produce a second margin cluster but
rarely a sustained gap across rows, so single-column resumes stay at 1 column.

Thresholds are loaded from configs/layout.yaml. They are classification
parameters: any change alters which documents are flagged, so bump the config
version with it.

Nothing in this module raises. Insufficient or odd input resolves to the
conservative reading (1 column, low risk, low density).
"""

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from atslens.contexts.parsing.logger import (
    log_contact_info,
    log_layout_fallback,
    log_layout_signals,
    log_page_columns,
)
from atslens.contexts.parsing.page_data_structure import (
    Page,
    PdfLayoutSignals,
    RiskLevel,
    TextDensity,
    TextItem,
)
from atslens.utils.config import load_config
from atslens.utils.patterns import ContactPatterns


@dataclass(frozen=True)
class LayoutThresholds:
    """Versioned classification parameters for layout analysis."""

    version: int
    pages_checked: int
    min_items_per_page: int
    cluster_tolerance_ratio: float
    min_cluster_size: int
    row_tolerance: float
    min_gap_ratio: float
    strong_row_ratio: float
    strong_right_half_ratio: float
    weak_row_ratio: float
    weak_right_half_ratio: float
    density_low_below: float
    density_medium_below: float

    @classmethod
    def from_config(cls, config) -> "LayoutThresholds":
        return cls(
            version=int(config.version),
            pages_checked=int(config.pages_checked),
            min_items_per_page=int(config.min_items_per_page),
            cluster_tolerance_ratio=float(config.margins.cluster_tolerance_ratio),
            min_cluster_size=int(config.margins.min_cluster_size),
            row_tolerance=float(config.rows.row_tolerance),
            min_gap_ratio=float(config.rows.min_gap_ratio),
            strong_row_ratio=float(config.decision.strong_row_ratio),
            strong_right_half_ratio=float(config.decision.strong_right_half_ratio),
            weak_row_ratio=float(config.decision.weak_row_ratio),
            weak_right_half_ratio=float(config.decision.weak_right_half_ratio),
            density_low_below=float(config.density.low_below),
            density_medium_below=float(config.density.medium_below),
        )


THRESHOLDS = LayoutThresholds.from_config(load_config("ATSLENS_LAYOUT_CONFIG_PATH", "layout.yaml"))


@dataclass(frozen=True)
class ColumnSignal:
    """Column decision for a single page."""

    columns: int
    risk: RiskLevel


SINGLE_COLUMN = ColumnSignal(columns=1, risk=RiskLevel.LOW)


# =============================================================================
# Column detection
# =============================================================================


def find_left_margins(
    items: Sequence[TextItem], page_width: float, thresholds: LayoutThresholds = THRESHOLDS
) -> List[float]:
    """
    Find the dominant left-margin positions where text starts.

    Single-column documents typically produce 1-2 margins (body + indent).
    Multi-column documents produce clusters in different page regions.

    Returns:
        Cluster centers with at least `min_cluster_size` members, most populated first
    """
    tolerance = page_width * thresholds.cluster_tolerance_ratio

    # Each cluster is [sum_of_x, count]; membership is tested against the running mean
    clusters: List[List[float]] = []
    for item in items:
        for cluster in clusters:
            if abs(item.x - cluster[0] / cluster[1]) < tolerance:
                cluster[0] += item.x
                cluster[1] += 1
                break
        else:
            clusters.append([item.x, 1])

    populated = [c for c in clusters if c[1] >= thresholds.min_cluster_size]
    populated.sort(key=lambda c: c[1], reverse=True)
    return [total / count for total, count in populated]


def group_rows(items: Sequence[TextItem], row_tolerance: float) -> Dict[float, List[TextItem]]:
    """Bucket items into pseudo-rows by rounding y to the nearest multiple of row_tolerance."""
    rows: Dict[float, List[TextItem]] = defaultdict(list)
    for item in items:
        # Round half up so bucket edges match across platforms
        row_y = math.floor(item.y / row_tolerance + 0.5) * row_tolerance
        rows[row_y].append(item)
    return rows


def _has_column_gap(row_items: List[TextItem], min_gap: float) -> bool:
    sorted_by_x = sorted(row_items, key=lambda item: item.x)
    for previous, current in zip(sorted_by_x, sorted_by_x[1:]):
        if current.x - (previous.x + previous.width) > min_gap:
            return True
    return False


def analyze_column_streams(
    items: Sequence[TextItem],
    left_margins: Sequence[float],
    page_width: float,
    thresholds: LayoutThresholds = THRESHOLDS,
    page_number: int = 0,
) -> ColumnSignal:
    """
    Decide whether left margins represent parallel columns or normal indentation.

    Args:
        items: Text items of one page
        left_margins: Output of find_left_margins()
        page_width: Page width in the items' coordinate units
        thresholds: Classification parameters
        page_number: Used for logging only

    Returns:
        ColumnSignal with 1, 2, or 3 columns and the matching merge risk
    """
    if len(left_margins) < 2 or not items:
        return SINGLE_COLUMN

    page_center = page_width / 2
    third = page_width / 3
    in_left_region = any(m < third for m in left_margins)
    in_middle_region = any(third <= m < 2 * third for m in left_margins)
    in_right_region = any(m >= 2 * third for m in left_margins)

    right_half_ratio = sum(1 for item in items if item.x > page_center) / len(items)

    rows = group_rows(items, thresholds.row_tolerance)
    min_gap = page_width * thresholds.min_gap_ratio
    column_rows = sum(
        1 for row_items in rows.values() if len(row_items) >= 2 and _has_column_gap(row_items, min_gap)
    )
    multi_column_row_ratio = column_rows / len(rows)

    if (
        multi_column_row_ratio > thresholds.strong_row_ratio
        and right_half_ratio > thresholds.strong_right_half_ratio
    ):
        if in_left_region and in_middle_region and in_right_region:
            signal = ColumnSignal(columns=3, risk=RiskLevel.HIGH)
        else:
            signal = ColumnSignal(columns=2, risk=RiskLevel.MEDIUM)
    elif (
        multi_column_row_ratio > thresholds.weak_row_ratio
        and right_half_ratio > thresholds.weak_right_half_ratio
    ):
        signal = ColumnSignal(columns=2, risk=RiskLevel.MEDIUM)
    else:
        signal = SINGLE_COLUMN

    log_page_columns(
        page_number, signal.columns, signal.risk.value, multi_column_row_ratio, right_half_ratio
    )
    return signal


def detect_columns(page: Page, thresholds: LayoutThresholds = THRESHOLDS) -> ColumnSignal:
    """Detect multi-column layout on one page; sparse or dimensionless pages read as 1 column."""
    if len(page.items) < thresholds.min_items_per_page or page.width <= 0:
        return SINGLE_COLUMN

    left_margins = find_left_margins(page.items, page.width, thresholds)
    return analyze_column_streams(
        page.items, left_margins, page.width, thresholds, page_number=page.page_number
    )


# =============================================================================
# Header/contact risk and density
# =============================================================================


def has_contact_info(text: str) -> bool:
    """True if text contains an email, a phone number, or a professional-network URL."""
    return bool(
        ContactPatterns.EMAIL.search(text)
        or ContactPatterns.PHONE.search(text)
        or ContactPatterns.PROFESSIONAL_NETWORK.search(text)
    )


def assess_header_contact_risk(pages: Sequence[Page]) -> RiskLevel:
    """
    Assess the risk that contact info sits in a PDF structural header/footer.

    Contact info found in the extracted text was, by definition, extracted, so
    it is low risk. Contact info that is absent is a separate "missing contact"
    concern and is also reported as low here. MEDIUM and HIGH stay reserved for
    a structural header/footer discriminator.
    """
    text = " ".join(item.text for page in pages for item in page.items)
    log_contact_info(has_contact_info(text))
    return RiskLevel.LOW


def classify_text_density(
    char_count: int, file_size: int, thresholds: LayoutThresholds = THRESHOLDS
) -> TextDensity:
    """
    Bucket extracted characters per file byte.

    Example:
        5,000 characters from a 1,000,000 byte file -> 0.005 -> LOW
    """
    if file_size <= 0:
        return TextDensity.LOW

    ratio = char_count / file_size
    if ratio < thresholds.density_low_below:
        return TextDensity.LOW
    if ratio < thresholds.density_medium_below:
        return TextDensity.MEDIUM
    return TextDensity.HIGH


# =============================================================================
# Document-level analysis
# =============================================================================


def analyze_layout(
    pages: Sequence[Page], file_size: int, thresholds: LayoutThresholds = THRESHOLDS
) -> PdfLayoutSignals:
    """
    Derive layout signals for a document.

    Column count and merge risk are the maximum over the first
    `pages_checked` pages that have any items. Density uses the text of every
    page supplied.

    Args:
        pages: Pages in document order
        file_size: Original document size in bytes
        thresholds: Classification parameters

    Returns:
        PdfLayoutSignals; the conservative default when no checked page has items
    """
    try:
        pages_with_items = [page for page in pages[: thresholds.pages_checked] if page.items]
        if not pages_with_items:
            return PdfLayoutSignals()

        column_signals = [detect_columns(page, thresholds) for page in pages_with_items]
        estimated_columns = max(signal.columns for signal in column_signals)
        column_merge_risk = max((signal.risk for signal in column_signals), key=lambda r: r.rank)

        char_count = sum(len(page.text) for page in pages)

        signals = PdfLayoutSignals(
            estimated_columns=estimated_columns,
            column_merge_risk=column_merge_risk,
            header_contact_risk=assess_header_contact_risk(pages_with_items),
            text_density=classify_text_density(char_count, file_size, thresholds),
        )
    except (TypeError, ValueError, ZeroDivisionError, AttributeError) as e:
        log_layout_fallback(e)
        return PdfLayoutSignals()

    log_layout_signals(signals, len(pages_with_items))
    return signals


# Sub-score penalties per signal value
COLUMN_PENALTIES = {3: 30, 2: 15}
MERGE_RISK_PENALTIES = {RiskLevel.HIGH: 25, RiskLevel.MEDIUM: 10}
HEADER_RISK_PENALTIES = {RiskLevel.HIGH: 15, RiskLevel.MEDIUM: 8}
DENSITY_PENALTIES = {TextDensity.LOW: 25, TextDensity.MEDIUM: 10}


def calculate_layout_score(signals: Optional[PdfLayoutSignals]) -> int:
    """
    Calculate a 0-100 layout sub-score from layout signals.

    Documents without layout signals (e.g. DOCX) get the full score.
    """
    if signals is None:
        return 100

    score = 100
    score -= COLUMN_PENALTIES.get(signals.estimated_columns, 0)
    score -= MERGE_RISK_PENALTIES.get(signals.column_merge_risk, 0)
    score -= HEADER_RISK_PENALTIES.get(signals.header_contact_risk, 0)
    score -= DENSITY_PENALTIES.get(signals.text_density, 0)
    return max(0, score)
