"""Unit tests for layout analysis: column detection, density, and the layout sub-score."""

import pytest

from atslens.contexts.parsing import (
    Page,
    PdfLayoutSignals,
    RiskLevel,
    TextDensity,
    TextItem,
    analyze_layout,
    calculate_layout_score,
    detect_columns,
)
from atslens.contexts.parsing.layout_analysis import (
    THRESHOLDS,
    classify_text_density,
    find_left_margins,
    group_rows,
    has_contact_info,
)

PAGE_WIDTH = 600.0
PAGE_HEIGHT = 800.0


def make_item(x, y, width=100.0, text="word"):
    return TextItem(text=text, x=x, y=y, width=width, height=10.0)


def make_page(items, page_number=1, width=PAGE_WIDTH):
    text = " ".join(item.text for item in items)
    return Page(page_number=page_number, items=items, width=width, height=PAGE_HEIGHT, text=text)


def single_column_items():
    """Body lines at x=50, a few indented bullets, and right-aligned dates."""
    items = []
    for row in range(20):
        y = 100 + row * 20
        x = 70 if row % 4 == 1 else 50
        items.append(make_item(x, y, width=400.0, text="Built data pipelines for analytics"))
        if row % 4 == 0:
            items.append(make_item(500, y, width=60.0, text="2021-2023"))
    return items


def two_column_items():
    """A sidebar at x=50 and a main column at x=320 on every row."""
    items = []
    for row in range(20):
        y = 100 + row * 20
        items.append(make_item(50, y, width=150.0, text="Python"))
        items.append(make_item(320, y, width=200.0, text="Led migration to Kubernetes"))
    return items


def three_column_items():
    items = []
    for row in range(20):
        y = 100 + row * 20
        for x in (30, 230, 430):
            items.append(make_item(x, y, width=100.0, text="cell"))
    return items


@pytest.mark.unit
class TestDetectColumns:
    """Per-page column decisions."""

    def test_single_column_with_indents_and_dates(self):
        signal = detect_columns(make_page(single_column_items()))
        assert signal.columns == 1
        assert signal.risk == RiskLevel.LOW

    def test_two_columns(self):
        signal = detect_columns(make_page(two_column_items()))
        assert signal.columns == 2
        assert signal.risk == RiskLevel.MEDIUM

    def test_three_columns(self):
        signal = detect_columns(make_page(three_column_items()))
        assert signal.columns == 3
        assert signal.risk == RiskLevel.HIGH

    def test_sparse_page_reads_as_single_column(self):
        signal = detect_columns(make_page(two_column_items()[:9]))
        assert signal.columns == 1
        assert signal.risk == RiskLevel.LOW

    def test_zero_width_page_reads_as_single_column(self):
        signal = detect_columns(make_page(two_column_items(), width=0.0))
        assert signal.columns == 1


@pytest.mark.unit
def test_find_left_margins_orders_by_population():
    items = [make_item(50, y) for y in range(0, 100, 10)] + [make_item(320, y) for y in range(0, 40, 10)]
    margins = find_left_margins(items, PAGE_WIDTH)
    assert margins == [50.0, 320.0]


@pytest.mark.unit
def test_find_left_margins_drops_small_clusters():
    items = [make_item(50, y) for y in range(0, 50, 10)] + [make_item(320, 0), make_item(320, 10)]
    assert find_left_margins(items, PAGE_WIDTH) == [50.0]


@pytest.mark.unit
def test_group_rows_buckets_nearby_y():
    rows = group_rows([make_item(0, 97), make_item(0, 100), make_item(0, 130)], row_tolerance=12)
    assert sorted(len(items) for items in rows.values()) == [1, 2]


@pytest.mark.unit
class TestTextDensity:
    """Characters-per-byte buckets."""

    def test_low_density(self):
        assert classify_text_density(5000, 1_000_000) == TextDensity.LOW

    def test_medium_density(self):
        assert classify_text_density(2000, 100_000) == TextDensity.MEDIUM

    def test_high_density(self):
        assert classify_text_density(10_000, 100_000) == TextDensity.HIGH

    def test_zero_file_size_is_low(self):
        assert classify_text_density(5000, 0) == TextDensity.LOW


@pytest.mark.unit
class TestAnalyzeLayout:
    """Document-level aggregation."""

    def test_no_pages_returns_defaults(self):
        assert analyze_layout([], 10_000) == PdfLayoutSignals()

    def test_pages_without_items_return_defaults(self):
        pages = [Page(page_number=1, width=PAGE_WIDTH), Page(page_number=2, width=PAGE_WIDTH)]
        assert analyze_layout(pages, 10_000) == PdfLayoutSignals()

    def test_two_column_resume(self):
        signals = analyze_layout([make_page(two_column_items())], 20_000)
        assert signals.estimated_columns == 2
        assert signals.column_merge_risk == RiskLevel.MEDIUM
        assert signals.header_contact_risk == RiskLevel.LOW

    def test_worst_page_wins(self):
        pages = [make_page(single_column_items(), 1), make_page(three_column_items(), 2)]
        signals = analyze_layout(pages, 20_000)
        assert signals.estimated_columns == 3
        assert signals.column_merge_risk == RiskLevel.HIGH

    def test_only_first_pages_are_checked(self):
        pages = [make_page(single_column_items(), n) for n in range(1, THRESHOLDS.pages_checked + 1)]
        pages.append(make_page(three_column_items(), len(pages) + 1))
        signals = analyze_layout(pages, 20_000)
        assert signals.estimated_columns == 1

    def test_sparse_page_still_gets_density(self):
        items = [make_item(50, 100, text="x" * 500) for _ in range(3)]
        signals = analyze_layout([make_page(items)], 10_000)
        assert signals.estimated_columns == 1
        assert signals.text_density == TextDensity.HIGH

    def test_low_density_document(self):
        items = [make_item(50, 100 + row * 20, text="y" * 250) for row in range(20)]
        signals = analyze_layout([make_page(items)], 1_000_000)
        assert signals.text_density == TextDensity.LOW

    def test_same_input_same_output(self):
        pages = [make_page(two_column_items())]
        assert analyze_layout(pages, 20_000) == analyze_layout(pages, 20_000)

    def test_malformed_positions_fall_back_to_defaults(self):
        items = [TextItem(text="word", x=None, y=100.0 + row * 20, width=100.0, height=10.0) for row in range(12)]
        assert analyze_layout([make_page(items)], 20_000) == PdfLayoutSignals()

    def test_malformed_page_width_falls_back_to_defaults(self):
        page = make_page(two_column_items())
        page.width = None
        assert analyze_layout([page], 20_000) == PdfLayoutSignals()


@pytest.mark.unit
class TestHeaderContactRisk:
    """Header/contact risk stays low whether or not contact details are found."""

    def contact_page(self, text):
        items = single_column_items()
        items[0] = make_item(50, 60, width=300.0, text=text)
        return make_page(items)

    @pytest.mark.parametrize(
        "contact",
        ["jane.doe@example.com", "(555) 123-4567", "linkedin.com/in/janedoe"],
    )
    def test_contact_info_present(self, contact):
        signals = analyze_layout([self.contact_page(contact)], 20_000)
        assert signals.header_contact_risk == RiskLevel.LOW

    def test_contact_info_absent(self):
        signals = analyze_layout([make_page(single_column_items())], 20_000)
        assert signals.header_contact_risk == RiskLevel.LOW

    def test_two_column_page_with_contact_info(self):
        items = two_column_items() + [make_item(320, 60, width=200.0, text="jane@example.com 555-123-4567")]
        signals = analyze_layout([make_page(items)], 20_000)
        assert signals.estimated_columns == 2
        assert signals.header_contact_risk == RiskLevel.LOW


@pytest.mark.unit
def test_has_contact_info():
    assert has_contact_info("Jane Doe jane@example.com")
    assert has_contact_info("Call (555) 123-4567")
    assert has_contact_info("linkedin.com/in/janedoe")
    assert not has_contact_info("Senior Data Engineer")


@pytest.mark.unit
class TestLayoutScore:
    """0-100 sub-score from signals."""

    def test_missing_signals_score_full(self):
        assert calculate_layout_score(None) == 100

    def test_clean_single_column(self):
        signals = PdfLayoutSignals(text_density=TextDensity.HIGH)
        assert calculate_layout_score(signals) == 100

    def test_two_columns_medium_risk(self):
        signals = PdfLayoutSignals(
            estimated_columns=2, column_merge_risk=RiskLevel.MEDIUM, text_density=TextDensity.HIGH
        )
        assert calculate_layout_score(signals) == 75

    def test_defaults_penalize_low_density(self):
        assert calculate_layout_score(PdfLayoutSignals()) == 75

    def test_worst_case(self):
        signals = PdfLayoutSignals(
            estimated_columns=3,
            column_merge_risk=RiskLevel.HIGH,
            header_contact_risk=RiskLevel.HIGH,
            text_density=TextDensity.LOW,
        )
        assert calculate_layout_score(signals) == 5

    def test_medium_header_and_density(self):
        signals = PdfLayoutSignals(
            header_contact_risk=RiskLevel.MEDIUM, text_density=TextDensity.MEDIUM
        )
        assert calculate_layout_score(signals) == 82


@pytest.mark.unit
def test_layout_signals_to_dict():
    signals = PdfLayoutSignals(estimated_columns=2, column_merge_risk=RiskLevel.MEDIUM)
    assert signals.to_dict() == {
        "estimated_columns": 2,
        "column_merge_risk": "medium",
        "header_contact_risk": "low",
        "text_density": "low",
    }
