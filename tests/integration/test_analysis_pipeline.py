"""
Integration test for the analysis pipeline without a PDF.
Tests: job text → keywords → resume coverage → guidance items.
"""

import pytest

from atslens.contexts.guidance import GuidanceInput, generate_guidance
from atslens.contexts.intake import extract_keywords
from atslens.contexts.parsing import (
    Page,
    PdfLayoutSignals,
    RiskLevel,
    TextDensity,
    TextItem,
    analyze_layout,
    calculate_layout_score,
)
from atslens.contexts.targeting import calculate_coverage

JOB_TEXT = """
Machine Learning Engineer

Requirements:
- Experience with Python, PyTorch, and Kubernetes
- Knowledge of feature stores and model monitoring
- Must have shipped recommendation systems to production
"""

MATCHING_RESUME = """
Jane Doe - Machine Learning Engineer - jane@example.com
Shipped recommendation systems to production serving 20M users.
Experience with Python, PyTorch, and Kubernetes.
Knowledge of feature stores and model monitoring for ranking models.
"""

UNRELATED_RESUME = """
John Roe - Pastry Chef
Managed a bakery kitchen, designed seasonal dessert menus, trained apprentices.
"""


def resume_page(text):
    items = [
        TextItem(text=line, x=50.0, y=100.0 + row * 20, width=400.0, height=10.0)
        for row, line in enumerate(text.strip().splitlines())
    ]
    return Page(page_number=1, items=items, width=612.0, height=792.0, text=text)


@pytest.mark.integration
def test_matching_resume_scores_higher_than_unrelated():
    keywords = extract_keywords(JOB_TEXT)

    matching = calculate_coverage(MATCHING_RESUME, keywords)
    unrelated = calculate_coverage(UNRELATED_RESUME, keywords)

    assert keywords.critical
    assert matching.score > unrelated.score
    assert unrelated.missing_keywords


@pytest.mark.integration
def test_unrelated_resume_gets_keyword_guidance():
    keywords = extract_keywords(JOB_TEXT)
    coverage = calculate_coverage(UNRELATED_RESUME, keywords)

    items = generate_guidance(
        GuidanceInput(parse_health=85, keyword_coverage=coverage.score, has_job_description=True)
    )

    assert "keyword-low" in [item.id for item in items]


@pytest.mark.integration
def test_layout_score_feeds_guidance():
    signals = analyze_layout([resume_page(MATCHING_RESUME)], file_size=len(MATCHING_RESUME) * 4)
    score = calculate_layout_score(signals)

    assert signals.estimated_columns == 1
    assert signals.text_density == TextDensity.HIGH
    assert score == 100

    items = generate_guidance(GuidanceInput(parse_health=score))
    assert [item.id for item in items] == ["add-jd"]


@pytest.mark.integration
def test_risky_layout_triggers_critical_guidance():
    signals = PdfLayoutSignals(
        estimated_columns=3, column_merge_risk=RiskLevel.HIGH, text_density=TextDensity.LOW
    )
    items = generate_guidance(GuidanceInput(parse_health=calculate_layout_score(signals)))
    assert items[0].id == "parse-critical"
