"""Unit tests for the score guidance engine."""

import pytest

from atslens.contexts.guidance import (
    ActionTarget,
    GuidanceInput,
    GuidancePriority,
    generate_guidance,
)


def ids(items):
    return [item.id for item in items]


@pytest.mark.unit
class TestParseHealthRules:
    """Parse health drives the critical and moderate parse items."""

    def test_critical_parse_health(self):
        items = generate_guidance(GuidanceInput(parse_health=30))
        assert ids(items) == ["parse-critical"]
        assert items[0].priority == GuidancePriority.CRITICAL
        assert items[0].action_target == ActionTarget.FINDINGS

    def test_moderate_parse_health(self):
        assert ids(generate_guidance(GuidanceInput(parse_health=50))) == ["parse-moderate"]

    def test_boundary_40_is_moderate(self):
        assert ids(generate_guidance(GuidanceInput(parse_health=40))) == ["parse-moderate"]

    def test_missing_parse_health_fires_nothing(self):
        assert generate_guidance(GuidanceInput()) == []


@pytest.mark.unit
def test_every_negative_signal_in_rule_order():
    snapshot = GuidanceInput(
        parse_health=30,
        knockout_risk="high",
        knockout_count=2,
        keyword_coverage=20,
        semantic_match=40,
        recruiter_search=30,
        has_job_description=True,
    )
    items = generate_guidance(snapshot)

    assert ids(items) == [
        "parse-critical",
        "knockout-critical",
        "keyword-low",
        "semantic-low",
        "recruiter-low",
    ]
    assert items[1].title == "2 potential disqualifiers found"
    assert items[2].title == "Only 20% keyword match"
    assert [item.priority for item in items] == [
        GuidancePriority.CRITICAL,
        GuidancePriority.CRITICAL,
        GuidancePriority.IMPORTANT,
        GuidancePriority.SUGGESTED,
        GuidancePriority.SUGGESTED,
    ]


@pytest.mark.unit
class TestKnockoutRule:
    """High knockout risk with detected knockouts."""

    def test_singular_title(self):
        items = generate_guidance(
            GuidanceInput(knockout_risk="high", knockout_count=1, has_job_description=True)
        )
        assert items[0].title == "1 potential disqualifier found"

    def test_zero_count_does_not_fire(self):
        items = generate_guidance(GuidanceInput(knockout_risk="high", knockout_count=0))
        assert items == []

    def test_medium_risk_does_not_fire(self):
        items = generate_guidance(GuidanceInput(knockout_risk="medium", knockout_count=3))
        assert items == []


@pytest.mark.unit
class TestJobDescriptionRules:
    """Rules that depend on a job description being present."""

    def test_add_job_description_prompt(self):
        items = generate_guidance(GuidanceInput(parse_health=75))
        assert ids(items) == ["add-jd"]
        assert items[0].action_target == ActionTarget.JOB_MATCH

    def test_fractional_keyword_coverage_in_title(self):
        items = generate_guidance(
            GuidanceInput(parse_health=85, keyword_coverage=49.5, has_job_description=True, has_api_key=True)
        )
        assert ids(items) == ["keyword-low"]
        assert items[0].title == "Only 49.5% keyword match"

    def test_unlock_ai_with_one_free_analysis(self):
        items = generate_guidance(
            GuidanceInput(parse_health=75, has_job_description=True, free_tier_remaining=1)
        )
        assert ids(items) == ["unlock-ai"]
        assert items[0].description.endswith(" 1 free analysis remaining today.")

    def test_unlock_ai_with_several_free_analyses(self):
        items = generate_guidance(
            GuidanceInput(parse_health=75, has_job_description=True, free_tier_remaining=3)
        )
        assert items[0].description.endswith(" 3 free analyses remaining today.")

    def test_unlock_ai_without_free_analyses(self):
        items = generate_guidance(
            GuidanceInput(parse_health=75, has_job_description=True, free_tier_remaining=0)
        )
        assert items[0].description == "Unlock semantic matching and AI-powered suggestions."

    def test_paid_access_skips_unlock_ai(self):
        items = generate_guidance(GuidanceInput(parse_health=75, has_job_description=True, has_access=True))
        assert items == []


@pytest.mark.unit
class TestLookingGood:
    """Positive item when nothing else fired."""

    def test_great_shape_with_job_description(self):
        items = generate_guidance(
            GuidanceInput(parse_health=90, keyword_coverage=80, has_job_description=True, has_api_key=True)
        )
        assert ids(items) == ["looking-good"]
        assert items[0].action_target == ActionTarget.AI_SETTINGS

    def test_not_shown_alongside_other_items(self):
        items = generate_guidance(
            GuidanceInput(parse_health=90, semantic_match=10, has_job_description=True, has_api_key=True)
        )
        assert ids(items) == ["semantic-low"]

    def test_not_shown_below_great_threshold(self):
        items = generate_guidance(GuidanceInput(parse_health=70, has_job_description=True, has_api_key=True))
        assert items == []


@pytest.mark.unit
class TestGuidanceInput:
    """Snapshot construction from loosely keyed records."""

    def test_from_camel_case_snapshot(self):
        snapshot = GuidanceInput.from_snapshot(
            {"parseHealth": 72, "hasJobDescription": True, "freeTierRemaining": 2, "unknown": 1}
        )
        assert snapshot.parse_health == 72
        assert snapshot.has_job_description is True
        assert snapshot.free_tier_remaining == 2
        assert snapshot.keyword_coverage is None

    def test_from_snake_case_snapshot(self):
        snapshot = GuidanceInput.from_snapshot({"parse_health": 55, "knockout_risk": "high"})
        assert snapshot == GuidanceInput(parse_health=55, knockout_risk="high")

    def test_missing_parse_health_stays_none(self):
        assert GuidanceInput.from_snapshot({}).parse_health is None


@pytest.mark.unit
def test_item_to_dict_uses_plain_values():
    item = generate_guidance(GuidanceInput(parse_health=30))[0]
    data = item.to_dict()
    assert data["priority"] == "critical"
    assert data["action_target"] == "findings"
    assert data["id"] == "parse-critical"


@pytest.mark.unit
def test_every_action_target_is_reachable():
    snapshots = [
        GuidanceInput(parse_health=30),
        GuidanceInput(parse_health=75),
        GuidanceInput(parse_health=75, has_job_description=True),
    ]
    emitted = {item.action_target for snapshot in snapshots for item in generate_guidance(snapshot)}
    assert emitted == set(ActionTarget)
