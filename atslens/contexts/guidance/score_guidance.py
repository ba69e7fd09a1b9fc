"""
Score guidance engine.

Pure function that maps analysis scores to prioritized "what to do next" guidance.

Rules are evaluated top to bottom; earlier rules rank higher within a priority
tier. Each rule decides independently whether to fire, several may fire, and
no rule suppresses another. The positive "looking good" item is the one
exception: it only appears when nothing else fired.

A rule whose input is missing (None) does not apply.
"""

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import List, Mapping, Optional

from atslens.contexts.guidance.logger import log_guidance

PARSE_HEALTH_CRITICAL_BELOW = 40
PARSE_HEALTH_MODERATE_BELOW = 60
PARSE_HEALTH_GREAT_AT = 80
KEYWORD_COVERAGE_LOW_BELOW = 50
SEMANTIC_MATCH_LOW_BELOW = 60
RECRUITER_SEARCH_LOW_BELOW = 50


class GuidancePriority(str, Enum):
    CRITICAL = "critical"
    IMPORTANT = "important"
    SUGGESTED = "suggested"


class ActionTarget(str, Enum):
    """Where the presentation layer sends the user when they act on an item."""

    FINDINGS = "findings"
    JOB_MATCH = "jobmatch"
    AI_SETTINGS = "ai-settings"


@dataclass(frozen=True)
class GuidanceItem:
    id: str
    priority: GuidancePriority
    title: str
    description: str
    action_label: str
    action_target: ActionTarget

    def to_dict(self) -> dict:
        data = asdict(self)
        data["priority"] = self.priority.value
        data["action_target"] = self.action_target.value
        return data


@dataclass(frozen=True)
class GuidanceInput:
    """
    Snapshot of scores for one analysis.

    Attributes:
        parse_health: 0-100 parsing health score
        knockout_risk: "low", "medium" or "high"
        knockout_count: Number of detected knockout requirements
        semantic_match: 0-100 conceptual alignment score
        recruiter_search: 0-100 recruiter searchability score
        keyword_coverage: 0-100 keyword coverage score
        has_job_description: A job posting was supplied
        has_api_key: The user configured their own model key
        has_access: The user has paid access
        free_tier_remaining: Free AI analyses left today
    """

    parse_health: Optional[float] = None
    knockout_risk: Optional[str] = None
    knockout_count: Optional[int] = None
    semantic_match: Optional[float] = None
    recruiter_search: Optional[float] = None
    keyword_coverage: Optional[float] = None
    has_job_description: bool = False
    has_api_key: bool = False
    has_access: bool = False
    free_tier_remaining: Optional[int] = None

    @classmethod
    def from_snapshot(cls, snapshot: Mapping) -> "GuidanceInput":
        """
        Build from a flat record with camelCase or snake_case keys.

        Unknown keys are ignored; missing keys take their defaults.

        Example:
            >>> GuidanceInput.from_snapshot({"parseHealth": 72, "hasJobDescription": True})
            GuidanceInput(parse_health=72, ..., has_job_description=True, ...)
        """
        values = {}
        for f in fields(cls):
            camel = _to_camel(f.name)
            if f.name in snapshot:
                values[f.name] = snapshot[f.name]
            elif camel in snapshot:
                values[f.name] = snapshot[camel]
        return cls(**values)


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _below(value: Optional[float], threshold: float) -> bool:
    return value is not None and value < threshold


def _at_least(value: Optional[float], threshold: float) -> bool:
    return value is not None and value >= threshold


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def generate_guidance(snapshot: GuidanceInput) -> List[GuidanceItem]:
    """
    Generate prioritized guidance items for the current analysis state.

    Args:
        snapshot: Scores and account flags for one analysis

    Returns:
        Items in rule order: critical first, then important, then suggested
    """
    items: List[GuidanceItem] = []
    parse_health = snapshot.parse_health

    # --- Critical: fix major issues before applying ---

    if _below(parse_health, PARSE_HEALTH_CRITICAL_BELOW):
        items.append(
            GuidanceItem(
                id="parse-critical",
                priority=GuidancePriority.CRITICAL,
                title="Major parsing issues detected",
                description="ATS software will struggle to read your resume. "
                "Fix layout and formatting issues before submitting applications.",
                action_label="View issues",
                action_target=ActionTarget.FINDINGS,
            )
        )

    if snapshot.knockout_risk == "high" and (snapshot.knockout_count or 0) > 0:
        count = snapshot.knockout_count
        items.append(
            GuidanceItem(
                id="knockout-critical",
                priority=GuidancePriority.CRITICAL,
                title=f"{count} potential disqualifier{'s' if count > 1 else ''} found",
                description="These requirements could auto-reject your application. "
                "Review them carefully before applying.",
                action_label="Review knockouts",
                action_target=ActionTarget.JOB_MATCH,
            )
        )

    # --- Important: address these to improve your chances ---

    if _at_least(parse_health, PARSE_HEALTH_CRITICAL_BELOW) and _below(
        parse_health, PARSE_HEALTH_MODERATE_BELOW
    ):
        items.append(
            GuidanceItem(
                id="parse-moderate",
                priority=GuidancePriority.IMPORTANT,
                title="Moderate parsing issues",
                description="Some parts of your resume may not parse correctly. "
                "Fix the critical findings first.",
                action_label="View findings",
                action_target=ActionTarget.FINDINGS,
            )
        )

    if not snapshot.has_job_description and _at_least(parse_health, PARSE_HEALTH_MODERATE_BELOW):
        items.append(
            GuidanceItem(
                id="add-jd",
                priority=GuidancePriority.IMPORTANT,
                title="Add a job description",
                description="Paste the job posting to unlock keyword matching, "
                "knockout detection, and compatibility scores.",
                action_label="Add job description",
                action_target=ActionTarget.JOB_MATCH,
            )
        )

    if _below(snapshot.keyword_coverage, KEYWORD_COVERAGE_LOW_BELOW):
        items.append(
            GuidanceItem(
                id="keyword-low",
                priority=GuidancePriority.IMPORTANT,
                title=f"Only {_format_number(snapshot.keyword_coverage)}% keyword match",
                description="Your resume is missing many terms from the job description. "
                "Add relevant skills and experience.",
                action_label="See keywords",
                action_target=ActionTarget.JOB_MATCH,
            )
        )

    # --- Suggested: optimize further ---

    if (
        _at_least(parse_health, PARSE_HEALTH_MODERATE_BELOW)
        and snapshot.has_job_description
        and not snapshot.has_api_key
        and not snapshot.has_access
    ):
        remaining = snapshot.free_tier_remaining
        free_note = ""
        if remaining is not None and remaining > 0:
            free_note = f" {remaining} free {'analysis' if remaining == 1 else 'analyses'} remaining today."
        items.append(
            GuidanceItem(
                id="unlock-ai",
                priority=GuidancePriority.SUGGESTED,
                title="Get deeper AI insights",
                description=f"Unlock semantic matching and AI-powered suggestions.{free_note}",
                action_label="Configure AI",
                action_target=ActionTarget.AI_SETTINGS,
            )
        )

    if _below(snapshot.semantic_match, SEMANTIC_MATCH_LOW_BELOW):
        items.append(
            GuidanceItem(
                id="semantic-low",
                priority=GuidancePriority.SUGGESTED,
                title="Low conceptual alignment",
                description="Your experience descriptions don't closely match the job's language. "
                "Rewrite bullets to mirror the posting.",
                action_label="See match details",
                action_target=ActionTarget.JOB_MATCH,
            )
        )

    if _below(snapshot.recruiter_search, RECRUITER_SEARCH_LOW_BELOW):
        items.append(
            GuidanceItem(
                id="recruiter-low",
                priority=GuidancePriority.SUGGESTED,
                title="Low searchability score",
                description="Recruiters searching for this role may not find you. "
                "Use industry-standard job titles and terms.",
                action_label="See search score",
                action_target=ActionTarget.JOB_MATCH,
            )
        )

    # --- Positive: only when nothing else fired ---

    if not items and _at_least(parse_health, PARSE_HEALTH_GREAT_AT):
        if snapshot.has_job_description:
            description = (
                "Your resume parses well and matches the job description. "
                "Fine-tune with AI for the best results."
            )
            action_label, action_target = "Fine-tune with AI", ActionTarget.AI_SETTINGS
        else:
            description = (
                "Your resume parses well. Add a job description to see how it matches specific roles."
            )
            action_label, action_target = "Add job description", ActionTarget.JOB_MATCH
        items.append(
            GuidanceItem(
                id="looking-good",
                priority=GuidancePriority.SUGGESTED,
                title="Resume is in great shape",
                description=description,
                action_label=action_label,
                action_target=action_target,
            )
        )

    log_guidance([item.id for item in items])
    return items
