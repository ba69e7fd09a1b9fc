"""
Keyword coverage scoring.

Calculates how well a resume covers the keywords extracted from a job description.

Scoring formula:
- Base score: (found critical / total critical) x 100
- Optional bonus: up to +10 for matching optional keywords
- Soft skills bonus: +1 per universal soft skill, up to +5
- Floor 8 for any resume with text (keeps field mismatches off 0%), cap 100
"""

import re
from dataclasses import asdict, dataclass, field
from typing import List, Optional, Tuple

from atslens.contexts.intake.keyword_extraction import KeywordSet
from atslens.contexts.intake.synonyms import get_synonyms
from atslens.contexts.intake.vocabulary import UNIVERSAL_SOFT_SKILLS
from atslens.contexts.targeting.logger import log_coverage

MIN_SCORE_FLOOR = 8
OPTIONAL_BONUS_MAX = 10
SOFT_SKILL_BONUS_MAX = 5

# Keywords this short only match on word boundaries
SHORT_KEYWORD_LENGTH = 4

MATCHING_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s\-/+#.]")
WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Finding:
    """One coverage observation, rendered by the presentation layer."""

    id: str
    category: str
    severity: str
    title: str
    description: str
    impact: str
    suggestion: Optional[str] = None


@dataclass
class CoverageResult:
    """Keyword coverage of a resume against a KeywordSet."""

    score: int
    found_keywords: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)
    bonus_keywords: List[str] = field(default_factory=list)
    findings: List[Finding] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def normalize_for_matching(text: str) -> str:
    """Lowercase, keep characters that appear in tech names (+ # . / -), collapse whitespace."""
    text = MATCHING_DISALLOWED_CHARS.sub(" ", text.lower())
    return WHITESPACE.sub(" ", text).strip()


def get_variations(keyword: str) -> List[str]:
    """
    Common surface variations of a keyword.

    Examples:
        >>> get_variations("api")
        ['apis']
        >>> get_variations("full-stack")
        ['full-stacks', 'full stack', 'fullstack']
    """
    variations = []

    if keyword.endswith("s"):
        variations.append(keyword[:-1])
    else:
        variations.append(keyword + "s")

    if keyword.endswith("ing"):
        stem = keyword[:-3]
        variations.extend([stem, stem + "e", stem + "ed"])

    if keyword.endswith("ed"):
        variations.extend([keyword[:-2], keyword[:-1], keyword[:-2] + "ing"])

    if "-" in keyword:
        variations.extend([keyword.replace("-", " "), keyword.replace("-", "")])

    if " " in keyword:
        variations.extend([keyword.replace(" ", "-"), keyword.replace(" ", "")])

    return variations


def keyword_matches(normalized_text: str, keyword: str) -> bool:
    """True if the keyword, a synonym, or a simple variation occurs in the normalized text."""
    normalized_keyword = keyword.lower().strip()
    if not normalized_keyword:
        return False

    if normalized_keyword in normalized_text:
        return True

    if any(synonym in normalized_text for synonym in get_synonyms(normalized_keyword)):
        return True

    if any(variation and variation in normalized_text for variation in get_variations(normalized_keyword)):
        return True

    if len(normalized_keyword) <= SHORT_KEYWORD_LENGTH:
        return re.search(rf"\b{re.escape(normalized_keyword)}\b", normalized_text) is not None

    return False


def _partition(normalized_text: str, keywords: List[str]) -> Tuple[List[str], List[str]]:
    found, missing = [], []
    for keyword in keywords:
        (found if keyword_matches(normalized_text, keyword) else missing).append(keyword)
    return found, missing


def find_soft_skills(normalized_text: str) -> List[str]:
    """Universal soft skills present in the text, title-cased for display."""
    return [
        " ".join(word[:1].upper() + word[1:] for word in skill.split(" "))
        for skill in UNIVERSAL_SOFT_SKILLS
        if skill.lower() in normalized_text
    ]


def _summary_finding(score: int, found: int, total: int) -> Finding:
    if score >= 90:
        return Finding(
            id="excellent-keyword-match",
            category="keyword",
            severity="info",
            title="Excellent Keyword Match",
            description=f"Found {found} of {total} critical keywords. Strong alignment with this role.",
            impact="Your resume is well-aligned with this job posting.",
        )
    if score >= 70:
        return Finding(
            id="good-keyword-match",
            category="keyword",
            severity="info",
            title="Good Keyword Coverage",
            description=f"Found {found} of {total} critical keywords ({score}% match).",
            impact="Your resume covers most key requirements.",
        )
    if score >= 40:
        return Finding(
            id="moderate-keyword-match",
            category="keyword",
            severity="medium",
            title="Moderate Keyword Coverage",
            description=f"Found {found} of {total} critical keywords ({score}% match).",
            impact="Consider adding missing keywords if they match your experience.",
        )
    if score >= 20:
        return Finding(
            id="low-keyword-match",
            category="keyword",
            severity="high",
            title="Low Keyword Coverage",
            description=f"Found only {found} of {total} critical keywords ({score}% match).",
            impact="Your resume may not be surfaced by ATS for this role. "
            "Consider if this job is a good match.",
        )
    return Finding(
        id="minimal-keyword-match",
        category="keyword",
        severity="high",
        title="Minimal Keyword Match",
        description=f"Found only {found} of {total} critical keywords. "
        "This role may not align with your background.",
        impact="This job appears to be in a different field from your experience. "
        "Consider roles that better match your skills.",
    )


def _preview(items: List[str], limit: int) -> str:
    return ", ".join(items[:limit]) + ("..." if len(items) > limit else "")


def calculate_coverage(resume_text: str, keywords: KeywordSet) -> CoverageResult:
    """
    Calculate keyword coverage between resume text and job-description keywords.

    Args:
        resume_text: Plain text extracted from the resume
        keywords: Output of extract_keywords() for the job description

    Returns:
        CoverageResult; its score feeds GuidanceInput.keyword_coverage
    """
    if not resume_text or not resume_text.strip():
        return CoverageResult(
            score=0,
            missing_keywords=list(keywords.critical),
            findings=[
                Finding(
                    id="empty-resume",
                    category="extraction",
                    severity="critical",
                    title="No Resume Text",
                    description="No text was extracted from your resume.",
                    impact="Cannot calculate keyword coverage without resume content.",
                )
            ],
        )

    if not keywords.critical and not keywords.optional:
        return CoverageResult(
            score=100,
            findings=[
                Finding(
                    id="no-keywords",
                    category="keyword",
                    severity="info",
                    title="No Specific Keywords Identified",
                    description="No specific keywords were extracted from the job description.",
                    impact="This may indicate a generic job posting or one without technical requirements.",
                )
            ],
        )

    normalized_resume = normalize_for_matching(resume_text)
    found_critical, missing_critical = _partition(normalized_resume, keywords.critical)
    found_optional, _ = _partition(normalized_resume, keywords.optional)
    soft_skills = find_soft_skills(normalized_resume)

    total_critical = len(keywords.critical)
    base_score = len(found_critical) / total_critical * 100 if total_critical else 100.0
    optional_bonus = (
        len(found_optional) / len(keywords.optional) * OPTIONAL_BONUS_MAX if keywords.optional else 0.0
    )
    soft_skill_bonus = min(len(soft_skills), SOFT_SKILL_BONUS_MAX)

    raw_score = base_score + optional_bonus + soft_skill_bonus
    # Clamp, then round half up
    score = int(min(max(raw_score, MIN_SCORE_FLOOR), 100) + 0.5)

    findings = [_summary_finding(score, len(found_critical), total_critical)]
    findings.extend(
        Finding(
            id=f"missing-keyword-{index}",
            category="keyword",
            severity="medium",
            title=f'Missing Keyword: "{keyword}"',
            description=f'The keyword "{keyword}" was not found in your resume.',
            impact="ATS systems may not surface your resume if this is a key requirement.",
            suggestion=f'If you have this skill or experience, add the exact phrase "{keyword}" to your resume.',
        )
        for index, keyword in enumerate(missing_critical)
    )

    if found_optional:
        findings.append(
            Finding(
                id="bonus-keywords-found",
                category="keyword",
                severity="info",
                title="Nice-to-Have Keywords Found",
                description=f"Your resume includes {len(found_optional)} preferred qualifications: "
                f"{_preview(found_optional, 5)}.",
                impact="These additional matches strengthen your application.",
            )
        )

    if soft_skills:
        findings.append(
            Finding(
                id="soft-skills-found",
                category="keyword",
                severity="info",
                title="Transferable Skills Detected",
                description=f"Found {len(soft_skills)} universal soft skills: {_preview(soft_skills, 4)}.",
                impact="Soft skills are valued across all roles and contribute to your match score.",
            )
        )

    log_coverage(score, len(found_critical), total_critical, len(found_optional), len(soft_skills))

    return CoverageResult(
        score=score,
        found_keywords=found_critical,
        missing_keywords=missing_critical,
        bonus_keywords=found_optional + soft_skills,
        findings=findings,
    )
