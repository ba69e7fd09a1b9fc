"""
Job description keyword extraction and ranking.

Turns free-form job-posting text into a prioritized keyword list using
frequency and context, without any model calls.

Pipeline:
1. Normalize: lowercase, collapse punctuated tech names ("c++" -> "cplusplus"),
   strip URLs and emails, keep only [a-z0-9], whitespace, "-" and "/".
2. Requirement zones: the 200 characters (original text offsets) following each
   requirement indicator ("required", "experience with", ...).
3. N-grams: unigrams, bigrams and trigrams over the normalized tokens.
4. Scoring: frequency, boosted for requirement zones, ALL-CAPS usage,
   multi-word specificity and known tech terms, damped for generic filler.
5. Rank and deduplicate: keep the more specific term when one term contains another.
6. Restore display spelling of collapsed tech names ("cplusplus" -> "C++").
7. Partition: top 15 critical, next 15 optional.

Usage:
    from atslens.contexts.intake import extract_keywords

    keywords = extract_keywords(job_text)
    keywords.critical  # ['kubernetes and aws', ...]
"""

import re
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Set

from nltk.util import ngrams

from atslens.contexts.intake.logger import log_keyword_extraction
from atslens.contexts.intake.vocabulary import (
    COMPOUND_TERMS,
    DISPLAY_FORMS,
    GENERIC_TERMS,
    PRESERVED_TERMS,
    REQUIREMENT_INDICATORS,
    SKILL_SYNONYMS,
    is_stopword,
)
from atslens.utils.patterns import ContactPatterns

CRITICAL_LIMIT = 15
OPTIONAL_LIMIT = 15

REQUIREMENT_ZONE_LENGTH = 200
MIN_TOKEN_LENGTH = 2

# Longest kept term tracked by the containment substring index
INDEXED_TERM_LENGTH = 32

# Score multipliers
REQUIREMENT_ZONE_BOOST = 2.0
ALL_CAPS_BOOST = 1.5
BIGRAM_BOOST = 1.3
TRIGRAM_BOOST = 1.5
TECH_TERM_BOOST = 1.5
GENERIC_TERM_PENALTY = 0.5

DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s\-/]")
WHITESPACE = re.compile(r"\s+")
NUMERIC = re.compile(r"^\d+$")


@dataclass
class KeywordSet:
    """
    Keywords extracted from a job description, ordered by descending relevance.

    critical and optional are disjoint slices of all; all holds no term that is
    a substring of another.
    """

    critical: List[str] = field(default_factory=list)
    optional: List[str] = field(default_factory=list)
    all: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


# =============================================================================
# Normalization and requirement zones
# =============================================================================


def normalize_text(text: str) -> str:
    """Lowercase and strip text down to tokenizable characters, keeping tech names whole."""
    normalized = text.lower()
    for punctuated, token in COMPOUND_TERMS:
        normalized = normalized.replace(punctuated, token)

    normalized = ContactPatterns.URL.sub(" ", normalized)
    normalized = ContactPatterns.EMAIL.sub(" ", normalized)
    normalized = DISALLOWED_CHARS.sub(" ", normalized)
    return WHITESPACE.sub(" ", normalized).strip()


def find_requirement_zones(text: str) -> FrozenSet[int]:
    """
    Mark the original-text offsets that follow a requirement indicator.

    Every occurrence of every indicator (case-insensitive) marks itself and the
    characters after it, up to REQUIREMENT_ZONE_LENGTH in total.
    """
    lower_text = text.lower()
    zones: Set[int] = set()

    for indicator in REQUIREMENT_INDICATORS:
        pos = lower_text.find(indicator)
        while pos != -1:
            zones.update(range(pos, min(pos + REQUIREMENT_ZONE_LENGTH, len(text))))
            pos = lower_text.find(indicator, pos + 1)

    return frozenset(zones)


# =============================================================================
# N-gram extraction
# =============================================================================


def extract_unigrams(tokens: List[str]) -> List[str]:
    """Single tokens of 2+ chars that are neither stopwords nor pure numbers."""
    return [
        token
        for token in tokens
        if len(token) >= MIN_TOKEN_LENGTH and not is_stopword(token) and not NUMERIC.match(token)
    ]


def extract_bigrams(tokens: List[str]) -> List[str]:
    """Adjacent pairs of 2+ char tokens where at least one token is not a stopword."""
    return [
        " ".join(pair)
        for pair in ngrams(tokens, 2)
        if all(len(token) >= MIN_TOKEN_LENGTH for token in pair)
        and not all(is_stopword(token) for token in pair)
    ]


def extract_trigrams(tokens: List[str]) -> List[str]:
    """Adjacent triples of 2+ char tokens with at most one stopword."""
    return [
        " ".join(triple)
        for triple in ngrams(tokens, 3)
        if all(len(token) >= MIN_TOKEN_LENGTH for token in triple)
        and sum(1 for token in triple if is_stopword(token)) <= 1
    ]


# =============================================================================
# Scoring and ranking
# =============================================================================


def score_terms(terms: Iterable[str], original_text: str, requirement_zones: FrozenSet[int]) -> Dict[str, float]:
    """
    Score each unique term, starting from its raw frequency.

    Multipliers:
        x2   first occurrence in the original text lies in a requirement zone
        x1.5 term appears in ALL CAPS somewhere in the original text
        x1.3 two-word term, x1.5 three-word term
        x1.5 preserved tech term or canonical synonym-table entry
        x0.5 generic filler term

    Returns:
        Dict of term -> score, in first-seen order
    """
    lower_original = original_text.lower()
    scores: Dict[str, float] = {}

    for term, count in Counter(terms).items():
        score = float(count)

        first_pos = lower_original.find(term)
        if first_pos != -1 and first_pos in requirement_zones:
            score *= REQUIREMENT_ZONE_BOOST

        if term.upper() in original_text:
            score *= ALL_CAPS_BOOST

        word_count = len(term.split(" "))
        if word_count == 2:
            score *= BIGRAM_BOOST
        elif word_count == 3:
            score *= TRIGRAM_BOOST

        if term in PRESERVED_TERMS or term in SKILL_SYNONYMS:
            score *= TECH_TERM_BOOST

        if term in GENERIC_TERMS:
            score *= GENERIC_TERM_PENALTY

        scores[term] = score

    return scores


def _proper_substrings(term: str) -> Set[str]:
    n = len(term)
    return {term[i:j] for i in range(n) for j in range(i + 1, n + 1) if j - i < n}


def deduplicate_and_rank(scores: Dict[str, float]) -> List[str]:
    """
    Rank terms by score and drop containment duplicates.

    Terms are visited in descending score order (ties: more words first, then
    longer). A term contained in an already-kept term is skipped; kept terms
    contained in the new term are dropped in its favor. The result keeps score
    order among survivors.

    Kept terms up to INDEXED_TERM_LENGTH chars are tracked in a substring
    index; longer kept terms are scanned directly, so a single very long token
    costs a linear scan rather than a quadratic substring set.
    """
    ranked = sorted(scores.items(), key=lambda kv: (-kv[1], -kv[0].count(" "), -len(kv[0])))

    kept: Dict[str, None] = {}
    long_kept: Dict[str, None] = {}
    # substring -> number of indexed kept terms that properly contain it
    contained_in_indexed: Counter = Counter()

    for term, _ in ranked:
        if contained_in_indexed[term] or any(term in longer for longer in long_kept):
            continue

        if len(term) <= INDEXED_TERM_LENGTH:
            substrings = _proper_substrings(term)
            shorter_kept = [s for s in substrings if s in kept]
        else:
            substrings = None
            shorter_kept = [k for k in kept if k in term]

        for shorter in shorter_kept:
            del kept[shorter]
            if shorter in long_kept:
                del long_kept[shorter]
            else:
                contained_in_indexed.subtract(_proper_substrings(shorter))

        kept[term] = None
        if substrings is None:
            long_kept[term] = None
        else:
            contained_in_indexed.update(substrings)

    return list(kept)


def restore_display_form(term: str) -> str:
    """Convert collapsed tech tokens back to their canonical spelling ("nodejs" -> "Node.js")."""
    for token, display in DISPLAY_FORMS:
        term = term.replace(token, display)
    return term


# =============================================================================
# Entry point
# =============================================================================


def extract_keywords(job_text: str) -> KeywordSet:
    """
    Extract and rank keywords from a job description.

    Deterministic and side-effect free. Empty or whitespace-only input yields
    an empty KeywordSet.

    Args:
        job_text: Raw job-posting text

    Returns:
        KeywordSet with critical (top 15), optional (next 15) and all ranked terms
    """
    if not isinstance(job_text, str) or not job_text.strip():
        return KeywordSet()

    tokens = normalize_text(job_text).split(" ")
    requirement_zones = find_requirement_zones(job_text)

    terms = extract_unigrams(tokens) + extract_bigrams(tokens) + extract_trigrams(tokens)
    scores = score_terms(terms, job_text, requirement_zones)
    ranked = [restore_display_form(term) for term in deduplicate_and_rank(scores)]

    log_keyword_extraction(len(job_text), len(requirement_zones), len(scores), len(ranked))

    return KeywordSet(
        critical=ranked[:CRITICAL_LIMIT],
        optional=ranked[CRITICAL_LIMIT : CRITICAL_LIMIT + OPTIONAL_LIMIT],
        all=ranked,
    )
