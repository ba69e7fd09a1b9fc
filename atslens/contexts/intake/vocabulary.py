"""
Fixed vocabulary tables for keyword extraction and matching.

Loaded once from configs/vocabulary.yaml (override with ATSLENS_VOCABULARY_PATH)
and frozen into immutable structures. Tables:
    STOPWORDS: English plus job-posting boilerplate words
    PRESERVED_TERMS: Short technical terms that are never treated as stopwords
    REQUIREMENT_INDICATORS: Phrases that open a requirement zone
    GENERIC_TERMS: Filler terms whose score is halved
    COMPOUND_TERMS: (punctuated name, collapsed token) pairs, applied in order
    DISPLAY_FORMS: (collapsed token, display spelling) pairs, applied in order
    SKILL_SYNONYMS: canonical phrase -> alternates
    UNIVERSAL_SOFT_SKILLS: Soft skills checked on every resume
"""

from types import MappingProxyType

from omegaconf import OmegaConf

from atslens.utils.config import load_config

_tables = OmegaConf.to_container(load_config("ATSLENS_VOCABULARY_PATH", "vocabulary.yaml"))

STOPWORDS = frozenset(_tables["english_stopwords"]) | frozenset(_tables["posting_stopwords"])
PRESERVED_TERMS = frozenset(_tables["preserved_terms"])
REQUIREMENT_INDICATORS = tuple(_tables["requirement_indicators"])
GENERIC_TERMS = frozenset(_tables["generic_terms"])
COMPOUND_TERMS = tuple(_tables["compound_terms"].items())
DISPLAY_FORMS = tuple(_tables["display_forms"].items())
SKILL_SYNONYMS = MappingProxyType(
    {canonical: tuple(alternates) for canonical, alternates in _tables["skill_synonyms"].items()}
)
UNIVERSAL_SOFT_SKILLS = tuple(_tables["universal_soft_skills"])
del _tables


def is_stopword(token: str) -> bool:
    """True for stopwords that are not on the preserved-terms exception list."""
    return token in STOPWORDS and token not in PRESERVED_TERMS
