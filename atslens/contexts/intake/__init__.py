"""
Intake Context

Responsibilities:
- Ingests raw job-posting text
- Extracts, scores, and ranks keywords (critical / optional / all)
- Provides skill synonym lookup for downstream matching

Owns: Keyword extraction logic and the vocabulary tables
Never: Reads resumes or makes scoring decisions about candidates
"""

from atslens.contexts.intake.keyword_extraction import KeywordSet, extract_keywords
from atslens.contexts.intake.synonyms import SKILL_SYNONYMS, get_synonyms

__all__ = ["KeywordSet", "SKILL_SYNONYMS", "extract_keywords", "get_synonyms"]
