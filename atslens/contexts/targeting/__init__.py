"""
Targeting Context

Responsibilities:
- Measures how well resume text covers the keywords extracted from a job posting
- Reports found, missing, and bonus keywords with findings for each gap

Owns: Keyword coverage scoring and keyword variation matching
Never: Extracts keywords from job text or parses documents
"""

from atslens.contexts.targeting.coverage import CoverageResult, Finding, calculate_coverage

__all__ = ["CoverageResult", "Finding", "calculate_coverage"]
