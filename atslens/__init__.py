"""
ATSLens - resume and job-posting signals for applicant tracking compatibility

Derives structured signals from an uploaded resume and a pasted job posting,
used downstream to score parsing health and keyword alignment.

Architecture:
- Parsing Context: PDF page loading and layout analysis (columns, density)
- Intake Context: Job description keyword extraction, ranking, and synonyms
- Targeting Context: Keyword coverage of a resume against extracted keywords
- Guidance Context: Prioritized next-step guidance from computed scores
"""

__version__ = "0.1.0"
