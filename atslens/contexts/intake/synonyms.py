"""
Skill synonym lookup.

Bidirectional: a canonical phrase resolves to itself plus its alternates, and
any alternate resolves to the first canonical entry that lists it.

Examples:
    >>> get_synonyms("Kubernetes")
    ['kubernetes', 'k8s']
    >>> get_synonyms("k8s")
    ['kubernetes', 'k8s']
    >>> get_synonyms("terraform")
    ['terraform']
"""

from typing import List

from atslens.contexts.intake.vocabulary import SKILL_SYNONYMS


def get_synonyms(keyword: str) -> List[str]:
    """
    Get the canonical form of a keyword plus all known alternates.

    Args:
        keyword: Any keyword, in any case

    Returns:
        [canonical, *alternates] if the keyword is in the synonym table,
        otherwise [keyword.lower()]
    """
    lower = keyword.lower().strip()

    if lower in SKILL_SYNONYMS:
        return [lower, *SKILL_SYNONYMS[lower]]

    for canonical, alternates in SKILL_SYNONYMS.items():
        if lower in alternates:
            return [canonical, *alternates]

    return [lower]


__all__ = ["SKILL_SYNONYMS", "get_synonyms"]
