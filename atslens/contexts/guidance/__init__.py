"""
Guidance Context

Responsibilities:
- Maps a snapshot of computed scores to prioritized "what to do next" items
- Evaluates independent rules in a fixed order (critical, important, suggested)

Owns: Guidance rules, thresholds, and copy
Never: Computes scores itself or parses documents
"""

from atslens.contexts.guidance.score_guidance import (
    ActionTarget,
    GuidanceInput,
    GuidanceItem,
    GuidancePriority,
    generate_guidance,
)

__all__ = ["ActionTarget", "GuidanceInput", "GuidanceItem", "GuidancePriority", "generate_guidance"]
