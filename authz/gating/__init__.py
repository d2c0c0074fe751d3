"""
Authz Gating - Public API
=========================
"""

from authz.gating.advisor import (
    GATING_ENABLED_KEY,
    GATING_TIER_KEY,
    GatingAdvice,
    GatingTier,
    advise,
    annotate,
    classify,
)

__all__ = [
    "GATING_ENABLED_KEY",
    "GATING_TIER_KEY",
    "GatingAdvice",
    "GatingTier",
    "advise",
    "annotate",
    "classify",
]
