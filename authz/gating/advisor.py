"""
Authz Gating - Content Gating Advisor
=====================================
Non-blocking content tier labelling.

This is NOT a security boundary. It never denies and never raises.
It labels the request for a downstream content service, which
re-verifies access before deciding how much to reveal.

Tier rules:
  authenticated actor             → FULL  (regardless of route)
  unauthenticated, any route      → PREVIEW
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, MutableMapping

logger = logging.getLogger("authz.gating")

GATING_TIER_KEY = "gating_tier"
GATING_ENABLED_KEY = "gating_enabled"


class GatingTier(Enum):
    FULL = "full"
    PREVIEW = "preview"


@dataclass(frozen=True)
class GatingAdvice:
    tier: GatingTier
    gating_enabled: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            GATING_TIER_KEY: self.tier.value,
            GATING_ENABLED_KEY: self.gating_enabled,
        }


def classify(is_public_route: bool, is_authenticated: bool) -> GatingTier:
    # route publicity does not change the tier
    if is_authenticated:
        return GatingTier.FULL
    return GatingTier.PREVIEW


def advise(
    is_public_route: bool,
    is_authenticated: bool,
    *,
    enabled: bool = True,
) -> GatingAdvice:
    """
    Tier plus the gating flag.

    gating_enabled is True only when gating is switched on AND the
    tier restricts content; a FULL tier never asks for truncation.
    """
    tier = classify(bool(is_public_route), bool(is_authenticated))
    return GatingAdvice(
        tier=tier,
        gating_enabled=bool(enabled) and tier == GatingTier.PREVIEW,
    )


def annotate(request_context: Any, advice: GatingAdvice) -> Any:
    """
    Write the advice onto a request context and return it.

    Mappings receive keys; any other object receives attributes.
    Objects that refuse attributes are left untouched.
    """
    if isinstance(request_context, MutableMapping):
        request_context[GATING_TIER_KEY] = advice.tier
        request_context[GATING_ENABLED_KEY] = advice.gating_enabled
        return request_context

    try:
        setattr(request_context, GATING_TIER_KEY, advice.tier)
        setattr(request_context, GATING_ENABLED_KEY, advice.gating_enabled)
    except (AttributeError, TypeError):
        logger.warning(
            f"Gating advice not attached: "
            f"{type(request_context).__name__} does not accept attributes."
        )
    return request_context
