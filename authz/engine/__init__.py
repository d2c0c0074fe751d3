"""
Authz Engine - Public API
=========================
"""

from authz.engine.evaluator import (
    AuthorizationEngine,
    RoleCheckMode,
    decide,
    decide_for_policy,
    decide_strict,
)
from authz.engine.reasons import AuthorizationDecision, ReasonCode

__all__ = [
    "AuthorizationDecision",
    "AuthorizationEngine",
    "ReasonCode",
    "RoleCheckMode",
    "decide",
    "decide_for_policy",
    "decide_strict",
]
