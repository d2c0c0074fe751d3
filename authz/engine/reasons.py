"""
Authz Engine - Decision Model
=============================
Authorization outcome as data.

Reason codes are stable identifiers for client-side branching:
- UNAUTHENTICATED           → re-authenticate
- ROLE_NOT_ALLOWED          → request an elevated role
- INSUFFICIENT_PERMISSIONS  → request additional grants

Never rename a published code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ReasonCode(Enum):
    """Closed set of deny reasons."""
    UNAUTHENTICATED = "UNAUTHENTICATED"
    ROLE_NOT_ALLOWED = "ROLE_NOT_ALLOWED"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"


@dataclass(frozen=True)
class AuthorizationDecision:
    allowed: bool
    reason_code: Optional[ReasonCode] = None
    message: str = ""

    def __post_init__(self):
        if not isinstance(self.allowed, bool):
            raise ValueError("allowed must be a bool.")

        if self.allowed and self.reason_code is not None:
            raise ValueError("reason_code must be None when allowed.")

        if not self.allowed and not isinstance(self.reason_code, ReasonCode):
            raise ValueError("reason_code must be a ReasonCode when denied.")

        if not isinstance(self.message, str):
            raise ValueError("message must be a string.")

    @property
    def denied(self) -> bool:
        return not self.allowed

    def to_dict(self) -> dict:
        return {
            "allowed": self.allowed,
            "reason_code": (
                None if self.reason_code is None else self.reason_code.value
            ),
            "message": self.message,
        }
