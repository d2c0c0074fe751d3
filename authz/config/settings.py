"""
Authz Config - Engine Settings
==============================
Process-wide settings for the enclosing gate.
The decision engine itself takes no configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class AuthzSettings:
    content_gating_enabled: bool = True
    log_denials: bool = True
    bearer_scheme: str = "Bearer"

    def __post_init__(self):
        if not isinstance(self.content_gating_enabled, bool):
            raise ValueError("content_gating_enabled must be a bool.")
        if not isinstance(self.log_denials, bool):
            raise ValueError("log_denials must be a bool.")
        if not self.bearer_scheme or not isinstance(self.bearer_scheme, str):
            raise ValueError("bearer_scheme must be a non-empty string.")

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "AuthzSettings":
        """Build from a plain mapping, e.g. Django's settings.AUTHZ."""
        known = {f.name for f in fields(cls)}
        normalized = {str(key).lower(): value for key, value in (values or {}).items()}
        unknown = sorted(set(normalized) - known)
        if unknown:
            raise ValueError(
                f"Unknown authz setting(s): {unknown}. "
                f"Must be among: {sorted(known)}"
            )
        return cls(**normalized)


DEFAULT_SETTINGS = AuthzSettings()
