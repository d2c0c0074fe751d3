"""
Authz HTTP API Auth - Provider and Principal Models
===================================================
Bearer-token principal resolution.

Token issuance and signature validation live upstream. A provider
only maps an already validated token to the principal it names.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol


@dataclass(frozen=True)
class AuthPrincipal:
    """
    Identity claims carried by a validated token.

    permissions defaults to empty. An empty list is NOT replaced by
    role defaults; provisioning copies defaults explicitly.
    """

    actor_id: str
    role: str
    permissions: tuple[str, ...] = field(default_factory=tuple)
    roles: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.actor_id or not isinstance(self.actor_id, str):
            raise ValueError("actor_id must be a non-empty string.")
        if not isinstance(self.role, str):
            raise ValueError("role must be a string.")
        if not isinstance(self.permissions, tuple):
            raise ValueError("permissions must be a tuple.")
        if not isinstance(self.roles, tuple):
            raise ValueError("roles must be a tuple.")

        object.__setattr__(
            self, "permissions", tuple(sorted(set(self.permissions)))
        )


class AuthProvider(Protocol):
    def resolve_token(self, token: str) -> Optional[AuthPrincipal]:
        ...


class InMemoryAuthProvider:
    """
    Deterministic in-memory provider for tests/bootstrap.
    """

    def __init__(self, token_to_principal: Mapping[str, AuthPrincipal] | None = None):
        normalized: dict[str, AuthPrincipal] = {}
        for token, principal in sorted(
            dict(token_to_principal or {}).items(),
            key=lambda item: item[0],
        ):
            if not isinstance(token, str) or not token.strip():
                raise ValueError("Token must be a non-empty string.")
            if not isinstance(principal, AuthPrincipal):
                raise ValueError("Principal must be AuthPrincipal.")
            normalized[token] = principal
        self._token_to_principal = normalized

    def resolve_token(self, token: str) -> Optional[AuthPrincipal]:
        if not isinstance(token, str):
            return None
        return self._token_to_principal.get(token)
