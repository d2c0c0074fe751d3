"""
Authz Context - ActorContext
============================
Immutable actor identity for one inbound operation.

Built by the identity layer, read-only for the engine.
Role and permission tokens are NOT validated against the catalogs here:
unknown tokens are carried verbatim and simply fail every check.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ActorContext:
    """
    Canonical actor identity context.

    role:        the single active role token evaluated by the engine.
    permissions: the actor's stored permission set (not role defaults).
    roles:       extra role tokens carried as metadata only.
    """

    role: str = ""
    permissions: frozenset[str] = field(default_factory=frozenset)
    is_authenticated: bool = False
    actor_id: Optional[str] = None
    roles: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.role, str):
            raise ValueError("role must be a string.")

        if not isinstance(self.is_authenticated, bool):
            raise ValueError("is_authenticated must be a bool.")

        if isinstance(self.permissions, str) or not isinstance(
            self.permissions, (frozenset, set, tuple, list)
        ):
            raise ValueError("permissions must be a collection of strings.")

        for permission in self.permissions:
            if not isinstance(permission, str):
                raise ValueError("permission values must be strings.")

        if not isinstance(self.roles, tuple):
            raise ValueError("roles must be a tuple.")

        if self.actor_id is not None and not isinstance(self.actor_id, str):
            raise ValueError("actor_id must be a string or None.")

        object.__setattr__(self, "permissions", frozenset(self.permissions))

    @classmethod
    def anonymous(cls) -> "ActorContext":
        return cls()
