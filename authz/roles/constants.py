"""
Authz Roles - Role Definitions
==============================
Closed, totally ordered set of roles.
Higher rank = more privileged. Ranks are strictly distinct.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


ROLE_SUPER_ADMIN = "super_admin"
ROLE_ADMIN = "admin"
ROLE_EDITOR = "editor"
ROLE_VIEWER = "viewer"


@dataclass(frozen=True)
class RoleDefinition:
    token: str
    display_name: str
    description: str
    rank: int

    def __post_init__(self):
        if not self.token or not isinstance(self.token, str):
            raise ValueError("token must be a non-empty string.")
        if not self.display_name or not isinstance(self.display_name, str):
            raise ValueError("display_name must be a non-empty string.")
        if not isinstance(self.rank, int) or isinstance(self.rank, bool):
            raise ValueError("rank must be an integer.")


# Ordered most privileged first.
ROLE_DEFINITIONS: tuple[RoleDefinition, ...] = (
    RoleDefinition(
        token=ROLE_SUPER_ADMIN,
        display_name="Super Admin",
        description="Full system access, including impersonation and maintenance.",
        rank=100,
    ),
    RoleDefinition(
        token=ROLE_ADMIN,
        display_name="Admin",
        description="Manages users, organization settings, content and billing.",
        rank=75,
    ),
    RoleDefinition(
        token=ROLE_EDITOR,
        display_name="Editor",
        description="Creates, edits and publishes content, projects and media.",
        rank=50,
    ),
    RoleDefinition(
        token=ROLE_VIEWER,
        display_name="Viewer",
        description="Read-only access to content and dashboards.",
        rank=25,
    ),
)

ROLES_BY_TOKEN = MappingProxyType(
    {definition.token: definition for definition in ROLE_DEFINITIONS}
)

VALID_ROLES = frozenset(ROLES_BY_TOKEN)
