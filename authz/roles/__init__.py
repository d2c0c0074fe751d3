"""
Authz Roles - Public API
========================
"""

from authz.roles.constants import (
    ROLE_ADMIN,
    ROLE_DEFINITIONS,
    ROLE_EDITOR,
    ROLE_SUPER_ADMIN,
    ROLE_VIEWER,
    ROLES_BY_TOKEN,
    VALID_ROLES,
    RoleDefinition,
)
from authz.roles.hierarchy import (
    all_roles,
    assignable_roles,
    description,
    display_name,
    highest,
    is_valid_role,
    lowest,
    manageable_roles,
    rank,
    satisfies,
)

__all__ = [
    "ROLE_SUPER_ADMIN",
    "ROLE_ADMIN",
    "ROLE_EDITOR",
    "ROLE_VIEWER",
    "ROLE_DEFINITIONS",
    "ROLES_BY_TOKEN",
    "VALID_ROLES",
    "RoleDefinition",
    "all_roles",
    "assignable_roles",
    "description",
    "display_name",
    "highest",
    "is_valid_role",
    "lowest",
    "manageable_roles",
    "rank",
    "satisfies",
]
