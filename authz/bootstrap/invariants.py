"""
Authz Bootstrap - Invariant Checks
==================================
Each function verifies one law of the static tables.
If any check fails → AuthzBootstrapError is raised.

Checks take the tables as arguments (defaulting to the live ones)
so a broken table can be verified in isolation.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Mapping, Optional

from authz.bootstrap.errors import AuthzBootstrapError
from authz.permissions.constants import (
    PERMISSION_CATEGORIES,
    PERMISSION_DISPLAY_NAMES,
    PERMISSIONS_IN_ORDER,
)
from authz.permissions.defaults import DEFAULT_ROLE_PERMISSIONS
from authz.roles.constants import ROLE_DEFINITIONS, RoleDefinition

logger = logging.getLogger("authz.bootstrap")

PERMISSION_TOKEN_PATTERN = re.compile(r"^[a-z][a-z_]*:[a-z][a-z_]*$")


# ══════════════════════════════════════════════════════════════
# CHECK 1: Permission tokens unique and well-formed
# ══════════════════════════════════════════════════════════════

def check_permission_tokens(
    tokens: Optional[Iterable[str]] = None,
) -> None:
    ordered = tuple(PERMISSIONS_IN_ORDER if tokens is None else tokens)

    seen: set[str] = set()
    for token in ordered:
        if not isinstance(token, str) or not PERMISSION_TOKEN_PATTERN.match(token):
            raise AuthzBootstrapError(
                invariant="PERMISSION_TOKEN_FORMAT",
                detail=(
                    f"Permission token {token!r} must match "
                    f"'<domain>:<action>' in lower snake case."
                ),
            )

        if token in seen:
            raise AuthzBootstrapError(
                invariant="PERMISSION_TOKEN_UNIQUE",
                detail=f"Permission token '{token}' is declared more than once.",
            )
        seen.add(token)

    logger.info(f"✓ {len(ordered)} permission tokens unique and well-formed.")


# ══════════════════════════════════════════════════════════════
# CHECK 2: Every permission has a display name and category
# ══════════════════════════════════════════════════════════════

def check_permission_metadata(
    tokens: Optional[Iterable[str]] = None,
    display_names: Optional[Mapping[str, str]] = None,
    categories: Optional[Mapping[str, object]] = None,
) -> None:
    ordered = tuple(PERMISSIONS_IN_ORDER if tokens is None else tokens)
    names = PERMISSION_DISPLAY_NAMES if display_names is None else display_names
    category_map = PERMISSION_CATEGORIES if categories is None else categories

    for token in ordered:
        if not names.get(token):
            raise AuthzBootstrapError(
                invariant="PERMISSION_DISPLAY_NAME",
                detail=f"Permission '{token}' has no display name.",
            )
        if category_map.get(token) is None:
            raise AuthzBootstrapError(
                invariant="PERMISSION_CATEGORY",
                detail=f"Permission '{token}' has no category.",
            )

    logger.info("✓ Permission display names and categories complete.")


# ══════════════════════════════════════════════════════════════
# CHECK 3: Role ranks strictly distinct
# ══════════════════════════════════════════════════════════════

def check_role_ranks(
    definitions: Optional[Iterable[RoleDefinition]] = None,
) -> None:
    ordered = tuple(ROLE_DEFINITIONS if definitions is None else definitions)

    tokens: set[str] = set()
    ranks: dict[int, str] = {}
    for definition in ordered:
        if definition.token in tokens:
            raise AuthzBootstrapError(
                invariant="ROLE_TOKEN_UNIQUE",
                detail=f"Role '{definition.token}' is declared more than once.",
            )
        tokens.add(definition.token)

        if definition.rank in ranks:
            raise AuthzBootstrapError(
                invariant="ROLE_RANK_STRICT",
                detail=(
                    f"Roles '{ranks[definition.rank]}' and '{definition.token}' "
                    f"share rank {definition.rank}."
                ),
            )
        ranks[definition.rank] = definition.token

    logger.info(f"✓ {len(ordered)} roles with strictly ordered ranks.")


# ══════════════════════════════════════════════════════════════
# CHECK 4: Default sets cover every role, reference known tokens
# ══════════════════════════════════════════════════════════════

def check_role_defaults(
    defaults: Optional[Mapping[str, Iterable[str]]] = None,
    definitions: Optional[Iterable[RoleDefinition]] = None,
    tokens: Optional[Iterable[str]] = None,
) -> None:
    default_map = DEFAULT_ROLE_PERMISSIONS if defaults is None else defaults
    role_tokens = {
        definition.token
        for definition in (ROLE_DEFINITIONS if definitions is None else definitions)
    }
    valid_permissions = frozenset(PERMISSIONS_IN_ORDER if tokens is None else tokens)

    missing = sorted(role_tokens - set(default_map))
    if missing:
        raise AuthzBootstrapError(
            invariant="ROLE_DEFAULTS_COMPLETE",
            detail=f"Roles without a default permission entry: {missing}.",
        )

    extra = sorted(set(default_map) - role_tokens)
    if extra:
        raise AuthzBootstrapError(
            invariant="ROLE_DEFAULTS_KNOWN_ROLES",
            detail=f"Default permissions declared for unknown roles: {extra}.",
        )

    for role, permissions in sorted(default_map.items()):
        unknown = sorted(set(permissions) - valid_permissions)
        if unknown:
            raise AuthzBootstrapError(
                invariant="ROLE_DEFAULTS_KNOWN_PERMISSIONS",
                detail=f"Role '{role}' defaults reference unknown permissions: {unknown}.",
            )

    logger.info("✓ Role default permission sets complete and valid.")
