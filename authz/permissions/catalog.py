"""
Authz Permissions - Catalog Lookups
===================================
Pure, total lookups over the static permission catalog.
Unknown tokens never raise.
"""

from __future__ import annotations

from typing import Iterable, Optional

from authz.permissions.constants import (
    PERMISSION_CATEGORIES,
    PERMISSION_DISPLAY_NAMES,
    PERMISSIONS_IN_ORDER,
    VALID_PERMISSIONS,
    PermissionCategory,
)


def all_permissions() -> frozenset[str]:
    return VALID_PERMISSIONS


def is_valid_permission(token) -> bool:
    if not isinstance(token, str):
        return False
    return token in VALID_PERMISSIONS


def display_name(permission: str) -> str:
    """Human-readable name. Unknown tokens are returned unchanged."""
    if not is_valid_permission(permission):
        return str(permission)
    return PERMISSION_DISPLAY_NAMES[permission]


def category(permission: str) -> Optional[PermissionCategory]:
    if not is_valid_permission(permission):
        return None
    return PERMISSION_CATEGORIES[permission]


def by_category(permission_category: PermissionCategory) -> frozenset[str]:
    return frozenset(
        token
        for token in PERMISSIONS_IN_ORDER
        if PERMISSION_CATEGORIES[token] is permission_category
    )


# ══════════════════════════════════════════════════════════════
# PERMISSION SET HELPERS
# ══════════════════════════════════════════════════════════════

def has_all_permissions(
    actor_permissions: Iterable[str],
    required_permissions: Iterable[str],
) -> bool:
    """True when every required permission is held. Empty requirement passes."""
    held = frozenset(actor_permissions)
    return frozenset(required_permissions) <= held


def has_any_permission(
    actor_permissions: Iterable[str],
    required_permissions: Iterable[str],
) -> bool:
    """
    True when at least one required permission is held.

    Note: an empty requirement set yields False here. The decision
    engine never calls this with an empty set; it skips the check.
    """
    held = frozenset(actor_permissions)
    return not held.isdisjoint(frozenset(required_permissions))


def permission_difference(
    base_permissions: Iterable[str],
    compare_permissions: Iterable[str],
) -> tuple[str, ...]:
    """Permissions in base but not in compare, in base order, deduplicated."""
    excluded = frozenset(compare_permissions)
    seen: set[str] = set()
    result: list[str] = []
    for permission in base_permissions:
        if permission in excluded or permission in seen:
            continue
        seen.add(permission)
        result.append(permission)
    return tuple(result)
