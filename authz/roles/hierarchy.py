"""
Authz Roles - Privilege Hierarchy
=================================
Rank-based role comparison.

Fail-closed: a token absent from the hierarchy has no rank,
satisfies nothing, and manages nothing.
"""

from __future__ import annotations

from typing import Iterable, Optional

from authz.roles.constants import ROLE_DEFINITIONS, ROLES_BY_TOKEN


def is_valid_role(token) -> bool:
    if not isinstance(token, str):
        return False
    return token in ROLES_BY_TOKEN


def all_roles() -> tuple[str, ...]:
    """All role tokens, most privileged first."""
    ordered = sorted(ROLE_DEFINITIONS, key=lambda d: d.rank, reverse=True)
    return tuple(definition.token for definition in ordered)


def rank(role: str) -> Optional[int]:
    if not is_valid_role(role):
        return None
    return ROLES_BY_TOKEN[role].rank


def display_name(role: str) -> str:
    if not is_valid_role(role):
        return str(role)
    return ROLES_BY_TOKEN[role].display_name


def description(role: str) -> str:
    if not is_valid_role(role):
        return ""
    return ROLES_BY_TOKEN[role].description


def satisfies(actor_role: str, required_role: str) -> bool:
    """
    Hierarchy-aware check: rank(actor_role) >= rank(required_role).

    Both tokens must be known roles. An unknown token on either side
    never satisfies.
    """
    actor_rank = rank(actor_role)
    required_rank = rank(required_role)
    if actor_rank is None or required_rank is None:
        return False
    return actor_rank >= required_rank


def assignable_roles(actor_role: str) -> frozenset[str]:
    """Roles strictly below the actor's rank."""
    actor_rank = rank(actor_role)
    if actor_rank is None:
        return frozenset()
    return frozenset(
        definition.token
        for definition in ROLE_DEFINITIONS
        if definition.rank < actor_rank
    )


def manageable_roles(actor_role: str) -> frozenset[str]:
    """Roles at or below the actor's rank."""
    actor_rank = rank(actor_role)
    if actor_rank is None:
        return frozenset()
    return frozenset(
        definition.token
        for definition in ROLE_DEFINITIONS
        if definition.rank <= actor_rank
    )


def _known(roles: Iterable[str]) -> list[str]:
    return [role for role in roles if is_valid_role(role)]


def highest(roles: Iterable[str]) -> Optional[str]:
    """Most privileged known role, or None when there is none."""
    known = _known(roles)
    if not known:
        return None
    return max(known, key=lambda role: ROLES_BY_TOKEN[role].rank)


def lowest(roles: Iterable[str]) -> Optional[str]:
    """Least privileged known role, or None when there is none."""
    known = _known(roles)
    if not known:
        return None
    return min(known, key=lambda role: ROLES_BY_TOKEN[role].rank)
