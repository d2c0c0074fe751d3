"""
Authz HTTP API Auth - Actor Context Resolver
============================================
Resolve an ActorContext from request headers.

Identity failure never raises. A missing, malformed or unknown
token yields an anonymous actor, and the engine answers
UNAUTHENTICATED where the operation is not public.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from authz.context.actor_context import ActorContext
from authz.http_api.auth.provider import AuthPrincipal

logger = logging.getLogger("authz.http_api")

HEADER_AUTHORIZATION = "authorization"


def _normalize_headers(headers: dict[str, Any] | None) -> dict[str, str]:
    normalized: dict[str, str] = {}
    for key, value in (headers or {}).items():
        normalized_key = str(key).strip().lower()
        normalized_value = str(value).strip()
        normalized[normalized_key] = normalized_value
    return normalized


def extract_bearer_token(
    headers: dict[str, Any] | None,
    scheme: str = "Bearer",
) -> Optional[str]:
    raw = _normalize_headers(headers).get(HEADER_AUTHORIZATION)
    if not raw:
        return None

    parts = raw.split(None, 1)
    if len(parts) != 2 or parts[0].lower() != scheme.lower():
        return None

    token = parts[1].strip()
    return token or None


def actor_context_from_principal(principal: AuthPrincipal) -> ActorContext:
    return ActorContext(
        role=principal.role,
        permissions=frozenset(principal.permissions),
        is_authenticated=True,
        actor_id=principal.actor_id,
        roles=principal.roles,
    )


def resolve_actor_context(
    headers: dict[str, Any] | None,
    provider,
    bearer_scheme: str = "Bearer",
) -> ActorContext:
    token = extract_bearer_token(headers, bearer_scheme)
    if token is None:
        return ActorContext.anonymous()

    principal = provider.resolve_token(token) if provider is not None else None
    if principal is None:
        logger.info("Bearer token did not resolve to a principal.")
        return ActorContext.anonymous()

    return actor_context_from_principal(principal)
