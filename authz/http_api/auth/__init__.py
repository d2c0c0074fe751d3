"""
Authz HTTP API Auth - Public API
================================
"""

from authz.http_api.auth.provider import (
    AuthPrincipal,
    AuthProvider,
    InMemoryAuthProvider,
)
from authz.http_api.auth.resolver import (
    actor_context_from_principal,
    extract_bearer_token,
    resolve_actor_context,
)

__all__ = [
    "AuthPrincipal",
    "AuthProvider",
    "InMemoryAuthProvider",
    "actor_context_from_principal",
    "extract_bearer_token",
    "resolve_actor_context",
]
