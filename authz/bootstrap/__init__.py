"""
Authz Bootstrap - Public API
============================
"""

from authz.bootstrap.errors import AuthzBootstrapError
from authz.bootstrap.invariants import (
    check_permission_metadata,
    check_permission_tokens,
    check_role_defaults,
    check_role_ranks,
)
from authz.bootstrap.self_check import run_self_check

__all__ = [
    "AuthzBootstrapError",
    "check_permission_metadata",
    "check_permission_tokens",
    "check_role_defaults",
    "check_role_ranks",
    "run_self_check",
]
