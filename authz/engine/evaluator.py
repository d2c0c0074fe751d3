"""
Authz Engine - Deterministic Authorization Evaluator
====================================================
Renders allow/deny for (actor, effective policy).

Strict order, first deny wins:
  1. public                  → allow
  2. not authenticated       → UNAUTHENTICATED
  3. role requirement        → ROLE_NOT_ALLOWED
  4. permission requirement  → INSUFFICIENT_PERMISSIONS
  5. allow

Role and permission checks are conjunctive. Roles within the
requirement are OR'd. The rank hierarchy applies to roles only.

Malformed actor data folds into the deny path and never raises.
A policy that is not an EffectivePolicy is a caller bug: ValueError.
"""

from __future__ import annotations

import logging
from enum import Enum

from authz.context.actor_context import ActorContext
from authz.engine.reasons import AuthorizationDecision, ReasonCode
from authz.permissions.catalog import (
    has_all_permissions,
    has_any_permission,
    permission_difference,
)
from authz.policy.models import EffectivePolicy, PermissionMode
from authz.roles.hierarchy import is_valid_role, rank, satisfies

logger = logging.getLogger("authz.engine")


class RoleCheckMode(Enum):
    HIERARCHY = "HIERARCHY"
    STRICT = "STRICT"


def _ordered_roles(roles) -> list[str]:
    # most privileged first, unknown tokens last
    return sorted(roles, key=lambda role: (-(rank(role) or -1), role))


class AuthorizationEngine:
    @staticmethod
    def _allow() -> AuthorizationDecision:
        return AuthorizationDecision(allowed=True)

    @staticmethod
    def _deny(code: ReasonCode, message: str) -> AuthorizationDecision:
        logger.debug(f"Authorization denied [{code.value}]: {message}")
        return AuthorizationDecision(
            allowed=False,
            reason_code=code,
            message=message,
        )

    @staticmethod
    def _role_passes(
        actor_role: str,
        required_roles: frozenset[str],
        role_check: RoleCheckMode,
    ) -> bool:
        if role_check == RoleCheckMode.STRICT:
            return is_valid_role(actor_role) and actor_role in required_roles
        return any(satisfies(actor_role, required) for required in required_roles)

    @staticmethod
    def _permissions_pass(
        actor_permissions: frozenset[str],
        required_permissions: frozenset[str],
        mode: PermissionMode,
    ) -> bool:
        if mode == PermissionMode.ANY:
            return has_any_permission(actor_permissions, required_permissions)
        return has_all_permissions(actor_permissions, required_permissions)

    @staticmethod
    def evaluate(
        actor: ActorContext,
        policy: EffectivePolicy,
        role_check: RoleCheckMode = RoleCheckMode.HIERARCHY,
    ) -> AuthorizationDecision:
        if not isinstance(policy, EffectivePolicy):
            raise ValueError("policy must be an EffectivePolicy.")

        if policy.is_public:
            return AuthorizationEngine._allow()

        if not isinstance(actor, ActorContext):
            return AuthorizationEngine._deny(
                ReasonCode.UNAUTHENTICATED,
                "Authorization requires an actor context.",
            )

        if not actor.is_authenticated:
            return AuthorizationEngine._deny(
                ReasonCode.UNAUTHENTICATED,
                "Authentication is required for this operation.",
            )

        if policy.required_roles and not AuthorizationEngine._role_passes(
            actor.role, policy.required_roles, role_check
        ):
            required = ", ".join(_ordered_roles(policy.required_roles))
            if role_check == RoleCheckMode.STRICT:
                qualifier = "exactly one of"
            else:
                qualifier = "at least one of"
            return AuthorizationEngine._deny(
                ReasonCode.ROLE_NOT_ALLOWED,
                (
                    f"Role '{actor.role}' is not allowed. "
                    f"Requires {qualifier}: {required}."
                ),
            )

        if policy.required_permissions and not AuthorizationEngine._permissions_pass(
            actor.permissions, policy.required_permissions, policy.mode
        ):
            required = sorted(policy.required_permissions)
            message = (
                f"Insufficient permissions. Requires {policy.mode.value} of: "
                f"{', '.join(required)}."
            )
            if policy.mode == PermissionMode.ALL:
                missing = permission_difference(required, actor.permissions)
                message += f" Missing: {', '.join(missing)}."
            return AuthorizationEngine._deny(
                ReasonCode.INSUFFICIENT_PERMISSIONS,
                message,
            )

        return AuthorizationEngine._allow()

    @staticmethod
    def decide(actor: ActorContext, policy: EffectivePolicy) -> AuthorizationDecision:
        """Hierarchy-aware evaluation: a higher role satisfies a lower one."""
        return AuthorizationEngine.evaluate(actor, policy, RoleCheckMode.HIERARCHY)

    @staticmethod
    def decide_strict(
        actor: ActorContext,
        policy: EffectivePolicy,
    ) -> AuthorizationDecision:
        """Exact role membership. Higher roles gain nothing automatically."""
        return AuthorizationEngine.evaluate(actor, policy, RoleCheckMode.STRICT)

    @staticmethod
    def decide_for_policy(
        actor: ActorContext,
        policy: EffectivePolicy,
    ) -> AuthorizationDecision:
        """Dispatch on the policy's own strict_roles flag."""
        if policy.strict_roles:
            return AuthorizationEngine.decide_strict(actor, policy)
        return AuthorizationEngine.decide(actor, policy)


decide = AuthorizationEngine.decide
decide_strict = AuthorizationEngine.decide_strict
decide_for_policy = AuthorizationEngine.decide_for_policy
