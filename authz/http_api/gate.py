"""
Authz HTTP API - Operation Gate
===============================
One call per inbound operation:

  1. resolve the effective policy (once)
  2. resolve the actor from headers
  3. decide (hierarchy or strict, per the policy)
  4. advise the content gating tier (independent of 3)

Framework-agnostic. Adapters translate the outcome to their own
request/response types.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from authz.config.settings import DEFAULT_SETTINGS, AuthzSettings
from authz.context.actor_context import ActorContext
from authz.engine.evaluator import decide_for_policy
from authz.engine.reasons import AuthorizationDecision
from authz.gating.advisor import GatingAdvice, advise
from authz.http_api.auth.resolver import resolve_actor_context
from authz.policy.models import EffectivePolicy, OperationDescriptor
from authz.policy.resolver import resolve

logger = logging.getLogger("authz.http_api")


@dataclass(frozen=True)
class GateOutcome:
    operation: str
    actor: ActorContext
    policy: EffectivePolicy
    decision: AuthorizationDecision
    gating: GatingAdvice

    @property
    def allowed(self) -> bool:
        return self.decision.allowed


def authorize_actor(
    operation: OperationDescriptor,
    actor: ActorContext,
    settings: AuthzSettings = DEFAULT_SETTINGS,
) -> GateOutcome:
    policy = resolve(operation)
    decision = decide_for_policy(actor, policy)
    gating = advise(
        is_public_route=policy.is_public,
        is_authenticated=actor.is_authenticated,
        enabled=settings.content_gating_enabled,
    )

    if not decision.allowed and settings.log_denials:
        logger.info(
            f"Operation denied: {operation.name} "
            f"actor={actor.actor_id or '<anonymous>'} "
            f"reason={decision.reason_code.value}"
        )

    return GateOutcome(
        operation=operation.name,
        actor=actor,
        policy=policy,
        decision=decision,
        gating=gating,
    )


def authorize_operation(
    operation: OperationDescriptor,
    headers: dict[str, Any] | None,
    auth_provider,
    settings: AuthzSettings = DEFAULT_SETTINGS,
) -> GateOutcome:
    actor = resolve_actor_context(
        headers,
        auth_provider,
        bearer_scheme=settings.bearer_scheme,
    )
    return authorize_actor(operation, actor, settings)
