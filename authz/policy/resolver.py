"""
Authz Policy - Effective Policy Resolver
========================================
Two-level override merge: handler declarations win over group
declarations, field by field.

Rules:
- public: handler overrides group; if true, resolution stops.
- roles / permissions / mode / strict: each resolved independently.
  None falls back to the group. An explicit empty tuple does not.
- mode defaults to ALL.

Pure function of its inputs. Nothing is cached, so changed
annotations are always picked up.
"""

from __future__ import annotations

import logging

from authz.policy.models import (
    DEFAULT_PERMISSION_MODE,
    EffectivePolicy,
    OperationDescriptor,
    PolicyAnnotations,
)

logger = logging.getLogger("authz.policy")

PUBLIC_POLICY = EffectivePolicy(is_public=True)


def _first_declared(handler_value, group_value):
    if handler_value is not None:
        return handler_value
    return group_value


def resolve_annotations(
    handler: PolicyAnnotations,
    group: PolicyAnnotations,
) -> EffectivePolicy:
    is_public = _first_declared(handler.is_public, group.is_public)
    if is_public:
        return PUBLIC_POLICY

    required_roles = _first_declared(handler.required_roles, group.required_roles)
    required_permissions = _first_declared(
        handler.required_permissions, group.required_permissions
    )
    mode = _first_declared(handler.mode, group.mode)
    strict = _first_declared(handler.strict_roles, group.strict_roles)

    return EffectivePolicy(
        is_public=False,
        required_roles=frozenset(required_roles or ()),
        required_permissions=frozenset(required_permissions or ()),
        mode=mode if mode is not None else DEFAULT_PERMISSION_MODE,
        strict_roles=bool(strict),
    )


def resolve(operation: OperationDescriptor) -> EffectivePolicy:
    policy = resolve_annotations(operation.handler, operation.group)
    logger.debug(
        f"Policy resolved: {operation.name} public={policy.is_public} "
        f"roles={sorted(policy.required_roles)} "
        f"permissions={sorted(policy.required_permissions)} "
        f"mode={policy.mode.value} strict={policy.strict_roles}"
    )
    return policy
