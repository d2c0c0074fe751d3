"""
Authz Policy - Public API
=========================
"""

from authz.policy.annotations import (
    POLICY_ANNOTATIONS_ATTR,
    annotate,
    describe_operation,
    get_annotations,
    public,
    require_any_permission,
    require_permissions,
    require_roles,
    strict_roles,
)
from authz.policy.models import (
    DEFAULT_PERMISSION_MODE,
    EMPTY_ANNOTATIONS,
    EffectivePolicy,
    OperationDescriptor,
    PermissionMode,
    PolicyAnnotations,
)
from authz.policy.resolver import PUBLIC_POLICY, resolve, resolve_annotations

__all__ = [
    "POLICY_ANNOTATIONS_ATTR",
    "DEFAULT_PERMISSION_MODE",
    "EMPTY_ANNOTATIONS",
    "PUBLIC_POLICY",
    "EffectivePolicy",
    "OperationDescriptor",
    "PermissionMode",
    "PolicyAnnotations",
    "annotate",
    "describe_operation",
    "get_annotations",
    "public",
    "require_any_permission",
    "require_permissions",
    "require_roles",
    "resolve",
    "resolve_annotations",
    "strict_roles",
]
