"""
Authz Policy - Declarative Annotations
======================================
Decorators that attach PolicyAnnotations to handlers and groups.

Every decorator reads and writes ONE shared attribute,
POLICY_ANNOTATIONS_ATTR. Role, permission, mode and public
declarations never live under separate keys.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Optional

from authz.policy.models import (
    EMPTY_ANNOTATIONS,
    OperationDescriptor,
    PermissionMode,
    PolicyAnnotations,
)

POLICY_ANNOTATIONS_ATTR = "__authz_policy__"


def get_annotations(target: Any) -> PolicyAnnotations:
    """
    Annotations declared directly on target.

    Only the target's own namespace is read, so a subclass does not
    silently inherit its parent's group declarations.
    """
    if target is None:
        return EMPTY_ANNOTATIONS
    namespace = getattr(target, "__dict__", None)
    if namespace is None:
        return EMPTY_ANNOTATIONS
    annotations = namespace.get(POLICY_ANNOTATIONS_ATTR)
    if isinstance(annotations, PolicyAnnotations):
        return annotations
    return EMPTY_ANNOTATIONS


def annotate(target: Any, **changes) -> Any:
    """Merge declarations into target's annotations and return target."""
    current = get_annotations(target)
    setattr(target, POLICY_ANNOTATIONS_ATTR, replace(current, **changes))
    return target


def public(target: Optional[Callable] = None, *, is_public: bool = True):
    """Mark a handler or group as exempt from authorization."""
    def decorator(inner):
        return annotate(inner, is_public=is_public)

    if target is not None:
        return decorator(target)
    return decorator


def require_roles(*roles: str, strict: Optional[bool] = None):
    """
    Declare the role requirement. Roles are OR'd.

    require_roles() with no arguments declares "no role requirement"
    and stops fallback to the group level.
    """
    declared = tuple(roles)

    def decorator(inner):
        changes: dict[str, Any] = {"required_roles": declared}
        if strict is not None:
            changes["strict_roles"] = strict
        return annotate(inner, **changes)

    return decorator


def require_permissions(
    *permissions: str,
    mode: Optional[PermissionMode] = None,
):
    """Declare the permission requirement, evaluated under mode."""
    declared = tuple(permissions)

    def decorator(inner):
        changes: dict[str, Any] = {"required_permissions": declared}
        if mode is not None:
            changes["mode"] = mode
        return annotate(inner, **changes)

    return decorator


def require_any_permission(*permissions: str):
    return require_permissions(*permissions, mode=PermissionMode.ANY)


def strict_roles(target: Optional[Callable] = None, *, enabled: bool = True):
    """Use exact role membership instead of the rank hierarchy."""
    def decorator(inner):
        return annotate(inner, strict_roles=enabled)

    if target is not None:
        return decorator(target)
    return decorator


def describe_operation(
    handler: Callable,
    group: Any = None,
    *,
    name: Optional[str] = None,
) -> OperationDescriptor:
    """Build an OperationDescriptor from decorated handler/group objects."""
    operation_name = name or getattr(handler, "__qualname__", None) or repr(handler)
    return OperationDescriptor(
        name=operation_name,
        handler=get_annotations(handler),
        group=get_annotations(group),
    )
