"""
Authz Policy - Policy Models
============================
Declared annotations (per level) and the resolved effective policy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from authz.permissions.catalog import is_valid_permission
from authz.roles.hierarchy import is_valid_role


class PermissionMode(Enum):
    """How a required permission set is evaluated."""
    ALL = "ALL"
    ANY = "ANY"


DEFAULT_PERMISSION_MODE = PermissionMode.ALL


def _check_tokens(values, *, field_name: str, validator, kind: str) -> None:
    if values is None:
        return
    if not isinstance(values, tuple):
        raise ValueError(f"{field_name} must be a tuple or None.")
    for value in values:
        if not isinstance(value, str) or not value:
            raise ValueError(f"{field_name} values must be non-empty strings.")
        if not validator(value):
            raise ValueError(f"Unknown {kind} '{value}' in {field_name}.")


@dataclass(frozen=True)
class PolicyAnnotations:
    """
    Declarations at one level (handler or group).

    None means "undeclared": the other level decides.
    An empty tuple means "declared, no requirement".
    """

    is_public: Optional[bool] = None
    required_roles: Optional[tuple[str, ...]] = None
    required_permissions: Optional[tuple[str, ...]] = None
    mode: Optional[PermissionMode] = None
    strict_roles: Optional[bool] = None

    def __post_init__(self):
        if self.is_public is not None and not isinstance(self.is_public, bool):
            raise ValueError("is_public must be a bool or None.")

        if self.strict_roles is not None and not isinstance(self.strict_roles, bool):
            raise ValueError("strict_roles must be a bool or None.")

        if self.mode is not None and not isinstance(self.mode, PermissionMode):
            raise ValueError("mode must be a PermissionMode or None.")

        _check_tokens(
            self.required_roles,
            field_name="required_roles",
            validator=is_valid_role,
            kind="role",
        )
        _check_tokens(
            self.required_permissions,
            field_name="required_permissions",
            validator=is_valid_permission,
            kind="permission",
        )

    def is_empty(self) -> bool:
        return (
            self.is_public is None
            and self.required_roles is None
            and self.required_permissions is None
            and self.mode is None
            and self.strict_roles is None
        )


EMPTY_ANNOTATIONS = PolicyAnnotations()


def _token_set(values, field_name: str) -> frozenset[str]:
    # a bare str would split into characters
    if isinstance(values, str) or not isinstance(
        values, (frozenset, set, tuple, list)
    ):
        raise ValueError(f"{field_name} must be a collection of strings.")
    for value in values:
        if not isinstance(value, str):
            raise ValueError(f"{field_name} values must be strings.")
    return frozenset(values)


@dataclass(frozen=True)
class EffectivePolicy:
    """
    Resolved, actor-independent access requirement for one operation.

    When is_public is True no other field is evaluated.
    """

    is_public: bool = False
    required_roles: frozenset[str] = field(default_factory=frozenset)
    required_permissions: frozenset[str] = field(default_factory=frozenset)
    mode: PermissionMode = DEFAULT_PERMISSION_MODE
    strict_roles: bool = False

    def __post_init__(self):
        if not isinstance(self.is_public, bool):
            raise ValueError("is_public must be a bool.")
        if not isinstance(self.mode, PermissionMode):
            raise ValueError("mode must be a PermissionMode.")
        if not isinstance(self.strict_roles, bool):
            raise ValueError("strict_roles must be a bool.")

        object.__setattr__(
            self, "required_roles", _token_set(self.required_roles, "required_roles")
        )
        object.__setattr__(
            self,
            "required_permissions",
            _token_set(self.required_permissions, "required_permissions"),
        )

    @property
    def requires_authentication_only(self) -> bool:
        return (
            not self.is_public
            and not self.required_roles
            and not self.required_permissions
        )


@dataclass(frozen=True)
class OperationDescriptor:
    """A logical route: handler-level and group-level annotations."""

    name: str
    handler: PolicyAnnotations = EMPTY_ANNOTATIONS
    group: PolicyAnnotations = EMPTY_ANNOTATIONS

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")
        if not isinstance(self.handler, PolicyAnnotations):
            raise ValueError("handler must be PolicyAnnotations.")
        if not isinstance(self.group, PolicyAnnotations):
            raise ValueError("group must be PolicyAnnotations.")
