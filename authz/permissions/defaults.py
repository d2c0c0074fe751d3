"""
Authz Permissions - Role Default Permission Sets
================================================
Provisioning data, not policy.

The decision engine evaluates the actor's stored permission set.
These defaults are only copied onto an actor at provisioning time.
"""

from __future__ import annotations

from types import MappingProxyType

from authz.permissions.constants import (
    PERMISSION_ADMIN_ACCESS,
    PERMISSION_ANALYTICS_EXPORT,
    PERMISSION_ANALYTICS_READ,
    PERMISSION_API_KEY_CREATE,
    PERMISSION_API_KEY_READ,
    PERMISSION_API_KEY_REVOKE,
    PERMISSION_APPLICATION_DELETE,
    PERMISSION_APPLICATION_READ,
    PERMISSION_APPLICATION_UPDATE,
    PERMISSION_AUDIT_EXPORT,
    PERMISSION_AUDIT_READ,
    PERMISSION_BILLING_MANAGE,
    PERMISSION_BILLING_READ,
    PERMISSION_CONTENT_ARCHIVE,
    PERMISSION_CONTENT_CREATE,
    PERMISSION_CONTENT_DELETE,
    PERMISSION_CONTENT_PUBLISH,
    PERMISSION_CONTENT_READ,
    PERMISSION_CONTENT_UPDATE,
    PERMISSION_MEDIA_DELETE,
    PERMISSION_MEDIA_READ,
    PERMISSION_MEDIA_UPDATE,
    PERMISSION_MEDIA_UPLOAD,
    PERMISSION_ORG_MANAGE_MEMBERS,
    PERMISSION_ORG_READ,
    PERMISSION_ORG_UPDATE,
    PERMISSION_PROJECT_CREATE,
    PERMISSION_PROJECT_DELETE,
    PERMISSION_PROJECT_MANAGE_SETTINGS,
    PERMISSION_PROJECT_PUBLISH,
    PERMISSION_PROJECT_READ,
    PERMISSION_PROJECT_UPDATE,
    PERMISSION_SETTINGS_READ,
    PERMISSION_SETTINGS_UPDATE,
    PERMISSION_SYSTEM_HEALTH,
    PERMISSION_USER_CREATE,
    PERMISSION_USER_DELETE,
    PERMISSION_USER_MANAGE_ROLES,
    PERMISSION_USER_READ,
    PERMISSION_USER_UPDATE,
    PERMISSIONS_IN_ORDER,
)
from authz.roles.constants import (
    ROLE_ADMIN,
    ROLE_EDITOR,
    ROLE_SUPER_ADMIN,
    ROLE_VIEWER,
)


_ADMIN_DEFAULTS = (
    # User management, except impersonation
    PERMISSION_USER_READ,
    PERMISSION_USER_CREATE,
    PERMISSION_USER_UPDATE,
    PERMISSION_USER_DELETE,
    PERMISSION_USER_MANAGE_ROLES,
    PERMISSION_ORG_READ,
    PERMISSION_ORG_UPDATE,
    PERMISSION_ORG_MANAGE_MEMBERS,
    PERMISSION_PROJECT_READ,
    PERMISSION_PROJECT_CREATE,
    PERMISSION_PROJECT_UPDATE,
    PERMISSION_PROJECT_DELETE,
    PERMISSION_PROJECT_MANAGE_SETTINGS,
    PERMISSION_PROJECT_PUBLISH,
    PERMISSION_CONTENT_READ,
    PERMISSION_CONTENT_CREATE,
    PERMISSION_CONTENT_UPDATE,
    PERMISSION_CONTENT_DELETE,
    PERMISSION_CONTENT_PUBLISH,
    PERMISSION_CONTENT_ARCHIVE,
    PERMISSION_MEDIA_READ,
    PERMISSION_MEDIA_UPLOAD,
    PERMISSION_MEDIA_UPDATE,
    PERMISSION_MEDIA_DELETE,
    PERMISSION_ANALYTICS_READ,
    PERMISSION_ANALYTICS_EXPORT,
    PERMISSION_SETTINGS_READ,
    PERMISSION_SETTINGS_UPDATE,
    PERMISSION_AUDIT_READ,
    PERMISSION_AUDIT_EXPORT,
    PERMISSION_API_KEY_READ,
    PERMISSION_API_KEY_CREATE,
    PERMISSION_API_KEY_REVOKE,
    PERMISSION_BILLING_READ,
    PERMISSION_BILLING_MANAGE,
    PERMISSION_ADMIN_ACCESS,
    PERMISSION_SYSTEM_HEALTH,
    PERMISSION_APPLICATION_READ,
    PERMISSION_APPLICATION_UPDATE,
    PERMISSION_APPLICATION_DELETE,
)

_EDITOR_DEFAULTS = (
    PERMISSION_USER_READ,
    PERMISSION_ORG_READ,
    PERMISSION_PROJECT_READ,
    PERMISSION_PROJECT_CREATE,
    PERMISSION_PROJECT_UPDATE,
    PERMISSION_PROJECT_PUBLISH,
    PERMISSION_CONTENT_READ,
    PERMISSION_CONTENT_CREATE,
    PERMISSION_CONTENT_UPDATE,
    PERMISSION_CONTENT_DELETE,
    PERMISSION_CONTENT_PUBLISH,
    PERMISSION_CONTENT_ARCHIVE,
    PERMISSION_MEDIA_READ,
    PERMISSION_MEDIA_UPLOAD,
    PERMISSION_MEDIA_UPDATE,
    PERMISSION_MEDIA_DELETE,
    PERMISSION_ANALYTICS_READ,
)

_VIEWER_DEFAULTS = (
    PERMISSION_USER_READ,
    PERMISSION_ORG_READ,
    PERMISSION_PROJECT_READ,
    PERMISSION_CONTENT_READ,
    PERMISSION_MEDIA_READ,
    PERMISSION_ANALYTICS_READ,
)

# role -> ordered default permissions
DEFAULT_ROLE_PERMISSIONS = MappingProxyType(
    {
        ROLE_SUPER_ADMIN: PERMISSIONS_IN_ORDER,
        ROLE_ADMIN: _ADMIN_DEFAULTS,
        ROLE_EDITOR: _EDITOR_DEFAULTS,
        ROLE_VIEWER: _VIEWER_DEFAULTS,
    }
)


def default_permissions_for(role: str) -> frozenset[str]:
    """Default permission set for a role. Unknown roles get an empty set."""
    if not isinstance(role, str):
        return frozenset()
    return frozenset(DEFAULT_ROLE_PERMISSIONS.get(role, ()))


def role_has_default_permission(role: str, permission: str) -> bool:
    return permission in default_permissions_for(role)


def provision_permissions(role: str) -> tuple[str, ...]:
    """
    Permission list to store on a newly provisioned actor.

    This is the only place defaults flow into an actor record.
    An actor whose stored list is empty holds no permissions.
    """
    if not isinstance(role, str):
        return tuple()
    return tuple(DEFAULT_ROLE_PERMISSIONS.get(role, ()))
