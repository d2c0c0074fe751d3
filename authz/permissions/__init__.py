"""
Authz Permissions - Public API
==============================
"""

from authz.permissions.catalog import (
    all_permissions,
    by_category,
    category,
    display_name,
    has_all_permissions,
    has_any_permission,
    is_valid_permission,
    permission_difference,
)
from authz.permissions.constants import (
    PERMISSION_CATEGORIES,
    PERMISSION_DISPLAY_NAMES,
    PERMISSIONS_IN_ORDER,
    VALID_PERMISSIONS,
    PermissionCategory,
)
from authz.permissions.defaults import (
    DEFAULT_ROLE_PERMISSIONS,
    default_permissions_for,
    provision_permissions,
    role_has_default_permission,
)

__all__ = [
    "PermissionCategory",
    "PERMISSIONS_IN_ORDER",
    "VALID_PERMISSIONS",
    "PERMISSION_DISPLAY_NAMES",
    "PERMISSION_CATEGORIES",
    "DEFAULT_ROLE_PERMISSIONS",
    "all_permissions",
    "by_category",
    "category",
    "display_name",
    "has_all_permissions",
    "has_any_permission",
    "is_valid_permission",
    "permission_difference",
    "default_permissions_for",
    "provision_permissions",
    "role_has_default_permission",
]
