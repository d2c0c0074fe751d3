"""
Authz Permissions - Catalog Constants
=====================================
Closed set of capability tokens.

Convention: <domain>:<action>
Tokens are stable identifiers. Never rename a published token.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


# ══════════════════════════════════════════════════════════════
# PERMISSION CATEGORIES
# ══════════════════════════════════════════════════════════════

class PermissionCategory(Enum):
    """UI grouping for permissions."""
    USER = "User Management"
    ORGANIZATION = "Organization"
    PROJECT = "Project"
    CONTENT = "Content"
    PRODUCT = "Product"
    SERVICE = "Service"
    BLOG = "Blog"
    COMMENT = "Comment"
    CONTACT = "Contact"
    APPLICATION = "Job Applications"
    NEWSLETTER = "Newsletter"
    MEDIA = "Media"
    ANALYTICS = "Analytics"
    SETTINGS = "Settings"
    AUDIT = "Audit"
    API = "API"
    BILLING = "Billing"
    SYSTEM = "System"


# ══════════════════════════════════════════════════════════════
# PERMISSION TOKENS
# ══════════════════════════════════════════════════════════════

# ── User management ───────────────────────────────────────────
PERMISSION_USER_READ = "user:read"
PERMISSION_USER_CREATE = "user:create"
PERMISSION_USER_UPDATE = "user:update"
PERMISSION_USER_DELETE = "user:delete"
PERMISSION_USER_MANAGE_ROLES = "user:manage_roles"
PERMISSION_USER_IMPERSONATE = "user:impersonate"

# ── Organization ──────────────────────────────────────────────
PERMISSION_ORG_READ = "org:read"
PERMISSION_ORG_CREATE = "org:create"
PERMISSION_ORG_UPDATE = "org:update"
PERMISSION_ORG_DELETE = "org:delete"
PERMISSION_ORG_MANAGE_MEMBERS = "org:manage_members"

# ── Project ───────────────────────────────────────────────────
PERMISSION_PROJECT_READ = "project:read"
PERMISSION_PROJECT_CREATE = "project:create"
PERMISSION_PROJECT_UPDATE = "project:update"
PERMISSION_PROJECT_DELETE = "project:delete"
PERMISSION_PROJECT_MANAGE_SETTINGS = "project:manage_settings"
PERMISSION_PROJECT_PUBLISH = "project:publish"

# ── Content ───────────────────────────────────────────────────
PERMISSION_CONTENT_READ = "content:read"
PERMISSION_CONTENT_CREATE = "content:create"
PERMISSION_CONTENT_UPDATE = "content:update"
PERMISSION_CONTENT_DELETE = "content:delete"
PERMISSION_CONTENT_PUBLISH = "content:publish"
PERMISSION_CONTENT_ARCHIVE = "content:archive"

# ── Product ───────────────────────────────────────────────────
PERMISSION_PRODUCT_READ = "product:read"
PERMISSION_PRODUCT_CREATE = "product:create"
PERMISSION_PRODUCT_UPDATE = "product:update"
PERMISSION_PRODUCT_DELETE = "product:delete"

# ── Service ───────────────────────────────────────────────────
PERMISSION_SERVICE_READ = "service:read"
PERMISSION_SERVICE_CREATE = "service:create"
PERMISSION_SERVICE_UPDATE = "service:update"
PERMISSION_SERVICE_DELETE = "service:delete"

# ── Blog ──────────────────────────────────────────────────────
PERMISSION_BLOG_READ = "blog:read"
PERMISSION_BLOG_CREATE = "blog:create"
PERMISSION_BLOG_UPDATE = "blog:update"
PERMISSION_BLOG_DELETE = "blog:delete"
PERMISSION_BLOG_PUBLISH = "blog:publish"

# ── Comment ───────────────────────────────────────────────────
PERMISSION_COMMENT_READ = "comment:read"
PERMISSION_COMMENT_CREATE = "comment:create"
PERMISSION_COMMENT_UPDATE = "comment:update"
PERMISSION_COMMENT_DELETE = "comment:delete"
PERMISSION_COMMENT_MODERATE = "comment:moderate"

# ── Contact ───────────────────────────────────────────────────
PERMISSION_CONTACT_READ = "contact:read"
PERMISSION_CONTACT_UPDATE = "contact:update"
PERMISSION_CONTACT_DELETE = "contact:delete"

# ── Job applications ──────────────────────────────────────────
PERMISSION_APPLICATION_READ = "application:read"
PERMISSION_APPLICATION_UPDATE = "application:update"
PERMISSION_APPLICATION_DELETE = "application:delete"

# ── Newsletter ────────────────────────────────────────────────
PERMISSION_NEWSLETTER_READ = "newsletter:read"
PERMISSION_NEWSLETTER_MANAGE = "newsletter:manage"

# ── Media ─────────────────────────────────────────────────────
PERMISSION_MEDIA_READ = "media:read"
PERMISSION_MEDIA_UPLOAD = "media:upload"
PERMISSION_MEDIA_UPDATE = "media:update"
PERMISSION_MEDIA_DELETE = "media:delete"

# ── Analytics ─────────────────────────────────────────────────
PERMISSION_ANALYTICS_READ = "analytics:read"
PERMISSION_ANALYTICS_EXPORT = "analytics:export"

# ── Settings ──────────────────────────────────────────────────
PERMISSION_SETTINGS_READ = "settings:read"
PERMISSION_SETTINGS_UPDATE = "settings:update"

# ── Audit ─────────────────────────────────────────────────────
PERMISSION_AUDIT_READ = "audit:read"
PERMISSION_AUDIT_EXPORT = "audit:export"

# ── API keys ──────────────────────────────────────────────────
PERMISSION_API_KEY_READ = "api_key:read"
PERMISSION_API_KEY_CREATE = "api_key:create"
PERMISSION_API_KEY_REVOKE = "api_key:revoke"

# ── Billing ───────────────────────────────────────────────────
PERMISSION_BILLING_READ = "billing:read"
PERMISSION_BILLING_MANAGE = "billing:manage"

# ── System administration ─────────────────────────────────────
PERMISSION_ADMIN_ACCESS = "admin:access"
PERMISSION_SYSTEM_CONFIG = "system:config"
PERMISSION_SYSTEM_HEALTH = "system:health"
PERMISSION_SYSTEM_MAINTENANCE = "system:maintenance"


# ══════════════════════════════════════════════════════════════
# CATALOG TABLE
# ══════════════════════════════════════════════════════════════
# (token, display name, category). Declaration order is catalog order.

_CATALOG_ROWS: tuple[tuple[str, str, PermissionCategory], ...] = (
    (PERMISSION_USER_READ, "View Users", PermissionCategory.USER),
    (PERMISSION_USER_CREATE, "Create Users", PermissionCategory.USER),
    (PERMISSION_USER_UPDATE, "Update Users", PermissionCategory.USER),
    (PERMISSION_USER_DELETE, "Delete Users", PermissionCategory.USER),
    (PERMISSION_USER_MANAGE_ROLES, "Manage User Roles", PermissionCategory.USER),
    (PERMISSION_USER_IMPERSONATE, "Impersonate Users", PermissionCategory.USER),

    (PERMISSION_ORG_READ, "View Organization", PermissionCategory.ORGANIZATION),
    (PERMISSION_ORG_CREATE, "Create Organization", PermissionCategory.ORGANIZATION),
    (PERMISSION_ORG_UPDATE, "Update Organization", PermissionCategory.ORGANIZATION),
    (PERMISSION_ORG_DELETE, "Delete Organization", PermissionCategory.ORGANIZATION),
    (
        PERMISSION_ORG_MANAGE_MEMBERS,
        "Manage Organization Members",
        PermissionCategory.ORGANIZATION,
    ),

    (PERMISSION_PROJECT_READ, "View Projects", PermissionCategory.PROJECT),
    (PERMISSION_PROJECT_CREATE, "Create Projects", PermissionCategory.PROJECT),
    (PERMISSION_PROJECT_UPDATE, "Update Projects", PermissionCategory.PROJECT),
    (PERMISSION_PROJECT_DELETE, "Delete Projects", PermissionCategory.PROJECT),
    (
        PERMISSION_PROJECT_MANAGE_SETTINGS,
        "Manage Project Settings",
        PermissionCategory.PROJECT,
    ),
    (PERMISSION_PROJECT_PUBLISH, "Publish Projects", PermissionCategory.PROJECT),

    (PERMISSION_CONTENT_READ, "View Content", PermissionCategory.CONTENT),
    (PERMISSION_CONTENT_CREATE, "Create Content", PermissionCategory.CONTENT),
    (PERMISSION_CONTENT_UPDATE, "Update Content", PermissionCategory.CONTENT),
    (PERMISSION_CONTENT_DELETE, "Delete Content", PermissionCategory.CONTENT),
    (PERMISSION_CONTENT_PUBLISH, "Publish Content", PermissionCategory.CONTENT),
    (PERMISSION_CONTENT_ARCHIVE, "Archive Content", PermissionCategory.CONTENT),

    (PERMISSION_PRODUCT_READ, "View Products", PermissionCategory.PRODUCT),
    (PERMISSION_PRODUCT_CREATE, "Create Products", PermissionCategory.PRODUCT),
    (PERMISSION_PRODUCT_UPDATE, "Update Products", PermissionCategory.PRODUCT),
    (PERMISSION_PRODUCT_DELETE, "Delete Products", PermissionCategory.PRODUCT),

    (PERMISSION_SERVICE_READ, "View Services", PermissionCategory.SERVICE),
    (PERMISSION_SERVICE_CREATE, "Create Services", PermissionCategory.SERVICE),
    (PERMISSION_SERVICE_UPDATE, "Update Services", PermissionCategory.SERVICE),
    (PERMISSION_SERVICE_DELETE, "Delete Services", PermissionCategory.SERVICE),

    (PERMISSION_BLOG_READ, "View Blog Posts", PermissionCategory.BLOG),
    (PERMISSION_BLOG_CREATE, "Create Blog Posts", PermissionCategory.BLOG),
    (PERMISSION_BLOG_UPDATE, "Update Blog Posts", PermissionCategory.BLOG),
    (PERMISSION_BLOG_DELETE, "Delete Blog Posts", PermissionCategory.BLOG),
    (PERMISSION_BLOG_PUBLISH, "Publish Blog Posts", PermissionCategory.BLOG),

    (PERMISSION_COMMENT_READ, "View Comments", PermissionCategory.COMMENT),
    (PERMISSION_COMMENT_CREATE, "Create Comments", PermissionCategory.COMMENT),
    (PERMISSION_COMMENT_UPDATE, "Update Comments", PermissionCategory.COMMENT),
    (PERMISSION_COMMENT_DELETE, "Delete Comments", PermissionCategory.COMMENT),
    (PERMISSION_COMMENT_MODERATE, "Moderate Comments", PermissionCategory.COMMENT),

    (PERMISSION_CONTACT_READ, "View Contact Submissions", PermissionCategory.CONTACT),
    (
        PERMISSION_CONTACT_UPDATE,
        "Update Contact Submissions",
        PermissionCategory.CONTACT,
    ),
    (
        PERMISSION_CONTACT_DELETE,
        "Delete Contact Submissions",
        PermissionCategory.CONTACT,
    ),

    (
        PERMISSION_APPLICATION_READ,
        "View Job Applications",
        PermissionCategory.APPLICATION,
    ),
    (
        PERMISSION_APPLICATION_UPDATE,
        "Update Job Applications",
        PermissionCategory.APPLICATION,
    ),
    (
        PERMISSION_APPLICATION_DELETE,
        "Delete Job Applications",
        PermissionCategory.APPLICATION,
    ),

    (
        PERMISSION_NEWSLETTER_READ,
        "View Newsletter Subscribers",
        PermissionCategory.NEWSLETTER,
    ),
    (PERMISSION_NEWSLETTER_MANAGE, "Manage Newsletter", PermissionCategory.NEWSLETTER),

    (PERMISSION_MEDIA_READ, "View Media", PermissionCategory.MEDIA),
    (PERMISSION_MEDIA_UPLOAD, "Upload Media", PermissionCategory.MEDIA),
    (PERMISSION_MEDIA_UPDATE, "Update Media", PermissionCategory.MEDIA),
    (PERMISSION_MEDIA_DELETE, "Delete Media", PermissionCategory.MEDIA),

    (PERMISSION_ANALYTICS_READ, "View Analytics", PermissionCategory.ANALYTICS),
    (PERMISSION_ANALYTICS_EXPORT, "Export Analytics", PermissionCategory.ANALYTICS),

    (PERMISSION_SETTINGS_READ, "View Settings", PermissionCategory.SETTINGS),
    (PERMISSION_SETTINGS_UPDATE, "Update Settings", PermissionCategory.SETTINGS),

    (PERMISSION_AUDIT_READ, "View Audit Logs", PermissionCategory.AUDIT),
    (PERMISSION_AUDIT_EXPORT, "Export Audit Logs", PermissionCategory.AUDIT),

    (PERMISSION_API_KEY_READ, "View API Keys", PermissionCategory.API),
    (PERMISSION_API_KEY_CREATE, "Create API Keys", PermissionCategory.API),
    (PERMISSION_API_KEY_REVOKE, "Revoke API Keys", PermissionCategory.API),

    (PERMISSION_BILLING_READ, "View Billing", PermissionCategory.BILLING),
    (PERMISSION_BILLING_MANAGE, "Manage Billing", PermissionCategory.BILLING),

    (PERMISSION_ADMIN_ACCESS, "Access Admin Panel", PermissionCategory.SYSTEM),
    (PERMISSION_SYSTEM_CONFIG, "System Configuration", PermissionCategory.SYSTEM),
    (PERMISSION_SYSTEM_HEALTH, "View System Health", PermissionCategory.SYSTEM),
    (PERMISSION_SYSTEM_MAINTENANCE, "System Maintenance", PermissionCategory.SYSTEM),
)

PERMISSIONS_IN_ORDER: tuple[str, ...] = tuple(row[0] for row in _CATALOG_ROWS)

VALID_PERMISSIONS = frozenset(PERMISSIONS_IN_ORDER)

PERMISSION_DISPLAY_NAMES = MappingProxyType(
    {token: display for token, display, _ in _CATALOG_ROWS}
)

PERMISSION_CATEGORIES = MappingProxyType(
    {token: category for token, _, category in _CATALOG_ROWS}
)
