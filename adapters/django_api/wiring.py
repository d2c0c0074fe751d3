"""
Authz Django Adapter Wiring
===========================
Constructs the auth provider and settings for local/staging runs.

Adapter-only glue:
- dev bearer tokens, one per role
- no token issuance or signature validation
"""

from __future__ import annotations

import threading

from django.conf import settings as django_settings

from authz.config.settings import AuthzSettings
from authz.http_api.auth import AuthPrincipal, InMemoryAuthProvider
from authz.permissions.constants import PERMISSION_CONTENT_READ
from authz.permissions.defaults import provision_permissions
from authz.roles.constants import (
    ROLE_ADMIN,
    ROLE_EDITOR,
    ROLE_SUPER_ADMIN,
    ROLE_VIEWER,
)


DEV_SUPER_ADMIN_TOKEN = "dev-super-admin-token"
DEV_ADMIN_TOKEN = "dev-admin-token"
DEV_EDITOR_TOKEN = "dev-editor-token"
DEV_VIEWER_TOKEN = "dev-viewer-token"
DEV_BARE_VIEWER_TOKEN = "dev-bare-viewer-token"

_PROVIDER_LOCK = threading.Lock()
_PROVIDER: InMemoryAuthProvider | None = None


def _dev_principals() -> dict[str, AuthPrincipal]:
    return {
        DEV_SUPER_ADMIN_TOKEN: AuthPrincipal(
            actor_id="live-super-admin",
            role=ROLE_SUPER_ADMIN,
            permissions=provision_permissions(ROLE_SUPER_ADMIN),
        ),
        DEV_ADMIN_TOKEN: AuthPrincipal(
            actor_id="live-admin",
            role=ROLE_ADMIN,
            permissions=provision_permissions(ROLE_ADMIN),
        ),
        DEV_EDITOR_TOKEN: AuthPrincipal(
            actor_id="live-editor",
            role=ROLE_EDITOR,
            permissions=provision_permissions(ROLE_EDITOR),
        ),
        DEV_VIEWER_TOKEN: AuthPrincipal(
            actor_id="live-viewer",
            role=ROLE_VIEWER,
            permissions=provision_permissions(ROLE_VIEWER),
        ),
        # viewer whose stored permission list was customized down
        DEV_BARE_VIEWER_TOKEN: AuthPrincipal(
            actor_id="live-bare-viewer",
            role=ROLE_VIEWER,
            permissions=(PERMISSION_CONTENT_READ,),
        ),
    }


def build_auth_provider() -> InMemoryAuthProvider:
    global _PROVIDER
    with _PROVIDER_LOCK:
        if _PROVIDER is None:
            _PROVIDER = InMemoryAuthProvider(_dev_principals())
        return _PROVIDER


def build_settings() -> AuthzSettings:
    return AuthzSettings.from_mapping(getattr(django_settings, "AUTHZ", None))
