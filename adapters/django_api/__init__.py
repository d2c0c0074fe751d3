"""
Authz Django HTTP adapter.
Thin framework glue over authz/http_api.
"""

from adapters.django_api.wiring import (
    DEV_ADMIN_TOKEN,
    DEV_BARE_VIEWER_TOKEN,
    DEV_EDITOR_TOKEN,
    DEV_SUPER_ADMIN_TOKEN,
    DEV_VIEWER_TOKEN,
    build_auth_provider,
    build_settings,
)

__all__ = [
    "DEV_SUPER_ADMIN_TOKEN",
    "DEV_ADMIN_TOKEN",
    "DEV_EDITOR_TOKEN",
    "DEV_VIEWER_TOKEN",
    "DEV_BARE_VIEWER_TOKEN",
    "build_auth_provider",
    "build_settings",
]
