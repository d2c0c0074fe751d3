"""
Authz Config - Public API
=========================
"""

from authz.config.settings import DEFAULT_SETTINGS, AuthzSettings

__all__ = [
    "AuthzSettings",
    "DEFAULT_SETTINGS",
]
