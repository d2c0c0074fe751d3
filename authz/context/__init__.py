"""
Authz Context - Public API
==========================
"""

from authz.context.actor_context import ActorContext

__all__ = ["ActorContext"]
