"""
Authz Django Adapter Views
==========================
Small content endpoints, one per policy shape.

The article detail view doubles as the downstream content service:
it reads the gating tier from the request and truncates the body.
"""

from __future__ import annotations

import json
from typing import Any

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt

from adapters.django_api.decorators import PolicyGroup, authorize
from authz.gating.advisor import GatingTier
from authz.http_api.errors import error_response, success_response
from authz.permissions.constants import (
    PERMISSION_ANALYTICS_EXPORT,
    PERMISSION_ANALYTICS_READ,
    PERMISSION_AUDIT_READ,
    PERMISSION_CONTENT_CREATE,
    PERMISSION_CONTENT_PUBLISH,
    PERMISSION_SYSTEM_HEALTH,
)
from authz.policy.annotations import (
    public,
    require_any_permission,
    require_permissions,
    require_roles,
)
from authz.roles.constants import ROLE_ADMIN, ROLE_EDITOR, ROLE_VIEWER

PREVIEW_CHARACTERS = 80

ARTICLES: dict[str, dict[str, str]] = {
    "welcome": {
        "title": "Welcome",
        "body": (
            "Every request is checked in a fixed order: public routes first, "
            "then authentication, then the role requirement, then the "
            "permission requirement. Anonymous readers see a preview."
        ),
    },
}

ADMIN_GROUP = require_roles(ROLE_ADMIN)(PolicyGroup("admin"))


def _json_error(code: str, message: str, status: int = 400) -> JsonResponse:
    return JsonResponse(
        error_response(code=code, message=message, details={}),
        status=status,
    )


def _method_not_allowed() -> JsonResponse:
    return _json_error(
        "METHOD_NOT_ALLOWED",
        "Method not allowed for this endpoint.",
        status=405,
    )


def _parse_json_body(request: HttpRequest) -> dict[str, Any]:
    if not request.body:
        return {}
    try:
        parsed = json.loads(request.body.decode("utf-8"))
    except Exception as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Request body must be a JSON object.")
    return parsed


def _gating_meta(request: HttpRequest) -> dict[str, Any]:
    # unannotated requests are treated as preview
    tier = getattr(request, "gating_tier", GatingTier.PREVIEW)
    return {
        "gating_tier": tier.value,
        "gating_enabled": bool(getattr(request, "gating_enabled", True)),
    }


# ══════════════════════════════════════════════════════════════
# CONTENT
# ══════════════════════════════════════════════════════════════

@csrf_exempt
@authorize
@public
def article_detail_view(request: HttpRequest, slug: str) -> JsonResponse:
    if request.method != "GET":
        return _method_not_allowed()

    article = ARTICLES.get(slug)
    if article is None:
        return _json_error("NOT_FOUND", f"Article '{slug}' not found.", status=404)

    meta = _gating_meta(request)
    body = article["body"]
    if meta["gating_enabled"]:
        body = body[:PREVIEW_CHARACTERS]

    return JsonResponse(
        success_response(
            {"slug": slug, "title": article["title"], "body": body},
            meta=meta,
        )
    )


@csrf_exempt
@authorize
@require_permissions(PERMISSION_CONTENT_CREATE)
def article_create_view(request: HttpRequest) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    try:
        body = _parse_json_body(request)
        slug = str(body["slug"])
        title = str(body["title"])
    except (ValueError, KeyError) as exc:
        return _json_error("INVALID_REQUEST", str(exc), status=400)

    return JsonResponse(
        success_response({"slug": slug, "title": title, "status": "DRAFT"}),
        status=201,
    )


@csrf_exempt
@authorize
@require_roles(ROLE_EDITOR)
@require_permissions(PERMISSION_CONTENT_PUBLISH)
def article_publish_view(request: HttpRequest, slug: str) -> JsonResponse:
    if request.method != "POST":
        return _method_not_allowed()
    return JsonResponse(success_response({"slug": slug, "status": "PUBLISHED"}))


# ══════════════════════════════════════════════════════════════
# ACCOUNT
# ══════════════════════════════════════════════════════════════

@csrf_exempt
@authorize
def me_view(request: HttpRequest) -> JsonResponse:
    actor = request.actor
    return JsonResponse(
        success_response(
            {
                "actor_id": actor.actor_id,
                "role": actor.role,
                "permissions": sorted(actor.permissions),
            }
        )
    )


@csrf_exempt
@authorize
@require_roles(ROLE_VIEWER, strict=True)
def onboarding_checklist_view(request: HttpRequest) -> JsonResponse:
    return JsonResponse(
        success_response({"steps": ["read-welcome", "follow-topics"]})
    )


@csrf_exempt
@authorize
@require_any_permission(PERMISSION_ANALYTICS_READ, PERMISSION_ANALYTICS_EXPORT)
def analytics_summary_view(request: HttpRequest) -> JsonResponse:
    return JsonResponse(success_response({"views": 0, "readers": 0}))


# ══════════════════════════════════════════════════════════════
# ADMIN (group: admin role)
# ══════════════════════════════════════════════════════════════

@csrf_exempt
@authorize(group=ADMIN_GROUP)
@require_permissions(PERMISSION_AUDIT_READ)
def audit_log_view(request: HttpRequest) -> JsonResponse:
    return JsonResponse(success_response({"entries": []}))


@csrf_exempt
@authorize(group=ADMIN_GROUP)
@require_roles()
@require_permissions(PERMISSION_SYSTEM_HEALTH)
def system_health_view(request: HttpRequest) -> JsonResponse:
    return JsonResponse(success_response({"status": "ok"}))
