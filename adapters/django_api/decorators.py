"""
Authz Django Adapter - View Gate
================================
@authorize wraps a Django view with the operation gate.

Handler-level declarations come from the authz.policy decorators
applied to the view. Group-level declarations come from a PolicyGroup
(or any object carrying annotations) passed as group=.

On deny the view is not called; the mapped error body and status
are returned instead. The gating tier is attached either way.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional

from django.http import HttpRequest, JsonResponse

from adapters.django_api.wiring import build_auth_provider, build_settings
from authz.gating.advisor import annotate as annotate_gating
from authz.http_api.errors import denial_response
from authz.http_api.gate import authorize_operation
from authz.policy.annotations import describe_operation


class PolicyGroup:
    """Group-level annotations shared by a set of views."""

    def __init__(self, name: str):
        if not name or not isinstance(name, str):
            raise ValueError("name must be a non-empty string.")
        self.name = name

    def __repr__(self) -> str:
        return f"PolicyGroup({self.name!r})"


def _headers_from_request(request: HttpRequest) -> dict[str, str]:
    return {str(key): str(value) for key, value in request.headers.items()}


def authorize(
    view: Optional[Callable] = None,
    *,
    group: Any = None,
):
    def decorator(view_func: Callable) -> Callable:
        operation_name = f"{view_func.__module__}.{view_func.__qualname__}"

        @functools.wraps(view_func)
        def wrapped(request: HttpRequest, *args, **kwargs):
            # annotations are read per call so later declarations are seen
            operation = describe_operation(wrapped, group, name=operation_name)
            outcome = authorize_operation(
                operation,
                _headers_from_request(request),
                build_auth_provider(),
                build_settings(),
            )

            request.actor = outcome.actor
            annotate_gating(request, outcome.gating)

            if not outcome.allowed:
                body, status = denial_response(outcome.decision)
                return JsonResponse(body, status=status)
            return view_func(request, *args, **kwargs)

        return wrapped

    if view is not None:
        return decorator(view)
    return decorator
