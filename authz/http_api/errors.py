"""
Authz HTTP API - Error Mapping
==============================
Translates deny decisions into stable transport errors.

The engine never raises. This layer is where a denial becomes an
exception (enforce) or an error body + status (denial_response).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Optional

from authz.engine.reasons import AuthorizationDecision, ReasonCode
from authz.http_api.contracts import HttpApiErrorBody, HttpApiResponse


# reason code → client error code
REASON_ERROR_CODES = MappingProxyType(
    {
        ReasonCode.UNAUTHENTICATED: "AUTH_002",
        ReasonCode.INSUFFICIENT_PERMISSIONS: "AUTH_018",
        ReasonCode.ROLE_NOT_ALLOWED: "AUTH_019",
    }
)

REASON_HTTP_STATUS = MappingProxyType(
    {
        ReasonCode.UNAUTHENTICATED: 401,
        ReasonCode.INSUFFICIENT_PERMISSIONS: 403,
        ReasonCode.ROLE_NOT_ALLOWED: 403,
    }
)


class AuthorizationDenied(Exception):
    """Raised by the gate layer when a decision denies the operation."""

    def __init__(self, decision: AuthorizationDecision):
        if decision.allowed:
            raise ValueError("AuthorizationDenied requires a deny decision.")
        self.decision = decision
        self.reason_code = decision.reason_code
        super().__init__(f"{decision.reason_code.value}: {decision.message}")

    @property
    def http_status(self) -> int:
        return http_status_for(self.reason_code)


def enforce(decision: AuthorizationDecision) -> AuthorizationDecision:
    """Return an allow decision unchanged; raise AuthorizationDenied otherwise."""
    if not decision.allowed:
        raise AuthorizationDenied(decision)
    return decision


def http_status_for(reason_code: ReasonCode) -> int:
    return REASON_HTTP_STATUS[reason_code]


def error_code_for(reason_code: ReasonCode) -> str:
    return REASON_ERROR_CODES[reason_code]


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(
        ok=False,
        error=HttpApiErrorBody(
            code=code,
            message=message,
            details=details or {},
        ),
    ).to_dict()


def success_response(
    data: Any,
    *,
    meta: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return HttpApiResponse(ok=True, data=data, meta=meta).to_dict()


def map_decision(decision: AuthorizationDecision) -> HttpApiErrorBody:
    if decision.allowed:
        raise ValueError("Only deny decisions map to an error body.")
    return HttpApiErrorBody(
        code=error_code_for(decision.reason_code),
        message=decision.message,
        details={
            "reason_code": decision.reason_code.value,
            "message_key": f"authz.{decision.reason_code.value.lower()}",
        },
    )


def denial_response(decision: AuthorizationDecision) -> tuple[dict[str, Any], int]:
    """(body, status) for a deny decision."""
    mapped = map_decision(decision)
    body = error_response(
        code=mapped.code,
        message=mapped.message,
        details=mapped.details,
    )
    return body, http_status_for(decision.reason_code)
