"""
Authz HTTP API - Public API
===========================
"""

from authz.http_api.contracts import HttpApiErrorBody, HttpApiResponse
from authz.http_api.errors import (
    REASON_ERROR_CODES,
    REASON_HTTP_STATUS,
    AuthorizationDenied,
    denial_response,
    enforce,
    error_code_for,
    error_response,
    http_status_for,
    map_decision,
    success_response,
)
from authz.http_api.gate import GateOutcome, authorize_actor, authorize_operation

__all__ = [
    "HttpApiErrorBody",
    "HttpApiResponse",
    "REASON_ERROR_CODES",
    "REASON_HTTP_STATUS",
    "AuthorizationDenied",
    "GateOutcome",
    "authorize_actor",
    "authorize_operation",
    "denial_response",
    "enforce",
    "error_code_for",
    "error_response",
    "http_status_for",
    "map_decision",
    "success_response",
]
