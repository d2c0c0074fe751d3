"""
Tests for authz.http_api auth resolution and the operation gate.
"""

from __future__ import annotations

import pytest

from authz.config import AuthzSettings
from authz.engine import ReasonCode
from authz.gating import GatingTier
from authz.http_api import authorize_operation
from authz.http_api.auth import (
    AuthPrincipal,
    InMemoryAuthProvider,
    extract_bearer_token,
    resolve_actor_context,
)
from authz.permissions.constants import (
    PERMISSION_CONTENT_PUBLISH,
    PERMISSION_CONTENT_READ,
)
from authz.policy import OperationDescriptor, PolicyAnnotations
from authz.roles.constants import ROLE_EDITOR, ROLE_VIEWER


def _provider():
    return InMemoryAuthProvider(
        {
            "editor-token": AuthPrincipal(
                actor_id="editor-1",
                role=ROLE_EDITOR,
                permissions=(PERMISSION_CONTENT_READ, PERMISSION_CONTENT_PUBLISH),
            ),
            "empty-token": AuthPrincipal(actor_id="viewer-1", role=ROLE_VIEWER),
        }
    )


PUBLISH = OperationDescriptor(
    name="publish",
    handler=PolicyAnnotations(
        required_roles=(ROLE_EDITOR,),
        required_permissions=(PERMISSION_CONTENT_PUBLISH,),
    ),
)
READ_PUBLIC = OperationDescriptor(
    name="read",
    handler=PolicyAnnotations(is_public=True),
)


# ══════════════════════════════════════════════════════════════
# BEARER EXTRACTION
# ══════════════════════════════════════════════════════════════

class TestBearer:
    def test_extracts_token_case_insensitively(self):
        assert extract_bearer_token({"Authorization": "bearer abc"}) == "abc"
        assert extract_bearer_token({"AUTHORIZATION": "Bearer  abc "}) == "abc"

    @pytest.mark.parametrize(
        "headers",
        [None, {}, {"Authorization": ""}, {"Authorization": "Basic abc"}, {"Authorization": "Bearer"}],
    )
    def test_missing_or_malformed(self, headers):
        assert extract_bearer_token(headers) is None

    def test_custom_scheme(self):
        assert extract_bearer_token({"Authorization": "Token abc"}, "Token") == "abc"


class TestResolveActor:
    def test_known_token(self):
        actor = resolve_actor_context({"Authorization": "Bearer editor-token"}, _provider())
        assert actor.is_authenticated is True
        assert actor.actor_id == "editor-1"
        assert actor.role == ROLE_EDITOR
        assert PERMISSION_CONTENT_PUBLISH in actor.permissions

    def test_unknown_token_is_anonymous(self):
        actor = resolve_actor_context({"Authorization": "Bearer nope"}, _provider())
        assert actor.is_authenticated is False
        assert actor.actor_id is None

    def test_empty_permission_list_stays_empty(self):
        actor = resolve_actor_context({"Authorization": "Bearer empty-token"}, _provider())
        assert actor.permissions == frozenset()

    def test_principal_validation(self):
        with pytest.raises(ValueError):
            AuthPrincipal(actor_id="", role=ROLE_VIEWER)
        with pytest.raises(ValueError):
            InMemoryAuthProvider({"": AuthPrincipal(actor_id="a", role=ROLE_VIEWER)})


# ══════════════════════════════════════════════════════════════
# GATE
# ══════════════════════════════════════════════════════════════

class TestGate:
    def test_allowed_editor_gets_full_tier(self):
        outcome = authorize_operation(
            PUBLISH, {"Authorization": "Bearer editor-token"}, _provider()
        )
        assert outcome.allowed is True
        assert outcome.operation == "publish"
        assert outcome.gating.tier is GatingTier.FULL

    def test_anonymous_denied(self):
        outcome = authorize_operation(PUBLISH, {}, _provider())
        assert outcome.allowed is False
        assert outcome.decision.reason_code == ReasonCode.UNAUTHENTICATED

    def test_empty_permissions_denied(self):
        outcome = authorize_operation(
            PUBLISH, {"Authorization": "Bearer empty-token"}, _provider()
        )
        assert outcome.decision.reason_code == ReasonCode.ROLE_NOT_ALLOWED

    def test_public_read_anonymous_is_preview(self):
        outcome = authorize_operation(READ_PUBLIC, None, _provider())
        assert outcome.allowed is True
        assert outcome.gating.tier is GatingTier.PREVIEW
        assert outcome.gating.gating_enabled is True

    def test_gating_switch_from_settings(self):
        settings = AuthzSettings(content_gating_enabled=False)
        outcome = authorize_operation(READ_PUBLIC, None, _provider(), settings)
        assert outcome.gating.gating_enabled is False

    def test_denials_logged(self, caplog):
        with caplog.at_level("INFO", logger="authz.http_api"):
            authorize_operation(PUBLISH, {}, _provider())
        assert "Operation denied: publish" in caplog.text
        assert "UNAUTHENTICATED" in caplog.text

    def test_denial_logging_can_be_switched_off(self, caplog):
        settings = AuthzSettings(log_denials=False)
        with caplog.at_level("INFO", logger="authz.http_api"):
            authorize_operation(PUBLISH, {}, _provider(), settings)
        assert "Operation denied" not in caplog.text

    def test_custom_bearer_scheme(self):
        settings = AuthzSettings(bearer_scheme="Token")
        outcome = authorize_operation(
            PUBLISH, {"Authorization": "Token editor-token"}, _provider(), settings
        )
        assert outcome.allowed is True
