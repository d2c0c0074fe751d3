"""
Tests for authz.permissions.defaults: provisioning data.
"""

from __future__ import annotations

from authz.context import ActorContext
from authz.engine import ReasonCode, decide
from authz.permissions import (
    DEFAULT_ROLE_PERMISSIONS,
    all_permissions,
    default_permissions_for,
    provision_permissions,
    role_has_default_permission,
)
from authz.permissions.constants import (
    PERMISSION_ADMIN_ACCESS,
    PERMISSION_CONTENT_PUBLISH,
    PERMISSION_CONTENT_READ,
    PERMISSION_USER_IMPERSONATE,
)
from authz.policy import EffectivePolicy
from authz.roles import (
    ROLE_ADMIN,
    ROLE_EDITOR,
    ROLE_SUPER_ADMIN,
    ROLE_VIEWER,
    VALID_ROLES,
)


def test_every_role_has_an_entry():
    assert set(DEFAULT_ROLE_PERMISSIONS) == set(VALID_ROLES)


def test_super_admin_carries_every_permission():
    assert default_permissions_for(ROLE_SUPER_ADMIN) == all_permissions()


def test_highest_role_is_superset_of_all_others():
    top = default_permissions_for(ROLE_SUPER_ADMIN)
    for role in VALID_ROLES:
        assert default_permissions_for(role) <= top


def test_admin_cannot_impersonate_by_default():
    assert role_has_default_permission(ROLE_ADMIN, PERMISSION_ADMIN_ACCESS)
    assert not role_has_default_permission(ROLE_ADMIN, PERMISSION_USER_IMPERSONATE)


def test_editor_publishes_viewer_reads():
    assert role_has_default_permission(ROLE_EDITOR, PERMISSION_CONTENT_PUBLISH)
    assert role_has_default_permission(ROLE_VIEWER, PERMISSION_CONTENT_READ)
    assert not role_has_default_permission(ROLE_VIEWER, PERMISSION_CONTENT_PUBLISH)


def test_unknown_role_gets_empty_defaults():
    assert default_permissions_for("root") == frozenset()
    assert default_permissions_for(None) == frozenset()
    assert provision_permissions("root") == tuple()


def test_provision_permissions_returns_ordered_tuple():
    provisioned = provision_permissions(ROLE_VIEWER)
    assert isinstance(provisioned, tuple)
    assert frozenset(provisioned) == default_permissions_for(ROLE_VIEWER)


def test_engine_ignores_role_defaults():
    # An admin whose stored permission list is empty holds nothing.
    actor = ActorContext(role=ROLE_ADMIN, permissions=(), is_authenticated=True)
    policy = EffectivePolicy(required_permissions=frozenset({PERMISSION_ADMIN_ACCESS}))

    decision = decide(actor, policy)

    assert decision.allowed is False
    assert decision.reason_code == ReasonCode.INSUFFICIENT_PERMISSIONS


def test_provisioned_actor_passes():
    actor = ActorContext(
        role=ROLE_ADMIN,
        permissions=provision_permissions(ROLE_ADMIN),
        is_authenticated=True,
    )
    policy = EffectivePolicy(required_permissions=frozenset({PERMISSION_ADMIN_ACCESS}))

    assert decide(actor, policy).allowed is True
