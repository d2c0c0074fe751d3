"""
Tests for authz.permissions: catalog lookups and set helpers.
"""

from __future__ import annotations

from authz.permissions import (
    PERMISSIONS_IN_ORDER,
    PermissionCategory,
    all_permissions,
    by_category,
    category,
    display_name,
    has_all_permissions,
    has_any_permission,
    is_valid_permission,
    permission_difference,
)
from authz.permissions.constants import (
    PERMISSION_CONTENT_PUBLISH,
    PERMISSION_CONTENT_READ,
    PERMISSION_CONTENT_UPDATE,
    PERMISSION_USER_DELETE,
)


class TestCatalog:
    def test_catalog_is_closed_and_enumerable(self):
        permissions = all_permissions()
        assert isinstance(permissions, frozenset)
        assert len(permissions) == len(PERMISSIONS_IN_ORDER)
        assert PERMISSION_CONTENT_PUBLISH in permissions

    def test_tokens_are_namespaced(self):
        for token in all_permissions():
            domain, _, action = token.partition(":")
            assert domain and action

    def test_display_name_and_category(self):
        assert display_name(PERMISSION_USER_DELETE) == "Delete Users"
        assert category(PERMISSION_USER_DELETE) is PermissionCategory.USER

    def test_unknown_token_never_raises(self):
        assert is_valid_permission("content:teleport") is False
        assert is_valid_permission(None) is False
        assert is_valid_permission(42) is False
        assert display_name("content:teleport") == "content:teleport"
        assert category("content:teleport") is None

    def test_by_category(self):
        content = by_category(PermissionCategory.CONTENT)
        assert content == frozenset(
            {
                "content:read",
                "content:create",
                "content:update",
                "content:delete",
                "content:publish",
                "content:archive",
            }
        )

    def test_every_category_has_permissions(self):
        for permission_category in PermissionCategory:
            assert by_category(permission_category)

    def test_categories_partition_the_catalog(self):
        union = frozenset().union(
            *(by_category(c) for c in PermissionCategory)
        )
        assert union == all_permissions()


class TestPermissionSetHelpers:
    def test_has_all_is_subset(self):
        held = {PERMISSION_CONTENT_READ, PERMISSION_CONTENT_UPDATE}
        assert has_all_permissions(held, {PERMISSION_CONTENT_READ})
        assert has_all_permissions(held, held)
        assert not has_all_permissions(
            held, {PERMISSION_CONTENT_READ, PERMISSION_CONTENT_PUBLISH}
        )

    def test_has_all_with_empty_requirement(self):
        assert has_all_permissions(set(), set())

    def test_has_any_is_intersection(self):
        held = {PERMISSION_CONTENT_READ}
        assert has_any_permission(
            held, {PERMISSION_CONTENT_READ, PERMISSION_CONTENT_UPDATE}
        )
        assert not has_any_permission(held, {PERMISSION_CONTENT_UPDATE})

    def test_permission_difference_preserves_base_order(self):
        result = permission_difference(
            [PERMISSION_CONTENT_READ, PERMISSION_USER_DELETE, PERMISSION_CONTENT_UPDATE],
            [PERMISSION_USER_DELETE],
        )
        assert result == (PERMISSION_CONTENT_READ, PERMISSION_CONTENT_UPDATE)

    def test_permission_difference_deduplicates(self):
        result = permission_difference(
            [PERMISSION_CONTENT_READ, PERMISSION_CONTENT_READ],
            [],
        )
        assert result == (PERMISSION_CONTENT_READ,)
