"""
Tests for authz.roles: rank ordering and fail-closed comparisons.
"""

from __future__ import annotations

import itertools

import pytest

from authz.roles import (
    ROLE_ADMIN,
    ROLE_EDITOR,
    ROLE_SUPER_ADMIN,
    ROLE_VIEWER,
    VALID_ROLES,
    all_roles,
    assignable_roles,
    description,
    display_name,
    highest,
    is_valid_role,
    lowest,
    manageable_roles,
    rank,
    satisfies,
)


def test_ranks():
    assert rank(ROLE_SUPER_ADMIN) == 100
    assert rank(ROLE_ADMIN) == 75
    assert rank(ROLE_EDITOR) == 50
    assert rank(ROLE_VIEWER) == 25


def test_ranks_strictly_distinct():
    ranks = [rank(role) for role in VALID_ROLES]
    assert len(set(ranks)) == len(ranks)


def test_all_roles_most_privileged_first():
    assert all_roles() == (ROLE_SUPER_ADMIN, ROLE_ADMIN, ROLE_EDITOR, ROLE_VIEWER)


@pytest.mark.parametrize(
    "actor_role,required_role",
    list(itertools.product(sorted(VALID_ROLES), repeat=2)),
)
def test_satisfies_iff_rank_at_least(actor_role, required_role):
    expected = rank(actor_role) >= rank(required_role)
    assert satisfies(actor_role, required_role) is expected


def test_satisfies_is_reflexive():
    for role in VALID_ROLES:
        assert satisfies(role, role)


class TestFailClosed:
    def test_unknown_actor_role_satisfies_nothing(self):
        for role in VALID_ROLES:
            assert satisfies("root", role) is False

    def test_unknown_required_role_is_never_satisfied(self):
        assert satisfies(ROLE_SUPER_ADMIN, "root") is False

    def test_unknown_role_matches_nothing_even_itself(self):
        assert satisfies("root", "root") is False

    def test_unknown_role_has_no_rank(self):
        assert rank("root") is None
        assert rank(None) is None
        assert is_valid_role("root") is False

    def test_unknown_role_manages_nothing(self):
        assert assignable_roles("root") == frozenset()
        assert manageable_roles("root") == frozenset()


class TestAssignableAndManageable:
    def test_assignable_strictly_below(self):
        assert assignable_roles(ROLE_ADMIN) == frozenset({ROLE_EDITOR, ROLE_VIEWER})
        assert assignable_roles(ROLE_VIEWER) == frozenset()

    def test_manageable_at_or_below(self):
        assert manageable_roles(ROLE_ADMIN) == frozenset(
            {ROLE_ADMIN, ROLE_EDITOR, ROLE_VIEWER}
        )
        assert manageable_roles(ROLE_VIEWER) == frozenset({ROLE_VIEWER})

    def test_super_admin_manages_everyone(self):
        assert manageable_roles(ROLE_SUPER_ADMIN) == VALID_ROLES


class TestHighestLowest:
    def test_highest_and_lowest(self):
        roles = [ROLE_EDITOR, ROLE_VIEWER, ROLE_ADMIN]
        assert highest(roles) == ROLE_ADMIN
        assert lowest(roles) == ROLE_VIEWER

    def test_empty_input_is_none(self):
        assert highest([]) is None
        assert lowest([]) is None

    def test_unknown_tokens_ignored(self):
        assert highest(["root", ROLE_VIEWER]) == ROLE_VIEWER
        assert lowest(["root"]) is None


def test_role_metadata():
    assert display_name(ROLE_SUPER_ADMIN) == "Super Admin"
    assert description(ROLE_VIEWER)
    assert display_name("root") == "root"
    assert description("root") == ""
