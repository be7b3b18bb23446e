"""Unit tests for access resolution."""

import pytest

from portalgate.domain.entities import PermissionGroup
from portalgate.domain.services import access_resolver
from portalgate.domain.value_objects import AllApps
from portalgate.infrastructure.seed import build_catalog, build_groups

from tests.conftest import make_user


@pytest.mark.parametrize(
    ("apps", "user_groups"),
    [([], []), (["a"], []), ([], ["g1"]), (["a", "b"], ["g1", "g2", "missing"])],
)
def test_admin_resolves_full_catalog(catalog, groups, apps, user_groups) -> None:
    """Admin sees every catalog app whatever their permission record holds."""
    user = make_user(role="admin", apps=apps, groups=user_groups)
    assert access_resolver.resolve_accessible_apps(user, catalog, groups) == {"a", "b", "c"}


def test_wildcard_resolves_full_catalog(catalog, groups) -> None:
    """A '*' grant gives the whole catalog to a non-admin."""
    user = make_user(role="operator", apps=["*"])
    assert isinstance(user.permissions.apps, AllApps)
    assert access_resolver.resolve_accessible_apps(user, catalog, groups) == {"a", "b", "c"}


def test_union_of_individual_group_and_role_sources(catalog, groups) -> None:
    user = make_user(role="manager", apps=["c"], groups=["g1"])
    # c individually, b from g1 and from the manager role
    assert access_resolver.resolve_accessible_apps(user, catalog, groups) == {"b", "c"}


def test_unknown_groups_are_ignored(catalog, groups) -> None:
    user = make_user(role="operator", apps=["a"], groups=["nope", "g1"])
    assert access_resolver.resolve_accessible_apps(user, catalog, groups) == {"a", "b"}


def test_resolution_is_idempotent(catalog, groups) -> None:
    user = make_user(role="manager", apps=["a"], groups=["g2"])
    first = access_resolver.resolve_accessible_apps(user, catalog, groups)
    second = access_resolver.resolve_accessible_apps(user, catalog, groups)
    assert first == second


@pytest.mark.parametrize(
    ("role", "apps", "user_groups"),
    [
        ("admin", [], []),
        ("operator", ["*"], []),
        ("operator", [], []),
        ("manager", ["c"], ["g2"]),
        ("operator", ["a"], ["missing"]),
    ],
)
def test_can_access_matches_resolved_set(catalog, groups, role, apps, user_groups) -> None:
    """can_access_app never diverges from membership in the resolved set."""
    user = make_user(role=role, apps=apps, groups=user_groups)
    resolved = access_resolver.resolve_accessible_apps(user, catalog, groups)
    for app_id in ["a", "b", "c", "not-in-catalog"]:
        assert access_resolver.can_access_app(user, app_id, catalog, groups) == (
            app_id in resolved
        )


def test_admin_cannot_access_app_outside_catalog(catalog, groups) -> None:
    user = make_user(role="admin")
    assert not access_resolver.can_access_app(user, "ghost", catalog, groups)


def test_operator_gets_required_role_apps() -> None:
    """Operator with no grants still opens apps that list the operator role."""
    catalog = build_catalog()
    groups = {g.id: g for g in build_groups()}
    user = make_user(role="operator", apps=[], groups=[])
    assert "equipment-tracking" in access_resolver.resolve_accessible_apps(
        user, catalog, groups
    )


def test_individual_and_group_grants_combine(catalog) -> None:
    """Individual market-forecast plus finance-suite gives both apps."""
    full_catalog = catalog + build_catalog()
    groups = {
        "finance-suite": PermissionGroup(
            id="finance-suite",
            name="Finance Suite",
            description="",
            apps=frozenset({"market-forecast", "company-equity"}),
        )
    }
    user = make_user(role="nobody", apps=["market-forecast"], groups=["finance-suite"])
    assert access_resolver.resolve_accessible_apps(user, full_catalog, groups) == {
        "market-forecast",
        "company-equity",
    }


def test_users_with_access(catalog, groups) -> None:
    users = [
        make_user("admin", role="admin"),
        make_user("manager", role="manager"),
        make_user("grouped", role="operator", groups=["g2"]),
        make_user("plain", role="operator"),
    ]
    assert access_resolver.users_with_access("b", users, catalog, groups) == {
        "admin",
        "manager",
    }
    assert access_resolver.users_with_access("a", users, catalog, groups) == {
        "admin",
        "grouped",
    }


def test_groups_containing_apps(groups) -> None:
    found = access_resolver.groups_containing_apps(["c"], groups)
    assert [g.id for g in found] == ["g2"]


def test_active_apps_excludes_maintenance(catalog) -> None:
    assert [a.id for a in access_resolver.active_apps(catalog)] == ["a", "b"]


def test_has_role_admin_satisfies_every_role() -> None:
    assert access_resolver.has_role(make_user(role="admin"), "manager")
    assert access_resolver.has_role(make_user(role="manager"), "manager")
    assert not access_resolver.has_role(make_user(role="operator"), "manager")
