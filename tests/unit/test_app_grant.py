"""Unit tests for the AppGrant variant."""

from portalgate.domain.value_objects import (
    WILDCARD,
    AllApps,
    IndividualApps,
    app_grant_from_ids,
)

CATALOG = frozenset({"a", "b", "c"})


def test_from_ids_parses_wildcard() -> None:
    grant = app_grant_from_ids(["*", "a"])
    assert grant == AllApps(retained=frozenset({"a"}))
    assert grant.to_ids() == [WILDCARD, "a"]


def test_from_ids_none_is_empty() -> None:
    assert app_grant_from_ids(None) == IndividualApps()


def test_grant_is_set_union() -> None:
    grant = IndividualApps(frozenset({"a"})).grant(["a", "b"])
    assert grant.to_ids() == ["a", "b"]


def test_grant_wildcard_keeps_previous_ids() -> None:
    grant = IndividualApps(frozenset({"a"})).grant([WILDCARD])
    assert isinstance(grant, AllApps)
    assert grant.retained == {"a"}


def test_grant_then_revoke_wildcard_restores_previous_ids() -> None:
    before = IndividualApps(frozenset({"a"}))
    after = before.grant([WILDCARD]).revoke([WILDCARD], CATALOG)
    assert after == before


def test_revoke_specific_id_from_all_expands_catalog() -> None:
    grant = AllApps().revoke(["b"], CATALOG)
    assert grant == IndividualApps(frozenset({"a", "c"}))


def test_revoke_missing_id_is_noop() -> None:
    grant = IndividualApps(frozenset({"a"}))
    assert grant.revoke(["z"], CATALOG) == grant
