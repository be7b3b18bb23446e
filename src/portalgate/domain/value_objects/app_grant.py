"""Individual application grant - either every app or an explicit id set."""

from collections.abc import Iterable
from dataclasses import dataclass

# Wire representation of "every catalog application".
WILDCARD = "*"


@dataclass(frozen=True)
class AllApps:
    """Unrestricted grant.

    ``retained`` keeps the explicit ids held before the wildcard was granted so
    that revoking the wildcard restores them.
    """

    retained: frozenset[str] = frozenset()

    def to_ids(self) -> list[str]:
        return [WILDCARD, *sorted(self.retained)]

    def grant(self, app_ids: Iterable[str]) -> "AppGrant":
        return self

    def revoke(self, app_ids: Iterable[str], catalog_ids: Iterable[str]) -> "AppGrant":
        """Drop the wildcard, or expand to the catalog and subtract."""
        ids = set(app_ids)
        if WILDCARD in ids:
            return IndividualApps(frozenset(self.retained - ids))
        return IndividualApps(frozenset(set(catalog_ids) - ids))


@dataclass(frozen=True)
class IndividualApps:
    """Explicitly granted application ids."""

    ids: frozenset[str] = frozenset()

    def to_ids(self) -> list[str]:
        return sorted(self.ids)

    def grant(self, app_ids: Iterable[str]) -> "AppGrant":
        ids = set(app_ids)
        if WILDCARD in ids:
            return AllApps(retained=self.ids)
        return IndividualApps(self.ids | ids)

    def revoke(self, app_ids: Iterable[str], catalog_ids: Iterable[str]) -> "AppGrant":
        return IndividualApps(self.ids - set(app_ids))


AppGrant = AllApps | IndividualApps


def app_grant_from_ids(app_ids: Iterable[str] | None) -> AppGrant:
    """Parse a wire list (which may contain the wildcard) into an AppGrant."""
    ids = set(app_ids or ())
    if WILDCARD in ids:
        return AllApps(retained=frozenset(ids - {WILDCARD}))
    return IndividualApps(frozenset(ids))
