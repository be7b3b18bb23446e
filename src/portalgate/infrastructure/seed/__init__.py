"""Seed data: catalog, roles, permission groups, demo users and chat."""

from portalgate.infrastructure.persistence.memory.store import PortalStore
from portalgate.infrastructure.seed.apps import DEFAULT_MARKET_FORECAST_URL, build_catalog
from portalgate.infrastructure.seed.chat import build_announcements, build_messages
from portalgate.infrastructure.seed.permission_groups import build_groups
from portalgate.infrastructure.seed.roles import build_roles
from portalgate.infrastructure.seed.users import build_users


def build_store(
    market_forecast_url: str = DEFAULT_MARKET_FORECAST_URL,
    with_demo_data: bool = True,
) -> PortalStore:
    """Fresh store holding the configuration tables and, optionally, demo data."""
    store = PortalStore(
        apps=build_catalog(market_forecast_url),
        groups={g.id: g for g in build_groups()},
        roles={r.id: r for r in build_roles()},
    )
    if with_demo_data:
        store.users = {u.id: u for u in build_users()}
        store.messages = {m.id: m for m in build_messages()}
        store.announcements = {a.id: a for a in build_announcements()}
    return store


__all__ = [
    "build_catalog",
    "build_groups",
    "build_roles",
    "build_store",
    "build_users",
]
