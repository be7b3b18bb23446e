"""Catalog and group snapshot used for access resolution inside a unit of work."""

from dataclasses import dataclass

from portalgate.application.ports import UnitOfWork
from portalgate.domain.entities import Application, PermissionGroup, User
from portalgate.domain.services import access_resolver


@dataclass
class AccessContext:
    """Catalog plus group registry, bound to the resolver functions."""

    catalog: list[Application]
    groups: dict[str, PermissionGroup]

    @property
    def catalog_ids(self) -> frozenset[str]:
        return access_resolver.catalog_ids(self.catalog)

    def resolve(self, user: User) -> frozenset[str]:
        return access_resolver.resolve_accessible_apps(user, self.catalog, self.groups)

    def can_access(self, user: User, app_id: str) -> bool:
        return access_resolver.can_access_app(user, app_id, self.catalog, self.groups)

    def users_with_access(self, app_id: str, users: list[User]) -> set[str]:
        return access_resolver.users_with_access(app_id, users, self.catalog, self.groups)


async def load_access_context(uow: UnitOfWork) -> AccessContext:
    catalog = await uow.apps.list_all()
    groups = await uow.groups.list_all()
    return AccessContext(catalog=catalog, groups={g.id: g for g in groups})
