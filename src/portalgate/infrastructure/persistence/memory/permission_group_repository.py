"""In-memory permission group repository."""

from portalgate.domain.entities import PermissionGroup
from portalgate.infrastructure.persistence.memory.store import PortalStore


class InMemoryPermissionGroupRepository:
    """Permission group repository implementation."""

    def __init__(self, store: PortalStore) -> None:
        self._store = store

    async def get_by_id(self, group_id: str) -> PermissionGroup | None:
        return self._store.groups.get(group_id)

    async def list_all(self) -> list[PermissionGroup]:
        return list(self._store.groups.values())

    async def create(self, group: PermissionGroup) -> PermissionGroup:
        self._store.groups[group.id] = group
        return group

    async def update(self, group: PermissionGroup) -> None:
        self._store.groups[group.id] = group

    async def delete(self, group_id: str) -> None:
        self._store.groups.pop(group_id, None)
