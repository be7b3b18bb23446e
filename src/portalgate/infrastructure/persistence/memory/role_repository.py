"""In-memory role repository."""

from portalgate.domain.entities import RoleDefinition
from portalgate.infrastructure.persistence.memory.store import PortalStore


class InMemoryRoleRepository:
    """Role repository implementation."""

    def __init__(self, store: PortalStore) -> None:
        self._store = store

    async def get_by_id(self, role_id: str) -> RoleDefinition | None:
        return self._store.roles.get(role_id)

    async def list_all(self) -> list[RoleDefinition]:
        return list(self._store.roles.values())
