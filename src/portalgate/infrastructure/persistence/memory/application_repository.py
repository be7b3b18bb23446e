"""In-memory application catalog repository."""

from portalgate.domain.entities import Application
from portalgate.infrastructure.persistence.memory.store import PortalStore


class InMemoryApplicationRepository:
    """Catalog repository implementation. Catalog order is preserved."""

    def __init__(self, store: PortalStore) -> None:
        self._store = store

    async def get_by_id(self, app_id: str) -> Application | None:
        for app in self._store.apps:
            if app.id == app_id:
                return app
        return None

    async def list_all(self) -> list[Application]:
        return list(self._store.apps)
