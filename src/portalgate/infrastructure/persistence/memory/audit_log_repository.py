"""In-memory audit log."""

from portalgate.domain.entities import AuditLogEntry
from portalgate.infrastructure.persistence.memory.store import PortalStore


class InMemoryAuditLogRepository:
    """Append-only list of audit entries."""

    def __init__(self, store: PortalStore) -> None:
        self._store = store

    async def append(self, entry: AuditLogEntry) -> None:
        self._store.audit.append(entry)

    async def list_all(self) -> list[AuditLogEntry]:
        return list(self._store.audit)
