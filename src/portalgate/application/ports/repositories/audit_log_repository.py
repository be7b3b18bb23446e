"""Audit log repository port."""

from typing import Protocol

from portalgate.domain.entities import AuditLogEntry


class AuditLogRepository(Protocol):
    """Append-only audit sink."""

    async def append(self, entry: AuditLogEntry) -> None: ...

    async def list_all(self) -> list[AuditLogEntry]: ...
