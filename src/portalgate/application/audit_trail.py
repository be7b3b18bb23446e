"""Helper for appending audit entries."""

from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from portalgate.application.ports import UnitOfWork
from portalgate.domain.entities import AuditLogEntry
from portalgate.domain.value_objects import AuditAction


async def record(
    uow: UnitOfWork,
    actor: str,
    action: AuditAction,
    subject: str,
    details: dict[str, Any] | None = None,
) -> AuditLogEntry:
    """Append one audit entry within the unit of work."""
    entry = AuditLogEntry(
        id=uuid4(),
        actor=actor,
        action=action,
        subject=subject,
        details=details or {},
        timestamp=datetime.now(UTC),
    )
    await uow.audit.append(entry)
    return entry
