"""Audit log entry entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from portalgate.domain.value_objects import AuditAction


@dataclass(frozen=True)
class AuditLogEntry:
    """Immutable record of one administrative action."""

    id: UUID
    actor: str
    action: AuditAction
    subject: str
    timestamp: datetime
    details: dict[str, Any] = field(default_factory=dict)
