"""Bulk operation command and result."""

from dataclasses import dataclass, field
from typing import Any

from portalgate.domain.value_objects import BulkOperationType


@dataclass(frozen=True)
class BulkPayload:
    """Arguments for the bulk mutation; which fields matter depends on the type."""

    apps: tuple[str, ...] = ()
    groups: tuple[str, ...] = ()
    role: str | None = None
    status: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.apps:
            data["apps"] = list(self.apps)
        if self.groups:
            data["groups"] = list(self.groups)
        if self.role is not None:
            data["role"] = self.role
        if self.status is not None:
            data["status"] = self.status
        return data


@dataclass(frozen=True)
class BulkOperation:
    """One administrative command applied to many users."""

    type: BulkOperationType
    user_ids: tuple[str, ...]
    payload: BulkPayload = field(default_factory=BulkPayload)


@dataclass
class BulkResult:
    """Partial-failure summary of a bulk operation."""

    succeeded: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def succeeded_count(self) -> int:
        return len(self.succeeded)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
