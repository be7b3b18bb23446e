"""Query audit log use case."""

import json
from datetime import UTC, datetime, timedelta

from portalgate.application.dto import AuditFilter, DateRange
from portalgate.application.ports import PermissionChecker
from portalgate.domain.entities import AuditLogEntry
from portalgate.domain.exceptions import PermissionDenied

_WINDOWS = {
    DateRange.WEEK: timedelta(days=7),
    DateRange.MONTH: timedelta(days=30),
}


def _in_range(entry: AuditLogEntry, date_range: DateRange, now: datetime) -> bool:
    if date_range == DateRange.ALL:
        return True
    if date_range == DateRange.TODAY:
        return entry.timestamp.astimezone(UTC).date() == now.date()
    return entry.timestamp >= now - _WINDOWS[date_range]


def _matches(entry: AuditLogEntry, search: str) -> bool:
    term = search.lower()
    haystack = " ".join(
        (entry.actor, entry.subject, str(entry.action), json.dumps(entry.details, default=str))
    )
    return term in haystack.lower()


def filter_entries(
    entries: list[AuditLogEntry], audit_filter: AuditFilter, now: datetime | None = None
) -> list[AuditLogEntry]:
    """Apply ``audit_filter`` and order newest first."""
    now = now or datetime.now(UTC)
    selected = [
        e
        for e in entries
        if (audit_filter.action is None or e.action == audit_filter.action)
        and (not audit_filter.search or _matches(e, audit_filter.search))
        and _in_range(e, audit_filter.date_range, now)
    ]
    selected.sort(key=lambda e: e.timestamp, reverse=True)
    return selected


class QueryAuditLogUseCase:
    """Filtered view of the audit log for administrators."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self, actor_id: str, audit_filter: AuditFilter | None = None
    ) -> list[AuditLogEntry]:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can view the audit log")

        async with self._uow_factory() as uow:
            entries = await uow.audit.list_all()

        return filter_entries(entries, audit_filter or AuditFilter())
