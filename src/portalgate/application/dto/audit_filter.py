"""Audit log query filter."""

from dataclasses import dataclass
from enum import StrEnum

from portalgate.domain.value_objects import AuditAction


class DateRange(StrEnum):
    """Relative time window for audit queries."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"


@dataclass(frozen=True)
class AuditFilter:
    """Filter for audit log queries."""

    action: AuditAction | None = None
    search: str | None = None
    date_range: DateRange = DateRange.ALL
