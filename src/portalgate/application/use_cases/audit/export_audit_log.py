"""Export audit log use case."""

import csv
import io
import json

from portalgate.application.dto import AuditFilter
from portalgate.application.dto.records import audit_entry_to_dict
from portalgate.application.use_cases.audit.query_audit_log import QueryAuditLogUseCase
from portalgate.domain.entities import AuditLogEntry
from portalgate.domain.exceptions import ValidationError

EXPORT_FORMATS = ("csv", "json")

_CSV_COLUMNS = ["id", "timestamp", "actor", "action", "subject", "details"]


def render_csv(entries: list[AuditLogEntry]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=_CSV_COLUMNS)
    writer.writeheader()
    for entry in entries:
        row = audit_entry_to_dict(entry)
        row["details"] = json.dumps(row["details"], sort_keys=True, default=str)
        writer.writerow({k: row[k] for k in _CSV_COLUMNS})
    return buf.getvalue()


def render_json(entries: list[AuditLogEntry]) -> str:
    return json.dumps([audit_entry_to_dict(e) for e in entries], indent=2, default=str)


class ExportAuditLogUseCase:
    """Render the filtered audit log as CSV or JSON text."""

    def __init__(self, query_audit_log: QueryAuditLogUseCase) -> None:
        self._query = query_audit_log

    async def execute(
        self,
        actor_id: str,
        export_format: str = "csv",
        audit_filter: AuditFilter | None = None,
    ) -> str:
        if export_format not in EXPORT_FORMATS:
            raise ValidationError(f"Unsupported export format: {export_format}")
        entries = await self._query.execute(actor_id, audit_filter)
        if export_format == "csv":
            return render_csv(entries)
        return render_json(entries)
