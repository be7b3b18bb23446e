"""Audit log API resources."""

import falcon.asgi

from portalgate.application.dto import AuditFilter, DateRange
from portalgate.application.dto.records import audit_entry_to_dict
from portalgate.application.use_cases.audit.export_audit_log import ExportAuditLogUseCase
from portalgate.application.use_cases.audit.query_audit_log import QueryAuditLogUseCase
from portalgate.domain.exceptions import PermissionDenied, ValidationError
from portalgate.domain.value_objects import AuditAction

_CONTENT_TYPES = {"csv": "text/csv", "json": "application/json"}


def _audit_filter(req: falcon.asgi.Request) -> AuditFilter:
    action = req.get_param("action")
    date_range = req.get_param("range") or DateRange.ALL
    try:
        return AuditFilter(
            action=AuditAction(action) if action and action != "all" else None,
            search=req.get_param("q"),
            date_range=DateRange(date_range),
        )
    except ValueError as e:
        raise falcon.HTTPBadRequest(description=str(e)) from e


class AuditResource:
    """GET /v1/audit - filtered audit trail, newest first (admin)."""

    def __init__(self, query_audit_log: QueryAuditLogUseCase) -> None:
        self._query = query_audit_log

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        audit_filter = _audit_filter(req)
        try:
            entries = await self._query.execute(user.user_id, audit_filter)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {"items": [audit_entry_to_dict(e) for e in entries]}
        resp.status = falcon.HTTP_200


class AuditExportResource:
    """GET /v1/audit/export?format=csv|json - downloadable audit trail (admin)."""

    def __init__(self, export_audit_log: ExportAuditLogUseCase) -> None:
        self._export = export_audit_log

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        export_format = req.get_param("format") or "csv"
        audit_filter = _audit_filter(req)
        try:
            text = await self._export.execute(user.user_id, export_format, audit_filter)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.content_type = _CONTENT_TYPES[export_format]
        resp.downloadable_as = f"audit-log.{export_format}"
        resp.text = text
        resp.status = falcon.HTTP_200
