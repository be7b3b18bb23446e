"""Unit tests for audit log querying and export."""

import csv
import io
import json
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from portalgate.application.dto import AccessChange, AuditFilter, DateRange
from portalgate.application.use_cases.access.grant_access import GrantAccessUseCase
from portalgate.application.use_cases.access.update_status import UpdateStatusUseCase
from portalgate.application.use_cases.audit.export_audit_log import ExportAuditLogUseCase
from portalgate.application.use_cases.audit.query_audit_log import (
    QueryAuditLogUseCase,
    filter_entries,
)
from portalgate.domain.entities import AuditLogEntry
from portalgate.domain.exceptions import PermissionDenied, ValidationError
from portalgate.domain.value_objects import AuditAction

from tests.conftest import ADMIN_ID, OPERATOR_ID, PENDING_ID

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


def _entry(action: AuditAction, age: timedelta, subject: str = "user-4", **details) -> AuditLogEntry:
    return AuditLogEntry(
        id=uuid4(),
        actor="user-1",
        action=action,
        subject=subject,
        timestamp=NOW - age,
        details=details,
    )


def test_filter_by_date_range() -> None:
    entries = [
        _entry(AuditAction.ROLE_CHANGED, timedelta(hours=1)),
        _entry(AuditAction.ROLE_CHANGED, timedelta(days=3)),
        _entry(AuditAction.ROLE_CHANGED, timedelta(days=20)),
        _entry(AuditAction.ROLE_CHANGED, timedelta(days=90)),
    ]

    def count(date_range: DateRange) -> int:
        return len(filter_entries(entries, AuditFilter(date_range=date_range), now=NOW))

    assert count(DateRange.TODAY) == 1
    assert count(DateRange.WEEK) == 2
    assert count(DateRange.MONTH) == 3
    assert count(DateRange.ALL) == 4


def test_filter_by_action_and_search_newest_first() -> None:
    old = _entry(AuditAction.PERMISSIONS_GRANTED, timedelta(days=2), user="jane.smith@acme.example")
    new = _entry(AuditAction.PERMISSIONS_GRANTED, timedelta(hours=2), user="jane.smith@acme.example")
    other = _entry(AuditAction.STATUS_CHANGED, timedelta(hours=1), user="jane.smith@acme.example")
    unrelated = _entry(AuditAction.PERMISSIONS_GRANTED, timedelta(hours=1), user="carlos@acme.example")

    selected = filter_entries(
        [old, new, other, unrelated],
        AuditFilter(action=AuditAction.PERMISSIONS_GRANTED, search="JANE"),
        now=NOW,
    )

    assert selected == [new, old]


@pytest.mark.asyncio
async def test_every_mutation_is_audited(uow_factory, permission_checker) -> None:
    grant = GrantAccessUseCase(uow_factory, permission_checker)
    status = UpdateStatusUseCase(uow_factory, permission_checker)
    query = QueryAuditLogUseCase(uow_factory, permission_checker)

    await grant.execute(ADMIN_ID, OPERATOR_ID, AccessChange(apps=("safety-compliance",)))
    await status.execute(ADMIN_ID, PENDING_ID, "active")

    entries = await query.execute(ADMIN_ID)
    assert {e.action for e in entries} == {
        AuditAction.PERMISSIONS_GRANTED,
        AuditAction.STATUS_CHANGED,
    }
    assert all(e.actor == ADMIN_ID for e in entries)


@pytest.mark.asyncio
async def test_audit_log_is_admin_only(uow_factory, permission_checker) -> None:
    query = QueryAuditLogUseCase(uow_factory, permission_checker)
    with pytest.raises(PermissionDenied):
        await query.execute(OPERATOR_ID)


@pytest.mark.asyncio
async def test_export_csv_and_json(uow_factory, permission_checker) -> None:
    grant = GrantAccessUseCase(uow_factory, permission_checker)
    await grant.execute(ADMIN_ID, OPERATOR_ID, AccessChange(apps=("safety-compliance",)))
    export = ExportAuditLogUseCase(QueryAuditLogUseCase(uow_factory, permission_checker))

    rows = list(csv.DictReader(io.StringIO(await export.execute(ADMIN_ID, "csv"))))
    assert len(rows) == 1
    assert rows[0]["action"] == "permissions_granted"
    assert json.loads(rows[0]["details"])["added_apps"] == ["safety-compliance"]

    data = json.loads(await export.execute(ADMIN_ID, "json"))
    assert data[0]["subject"] == OPERATOR_ID

    with pytest.raises(ValidationError):
        await export.execute(ADMIN_ID, "xml")
