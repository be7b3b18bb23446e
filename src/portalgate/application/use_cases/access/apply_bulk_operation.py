"""Apply bulk operation use case."""

import logging

from portalgate.application import audit_trail
from portalgate.application.access_context import load_access_context
from portalgate.application.dto import AccessChange, BulkOperation, BulkResult
from portalgate.application.ports import PermissionChecker
from portalgate.application.use_cases.access import mutations
from portalgate.domain.exceptions import PermissionDenied, ValidationError
from portalgate.domain.value_objects import AuditAction, BulkOperationType

logger = logging.getLogger(__name__)

_AUDIT_ACTIONS = {
    BulkOperationType.GRANT_ACCESS: AuditAction.BULK_GRANT_ACCESS,
    BulkOperationType.REVOKE_ACCESS: AuditAction.BULK_REVOKE_ACCESS,
    BulkOperationType.UPDATE_ROLE: AuditAction.BULK_UPDATE_ROLE,
    BulkOperationType.UPDATE_STATUS: AuditAction.BULK_UPDATE_STATUS,
}


class ApplyBulkOperationUseCase:
    """Apply one grant/revoke/role/status mutation to every listed user.

    The payload is validated once up front; an invalid payload applies nothing.
    After that each user is mutated independently. Unknown user ids are
    skipped and reported, they do not stop the remaining ids. One aggregate
    audit entry is written.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, operation: BulkOperation) -> BulkResult:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can run bulk operations")

        payload = operation.payload
        change = AccessChange(apps=payload.apps, groups=payload.groups)
        result = BulkResult()

        async with self._uow_factory() as uow:
            ctx = await load_access_context(uow)
            role = None
            status = None
            if operation.type in (
                BulkOperationType.GRANT_ACCESS,
                BulkOperationType.REVOKE_ACCESS,
            ):
                if change.is_empty:
                    raise ValidationError("Select at least one app or group")
                if operation.type == BulkOperationType.GRANT_ACCESS:
                    mutations.validate_change(change, ctx)
            elif operation.type == BulkOperationType.UPDATE_ROLE:
                if not payload.role:
                    raise ValidationError("Role is required")
                role = await uow.roles.get_by_id(payload.role)
                if not role:
                    raise ValidationError(f"Unknown role: {payload.role}")
            else:
                if not payload.status:
                    raise ValidationError("Status is required")
                status = mutations.parse_status(payload.status)

            for user_id in dict.fromkeys(operation.user_ids):
                user = await uow.users.get_by_id(user_id)
                if not user:
                    result.skipped.append(user_id)
                    continue

                if operation.type == BulkOperationType.GRANT_ACCESS:
                    updated, _ = mutations.grant(user, change)
                elif operation.type == BulkOperationType.REVOKE_ACCESS:
                    updated, _ = mutations.revoke(user, change, ctx.catalog_ids)
                elif operation.type == BulkOperationType.UPDATE_ROLE:
                    updated, _ = mutations.change_role(user, role)
                else:
                    updated, _ = mutations.change_status(user, status)
                await uow.users.update(updated)
                result.succeeded.append(user_id)

            await audit_trail.record(
                uow,
                actor_id,
                _AUDIT_ACTIONS[operation.type],
                "bulk-operation",
                {
                    "user_count": result.succeeded_count,
                    "skipped_count": result.skipped_count,
                    "user_ids": list(result.succeeded),
                    **payload.to_dict(),
                },
            )

        if result.skipped:
            logger.warning(
                "Bulk %s skipped unknown users: %s", operation.type, result.skipped
            )
        logger.info(
            "Bulk %s applied to %d users", operation.type, result.succeeded_count
        )
        return result
