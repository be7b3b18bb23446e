"""Revoke access use case."""

import logging

from portalgate.application import audit_trail
from portalgate.application.access_context import load_access_context
from portalgate.application.dto import AccessChange
from portalgate.application.ports import PermissionChecker
from portalgate.application.use_cases.access import mutations
from portalgate.domain.entities import User
from portalgate.domain.exceptions import NotFound, PermissionDenied
from portalgate.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class RevokeAccessUseCase:
    """Remove apps and/or groups from a user's permission record."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: str, change: AccessChange) -> User:
        """Revoke ``change`` from the user. Revoking ids not held is a no-op."""
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can revoke access")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            ctx = await load_access_context(uow)
            updated, details = mutations.revoke(user, change, ctx.catalog_ids)
            await uow.users.update(updated)
            await audit_trail.record(
                uow, actor_id, AuditAction.PERMISSIONS_REVOKED, user.id, details
            )

        logger.info(
            "Revoked apps=%s groups=%s from %s",
            details["removed_apps"],
            details["removed_groups"],
            user.email,
        )
        return updated
