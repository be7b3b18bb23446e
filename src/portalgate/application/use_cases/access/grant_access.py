"""Grant access use case."""

import logging

from portalgate.application import audit_trail
from portalgate.application.access_context import load_access_context
from portalgate.application.dto import AccessChange
from portalgate.application.ports import PermissionChecker
from portalgate.application.use_cases.access import mutations
from portalgate.domain.entities import User
from portalgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from portalgate.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class GrantAccessUseCase:
    """Add apps and/or groups to a user's permission record."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: str, change: AccessChange) -> User:
        """Grant ``change`` to the user. Re-granting held ids is a no-op."""
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can grant access")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            ctx = await load_access_context(uow)
            mutations.validate_change(change, ctx)
            if change.role is not None and not await uow.roles.get_by_id(change.role):
                raise ValidationError(f"Unknown role: {change.role}")

            updated, details = mutations.grant(user, change)
            await uow.users.update(updated)
            await audit_trail.record(
                uow, actor_id, AuditAction.PERMISSIONS_GRANTED, user.id, details
            )

        logger.info(
            "Granted apps=%s groups=%s to %s",
            details["added_apps"],
            details["added_groups"],
            user.email,
        )
        return updated
