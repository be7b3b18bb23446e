"""Update role use case."""

import logging

from portalgate.application import audit_trail
from portalgate.application.ports import PermissionChecker
from portalgate.application.use_cases.access import mutations
from portalgate.domain.entities import User
from portalgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from portalgate.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """Assign a new role and reset permissions to that role's defaults.

    The reset is destructive: custom grants held before the change are dropped
    (they are preserved in the audit entry under ``previous``).
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: str, role_id: str) -> User:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can change roles")

        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id)
            if not role:
                raise ValidationError(f"Unknown role: {role_id}")
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            updated, details = mutations.change_role(user, role)
            await uow.users.update(updated)
            await audit_trail.record(
                uow, actor_id, AuditAction.ROLE_CHANGED, user.id, details
            )

        logger.info("Changed role of %s from %s to %s", user.email, user.role, role.id)
        return updated
