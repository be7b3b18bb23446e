"""Update status use case."""

import logging

from portalgate.application import audit_trail
from portalgate.application.ports import PermissionChecker
from portalgate.application.use_cases.access import mutations
from portalgate.domain.entities import User
from portalgate.domain.exceptions import NotFound, PermissionDenied
from portalgate.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class UpdateStatusUseCase:
    """Set a user's account status. Permissions are left as they are.

    Inactive users are refused at login; sessions already issued stay valid
    until they expire.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: str, status: str) -> User:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can change account status")
        new_status = mutations.parse_status(status)

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            updated, details = mutations.change_status(user, new_status)
            await uow.users.update(updated)
            await audit_trail.record(
                uow, actor_id, AuditAction.STATUS_CHANGED, user.id, details
            )

        logger.info("Status of %s changed to %s", user.email, new_status)
        return updated
