"""Delete permission group use case."""

import logging

from portalgate.application import audit_trail
from portalgate.application.ports import PermissionChecker
from portalgate.domain.exceptions import NotFound, PermissionDenied
from portalgate.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class DeleteGroupUseCase:
    """Delete a permission group.

    Users keep the dangling id in their ``groups``; it resolves to nothing.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, group_id: str) -> None:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can manage permission groups")

        async with self._uow_factory() as uow:
            group = await uow.groups.get_by_id(group_id)
            if not group:
                raise NotFound("Permission group", group_id)
            await uow.groups.delete(group_id)
            await audit_trail.record(
                uow,
                actor_id,
                AuditAction.GROUP_DELETED,
                group_id,
                {"group_name": group.name, "apps": sorted(group.apps)},
            )

        logger.info("Deleted permission group %s", group_id)
