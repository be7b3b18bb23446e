"""Create permission group use case."""

import logging
from uuid import uuid4

from portalgate.application import audit_trail
from portalgate.application.ports import PermissionChecker
from portalgate.domain.entities import PermissionGroup
from portalgate.domain.exceptions import PermissionDenied, ValidationError
from portalgate.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


async def validate_group_apps(uow, apps: list[str]) -> frozenset[str]:
    """Return ``apps`` as a set, rejecting ids missing from the catalog."""
    known = {app.id for app in await uow.apps.list_all()}
    unknown = sorted(set(apps) - known)
    if unknown:
        raise ValidationError(f"Unknown apps: {', '.join(unknown)}")
    return frozenset(apps)


class CreateGroupUseCase:
    """Create a permission group with a fresh id."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        name: str,
        apps: list[str],
        description: str = "",
        icon: str = "",
        color: str = "",
    ) -> PermissionGroup:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can manage permission groups")
        name = (name or "").strip()
        if not name:
            raise ValidationError("Group name is required")

        async with self._uow_factory() as uow:
            group = PermissionGroup(
                id=f"group-{uuid4().hex}",
                name=name,
                description=description,
                apps=await validate_group_apps(uow, apps),
                icon=icon,
                color=color,
            )
            await uow.groups.create(group)
            await audit_trail.record(
                uow,
                actor_id,
                AuditAction.GROUP_CREATED,
                group.id,
                {"group_name": group.name, "apps": sorted(group.apps)},
            )

        logger.info("Created permission group %s (%s)", group.name, group.id)
        return group
