"""Update permission group use case."""

import logging
from dataclasses import replace

from portalgate.application import audit_trail
from portalgate.application.ports import PermissionChecker
from portalgate.application.use_cases.groups.create_group import validate_group_apps
from portalgate.domain.entities import PermissionGroup
from portalgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from portalgate.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class UpdateGroupUseCase:
    """Edit a permission group. ``None`` leaves a field unchanged."""

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
        group_id: str,
        name: str | None = None,
        description: str | None = None,
        apps: list[str] | None = None,
        icon: str | None = None,
        color: str | None = None,
    ) -> PermissionGroup:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can manage permission groups")

        async with self._uow_factory() as uow:
            group = await uow.groups.get_by_id(group_id)
            if not group:
                raise NotFound("Permission group", group_id)

            changes = {}
            if name is not None:
                if not name.strip():
                    raise ValidationError("Group name is required")
                changes["name"] = name.strip()
            if description is not None:
                changes["description"] = description
            if apps is not None:
                changes["apps"] = await validate_group_apps(uow, apps)
            if icon is not None:
                changes["icon"] = icon
            if color is not None:
                changes["color"] = color

            updated = replace(group, **changes)
            await uow.groups.update(updated)
            await audit_trail.record(
                uow,
                actor_id,
                AuditAction.GROUP_UPDATED,
                group.id,
                {
                    "group_name": updated.name,
                    "added_apps": sorted(updated.apps - group.apps),
                    "removed_apps": sorted(group.apps - updated.apps),
                },
            )

        logger.info("Updated permission group %s", group.id)
        return updated
