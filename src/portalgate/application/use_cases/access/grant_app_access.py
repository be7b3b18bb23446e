"""Grant one application by role, group, or user list."""

import logging
from dataclasses import dataclass, field, replace

from portalgate.application import audit_trail
from portalgate.application.dto import AccessChange
from portalgate.application.ports import PermissionChecker
from portalgate.application.use_cases.access import mutations
from portalgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from portalgate.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


@dataclass
class AppGrantSummary:
    """Who received the application."""

    app_id: str
    user_ids: list[str] = field(default_factory=list)
    group_ids: list[str] = field(default_factory=list)
    skipped_user_ids: list[str] = field(default_factory=list)


class GrantAppAccessUseCase:
    """Grant an application to every holder of some roles, to groups, and to users.

    A role target grants the app individually to each user currently holding
    that role; a group target adds the app to the group's bundle.
    """

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
        app_id: str,
        roles: list[str] | None = None,
        groups: list[str] | None = None,
        user_ids: list[str] | None = None,
    ) -> AppGrantSummary:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can grant application access")
        roles = roles or []
        groups = groups or []
        user_ids = user_ids or []
        if not roles and not groups and not user_ids:
            raise ValidationError("Select at least one role, group or user")

        summary = AppGrantSummary(app_id=app_id)
        change = AccessChange(apps=(app_id,))

        async with self._uow_factory() as uow:
            if not await uow.apps.get_by_id(app_id):
                raise NotFound("Application", app_id)
            for role_id in roles:
                if not await uow.roles.get_by_id(role_id):
                    raise ValidationError(f"Unknown role: {role_id}")

            targets = dict.fromkeys(user_ids)
            for user in await uow.users.list_all():
                if user.role in roles:
                    targets[user.id] = None

            for user_id in targets:
                user = await uow.users.get_by_id(user_id)
                if not user:
                    summary.skipped_user_ids.append(user_id)
                    continue
                updated, _ = mutations.grant(user, change)
                await uow.users.update(updated)
                summary.user_ids.append(user_id)

            for group_id in groups:
                group = await uow.groups.get_by_id(group_id)
                if not group:
                    raise NotFound("Permission group", group_id)
                await uow.groups.update(replace(group, apps=group.apps | {app_id}))
                summary.group_ids.append(group_id)

            await audit_trail.record(
                uow,
                actor_id,
                AuditAction.APP_ACCESS_GRANTED,
                app_id,
                {
                    "roles": list(roles),
                    "groups": summary.group_ids,
                    "user_count": len(summary.user_ids),
                    "skipped_count": len(summary.skipped_user_ids),
                },
            )

        logger.info(
            "Granted %s to %d users and %d groups",
            app_id,
            len(summary.user_ids),
            len(summary.group_ids),
        )
        return summary
