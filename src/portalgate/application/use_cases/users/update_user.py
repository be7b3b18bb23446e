"""Update user profile use case."""

import logging
from dataclasses import replace

from portalgate.application import audit_trail
from portalgate.application.dto import UpdateUserInput
from portalgate.application.ports import PermissionChecker
from portalgate.application.use_cases.users.create_user import validate_profile
from portalgate.domain.entities import User
from portalgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from portalgate.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Edit profile fields. Role, status and permissions have their own use cases."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: str, data: UpdateUserInput) -> User:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can edit users")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)

            changes = {
                name: value
                for name, value in (
                    ("email", data.email.strip() if data.email is not None else None),
                    ("first_name", data.first_name),
                    ("last_name", data.last_name),
                    ("company", data.company),
                    ("department", data.department),
                )
                if value is not None and value != getattr(user, name)
            }
            updated = replace(user, **changes)
            validate_profile(updated.email, updated.first_name, updated.last_name)
            if "email" in changes:
                existing = await uow.users.get_by_email(updated.email)
                if existing and existing.id != user.id:
                    raise ValidationError(f"A user with email {updated.email} already exists")

            await uow.users.update(updated)
            await audit_trail.record(
                uow,
                actor_id,
                AuditAction.USER_UPDATED,
                user.id,
                {"user": updated.email, "changed": sorted(changes)},
            )

        logger.info("Updated user %s fields=%s", user.id, sorted(changes))
        return updated
