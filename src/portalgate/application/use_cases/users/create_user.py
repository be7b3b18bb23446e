"""Create user use case."""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from uuid import uuid4

from portalgate.application import audit_trail
from portalgate.application.access_context import load_access_context
from portalgate.application.dto import AccessChange, CreateUserInput
from portalgate.application.ports import PermissionChecker
from portalgate.application.use_cases.access import mutations
from portalgate.domain.entities import User, UserPermissions
from portalgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from portalgate.domain.value_objects import AuditAction, UserStatus, app_grant_from_ids

logger = logging.getLogger(__name__)


def validate_profile(email: str, first_name: str, last_name: str) -> None:
    if not email or "@" not in email:
        raise ValidationError("A valid email is required")
    if not first_name.strip() or not last_name.strip():
        raise ValidationError("First and last name are required")


class CreateUserUseCase:
    """Create a user, seeding permissions from a source user, explicit input, or role defaults."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        initial_status: UserStatus = UserStatus.ACTIVE,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._initial_status = initial_status

    async def execute(self, actor_id: str, data: CreateUserInput) -> User:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can create users")
        email = data.email.strip()
        validate_profile(email, data.first_name, data.last_name)

        async with self._uow_factory() as uow:
            if await uow.users.get_by_email(email):
                raise ValidationError(f"A user with email {email} already exists")
            role = await uow.roles.get_by_id(data.role)
            if not role:
                raise ValidationError(f"Unknown role: {data.role}")

            if data.copy_from_user_id:
                source = await uow.users.get_by_id(data.copy_from_user_id)
                if not source:
                    raise NotFound("User", data.copy_from_user_id)
                permissions = replace(source.permissions)
            elif data.apps is not None or data.groups is not None or data.features is not None:
                ctx = await load_access_context(uow)
                mutations.validate_change(
                    AccessChange(apps=tuple(data.apps or ()), groups=tuple(data.groups or ())),
                    ctx,
                )
                permissions = UserPermissions(
                    apps=app_grant_from_ids(data.apps),
                    features=tuple(data.features or ()),
                    groups=frozenset(data.groups or ()),
                )
            else:
                permissions = role.default_permissions()

            user = User(
                id=f"user-{uuid4().hex}",
                email=email,
                first_name=data.first_name.strip(),
                last_name=data.last_name.strip(),
                role=role.id,
                permissions=permissions,
                company=data.company,
                department=data.department or None,
                status=self._initial_status,
                created_at=datetime.now(UTC),
            )
            await uow.users.create(user)
            await audit_trail.record(
                uow,
                actor_id,
                AuditAction.USER_CREATED,
                user.id,
                {
                    "user": user.email,
                    "role": user.role,
                    **mutations.permissions_snapshot(user),
                },
            )

        logger.info("Created user %s with role %s", user.email, user.role)
        return user
