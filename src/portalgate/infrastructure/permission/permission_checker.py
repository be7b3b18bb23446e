"""Permission checker implementation - checks actors against the user store."""

from portalgate.domain.entities import ADMIN_ROLE
from portalgate.domain.services import access_resolver


class PortalPermissionChecker:
    """Authorizes actors by their current stored record. Inactive actors get nothing."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def is_admin(self, user_id: str) -> bool:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
        return bool(user and user.is_active and user.role == ADMIN_ROLE)

    async def has_role(self, user_id: str, role: str) -> bool:
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
        return bool(user and user.is_active and access_resolver.has_role(user, role))
