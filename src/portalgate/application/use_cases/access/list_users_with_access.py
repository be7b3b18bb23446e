"""List users with access to an application."""

from portalgate.application.access_context import load_access_context
from portalgate.application.ports import PermissionChecker
from portalgate.domain.entities import User
from portalgate.domain.exceptions import NotFound, PermissionDenied


class ListUsersWithAccessUseCase:
    """Admin report: every user who can open the application."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, app_id: str) -> list[User]:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can view application access")

        async with self._uow_factory() as uow:
            if not await uow.apps.get_by_id(app_id):
                raise NotFound("Application", app_id)
            ctx = await load_access_context(uow)
            users = await uow.users.list_all()

        allowed = ctx.users_with_access(app_id, users)
        return [u for u in users if u.id in allowed]
