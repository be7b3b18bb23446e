"""Resolve the accessible applications of a user."""

from portalgate.application.access_context import load_access_context
from portalgate.application.ports import PermissionChecker
from portalgate.domain.entities import Application
from portalgate.domain.exceptions import NotFound, PermissionDenied


class ResolveUserAppsUseCase:
    """Catalog entries a user can open. Readable by admins and by the user."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: str) -> list[Application]:
        if actor_id != user_id and not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Cannot view another user's applications")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            ctx = await load_access_context(uow)

        accessible = ctx.resolve(user)
        return [app for app in ctx.catalog if app.id in accessible]
