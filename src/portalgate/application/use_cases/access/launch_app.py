"""Launch application use case."""

import logging

from portalgate.application.access_context import load_access_context
from portalgate.domain.entities import Application
from portalgate.domain.exceptions import AppUnavailable, NotFound, PermissionDenied

logger = logging.getLogger(__name__)


class LaunchAppUseCase:
    """Return the catalog entry a user is about to open.

    Access is checked before availability, so a user without access never
    learns that an app is under maintenance.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, app_id: str) -> Application:
        async with self._uow_factory() as uow:
            app = await uow.apps.get_by_id(app_id)
            if not app:
                raise NotFound("Application", app_id)
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            ctx = await load_access_context(uow)

        if not ctx.can_access(user, app_id):
            raise PermissionDenied(f"No access to {app.name}")
        if not app.is_launchable:
            raise AppUnavailable(f"{app.name} is not available ({app.status})")

        logger.info("User %s launched %s", user.email, app.id)
        return app
