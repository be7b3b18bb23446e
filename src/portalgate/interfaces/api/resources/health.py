"""Health check endpoints."""

import falcon.asgi


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, unit_of_work_factory: type | None = None) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (catalog and roles loaded)."""
        if self._uow_factory is None:
            resp.media = {"status": "ready"}
            resp.status = falcon.HTTP_200
            return

        async with self._uow_factory() as uow:
            apps = await uow.apps.list_all()
            roles = await uow.roles.list_all()
        if not apps or not roles:
            resp.media = {"status": "not ready", "apps": len(apps), "roles": len(roles)}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready", "apps": len(apps), "roles": len(roles)}
        resp.status = falcon.HTTP_200
