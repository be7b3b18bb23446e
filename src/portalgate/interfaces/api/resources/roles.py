"""Roles API resource."""

import falcon.asgi

from portalgate.application.dto.records import role_to_dict


class RolesResource:
    """GET /v1/roles - role table with default permissions."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        async with self._uow_factory() as uow:
            roles = await uow.roles.list_all()
        resp.media = {"items": [role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200
