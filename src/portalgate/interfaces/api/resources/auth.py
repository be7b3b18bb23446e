"""Authentication API resources."""

import falcon.asgi

from portalgate.application.dto.records import user_to_dict
from portalgate.application.use_cases.auth.login import LoginUseCase
from portalgate.domain.exceptions import AuthenticationError, LoginInProgress
from portalgate.interfaces.api.resources._media import read_object


class LoginResource:
    """POST /v1/auth/login - exchange the demo credential for a session token."""

    def __init__(self, login: LoginUseCase) -> None:
        self._login = login

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        body = await read_object(req)
        try:
            email = str(body["email"])
            password = str(body["password"])
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        try:
            result = await self._login.execute(email, password)
        except AuthenticationError as e:
            resp.status = falcon.HTTP_401
            resp.media = {"error": str(e)}
            return
        except LoginInProgress as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return

        resp.media = {"token": result.token, "user": user_to_dict(result.user)}
        resp.status = falcon.HTTP_200


class MeResource:
    """GET /v1/auth/me - the authenticated user."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": getattr(req.context, "session_error", "Unauthorized")}
            return

        async with self._uow_factory() as uow:
            record = await uow.users.get_by_id(user.user_id)
        resp.media = user_to_dict(record)
        resp.status = falcon.HTTP_200
