"""Application catalog API resources."""

import falcon.asgi

from portalgate.application.access_context import load_access_context
from portalgate.application.dto.records import app_to_dict, user_to_dict
from portalgate.application.use_cases.access.grant_app_access import GrantAppAccessUseCase
from portalgate.application.use_cases.access.launch_app import LaunchAppUseCase
from portalgate.application.use_cases.access.list_users_with_access import (
    ListUsersWithAccessUseCase,
)
from portalgate.domain.exceptions import (
    AppUnavailable,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from portalgate.interfaces.api.resources._media import read_object, str_list


class AppsResource:
    """GET /v1/apps - catalog annotated with the caller's access."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List catalog apps. ``?accessible=true`` keeps only apps the caller can open."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        status = req.get_param("status")
        only_accessible = req.get_param_as_bool("accessible") or False

        async with self._uow_factory() as uow:
            record = await uow.users.get_by_id(user.user_id)
            ctx = await load_access_context(uow)

        allowed = ctx.resolve(record)
        items = [
            app_to_dict(app, accessible=app.id in allowed)
            for app in ctx.catalog
            if (not status or app.status == status)
            and (not only_accessible or app.id in allowed)
        ]
        resp.media = {"items": items}
        resp.status = falcon.HTTP_200


class AppLaunchResource:
    """GET /v1/apps/{app_id}/launch - launch URL if the caller may open the app."""

    def __init__(self, launch_app: LaunchAppUseCase) -> None:
        self._launch = launch_app

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, app_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            app = await self._launch.execute(user.user_id, app_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Application not found"}
            return
        except AppUnavailable as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return

        resp.media = {"id": app.id, "url": app.url}
        resp.status = falcon.HTTP_200


class AppUsersResource:
    """GET /v1/apps/{app_id}/users - users with access to the app (admin)."""

    def __init__(self, list_users_with_access: ListUsersWithAccessUseCase) -> None:
        self._list = list_users_with_access

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, app_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            users = await self._list.execute(user.user_id, app_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return

        resp.media = {"items": [user_to_dict(u) for u in users]}
        resp.status = falcon.HTTP_200


class AppGrantsResource:
    """POST /v1/apps/{app_id}/grants - grant the app to roles, groups and users (admin)."""

    def __init__(self, grant_app_access: GrantAppAccessUseCase) -> None:
        self._grant = grant_app_access

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, app_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await read_object(req)
        try:
            summary = await self._grant.execute(
                user.user_id,
                app_id,
                roles=str_list(body, "roles"),
                groups=str_list(body, "groups"),
                user_ids=str_list(body, "user_ids"),
            )
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "app_id": summary.app_id,
            "user_ids": summary.user_ids,
            "group_ids": summary.group_ids,
            "skipped_user_ids": summary.skipped_user_ids,
        }
        resp.status = falcon.HTTP_200
