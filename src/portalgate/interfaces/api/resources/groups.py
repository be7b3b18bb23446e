"""Permission group API resources."""

import falcon.asgi

from portalgate.application.dto.records import group_to_dict
from portalgate.application.use_cases.groups.create_group import CreateGroupUseCase
from portalgate.application.use_cases.groups.delete_group import DeleteGroupUseCase
from portalgate.application.use_cases.groups.update_group import UpdateGroupUseCase
from portalgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from portalgate.interfaces.api.resources._media import optional_str, read_object, str_list


class GroupsResource:
    """GET/POST /v1/groups - list and create permission groups."""

    def __init__(self, unit_of_work_factory: type, create_group: CreateGroupUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._create = create_group

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        async with self._uow_factory() as uow:
            groups = await uow.groups.list_all()
        resp.media = {"items": [group_to_dict(g) for g in groups]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await read_object(req)
        try:
            group = await self._create.execute(
                user.user_id,
                name=str(body.get("name") or ""),
                apps=str_list(body, "apps"),
                description=str(body.get("description") or ""),
                icon=str(body.get("icon") or ""),
                color=str(body.get("color") or ""),
            )
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = group_to_dict(group)
        resp.status = falcon.HTTP_201


class GroupResource:
    """GET/PATCH/DELETE /v1/groups/{group_id} - read any, change admin only."""

    def __init__(
        self,
        unit_of_work_factory: type,
        update_group: UpdateGroupUseCase,
        delete_group: DeleteGroupUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._update = update_group
        self._delete = delete_group

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, group_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        async with self._uow_factory() as uow:
            group = await uow.groups.get_by_id(group_id)
        if not group:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Group not found"}
            return
        resp.media = group_to_dict(group)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, group_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await read_object(req)
        try:
            group = await self._update.execute(
                user.user_id,
                group_id,
                name=optional_str(body, "name"),
                description=optional_str(body, "description"),
                apps=str_list(body, "apps") if "apps" in body else None,
                icon=optional_str(body, "icon"),
                color=optional_str(body, "color"),
            )
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Group not found"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = group_to_dict(group)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, group_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._delete.execute(user.user_id, group_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Group not found"}
            return

        resp.status = falcon.HTTP_204
