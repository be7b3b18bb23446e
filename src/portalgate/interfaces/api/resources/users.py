"""User management API resources."""

import falcon.asgi

from portalgate.application.dto import (
    AccessChange,
    BulkOperation,
    BulkPayload,
    CreateUserInput,
    UpdateUserInput,
)
from portalgate.application.dto.records import app_to_dict, user_to_dict
from portalgate.application.use_cases.access.apply_bulk_operation import (
    ApplyBulkOperationUseCase,
)
from portalgate.application.use_cases.access.grant_access import GrantAccessUseCase
from portalgate.application.use_cases.access.resolve_user_apps import ResolveUserAppsUseCase
from portalgate.application.use_cases.access.revoke_access import RevokeAccessUseCase
from portalgate.application.use_cases.access.update_role import UpdateRoleUseCase
from portalgate.application.use_cases.access.update_status import UpdateStatusUseCase
from portalgate.application.use_cases.users.create_user import CreateUserUseCase
from portalgate.application.use_cases.users.list_users import ListUsersUseCase
from portalgate.application.use_cases.users.update_user import UpdateUserUseCase
from portalgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from portalgate.domain.value_objects import BulkOperationType
from portalgate.interfaces.api.resources._media import optional_str, read_object, str_list


class UsersResource:
    """GET/POST /v1/users - list and create users (admin)."""

    def __init__(
        self,
        list_users: ListUsersUseCase,
        create_user: CreateUserUseCase,
    ) -> None:
        self._list = list_users
        self._create = create_user

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List users, filtered by ``q``, ``role`` and ``status``."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            users = await self._list.execute(
                user.user_id,
                search=req.get_param("q"),
                role=req.get_param("role"),
                status=req.get_param("status"),
            )
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        resp.media = {"items": [user_to_dict(u) for u in users]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create a user."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await read_object(req)
        try:
            data = CreateUserInput(
                email=str(body["email"]),
                first_name=str(body["first_name"]),
                last_name=str(body["last_name"]),
                role=str(body["role"]),
                company=str(body.get("company") or ""),
                department=optional_str(body, "department"),
                apps=str_list(body, "apps") if "apps" in body else None,
                groups=str_list(body, "groups") if "groups" in body else None,
                features=str_list(body, "features") if "features" in body else None,
                copy_from_user_id=optional_str(body, "copy_from_user_id"),
            )
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return

        try:
            created = await self._create.execute(user.user_id, data)
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

        resp.media = user_to_dict(created)
        resp.status = falcon.HTTP_201


class UserResource:
    """GET/PATCH /v1/users/{user_id} - read (admin or self) and edit (admin) a user's profile."""

    def __init__(self, unit_of_work_factory: type, permission_checker, update_user: UpdateUserUseCase) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._update = update_user

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        if user.user_id != user_id and not await self._permission_checker.is_admin(user.user_id):
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return

        async with self._uow_factory() as uow:
            record = await uow.users.get_by_id(user_id)
        if not record:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "User not found"}
            return
        resp.media = user_to_dict(record)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await read_object(req)
        data = UpdateUserInput(
            email=optional_str(body, "email"),
            first_name=optional_str(body, "first_name"),
            last_name=optional_str(body, "last_name"),
            company=optional_str(body, "company"),
            department=optional_str(body, "department"),
        )
        try:
            updated = await self._update.execute(user.user_id, user_id, data)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "User not found"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = user_to_dict(updated)
        resp.status = falcon.HTTP_200


class UserAppsResource:
    """GET /v1/users/{user_id}/apps - resolved accessible apps (admin or self)."""

    def __init__(self, resolve_user_apps: ResolveUserAppsUseCase) -> None:
        self._resolve = resolve_user_apps

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            apps = await self._resolve.execute(user.user_id, user_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "User not found"}
            return

        resp.media = {"items": [app_to_dict(a) for a in apps]}
        resp.status = falcon.HTTP_200


class UserAccessResource:
    """POST /v1/users/{user_id}/access/grant|revoke - change individual access (admin)."""

    def __init__(
        self,
        grant_access: GrantAccessUseCase,
        revoke_access: RevokeAccessUseCase,
    ) -> None:
        self._grant = grant_access
        self._revoke = revoke_access

    async def on_post_grant(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        body = await read_object(req)
        change = AccessChange(
            apps=tuple(str_list(body, "apps")),
            groups=tuple(str_list(body, "groups")),
            role=optional_str(body, "role"),
        )
        await self._apply(req, resp, self._grant.execute, user_id, change)

    async def on_post_revoke(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        body = await read_object(req)
        change = AccessChange(
            apps=tuple(str_list(body, "apps")),
            groups=tuple(str_list(body, "groups")),
        )
        await self._apply(req, resp, self._revoke.execute, user_id, change)

    async def _apply(self, req, resp, operation, user_id: str, change: AccessChange) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            updated = await operation(user.user_id, user_id, change)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "User not found"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = user_to_dict(updated)
        resp.status = falcon.HTTP_200


class UserRoleResource:
    """PUT /v1/users/{user_id}/role - change role, resetting permissions (admin)."""

    def __init__(self, update_role: UpdateRoleUseCase) -> None:
        self._update_role = update_role

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await read_object(req)
        try:
            updated = await self._update_role.execute(user.user_id, user_id, str(body["role"]))
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "User not found"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = user_to_dict(updated)
        resp.status = falcon.HTTP_200


class UserStatusResource:
    """PUT /v1/users/{user_id}/status - activate or deactivate (admin)."""

    def __init__(self, update_status: UpdateStatusUseCase) -> None:
        self._update_status = update_status

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await read_object(req)
        try:
            updated = await self._update_status.execute(
                user.user_id, user_id, str(body["status"])
            )
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "User not found"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = user_to_dict(updated)
        resp.status = falcon.HTTP_200


class BulkOperationResource:
    """POST /v1/users/bulk - apply one operation to many users (admin)."""

    def __init__(self, apply_bulk_operation: ApplyBulkOperationUseCase) -> None:
        self._apply = apply_bulk_operation

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await read_object(req)
        payload = body.get("payload") or {}
        if not isinstance(payload, dict):
            raise falcon.HTTPBadRequest(description="'payload' must be an object")
        try:
            operation = BulkOperation(
                type=BulkOperationType(body["type"]),
                user_ids=tuple(str_list(body, "user_ids")),
                payload=BulkPayload(
                    apps=tuple(str_list(payload, "apps")),
                    groups=tuple(str_list(payload, "groups")),
                    role=optional_str(payload, "role"),
                    status=optional_str(payload, "status"),
                ),
            )
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Unknown bulk operation: {body['type']}"}
            return

        try:
            result = await self._apply.execute(user.user_id, operation)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "succeeded": result.succeeded,
            "skipped": result.skipped,
            "succeeded_count": result.succeeded_count,
            "skipped_count": result.skipped_count,
        }
        resp.status = falcon.HTTP_200
