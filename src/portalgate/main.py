"""Application entry point and composition root."""

import logging
from datetime import timedelta

import falcon.asgi

from portalgate.application.use_cases.access.apply_bulk_operation import (
    ApplyBulkOperationUseCase,
)
from portalgate.application.use_cases.access.grant_access import GrantAccessUseCase
from portalgate.application.use_cases.access.grant_app_access import GrantAppAccessUseCase
from portalgate.application.use_cases.access.launch_app import LaunchAppUseCase
from portalgate.application.use_cases.access.list_users_with_access import (
    ListUsersWithAccessUseCase,
)
from portalgate.application.use_cases.access.resolve_user_apps import ResolveUserAppsUseCase
from portalgate.application.use_cases.access.revoke_access import RevokeAccessUseCase
from portalgate.application.use_cases.access.update_role import UpdateRoleUseCase
from portalgate.application.use_cases.access.update_status import UpdateStatusUseCase
from portalgate.application.use_cases.audit.export_audit_log import ExportAuditLogUseCase
from portalgate.application.use_cases.audit.query_audit_log import QueryAuditLogUseCase
from portalgate.application.use_cases.auth.authenticate import AuthenticateTokenUseCase
from portalgate.application.use_cases.auth.login import LoginUseCase
from portalgate.application.use_cases.chat.announcements import (
    DismissAnnouncementUseCase,
    ListAnnouncementsUseCase,
)
from portalgate.application.use_cases.chat.list_messages import ListMessagesUseCase
from portalgate.application.use_cases.chat.mark_read import MarkReadUseCase
from portalgate.application.use_cases.chat.pin_message import TogglePinUseCase
from portalgate.application.use_cases.chat.react import ToggleReactionUseCase
from portalgate.application.use_cases.chat.send_message import SendMessageUseCase
from portalgate.application.use_cases.groups.create_group import CreateGroupUseCase
from portalgate.application.use_cases.groups.delete_group import DeleteGroupUseCase
from portalgate.application.use_cases.groups.update_group import UpdateGroupUseCase
from portalgate.application.use_cases.users.create_user import CreateUserUseCase
from portalgate.application.use_cases.users.list_users import ListUsersUseCase
from portalgate.application.use_cases.users.update_user import UpdateUserUseCase
from portalgate.config import Settings, get_settings
from portalgate.domain.value_objects import UserStatus
from portalgate.infrastructure.permission.permission_checker import PortalPermissionChecker
from portalgate.infrastructure.persistence.memory.store import PortalStore
from portalgate.infrastructure.persistence.memory.unit_of_work import create_uow_factory
from portalgate.infrastructure.seed import build_store
from portalgate.infrastructure.session.jwt_token_service import JWTTokenService
from portalgate.interfaces.api.middleware.auth import AuthMiddleware
from portalgate.interfaces.api.middleware.cors import CORSMiddleware
from portalgate.interfaces.api.resources.apps import (
    AppGrantsResource,
    AppLaunchResource,
    AppsResource,
    AppUsersResource,
)
from portalgate.interfaces.api.resources.audit import AuditExportResource, AuditResource
from portalgate.interfaces.api.resources.auth import LoginResource, MeResource
from portalgate.interfaces.api.resources.chat import (
    AnnouncementDismissResource,
    AnnouncementsResource,
    MessageActionResource,
    MessagesResource,
)
from portalgate.interfaces.api.resources.groups import GroupResource, GroupsResource
from portalgate.interfaces.api.resources.health import HealthResource
from portalgate.interfaces.api.resources.roles import RolesResource
from portalgate.interfaces.api.resources.users import (
    BulkOperationResource,
    UserAccessResource,
    UserAppsResource,
    UserResource,
    UserRoleResource,
    UsersResource,
    UserStatusResource,
)

logger = logging.getLogger(__name__)


def create_token_service(settings: Settings) -> JWTTokenService:
    return JWTTokenService(
        secret=settings.session_secret,
        ttl=timedelta(hours=settings.session_ttl_hours),
    )


def create_portal_store(settings: Settings) -> PortalStore:
    return build_store(
        market_forecast_url=settings.market_forecast_url,
        with_demo_data=settings.seed_demo_data,
    )


def create_portal_app(
    settings: Settings | None = None,
    store: PortalStore | None = None,
) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    store = store if store is not None else create_portal_store(settings)
    uow_factory = create_uow_factory(store)

    token_service = create_token_service(settings)
    permission_checker = PortalPermissionChecker(uow_factory)

    login = LoginUseCase(
        unit_of_work_factory=uow_factory,
        token_service=token_service,
        password=settings.demo_password,
        delay_seconds=settings.login_delay_seconds,
    )
    authenticate = AuthenticateTokenUseCase(
        unit_of_work_factory=uow_factory,
        token_service=token_service,
    )
    grant_access = GrantAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    revoke_access = RevokeAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    update_role = UpdateRoleUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    update_status = UpdateStatusUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    apply_bulk = ApplyBulkOperationUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    grant_app_access = GrantAppAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    list_users_with_access = ListUsersWithAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    launch_app = LaunchAppUseCase(unit_of_work_factory=uow_factory)
    resolve_user_apps = ResolveUserAppsUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    create_group = CreateGroupUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    update_group = UpdateGroupUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    delete_group = DeleteGroupUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    create_user = CreateUserUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
        initial_status=UserStatus(settings.new_user_status),
    )
    update_user = UpdateUserUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    list_users = ListUsersUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    query_audit_log = QueryAuditLogUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    export_audit_log = ExportAuditLogUseCase(query_audit_log)

    health_resource = HealthResource(uow_factory)
    login_resource = LoginResource(login)
    me_resource = MeResource(uow_factory)
    apps_resource = AppsResource(uow_factory)
    app_launch_resource = AppLaunchResource(launch_app)
    app_users_resource = AppUsersResource(list_users_with_access)
    app_grants_resource = AppGrantsResource(grant_app_access)
    roles_resource = RolesResource(uow_factory)
    users_resource = UsersResource(list_users, create_user)
    user_resource = UserResource(uow_factory, permission_checker, update_user)
    user_apps_resource = UserAppsResource(resolve_user_apps)
    user_access_resource = UserAccessResource(grant_access, revoke_access)
    user_role_resource = UserRoleResource(update_role)
    user_status_resource = UserStatusResource(update_status)
    bulk_resource = BulkOperationResource(apply_bulk)
    groups_resource = GroupsResource(uow_factory, create_group)
    group_resource = GroupResource(uow_factory, update_group, delete_group)
    audit_resource = AuditResource(query_audit_log)
    audit_export_resource = AuditExportResource(export_audit_log)
    messages_resource = MessagesResource(
        ListMessagesUseCase(uow_factory), SendMessageUseCase(uow_factory)
    )
    message_action_resource = MessageActionResource(
        ToggleReactionUseCase(uow_factory),
        TogglePinUseCase(uow_factory, permission_checker),
        MarkReadUseCase(uow_factory),
    )
    announcements_resource = AnnouncementsResource(ListAnnouncementsUseCase(uow_factory))
    announcement_dismiss_resource = AnnouncementDismissResource(
        DismissAnnouncementUseCase(uow_factory)
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    app = falcon.asgi.App(
        middleware=[
            CORSMiddleware(cors_origins),
            AuthMiddleware(authenticate),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.exception("Unhandled error on %s %s", req.method, req.path)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/auth/login", login_resource)
    app.add_route("/v1/auth/me", me_resource)
    app.add_route("/v1/apps", apps_resource)
    app.add_route("/v1/apps/{app_id}/launch", app_launch_resource)
    app.add_route("/v1/apps/{app_id}/users", app_users_resource)
    app.add_route("/v1/apps/{app_id}/grants", app_grants_resource)
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/users", users_resource)
    app.add_route("/v1/users/bulk", bulk_resource)
    app.add_route("/v1/users/{user_id}", user_resource)
    app.add_route("/v1/users/{user_id}/apps", user_apps_resource)
    app.add_route("/v1/users/{user_id}/access/grant", user_access_resource, suffix="grant")
    app.add_route("/v1/users/{user_id}/access/revoke", user_access_resource, suffix="revoke")
    app.add_route("/v1/users/{user_id}/role", user_role_resource)
    app.add_route("/v1/users/{user_id}/status", user_status_resource)
    app.add_route("/v1/groups", groups_resource)
    app.add_route("/v1/groups/{group_id}", group_resource)
    app.add_route("/v1/audit", audit_resource)
    app.add_route("/v1/audit/export", audit_export_resource)
    app.add_route("/v1/chat/messages", messages_resource)
    app.add_route(
        "/v1/chat/messages/{message_id}/reactions", message_action_resource, suffix="reactions"
    )
    app.add_route("/v1/chat/messages/{message_id}/pin", message_action_resource, suffix="pin")
    app.add_route("/v1/chat/messages/{message_id}/read", message_action_resource, suffix="read")
    app.add_route("/v1/chat/announcements", announcements_resource)
    app.add_route(
        "/v1/chat/announcements/{announcement_id}/dismiss", announcement_dismiss_resource
    )

    logger.info(
        "Portal app ready: %d apps, %d users (%s)",
        len(store.apps),
        len(store.users),
        settings.environment,
    )
    return app


def run_server(settings: Settings | None = None) -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = settings or get_settings()
    app = create_portal_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
