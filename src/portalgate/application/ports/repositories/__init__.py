"""Repository ports."""

from portalgate.application.ports.repositories.application_repository import (
    ApplicationRepository,
)
from portalgate.application.ports.repositories.audit_log_repository import (
    AuditLogRepository,
)
from portalgate.application.ports.repositories.chat_repository import (
    AnnouncementRepository,
    ChatMessageRepository,
)
from portalgate.application.ports.repositories.permission_group_repository import (
    PermissionGroupRepository,
)
from portalgate.application.ports.repositories.role_repository import RoleRepository
from portalgate.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "AnnouncementRepository",
    "ApplicationRepository",
    "AuditLogRepository",
    "ChatMessageRepository",
    "PermissionGroupRepository",
    "RoleRepository",
    "UserRepository",
]
