"""Domain entities."""

from portalgate.domain.entities.application import Application
from portalgate.domain.entities.audit_entry import AuditLogEntry
from portalgate.domain.entities.chat import Announcement, ChatMessage, Reaction
from portalgate.domain.entities.permission_group import PermissionGroup
from portalgate.domain.entities.role import ADMIN_ROLE, RoleDefinition
from portalgate.domain.entities.user import User, UserPermissions

__all__ = [
    "ADMIN_ROLE",
    "Announcement",
    "Application",
    "AuditLogEntry",
    "ChatMessage",
    "PermissionGroup",
    "Reaction",
    "RoleDefinition",
    "User",
    "UserPermissions",
]
