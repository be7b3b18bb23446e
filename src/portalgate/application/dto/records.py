"""JSON-ready records for domain entities.

Shared by the HTTP resources and the client-side session store, which keeps a
serialized copy of the logged-in user.
"""

from datetime import datetime
from typing import Any

from portalgate.domain.entities import (
    Announcement,
    Application,
    AuditLogEntry,
    ChatMessage,
    PermissionGroup,
    RoleDefinition,
    User,
    UserPermissions,
)
from portalgate.domain.value_objects import UserStatus, app_grant_from_ids


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def user_to_dict(user: User) -> dict[str, Any]:
    return {
        "id": user.id,
        "email": user.email,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "role": user.role,
        "permissions": {
            "apps": user.permissions.apps.to_ids(),
            "features": list(user.permissions.features),
            "groups": sorted(user.permissions.groups),
        },
        "company": user.company,
        "department": user.department,
        "status": str(user.status),
        "created_at": _iso(user.created_at),
        "last_login": _iso(user.last_login),
    }


def user_from_dict(data: dict[str, Any]) -> User:
    """Inverse of ``user_to_dict``. Raises KeyError/ValueError/TypeError on bad input."""
    if not isinstance(data, dict):
        raise TypeError(f"User record must be an object, got {type(data).__name__}")
    perms = data.get("permissions") or {}
    if not isinstance(perms, dict):
        raise TypeError("User permissions must be an object")
    last_login = data.get("last_login")
    return User(
        id=str(data["id"]),
        email=data["email"],
        first_name=data["first_name"],
        last_name=data["last_name"],
        role=data["role"],
        permissions=UserPermissions(
            apps=app_grant_from_ids(perms.get("apps")),
            features=tuple(perms.get("features") or ()),
            groups=frozenset(perms.get("groups") or ()),
        ),
        company=data.get("company", ""),
        department=data.get("department"),
        status=UserStatus(data.get("status", UserStatus.ACTIVE)),
        created_at=datetime.fromisoformat(data["created_at"]),
        last_login=datetime.fromisoformat(last_login) if last_login else None,
    )


def app_to_dict(app: Application, accessible: bool | None = None) -> dict[str, Any]:
    data = {
        "id": app.id,
        "name": app.name,
        "description": app.description,
        "url": app.url,
        "icon": app.icon,
        "color": app.color,
        "required_roles": list(app.required_roles),
        "status": str(app.status),
        "version": app.version,
        "last_updated": app.last_updated,
    }
    if accessible is not None:
        data["accessible"] = accessible
    return data


def group_to_dict(group: PermissionGroup) -> dict[str, Any]:
    return {
        "id": group.id,
        "name": group.name,
        "description": group.description,
        "apps": sorted(group.apps),
        "icon": group.icon,
        "color": group.color,
    }


def role_to_dict(role: RoleDefinition) -> dict[str, Any]:
    return {
        "id": role.id,
        "name": role.name,
        "description": role.description,
        "capabilities": list(role.capabilities),
        "default_apps": role.default_apps.to_ids(),
        "default_groups": sorted(role.default_groups),
        "default_features": list(role.default_features),
        "color": role.color,
    }


def audit_entry_to_dict(entry: AuditLogEntry) -> dict[str, Any]:
    return {
        "id": str(entry.id),
        "actor": entry.actor,
        "action": str(entry.action),
        "subject": entry.subject,
        "details": entry.details,
        "timestamp": entry.timestamp.isoformat(),
    }


def message_to_dict(message: ChatMessage, viewer_id: str | None = None) -> dict[str, Any]:
    data = {
        "id": message.id,
        "user_id": message.user_id,
        "user_name": message.user_name,
        "user_role": message.user_role,
        "content": message.content,
        "type": str(message.type),
        "tags": list(message.tags),
        "app_id": message.app_id,
        "timestamp": message.timestamp.isoformat(),
        "reactions": [
            {"emoji": r.emoji, "user_id": r.user_id, "user_name": r.user_name}
            for r in message.reactions
        ],
        "is_pinned": message.is_pinned,
    }
    if viewer_id is not None:
        data["is_read"] = viewer_id == message.user_id or viewer_id in message.read_by
    return data


def announcement_to_dict(announcement: Announcement) -> dict[str, Any]:
    return {
        "id": announcement.id,
        "content": announcement.content,
        "priority": str(announcement.priority),
        "created_by": announcement.created_by,
        "created_at": announcement.created_at.isoformat(),
    }
