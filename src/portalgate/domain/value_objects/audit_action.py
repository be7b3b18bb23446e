"""Audit log action kinds."""

from enum import StrEnum


class AuditAction(StrEnum):
    """Administrative actions recorded in the audit log."""

    USER_CREATED = "user_created"
    USER_UPDATED = "user_updated"
    PERMISSIONS_GRANTED = "permissions_granted"
    PERMISSIONS_REVOKED = "permissions_revoked"
    ROLE_CHANGED = "role_changed"
    STATUS_CHANGED = "status_changed"
    BULK_GRANT_ACCESS = "bulk_grant_access"
    BULK_REVOKE_ACCESS = "bulk_revoke_access"
    BULK_UPDATE_ROLE = "bulk_update_role"
    BULK_UPDATE_STATUS = "bulk_update_status"
    APP_ACCESS_GRANTED = "app_access_granted"
    GROUP_CREATED = "group_created"
    GROUP_UPDATED = "group_updated"
    GROUP_DELETED = "group_deleted"
