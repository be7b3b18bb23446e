"""Domain value objects."""

from portalgate.domain.value_objects.app_grant import (
    WILDCARD,
    AllApps,
    AppGrant,
    IndividualApps,
    app_grant_from_ids,
)
from portalgate.domain.value_objects.app_status import AppStatus
from portalgate.domain.value_objects.audit_action import AuditAction
from portalgate.domain.value_objects.bulk_operation_type import BulkOperationType
from portalgate.domain.value_objects.message_type import AnnouncementPriority, MessageType
from portalgate.domain.value_objects.user_status import UserStatus

__all__ = [
    "WILDCARD",
    "AllApps",
    "AnnouncementPriority",
    "AppGrant",
    "AppStatus",
    "AuditAction",
    "BulkOperationType",
    "IndividualApps",
    "MessageType",
    "UserStatus",
    "app_grant_from_ids",
]
