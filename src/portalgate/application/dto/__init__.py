"""Application DTOs."""

from portalgate.application.dto.access_change import AccessChange
from portalgate.application.dto.audit_filter import AuditFilter, DateRange
from portalgate.application.dto.bulk_operation import BulkOperation, BulkPayload, BulkResult
from portalgate.application.dto.chat_input import SendMessageInput
from portalgate.application.dto.login_result import LoginResult
from portalgate.application.dto.user_input import CreateUserInput, UpdateUserInput

__all__ = [
    "AccessChange",
    "AuditFilter",
    "BulkOperation",
    "BulkPayload",
    "BulkResult",
    "CreateUserInput",
    "DateRange",
    "LoginResult",
    "SendMessageInput",
    "UpdateUserInput",
]
