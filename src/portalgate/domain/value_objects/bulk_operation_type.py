"""Bulk operation kinds."""

from enum import StrEnum


class BulkOperationType(StrEnum):
    """Mutation applied to every user listed in a bulk operation."""

    GRANT_ACCESS = "grant_access"
    REVOKE_ACCESS = "revoke_access"
    UPDATE_ROLE = "update_role"
    UPDATE_STATUS = "update_status"
