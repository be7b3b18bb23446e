"""User account status."""

from enum import StrEnum


class UserStatus(StrEnum):
    """Only active accounts may log in."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
