"""Chat message and announcement kinds."""

from enum import StrEnum


class MessageType(StrEnum):
    """Kind of team chat message."""

    COMMENT = "comment"
    QUESTION = "question"
    ANNOUNCEMENT = "announcement"
    UPDATE = "update"


class AnnouncementPriority(StrEnum):
    """Banner priority for announcements."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
