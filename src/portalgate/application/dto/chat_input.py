"""Chat input DTOs."""

from dataclasses import dataclass

from portalgate.domain.value_objects import AnnouncementPriority, MessageType


@dataclass
class SendMessageInput:
    """New chat message."""

    content: str
    type: MessageType = MessageType.COMMENT
    tags: tuple[str, ...] = ()
    app_id: str | None = None
    priority: AnnouncementPriority = AnnouncementPriority.MEDIUM
