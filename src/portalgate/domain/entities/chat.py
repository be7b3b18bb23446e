"""Team chat entities."""

from dataclasses import dataclass, field
from datetime import datetime

from portalgate.domain.value_objects import AnnouncementPriority, MessageType


@dataclass(frozen=True)
class Reaction:
    """Emoji reaction by one user."""

    emoji: str
    user_id: str
    user_name: str


@dataclass
class ChatMessage:
    """Message in the team feed, optionally tied to an application."""

    id: str
    user_id: str
    user_name: str
    user_role: str
    content: str
    type: MessageType
    timestamp: datetime
    tags: tuple[str, ...] = ()
    app_id: str | None = None
    reactions: list[Reaction] = field(default_factory=list)
    is_pinned: bool = False
    read_by: set[str] = field(default_factory=set)


@dataclass
class Announcement:
    """Banner announcement; each user can dismiss it for themselves."""

    id: str
    content: str
    priority: AnnouncementPriority
    created_by: str
    created_at: datetime
    dismissed_by: set[str] = field(default_factory=set)
