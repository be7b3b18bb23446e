"""Starter team feed content."""

from datetime import UTC, datetime, timedelta

from portalgate.domain.entities import Announcement, ChatMessage, Reaction
from portalgate.domain.value_objects import AnnouncementPriority, MessageType


def build_messages(now: datetime | None = None) -> list[ChatMessage]:
    now = now or datetime.now(UTC)
    return [
        ChatMessage(
            id="msg-1",
            user_id="user-2",
            user_name="Sarah Manager",
            user_role="manager",
            content="Great work on the Market Forecast dashboard! The new features are really helpful.",
            type=MessageType.COMMENT,
            app_id="market-forecast",
            timestamp=now - timedelta(hours=1),
            reactions=[
                Reaction(emoji="👍", user_id="user-1", user_name="John Admin"),
                Reaction(emoji="❤️", user_id="user-3", user_name="Mike Foreman"),
            ],
        ),
        ChatMessage(
            id="msg-2",
            user_id="user-3",
            user_name="Mike Foreman",
            user_role="foreman",
            content="Is there a way to export the revenue projections to Excel?",
            type=MessageType.QUESTION,
            app_id="market-forecast",
            tags=("export", "excel"),
            timestamp=now - timedelta(hours=2),
        ),
        ChatMessage(
            id="msg-3",
            user_id="user-1",
            user_name="John Admin",
            user_role="admin",
            content="System maintenance scheduled for Friday at 5 PM. Please save your work before then.",
            type=MessageType.ANNOUNCEMENT,
            timestamp=now - timedelta(days=1),
            is_pinned=True,
        ),
    ]


def build_announcements(now: datetime | None = None) -> list[Announcement]:
    now = now or datetime.now(UTC)
    return [
        Announcement(
            id="ann-1",
            content="The Deferred Rent app will be available next week.",
            priority=AnnouncementPriority.MEDIUM,
            created_by="admin@acme.example",
            created_at=now,
        )
    ]
