"""Chat message and announcement repository ports."""

from typing import Protocol

from portalgate.domain.entities import Announcement, ChatMessage


class ChatMessageRepository(Protocol):
    """Port for team chat messages."""

    async def get_by_id(self, message_id: str) -> ChatMessage | None: ...

    async def list_all(self) -> list[ChatMessage]: ...

    async def create(self, message: ChatMessage) -> ChatMessage: ...

    async def update(self, message: ChatMessage) -> None: ...


class AnnouncementRepository(Protocol):
    """Port for announcements."""

    async def get_by_id(self, announcement_id: str) -> Announcement | None: ...

    async def list_all(self) -> list[Announcement]: ...

    async def create(self, announcement: Announcement) -> Announcement: ...

    async def update(self, announcement: Announcement) -> None: ...
