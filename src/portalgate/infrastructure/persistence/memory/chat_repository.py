"""In-memory chat message and announcement repositories."""

from portalgate.domain.entities import Announcement, ChatMessage
from portalgate.infrastructure.persistence.memory.store import PortalStore


class InMemoryChatMessageRepository:
    """Chat message repository implementation."""

    def __init__(self, store: PortalStore) -> None:
        self._store = store

    async def get_by_id(self, message_id: str) -> ChatMessage | None:
        return self._store.messages.get(message_id)

    async def list_all(self) -> list[ChatMessage]:
        return list(self._store.messages.values())

    async def create(self, message: ChatMessage) -> ChatMessage:
        self._store.messages[message.id] = message
        return message

    async def update(self, message: ChatMessage) -> None:
        self._store.messages[message.id] = message


class InMemoryAnnouncementRepository:
    """Announcement repository implementation."""

    def __init__(self, store: PortalStore) -> None:
        self._store = store

    async def get_by_id(self, announcement_id: str) -> Announcement | None:
        return self._store.announcements.get(announcement_id)

    async def list_all(self) -> list[Announcement]:
        return list(self._store.announcements.values())

    async def create(self, announcement: Announcement) -> Announcement:
        self._store.announcements[announcement.id] = announcement
        return announcement

    async def update(self, announcement: Announcement) -> None:
        self._store.announcements[announcement.id] = announcement
