"""List chat feed use case."""

from dataclasses import dataclass

from portalgate.domain.entities import ChatMessage
from portalgate.domain.value_objects import MessageType


def is_unread(message: ChatMessage, user_id: str) -> bool:
    return message.user_id != user_id and user_id not in message.read_by


@dataclass
class ChatFeed:
    """Feed page plus the viewer's unread count over the whole feed."""

    messages: list[ChatMessage]
    unread_count: int


class ListMessagesUseCase:
    """Team feed, pinned messages first, then newest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        user_id: str,
        message_type: MessageType | None = None,
        app_id: str | None = None,
    ) -> ChatFeed:
        async with self._uow_factory() as uow:
            messages = await uow.messages.list_all()

        unread = sum(1 for m in messages if is_unread(m, user_id))
        selected = [
            m
            for m in messages
            if (message_type is None or m.type == message_type)
            and (app_id is None or m.app_id == app_id)
        ]
        selected.sort(key=lambda m: m.timestamp, reverse=True)
        selected.sort(key=lambda m: not m.is_pinned)
        return ChatFeed(messages=selected, unread_count=unread)
