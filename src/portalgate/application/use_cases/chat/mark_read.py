"""Mark message read use case."""

from portalgate.domain.entities import ChatMessage
from portalgate.domain.exceptions import NotFound


class MarkReadUseCase:
    """Record that the user has read a message."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, message_id: str) -> ChatMessage:
        async with self._uow_factory() as uow:
            message = await uow.messages.get_by_id(message_id)
            if not message:
                raise NotFound("Message", message_id)
            if user_id not in message.read_by:
                message.read_by.add(user_id)
                await uow.messages.update(message)
        return message
