"""Pin message use case."""

from portalgate.application.ports import PermissionChecker
from portalgate.domain.entities import ChatMessage
from portalgate.domain.exceptions import NotFound, PermissionDenied


class TogglePinUseCase:
    """Flip a message's pinned flag. Managers (and admins) only."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, user_id: str, message_id: str) -> ChatMessage:
        if not await self._permission_checker.has_role(user_id, "manager"):
            raise PermissionDenied("Only managers can pin messages")

        async with self._uow_factory() as uow:
            message = await uow.messages.get_by_id(message_id)
            if not message:
                raise NotFound("Message", message_id)
            message.is_pinned = not message.is_pinned
            await uow.messages.update(message)

        return message
