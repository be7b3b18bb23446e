"""Message reaction use case."""

from portalgate.domain.entities import ChatMessage, Reaction
from portalgate.domain.exceptions import NotFound, ValidationError


class ToggleReactionUseCase:
    """Add the user's emoji reaction, or remove it if already present."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, message_id: str, emoji: str) -> ChatMessage:
        if not emoji:
            raise ValidationError("Emoji is required")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            message = await uow.messages.get_by_id(message_id)
            if not message:
                raise NotFound("Message", message_id)

            kept = [
                r for r in message.reactions if not (r.user_id == user.id and r.emoji == emoji)
            ]
            if len(kept) == len(message.reactions):
                kept.append(Reaction(emoji=emoji, user_id=user.id, user_name=user.display_name))
            message.reactions = kept
            await uow.messages.update(message)

        return message
