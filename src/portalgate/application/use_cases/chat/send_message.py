"""Send chat message use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from portalgate.application.access_context import load_access_context
from portalgate.application.dto import SendMessageInput
from portalgate.domain.entities import ADMIN_ROLE, Announcement, ChatMessage
from portalgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from portalgate.domain.value_objects import MessageType

logger = logging.getLogger(__name__)


class SendMessageUseCase:
    """Post a message to the team feed.

    An announcement posted by an admin also becomes a banner announcement.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, data: SendMessageInput) -> ChatMessage:
        content = (data.content or "").strip()
        if not content:
            raise ValidationError("Message content is required")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", user_id)
            if data.app_id is not None:
                ctx = await load_access_context(uow)
                if not ctx.can_access(user, data.app_id):
                    raise PermissionDenied("Cannot post about an application you cannot access")

            now = datetime.now(UTC)
            message = ChatMessage(
                id=f"msg-{uuid4().hex}",
                user_id=user.id,
                user_name=user.display_name,
                user_role=user.role,
                content=content,
                type=data.type,
                tags=tuple(data.tags),
                app_id=data.app_id,
                timestamp=now,
                read_by={user.id},
            )
            await uow.messages.create(message)

            if data.type == MessageType.ANNOUNCEMENT and user.role == ADMIN_ROLE:
                await uow.announcements.create(
                    Announcement(
                        id=f"ann-{uuid4().hex}",
                        content=content,
                        priority=data.priority,
                        created_by=user.email,
                        created_at=now,
                    )
                )
                logger.info("Announcement posted by %s", user.email)

        return message
