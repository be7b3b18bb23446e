"""Team chat and announcement API resources."""

import falcon.asgi

from portalgate.application.dto import SendMessageInput
from portalgate.application.dto.records import announcement_to_dict, message_to_dict
from portalgate.application.use_cases.chat.announcements import (
    DismissAnnouncementUseCase,
    ListAnnouncementsUseCase,
)
from portalgate.application.use_cases.chat.list_messages import ListMessagesUseCase
from portalgate.application.use_cases.chat.mark_read import MarkReadUseCase
from portalgate.application.use_cases.chat.pin_message import TogglePinUseCase
from portalgate.application.use_cases.chat.react import ToggleReactionUseCase
from portalgate.application.use_cases.chat.send_message import SendMessageUseCase
from portalgate.domain.exceptions import NotFound, PermissionDenied, ValidationError
from portalgate.domain.value_objects import AnnouncementPriority, MessageType
from portalgate.interfaces.api.resources._media import optional_str, read_object, str_list


class MessagesResource:
    """GET/POST /v1/chat/messages - team feed."""

    def __init__(self, list_messages: ListMessagesUseCase, send_message: SendMessageUseCase) -> None:
        self._list = list_messages
        self._send = send_message

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Feed with ``?type=`` and ``?app_id=`` filters plus the caller's unread count."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        raw_type = req.get_param("type")
        try:
            message_type = MessageType(raw_type) if raw_type and raw_type != "all" else None
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Unknown message type: {raw_type}"}
            return

        feed = await self._list.execute(
            user.user_id, message_type=message_type, app_id=req.get_param("app_id")
        )
        resp.media = {
            "items": [message_to_dict(m, user.user_id) for m in feed.messages],
            "unread_count": feed.unread_count,
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await read_object(req)
        try:
            data = SendMessageInput(
                content=str(body.get("content") or ""),
                type=MessageType(body.get("type") or MessageType.COMMENT),
                tags=tuple(str_list(body, "tags")),
                app_id=optional_str(body, "app_id"),
                priority=AnnouncementPriority(body.get("priority") or AnnouncementPriority.MEDIUM),
            )
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            message = await self._send.execute(user.user_id, data)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = message_to_dict(message, user.user_id)
        resp.status = falcon.HTTP_201


class MessageActionResource:
    """POST /v1/chat/messages/{message_id}/reactions|pin|read."""

    def __init__(
        self,
        toggle_reaction: ToggleReactionUseCase,
        toggle_pin: TogglePinUseCase,
        mark_read: MarkReadUseCase,
    ) -> None:
        self._react = toggle_reaction
        self._pin = toggle_pin
        self._mark_read = mark_read

    async def on_post_reactions(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, message_id: str
    ) -> None:
        body = await read_object(req)
        emoji = str(body.get("emoji") or "")
        await self._run(req, resp, lambda uid: self._react.execute(uid, message_id, emoji))

    async def on_post_pin(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, message_id: str
    ) -> None:
        await self._run(req, resp, lambda uid: self._pin.execute(uid, message_id))

    async def on_post_read(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, message_id: str
    ) -> None:
        await self._run(req, resp, lambda uid: self._mark_read.execute(uid, message_id))

    async def _run(self, req, resp, action) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            message = await action(user.user_id)
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Permission denied"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Message not found"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = message_to_dict(message, user.user_id)
        resp.status = falcon.HTTP_200


class AnnouncementsResource:
    """GET /v1/chat/announcements - banners the caller has not dismissed."""

    def __init__(self, list_announcements: ListAnnouncementsUseCase) -> None:
        self._list = list_announcements

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        announcements = await self._list.execute(user.user_id)
        resp.media = {"items": [announcement_to_dict(a) for a in announcements]}
        resp.status = falcon.HTTP_200


class AnnouncementDismissResource:
    """POST /v1/chat/announcements/{announcement_id}/dismiss."""

    def __init__(self, dismiss_announcement: DismissAnnouncementUseCase) -> None:
        self._dismiss = dismiss_announcement

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, announcement_id: str
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._dismiss.execute(user.user_id, announcement_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Announcement not found"}
            return

        resp.status = falcon.HTTP_204
