"""Unit tests for team chat and announcements."""

import pytest

from portalgate.application.dto import SendMessageInput
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

from tests.conftest import ADMIN_ID, MANAGER_ID, OPERATOR_ID


@pytest.mark.asyncio
async def test_feed_orders_pinned_first_then_newest(uow_factory) -> None:
    feed = await ListMessagesUseCase(uow_factory).execute(OPERATOR_ID)

    assert [m.id for m in feed.messages] == ["msg-3", "msg-1", "msg-2"]
    assert feed.unread_count == 3


@pytest.mark.asyncio
async def test_feed_filters_by_type_and_app(uow_factory) -> None:
    use_case = ListMessagesUseCase(uow_factory)

    questions = await use_case.execute(OPERATOR_ID, message_type=MessageType.QUESTION)
    assert [m.id for m in questions.messages] == ["msg-2"]
    forecast = await use_case.execute(OPERATOR_ID, app_id="market-forecast")
    assert {m.id for m in forecast.messages} == {"msg-1", "msg-2"}


@pytest.mark.asyncio
async def test_unread_count_skips_own_and_read_messages(uow_factory) -> None:
    await MarkReadUseCase(uow_factory).execute(ADMIN_ID, "msg-1")

    feed = await ListMessagesUseCase(uow_factory).execute(ADMIN_ID)

    # msg-3 is the admin's own message
    assert feed.unread_count == 1


@pytest.mark.asyncio
async def test_send_message_marks_sender_as_reader(store, uow_factory) -> None:
    message = await SendMessageUseCase(uow_factory).execute(
        OPERATOR_ID,
        SendMessageInput(content="  Excavator 4 is back online  ", type=MessageType.UPDATE),
    )

    assert message.content == "Excavator 4 is back online"
    assert message.user_name == "David Operator"
    assert message.read_by == {OPERATOR_ID}
    assert store.messages[message.id] is message
    assert len(store.announcements) == 1


@pytest.mark.asyncio
async def test_send_message_rejects_empty_content(uow_factory) -> None:
    with pytest.raises(ValidationError):
        await SendMessageUseCase(uow_factory).execute(OPERATOR_ID, SendMessageInput(content="   "))


@pytest.mark.asyncio
async def test_send_message_about_inaccessible_app(uow_factory) -> None:
    with pytest.raises(PermissionDenied):
        await SendMessageUseCase(uow_factory).execute(
            OPERATOR_ID, SendMessageInput(content="hi", app_id="company-equity")
        )


@pytest.mark.asyncio
async def test_admin_announcement_creates_banner(store, uow_factory) -> None:
    await SendMessageUseCase(uow_factory).execute(
        ADMIN_ID,
        SendMessageInput(
            content="Payroll closes early",
            type=MessageType.ANNOUNCEMENT,
            priority=AnnouncementPriority.HIGH,
        ),
    )

    banners = await ListAnnouncementsUseCase(uow_factory).execute(OPERATOR_ID)
    assert banners[0].content == "Payroll closes early"
    assert banners[0].priority == AnnouncementPriority.HIGH
    assert len(store.announcements) == 2


@pytest.mark.asyncio
async def test_non_admin_announcement_has_no_banner(store, uow_factory) -> None:
    await SendMessageUseCase(uow_factory).execute(
        MANAGER_ID,
        SendMessageInput(content="Team lunch", type=MessageType.ANNOUNCEMENT),
    )
    assert len(store.announcements) == 1


@pytest.mark.asyncio
async def test_reaction_toggles(store, uow_factory) -> None:
    use_case = ToggleReactionUseCase(uow_factory)

    message = await use_case.execute(OPERATOR_ID, "msg-2", "👍")
    assert [(r.emoji, r.user_id) for r in message.reactions] == [("👍", OPERATOR_ID)]

    message = await use_case.execute(OPERATOR_ID, "msg-2", "👍")
    assert message.reactions == []


@pytest.mark.asyncio
async def test_reaction_on_missing_message(uow_factory) -> None:
    with pytest.raises(NotFound):
        await ToggleReactionUseCase(uow_factory).execute(OPERATOR_ID, "msg-404", "👍")


@pytest.mark.asyncio
async def test_pin_requires_manager(uow_factory, permission_checker) -> None:
    use_case = TogglePinUseCase(uow_factory, permission_checker)

    message = await use_case.execute(MANAGER_ID, "msg-2")
    assert message.is_pinned
    message = await use_case.execute(ADMIN_ID, "msg-2")
    assert not message.is_pinned
    with pytest.raises(PermissionDenied):
        await use_case.execute(OPERATOR_ID, "msg-2")


@pytest.mark.asyncio
async def test_dismiss_announcement_is_per_user_and_idempotent(uow_factory) -> None:
    dismiss = DismissAnnouncementUseCase(uow_factory)
    listing = ListAnnouncementsUseCase(uow_factory)

    await dismiss.execute(OPERATOR_ID, "ann-1")
    await dismiss.execute(OPERATOR_ID, "ann-1")

    assert await listing.execute(OPERATOR_ID) == []
    assert [a.id for a in await listing.execute(MANAGER_ID)] == ["ann-1"]
    with pytest.raises(NotFound):
        await dismiss.execute(OPERATOR_ID, "ann-404")
