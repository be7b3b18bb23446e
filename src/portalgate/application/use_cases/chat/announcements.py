"""Announcement use cases."""

from portalgate.domain.entities import Announcement
from portalgate.domain.exceptions import NotFound


class ListAnnouncementsUseCase:
    """Announcements the user has not dismissed, newest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str) -> list[Announcement]:
        async with self._uow_factory() as uow:
            announcements = await uow.announcements.list_all()
        visible = [a for a in announcements if user_id not in a.dismissed_by]
        visible.sort(key=lambda a: a.created_at, reverse=True)
        return visible


class DismissAnnouncementUseCase:
    """Hide an announcement for one user. Dismissing twice is a no-op."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user_id: str, announcement_id: str) -> Announcement:
        async with self._uow_factory() as uow:
            announcement = await uow.announcements.get_by_id(announcement_id)
            if not announcement:
                raise NotFound("Announcement", announcement_id)
            if user_id not in announcement.dismissed_by:
                announcement.dismissed_by.add(user_id)
                await uow.announcements.update(announcement)
        return announcement
