"""List users use case."""

from portalgate.application.ports import PermissionChecker
from portalgate.domain.entities import User
from portalgate.domain.exceptions import PermissionDenied


def matches_search(user: User, search: str) -> bool:
    term = search.lower()
    return any(
        term in field.lower()
        for field in (user.first_name, user.last_name, user.email, user.company)
    )


class ListUsersUseCase:
    """Admin user listing with search and role/status filters."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        search: str | None = None,
        role: str | None = None,
        status: str | None = None,
    ) -> list[User]:
        if not await self._permission_checker.is_admin(actor_id):
            raise PermissionDenied("Only administrators can list users")

        async with self._uow_factory() as uow:
            users = await uow.users.list_all()

        return [
            u
            for u in users
            if (not search or matches_search(u, search))
            and (not role or role == "all" or u.role == role)
            and (not status or status == "all" or u.status == status)
        ]
