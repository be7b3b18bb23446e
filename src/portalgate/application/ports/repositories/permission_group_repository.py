"""Permission group repository port."""

from typing import Protocol

from portalgate.domain.entities import PermissionGroup


class PermissionGroupRepository(Protocol):
    """Port for permission group storage."""

    async def get_by_id(self, group_id: str) -> PermissionGroup | None: ...

    async def list_all(self) -> list[PermissionGroup]: ...

    async def create(self, group: PermissionGroup) -> PermissionGroup: ...

    async def update(self, group: PermissionGroup) -> None: ...

    async def delete(self, group_id: str) -> None: ...
