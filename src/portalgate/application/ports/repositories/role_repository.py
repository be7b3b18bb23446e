"""Role repository port."""

from typing import Protocol

from portalgate.domain.entities import RoleDefinition


class RoleRepository(Protocol):
    """Port for role definitions."""

    async def get_by_id(self, role_id: str) -> RoleDefinition | None: ...

    async def list_all(self) -> list[RoleDefinition]: ...
