"""Application catalog repository port."""

from typing import Protocol

from portalgate.domain.entities import Application


class ApplicationRepository(Protocol):
    """Port for the read-only application catalog."""

    async def get_by_id(self, app_id: str) -> Application | None: ...

    async def list_all(self) -> list[Application]: ...
