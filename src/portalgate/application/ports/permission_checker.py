"""Permission checker port - actor authorization."""

from typing import Protocol


class PermissionChecker(Protocol):
    """Port for checking what an authenticated actor may do."""

    async def is_admin(self, user_id: str) -> bool: ...

    async def has_role(self, user_id: str, role: str) -> bool: ...
