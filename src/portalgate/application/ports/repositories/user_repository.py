"""User repository port."""

from typing import Protocol

from portalgate.domain.entities import User


class UserRepository(Protocol):
    """Port for user storage."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def list_all(self) -> list[User]: ...

    async def create(self, user: User) -> User: ...

    async def update(self, user: User) -> None: ...
