"""In-memory user repository implementation."""

from portalgate.domain.entities import User
from portalgate.infrastructure.persistence.memory.store import PortalStore


class InMemoryUserRepository:
    """User repository implementation."""

    def __init__(self, store: PortalStore) -> None:
        self._store = store

    async def get_by_id(self, user_id: str) -> User | None:
        return self._store.users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        """Case-insensitive email lookup."""
        wanted = email.strip().lower()
        for user in self._store.users.values():
            if user.email.lower() == wanted:
                return user
        return None

    async def list_all(self) -> list[User]:
        return list(self._store.users.values())

    async def create(self, user: User) -> User:
        self._store.users[user.id] = user
        return user

    async def update(self, user: User) -> None:
        self._store.users[user.id] = user
