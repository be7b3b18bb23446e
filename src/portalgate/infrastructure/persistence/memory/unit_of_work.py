"""In-memory Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from portalgate.infrastructure.persistence.memory.application_repository import (
    InMemoryApplicationRepository,
)
from portalgate.infrastructure.persistence.memory.audit_log_repository import (
    InMemoryAuditLogRepository,
)
from portalgate.infrastructure.persistence.memory.chat_repository import (
    InMemoryAnnouncementRepository,
    InMemoryChatMessageRepository,
)
from portalgate.infrastructure.persistence.memory.permission_group_repository import (
    InMemoryPermissionGroupRepository,
)
from portalgate.infrastructure.persistence.memory.role_repository import (
    InMemoryRoleRepository,
)
from portalgate.infrastructure.persistence.memory.store import PortalStore
from portalgate.infrastructure.persistence.memory.user_repository import (
    InMemoryUserRepository,
)


class InMemoryUnitOfWork:
    """In-memory Unit of Work - snapshot on enter, restore on rollback."""

    def __init__(self, store: PortalStore) -> None:
        self._store = store
        self._snapshot: PortalStore | None = None
        self._audit_length = 0

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        self._snapshot = self._store.snapshot()
        self._audit_length = len(self._store.audit)
        self._users = InMemoryUserRepository(self._store)
        self._apps = InMemoryApplicationRepository(self._store)
        self._groups = InMemoryPermissionGroupRepository(self._store)
        self._roles = InMemoryRoleRepository(self._store)
        self._audit = InMemoryAuditLogRepository(self._store)
        self._messages = InMemoryChatMessageRepository(self._store)
        self._announcements = InMemoryAnnouncementRepository(self._store)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type:
            await self.rollback()
        self._snapshot = None

    @property
    def users(self) -> InMemoryUserRepository:
        return self._users

    @property
    def apps(self) -> InMemoryApplicationRepository:
        return self._apps

    @property
    def groups(self) -> InMemoryPermissionGroupRepository:
        return self._groups

    @property
    def roles(self) -> InMemoryRoleRepository:
        return self._roles

    @property
    def audit(self) -> InMemoryAuditLogRepository:
        return self._audit

    @property
    def messages(self) -> InMemoryChatMessageRepository:
        return self._messages

    @property
    def announcements(self) -> InMemoryAnnouncementRepository:
        return self._announcements

    async def commit(self) -> None:
        self._snapshot = None

    async def rollback(self) -> None:
        if self._snapshot is not None:
            self._store.restore(self._snapshot, self._audit_length)
            self._snapshot = None


def create_uow_factory(store: PortalStore) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryUnitOfWork]:
        uow = InMemoryUnitOfWork(store)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
