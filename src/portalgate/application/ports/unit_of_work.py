"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from portalgate.application.ports.repositories import (
    AnnouncementRepository,
    ApplicationRepository,
    AuditLogRepository,
    ChatMessageRepository,
    PermissionGroupRepository,
    RoleRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def users(self) -> UserRepository: ...

    @property
    def apps(self) -> ApplicationRepository: ...

    @property
    def groups(self) -> PermissionGroupRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def audit(self) -> AuditLogRepository: ...

    @property
    def messages(self) -> ChatMessageRepository: ...

    @property
    def announcements(self) -> AnnouncementRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
