"""User entity and its permission record."""

from dataclasses import dataclass, field
from datetime import datetime

from portalgate.domain.value_objects import AppGrant, IndividualApps, UserStatus


@dataclass
class UserPermissions:
    """Individually granted apps, feature flags and permission-group memberships."""

    apps: AppGrant = field(default_factory=IndividualApps)
    features: tuple[str, ...] = ()
    groups: frozenset[str] = frozenset()


@dataclass
class User:
    """Portal user."""

    id: str
    email: str
    first_name: str
    last_name: str
    role: str
    permissions: UserPermissions
    company: str
    created_at: datetime
    status: UserStatus = UserStatus.ACTIVE
    department: str | None = None
    last_login: datetime | None = None

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE
