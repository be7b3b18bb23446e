"""Role definition - display metadata and default permissions."""

from dataclasses import dataclass

from portalgate.domain.entities.user import UserPermissions
from portalgate.domain.value_objects import AppGrant

# The one role that always sees the full catalog.
ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class RoleDefinition:
    """Role - baseline permissions a user receives when assigned the role."""

    id: str
    name: str
    description: str
    default_apps: AppGrant
    default_groups: frozenset[str] = frozenset()
    default_features: tuple[str, ...] = ()
    capabilities: tuple[str, ...] = ()
    color: str = ""

    def default_permissions(self) -> UserPermissions:
        """Fresh permission record holding exactly this role's defaults."""
        return UserPermissions(
            apps=self.default_apps,
            features=self.default_features,
            groups=self.default_groups,
        )

    def has_capability(self, capability: str) -> bool:
        return capability in self.capabilities or "all" in self.capabilities
