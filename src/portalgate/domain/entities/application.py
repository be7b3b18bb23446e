"""Application entity - catalog entry."""

from dataclasses import dataclass

from portalgate.domain.value_objects import AppStatus


@dataclass(frozen=True)
class Application:
    """Catalog application. ``required_roles`` grants access without an explicit grant."""

    id: str
    name: str
    description: str
    url: str
    icon: str
    color: str
    required_roles: tuple[str, ...]
    status: AppStatus
    version: str | None = None
    last_updated: str | None = None

    @property
    def is_launchable(self) -> bool:
        return self.status == AppStatus.ACTIVE
