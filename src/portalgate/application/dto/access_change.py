"""Access change DTO - apps and groups to grant or revoke."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccessChange:
    """Apps and/or groups to add or remove. ``role`` is only honoured on grant."""

    apps: tuple[str, ...] = ()
    groups: tuple[str, ...] = ()
    role: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.apps and not self.groups and self.role is None
