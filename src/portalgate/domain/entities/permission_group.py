"""Permission group entity."""

from dataclasses import dataclass


@dataclass
class PermissionGroup:
    """Named bundle of application ids granted through one membership."""

    id: str
    name: str
    description: str
    apps: frozenset[str]
    icon: str = ""
    color: str = ""
