"""Application lifecycle status."""

from enum import StrEnum


class AppStatus(StrEnum):
    """Lifecycle of a catalog application."""

    ACTIVE = "active"
    COMING_SOON = "coming-soon"
    MAINTENANCE = "maintenance"
