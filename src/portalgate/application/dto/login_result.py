"""Login result DTO."""

from dataclasses import dataclass

from portalgate.domain.entities import User


@dataclass
class LoginResult:
    """Issued token and the authenticated user record."""

    token: str
    user: User
