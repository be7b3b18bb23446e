"""Token service port - issues and verifies session tokens."""

from typing import Protocol


class TokenService(Protocol):
    """Port for session tokens bound to a user id."""

    def issue(self, user_id: str) -> str: ...

    def verify(self, token: str) -> str:
        """Return the user id, or raise SessionExpired / InvalidSession."""
        ...
