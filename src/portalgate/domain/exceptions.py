"""Domain exceptions."""


class PortalError(Exception):
    """Base exception for PortalGate."""

    pass


class PermissionDenied(PortalError):
    """Actor is not allowed to perform the requested action."""

    pass


class NotFound(PortalError):
    """Requested resource was not found."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


class ValidationError(PortalError):
    """Validation failed for input data."""

    pass


class AuthenticationError(PortalError):
    """Credentials were rejected. The message is safe to show to the user."""

    pass


class InactiveAccount(AuthenticationError):
    """Account exists but is not active."""

    pass


class LoginInProgress(PortalError):
    """A login for the same account is already running."""

    pass


class SessionError(PortalError):
    """Stored or presented session cannot be used."""

    pass


class SessionExpired(SessionError):
    """Session token is past its expiry."""

    pass


class InvalidSession(SessionError):
    """Session token or stored record is malformed."""

    pass


class AppUnavailable(PortalError):
    """Application exists but cannot be launched in its current status."""

    pass
