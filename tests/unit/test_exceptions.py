"""Unit tests for domain exceptions."""

import pytest

from portalgate.domain.exceptions import (
    AppUnavailable,
    AuthenticationError,
    InactiveAccount,
    InvalidSession,
    LoginInProgress,
    NotFound,
    PermissionDenied,
    PortalError,
    SessionError,
    SessionExpired,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc",
    [
        PermissionDenied,
        NotFound,
        ValidationError,
        AuthenticationError,
        LoginInProgress,
        SessionError,
        AppUnavailable,
    ],
)
def test_inherits_portal_error(exc) -> None:
    assert issubclass(exc, PortalError)


def test_inactive_account_is_authentication_error() -> None:
    """Callers handling bad credentials also handle inactive accounts."""
    assert issubclass(InactiveAccount, AuthenticationError)


def test_session_errors() -> None:
    assert issubclass(SessionExpired, SessionError)
    assert issubclass(InvalidSession, SessionError)


def test_not_found_message() -> None:
    err = NotFound("User", "user-9")
    assert str(err) == "User not found: user-9"
    assert err.kind == "User"
    assert err.identifier == "user-9"


def test_exception_message_preserved() -> None:
    msg = "Only administrators can grant access"
    with pytest.raises(PortalError, match=msg):
        raise PermissionDenied(msg)
