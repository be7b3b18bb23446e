"""Signed session tokens (PyJWT)."""

from datetime import UTC, datetime, timedelta

import jwt

from portalgate.domain.exceptions import InvalidSession, SessionExpired


class JWTTokenService:
    """HS256 tokens carrying the user id (``sub``) and expiry (``exp``)."""

    def __init__(self, secret: str, ttl: timedelta, algorithm: str = "HS256") -> None:
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm

    def issue(self, user_id: str) -> str:
        now = datetime.now(UTC)
        payload = {"sub": user_id, "iat": now, "exp": now + self._ttl}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """Return the user id carried by ``token``."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise SessionExpired("Token expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidSession(f"Invalid token: {e}") from e
        return payload["sub"]
