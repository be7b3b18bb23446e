"""Auth middleware - resolves the bearer token to the current user."""

import logging
from dataclasses import dataclass

import falcon.asgi

from portalgate.application.use_cases.auth.authenticate import AuthenticateTokenUseCase
from portalgate.domain.exceptions import SessionError

logger = logging.getLogger(__name__)


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str
    role: str


class AuthMiddleware:
    """Middleware that validates the session token and sets req.context.user.

    Requests without a usable token get ``req.context.user = None``; each
    resource decides whether that is acceptable.
    """

    def __init__(self, authenticate: AuthenticateTokenUseCase) -> None:
        self._authenticate = authenticate

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer "):
            return

        try:
            user = await self._authenticate.execute(auth[7:])
        except SessionError as e:
            logger.info("Rejected session token: %s", e)
            req.context.session_error = str(e)
            return
        req.context.user = RequestUser(user_id=user.id, email=user.email, role=user.role)
