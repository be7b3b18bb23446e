"""Login use case."""

import asyncio
import logging
import secrets
from dataclasses import replace
from datetime import UTC, datetime

from portalgate.application.dto import LoginResult
from portalgate.application.ports import TokenService
from portalgate.domain.exceptions import AuthenticationError, InactiveAccount, LoginInProgress

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
INACTIVE_ACCOUNT = "Account is inactive. Please contact administrator."


class LoginUseCase:
    """Simulated authentication against the shared demo credential.

    The round trip is delayed by ``delay_seconds``. A second attempt for an
    email whose login is still pending raises ``LoginInProgress``.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        token_service: TokenService,
        password: str,
        delay_seconds: float = 1.0,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._token_service = token_service
        self._password = password
        self._delay = delay_seconds
        self._in_flight: set[str] = set()

    async def execute(self, email: str, password: str) -> LoginResult:
        key = (email or "").strip().lower()
        if key in self._in_flight:
            raise LoginInProgress("A login for this account is already in progress")

        self._in_flight.add(key)
        try:
            if self._delay > 0:
                await asyncio.sleep(self._delay)

            async with self._uow_factory() as uow:
                user = await uow.users.get_by_email(key)
                if not user or not secrets.compare_digest(
                    password.encode(), self._password.encode()
                ):
                    logger.warning("Rejected login for %s", key)
                    raise AuthenticationError(INVALID_CREDENTIALS)
                if not user.is_active:
                    logger.warning("Rejected login for %s account (%s)", key, user.status)
                    raise InactiveAccount(INACTIVE_ACCOUNT)

                user = replace(user, last_login=datetime.now(UTC))
                await uow.users.update(user)
        finally:
            self._in_flight.discard(key)

        logger.info("User %s logged in", user.email)
        return LoginResult(token=self._token_service.issue(user.id), user=user)
