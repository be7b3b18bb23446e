"""Authenticate bearer token use case."""

from portalgate.application.ports import TokenService
from portalgate.domain.entities import User
from portalgate.domain.exceptions import InvalidSession


class AuthenticateTokenUseCase:
    """Resolve a session token to the current user record."""

    def __init__(self, unit_of_work_factory: type, token_service: TokenService) -> None:
        self._uow_factory = unit_of_work_factory
        self._token_service = token_service

    async def execute(self, token: str) -> User:
        """Raise SessionExpired / InvalidSession when the token cannot be used."""
        user_id = self._token_service.verify(token)
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
        if not user:
            raise InvalidSession("Session refers to an unknown user")
        return user
