"""Client session state - the logged-in user and its stored session record.

``PortalSession`` is created once by whoever hosts the client (the CLI) and
passed explicitly to the code that needs it:

* ``start()`` restores a stored session, discarding corrupt or expired records;
* ``logout()`` clears both the state and the stored record.
"""

import json
import logging
from dataclasses import dataclass

from portalgate.application.access_context import AccessContext
from portalgate.application.dto.records import user_from_dict, user_to_dict
from portalgate.application.ports import SessionStore, TokenService
from portalgate.application.use_cases.auth.login import LoginUseCase
from portalgate.domain.entities import Application, User
from portalgate.domain.exceptions import (
    InvalidSession,
    LoginInProgress,
    PortalError,
    SessionError,
    SessionExpired,
)
from portalgate.domain.services import access_resolver

logger = logging.getLogger(__name__)

TOKEN_KEY = "portal_token"
USER_KEY = "portal_user"

SESSION_EXPIRED = "Session expired. Please log in again."


@dataclass
class AuthState:
    """Authentication state exposed to the client."""

    user: User | None = None
    is_authenticated: bool = False
    is_loading: bool = True
    error: str | None = None


class PortalSession:
    """Explicit session state object."""

    def __init__(
        self,
        store: SessionStore,
        token_service: TokenService,
        login: LoginUseCase,
        access: AccessContext,
    ) -> None:
        self._store = store
        self._token_service = token_service
        self._login = login
        self._access = access
        self._login_pending = False
        self.state = AuthState()

    def start(self) -> AuthState:
        """Restore a stored session, falling back to logged out."""
        token = self._store.get_item(TOKEN_KEY)
        raw_user = self._store.get_item(USER_KEY)
        if not token or not raw_user:
            self.state = AuthState(is_loading=False)
            return self.state

        try:
            user_id = self._token_service.verify(token)
            user = user_from_dict(json.loads(raw_user))
            if user.id != user_id:
                raise InvalidSession("Stored user does not match session token")
        except (SessionError, ValueError, KeyError, TypeError) as e:
            logger.warning("Discarding stored session: %s", e)
            self._clear_store()
            self.state = AuthState(is_loading=False)
            return self.state

        self.state = AuthState(user=user, is_authenticated=True, is_loading=False)
        return self.state

    async def login(self, email: str, password: str) -> User:
        if self._login_pending:
            raise LoginInProgress("A login is already in progress")

        self._login_pending = True
        self.state = AuthState(
            user=self.state.user,
            is_authenticated=self.state.is_authenticated,
            is_loading=True,
        )
        try:
            result = await self._login.execute(email, password)
        except PortalError as e:
            self.state = AuthState(is_loading=False, error=str(e))
            raise
        finally:
            self._login_pending = False

        self._store.set_item(TOKEN_KEY, result.token)
        self._store.set_item(USER_KEY, json.dumps(user_to_dict(result.user)))
        self.state = AuthState(user=result.user, is_authenticated=True, is_loading=False)
        return result.user

    def logout(self) -> None:
        self._clear_store()
        self.state = AuthState(is_loading=False)

    def refresh(self) -> None:
        """Check the stored token; an unusable token logs the session out."""
        token = self._store.get_item(TOKEN_KEY)
        try:
            if not token:
                raise InvalidSession("No token found")
            self._token_service.verify(token)
        except SessionError as e:
            self.logout()
            raise SessionExpired(SESSION_EXPIRED) from e

    def has_permission(self, app_id: str) -> bool:
        user = self.state.user
        if user is None:
            return False
        return self._access.can_access(user, app_id)

    def has_role(self, role: str) -> bool:
        user = self.state.user
        if user is None:
            return False
        return access_resolver.has_role(user, role)

    def accessible_apps(self) -> list[Application]:
        user = self.state.user
        if user is None:
            return []
        allowed = self._access.resolve(user)
        return [app for app in self._access.catalog if app.id in allowed]

    def _clear_store(self) -> None:
        self._store.remove_item(TOKEN_KEY)
        self._store.remove_item(USER_KEY)
