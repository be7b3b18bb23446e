"""Pytest fixtures for PortalGate tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from portalgate.domain.entities import (
    Application,
    PermissionGroup,
    User,
    UserPermissions,
)
from portalgate.domain.value_objects import AppStatus, UserStatus, app_grant_from_ids
from portalgate.infrastructure.permission.permission_checker import PortalPermissionChecker
from portalgate.infrastructure.persistence.memory.store import PortalStore
from portalgate.infrastructure.persistence.memory.unit_of_work import create_uow_factory
from portalgate.infrastructure.seed import build_store
from portalgate.infrastructure.session.jwt_token_service import JWTTokenService

ADMIN_ID = "user-1"
MANAGER_ID = "user-2"
FOREMAN_ID = "user-3"
OPERATOR_ID = "user-4"
PENDING_ID = "user-7"


# --- Builders ---


def make_app(app_id: str, roles: tuple[str, ...] = (), status: AppStatus = AppStatus.ACTIVE) -> Application:
    return Application(
        id=app_id,
        name=app_id.replace("-", " ").title(),
        description="",
        url=f"/{app_id}",
        icon="",
        color="",
        required_roles=roles,
        status=status,
    )


def make_user(
    user_id: str = "u-1",
    role: str = "operator",
    apps: list[str] | None = None,
    groups: list[str] | None = None,
    status: UserStatus = UserStatus.ACTIVE,
) -> User:
    return User(
        id=user_id,
        email=f"{user_id}@example.com",
        first_name="Test",
        last_name=user_id,
        role=role,
        permissions=UserPermissions(
            apps=app_grant_from_ids(apps),
            groups=frozenset(groups or ()),
        ),
        company="Example",
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
        status=status,
    )


# --- Fixtures ---


@pytest.fixture
def catalog() -> list[Application]:
    """Small catalog: a, b (manager role), c (maintenance)."""
    return [
        make_app("a"),
        make_app("b", roles=("manager",)),
        make_app("c", status=AppStatus.MAINTENANCE),
    ]


@pytest.fixture
def groups() -> dict[str, PermissionGroup]:
    return {
        "g1": PermissionGroup(id="g1", name="G1", description="", apps=frozenset({"b"})),
        "g2": PermissionGroup(id="g2", name="G2", description="", apps=frozenset({"a", "c"})),
    }


@pytest.fixture
def store() -> PortalStore:
    """Seeded store: catalog, roles, groups, demo users and chat."""
    return build_store(market_forecast_url="http://forecast.test")


@pytest.fixture
def uow_factory(store: PortalStore):
    """Factory returning async context manager over the seeded store."""
    return create_uow_factory(store)


@pytest.fixture
def permission_checker(uow_factory) -> PortalPermissionChecker:
    return PortalPermissionChecker(uow_factory)


@pytest.fixture
def token_service() -> JWTTokenService:
    return JWTTokenService(secret="test-secret", ttl=timedelta(hours=1))
