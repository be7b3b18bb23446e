"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from portalgate.config import Settings
from portalgate.infrastructure.persistence.memory.store import PortalStore
from portalgate.infrastructure.seed import build_store
from portalgate.main import create_portal_app

PASSWORD = "admin123"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        session_secret="api-test-secret",
        login_delay_seconds=0,
        demo_password=PASSWORD,
        cors_origins="http://portal.test",
        _env_file=None,
    )


@pytest.fixture
def store() -> PortalStore:
    return build_store(market_forecast_url="http://forecast.test")


@pytest.fixture
def client(settings, store) -> TestClient:
    """Falcon test client over the fully wired app and a seeded store."""
    return TestClient(create_portal_app(settings, store=store))


def login_headers(client: TestClient, email: str) -> dict[str, str]:
    r = client.simulate_post("/v1/auth/login", json={"email": email, "password": PASSWORD})
    assert r.status_code == 200, r.json
    return {"Authorization": f"Bearer {r.json['token']}"}


@pytest.fixture
def admin(client) -> dict[str, str]:
    return login_headers(client, "admin@acme.example")


@pytest.fixture
def manager(client) -> dict[str, str]:
    return login_headers(client, "manager@acme.example")


@pytest.fixture
def operator(client) -> dict[str, str]:
    return login_headers(client, "operator@acme.example")
