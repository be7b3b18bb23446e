"""Health endpoint tests."""

import pytest
from falcon.asgi import App
from falcon.testing import TestClient

from portalgate.infrastructure.persistence.memory.store import PortalStore
from portalgate.infrastructure.persistence.memory.unit_of_work import create_uow_factory
from portalgate.interfaces.api.resources.health import HealthResource


def _client(health: HealthResource) -> TestClient:
    app = App()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    return _client(HealthResource())


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_counts_catalog(uow_factory) -> None:
    result = _client(HealthResource(uow_factory)).simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json == {"status": "ready", "apps": 9, "roles": 5}


def test_health_not_ready_without_catalog() -> None:
    health = HealthResource(create_uow_factory(PortalStore()))
    result = _client(health).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "not ready"
