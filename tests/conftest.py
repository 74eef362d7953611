import pytest
from fastapi.testclient import TestClient

from league_manager.core.state import get_registry
from league_manager.main import app
from league_manager.services.registry import LeagueRegistry


@pytest.fixture
def registry() -> LeagueRegistry:
    return LeagueRegistry()


@pytest.fixture
def client(registry: LeagueRegistry):
    app.dependency_overrides[get_registry] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()
