"""Root conftest — shared test configuration and fixtures."""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Ensure tests don't depend on a developer .env for log output
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("LOG_FORMAT", "json")

from solarnetwork_datasource.api.dependencies import get_datasource  # noqa: E402
from solarnetwork_datasource.main import app  # noqa: E402
from solarnetwork_datasource.services.datasource import Datasource  # noqa: E402
from tests.signing_fixtures import FIXED_NOW  # noqa: E402


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
async def client(fixed_clock):
    """FastAPI test client with the datasource clock pinned to FIXED_NOW."""
    app.dependency_overrides[get_datasource] = lambda: Datasource(clock=fixed_clock)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
