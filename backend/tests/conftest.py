"""
HelloAPI - Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── app: A freshly built FastAPI application
    └── test_client: HTTPX AsyncClient talking to `app` in-process
"""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must be set BEFORE helloapi.config is imported
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["ACCESS_LOG"] = "true"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app():
    """
    Provides a new application instance.

    Tests may register extra routes on it (e.g. one that raises) without
    leaking them into other tests.
    """
    from helloapi.main import create_app
    return create_app()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
