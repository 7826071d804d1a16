"""
NetDemo — Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped, created fresh for each test):
    ├── app: A new FastAPI app from create_app() (its own Counter at 0)
    ├── counter: That app's Counter
    └── test_client: HTTPX AsyncClient bound to that app
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from netdemo.main import create_app


@pytest.fixture
def app():
    """A fresh application instance, so counter state never leaks between tests."""
    return create_app()


@pytest.fixture
def counter(app):
    return app.state.counter


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Uses ASGITransport to route requests directly to the app; no socket
    is opened.

    Usage:
        async def test_hello(test_client):
            response = await test_client.get("/hello")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
