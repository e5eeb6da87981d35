"""Shared fixtures for API tests."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from shopcatalog.api.health import get_session_factory
from shopcatalog.api.products import get_catalog_service
from shopcatalog.main import app


@pytest.fixture
async def client(session_factory, catalog) -> AsyncGenerator[AsyncClient, None]:
    """Create an async client wired to the test database."""
    app.dependency_overrides[get_catalog_service] = lambda: catalog
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def product_payload() -> dict:
    """Create a valid product payload."""
    return {
        "title": "Men's Raven Lightweight Zip Up Bomber Jacket",
        "price": 130,
        "description": "Lightweight bomber jacket",
        "stock": 10,
        "sizes": ["S", "M", "L"],
        "gender": "men",
        "tags": ["jacket"],
        "images": ["1740250-00-A_0_2000.jpg", "1740250-00-A_1.jpg"],
    }
