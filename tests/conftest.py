"""Shared fixtures.

Every test gets a fresh in-memory SQLite catalog.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from shopcatalog.catalog.models import Gender
from shopcatalog.catalog.service import CatalogService, ProductDraft
from shopcatalog.infrastructure.database import create_tables


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory database with the catalog tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the test database."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def catalog(session_factory: async_sessionmaker[AsyncSession]) -> CatalogService:
    """Create a catalog service on the test database."""
    return CatalogService(session_factory)


@pytest.fixture
def make_draft() -> Callable[..., ProductDraft]:
    """Build product drafts with sensible defaults."""

    def _make(title: str = "Men's Chill Crew Neck Sweatshirt", **overrides: Any) -> ProductDraft:
        values: dict[str, Any] = {
            "title": title,
            "sizes": ["S", "M", "L"],
            "gender": Gender.MEN,
            "price": 75,
            "stock": 7,
            "tags": ["sweatshirt"],
            "images": ["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
        }
        values.update(overrides)
        return ProductDraft(**values)

    return _make
