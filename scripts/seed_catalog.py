#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables and replaces their contents with the seed
products.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --database-url sqlite+aiosqlite:///./catalog.db
"""

import argparse
import asyncio

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from shopcatalog.catalog.seed import SeedService
from shopcatalog.catalog.service import CatalogService
from shopcatalog.infrastructure.config import settings
from shopcatalog.infrastructure.database import create_tables
from shopcatalog.infrastructure.logging import configure_logging


async def seed(database_url: str) -> str:
    """Create tables and run the seed.

    Args:
        database_url: SQLAlchemy async database URL.

    Returns:
        Seed confirmation message.
    """
    engine = create_async_engine(database_url)
    try:
        await create_tables(engine)
        session_factory = async_sessionmaker(engine, expire_on_commit=False)
        return await SeedService(CatalogService(session_factory)).run_seed()
    finally:
        await engine.dispose()


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog",
    )
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="Database URL (default: DATABASE_URL setting)",
    )
    args = parser.parse_args()

    configure_logging(settings.log_level, json=False)

    print("=" * 60)
    print("Shop Catalog Seeder")
    print("=" * 60)

    result = await seed(args.database_url)

    print(result)
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
