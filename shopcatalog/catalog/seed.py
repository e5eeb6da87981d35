"""Catalog seeding.

Replaces the whole catalog with the products from ``seed_data``.
"""

import structlog

from shopcatalog.catalog.seed_data import SEED_PRODUCTS
from shopcatalog.catalog.service import CatalogService, ProductDraft

logger = structlog.get_logger()


class SeedService:
    """Resets the catalog to a known set of products.

    Example usage:
        seeder = SeedService(CatalogService(async_session_factory))
        await seeder.run_seed()
    """

    def __init__(
        self,
        catalog: CatalogService,
        products: list[ProductDraft] | None = None,
    ) -> None:
        """Initialize seeder.

        Args:
            catalog: Catalog service used for deletes and creates.
            products: Products to insert, defaults to ``SEED_PRODUCTS``.
        """
        self.catalog = catalog
        self.products = SEED_PRODUCTS if products is None else products

    async def run_seed(self) -> str:
        """Delete every product and insert the seed products.

        Returns:
            Confirmation message.
        """
        deleted = await self.catalog.delete_all_products()

        # Sequential so that insertion order follows the seed list
        for draft in self.products:
            await self.catalog.create(draft)

        logger.info(
            "Catalog seeded",
            deleted=deleted,
            products_created=len(self.products),
        )
        return "SEED EXECUTED"
