"""Product repository for database operations.

Provides the lookup resolver and the bounded listing query on top of an
async SQLAlchemy session.
"""

import re
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from shopcatalog.catalog.models import Product, ProductImage, build_images

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_uuid(term: str) -> bool:
    """Check whether a term is a canonical UUID string.

    Args:
        term: Lookup term.

    Returns:
        True for the 8-4-4-4-12 hexadecimal form.
    """
    return bool(UUID_PATTERN.match(term))


def lookup_predicate(term: str) -> ColumnElement[bool]:
    """Build the WHERE clause for a lookup term.

    A UUID matches on ``id`` only. Any other term matches the title
    case-insensitively or the slug exactly (lower-cased).

    Args:
        term: Identifier, title or slug.

    Returns:
        SQLAlchemy boolean expression.
    """
    if is_uuid(term):
        return Product.id == str(UUID(term))

    return or_(
        func.upper(Product.title) == term.upper(),
        Product.slug == term.lower(),
    )


class ProductRepository:
    """Repository for Product database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            product = await repo.find_by_term("mens_chill_crew_neck_pullover")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product and its images.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def get_for_update(self, product_id: str) -> Product | None:
        """Load a product with its images and lock the row.

        The lock is a no-op on stores without ``SELECT ... FOR UPDATE``.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        if not is_uuid(product_id):
            return None

        query = (
            select(Product)
            .where(Product.id == str(UUID(product_id)))
            .options(selectinload(Product.images))
            .with_for_update(of=Product)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_by_term(self, term: str) -> Product | None:
        """Resolve a term to a single product with its images joined.

        Args:
            term: Identifier, title or slug.

        Returns:
            First matching product in insertion order, None if nothing matches.
        """
        query = (
            select(Product)
            .where(lookup_predicate(term))
            .options(joinedload(Product.images))
            .order_by(Product.created_at, Product.id)
        )
        result = await self.session.execute(query)
        products = result.unique().scalars().all()
        return products[0] if products else None

    async def find_all(self, limit: int = 10, offset: int = 0) -> Sequence[Product]:
        """Fetch a page of products in insertion order.

        Args:
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Sequence of products with images loaded.
        """
        query = (
            select(Product)
            .options(selectinload(Product.images))
            .order_by(Product.created_at, Product.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def replace_images(self, product: Product, urls: list[str]) -> None:
        """Discard every image of a product and attach new ones.

        The old images are deleted before the new ones are inserted. Must run
        inside the caller's transaction.

        Args:
            product: Product with its images loaded.
            urls: New image URLs in display order.
        """
        product.images.clear()
        await self.session.flush()

        product.images.extend(build_images(urls))

    async def delete(self, product: Product) -> None:
        """Delete a product; its images go with it.

        Args:
            product: Product to delete.
        """
        await self.session.delete(product)
        await self.session.flush()

    async def delete_all(self) -> int:
        """Delete every product and image.

        Returns:
            Number of deleted products.
        """
        await self.session.execute(delete(ProductImage))
        result = await self.session.execute(delete(Product))
        return result.rowcount
