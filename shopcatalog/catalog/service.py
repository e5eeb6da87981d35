"""Catalog service for product operations.

High-level service that combines repository operations with the write
protocols of the catalog: creating a product with its images, atomically
replacing a product's image set on update, and deleting products.
"""

from dataclasses import dataclass, field, fields
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shopcatalog.catalog.errors import DatabaseErrorClassifier
from shopcatalog.catalog.models import Gender, Product, build_images, normalize_slug
from shopcatalog.catalog.repository import ProductRepository
from shopcatalog.domain.exceptions import DomainError, ProductNotFoundError

logger = structlog.get_logger()


class _Unset:
    """Marker type for fields absent from a partial update."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass
class ProductDraft:
    """Fields for a new product.

    Attributes:
        title: Product title.
        sizes: Available sizes, in order.
        gender: Target audience.
        price: Price, defaults to 0.
        description: Optional description.
        slug: Optional slug; derived from the title when absent.
        stock: Units in stock, defaults to 0.
        tags: Classification tags.
        images: Image URLs, in display order.
    """

    title: str
    sizes: list[str]
    gender: Gender
    price: float = 0
    description: str | None = None
    slug: str | None = None
    stock: int = 0
    tags: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)


@dataclass
class ProductChanges:
    """Partial update of a product.

    Every field defaults to ``UNSET``; only fields that were supplied are
    merged onto the stored row. ``images``, when supplied, replaces the whole
    image set (an empty list removes all images).
    """

    title: str = UNSET
    sizes: list[str] = UNSET
    gender: Gender = UNSET
    price: float = UNSET
    description: str | None = UNSET
    slug: str = UNSET
    stock: int = UNSET
    tags: list[str] = UNSET
    images: list[str] = UNSET

    def scalar_values(self) -> dict[str, Any]:
        """Get the supplied scalar fields.

        Returns:
            Mapping of field name to new value, images excluded.
        """
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "images" and getattr(self, f.name) is not UNSET
        }

    @property
    def has_images(self) -> bool:
        """Whether the image set is to be replaced."""
        return self.images is not UNSET


@dataclass
class PaginationParams:
    """Pagination parameters.

    Attributes:
        limit: Maximum number of products to return.
        offset: Number of products to skip.
    """

    limit: int = 10
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"limit must not be negative, got {self.limit}")
        if self.offset < 0:
            raise ValueError(f"offset must not be negative, got {self.offset}")


class CatalogService:
    """Service for catalog operations.

    Each operation opens its own session and releases it before returning;
    the service holds no per-request state.

    Example usage:
        service = CatalogService(async_session_factory)

        product = await service.create(
            ProductDraft(title="Shirt", sizes=["M"], gender=Gender.MEN)
        )
        await service.update(product["id"], ProductChanges(images=["1.jpg"]))
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        errors: DatabaseErrorClassifier | None = None,
    ) -> None:
        """Initialize service.

        Args:
            session_factory: Factory for async sessions.
            errors: Classifier for store failures.
        """
        self.session_factory = session_factory
        self.errors = errors or DatabaseErrorClassifier()

    async def create(self, draft: ProductDraft) -> dict[str, Any]:
        """Create a product together with its images.

        Args:
            draft: Product fields and image URLs.

        Returns:
            Flattened product.

        Raises:
            ProductConflictError: If title or slug is already taken.
            UnexpectedServerError: For any other store failure.
        """
        try:
            product = Product(
                title=draft.title,
                slug=normalize_slug(draft.slug or draft.title),
                price=draft.price,
                description=draft.description,
                stock=draft.stock,
                sizes=list(draft.sizes),
                gender=Gender(draft.gender),
                tags=list(draft.tags),
                images=build_images(draft.images),
            )
            async with self.session_factory() as session:
                async with session.begin():
                    await ProductRepository(session).save(product)
        except Exception as e:
            self.errors.raise_for(e)

        logger.info(
            "Product created",
            product_id=product.id,
            slug=product.slug,
            image_count=len(draft.images),
        )
        return product.to_dict()

    async def find_all(
        self, pagination: PaginationParams | None = None
    ) -> list[dict[str, Any]]:
        """List a page of products.

        Offset paging may shift under concurrent writes.

        Args:
            pagination: Limit and offset, defaults to the first 10.

        Returns:
            Flattened products in insertion order.
        """
        pagination = pagination or PaginationParams()

        try:
            async with self.session_factory() as session:
                products = await ProductRepository(session).find_all(
                    limit=pagination.limit,
                    offset=pagination.offset,
                )
        except Exception as e:
            self.errors.raise_for(e)

        return [product.to_dict() for product in products]

    async def find_one(self, term: str) -> Product:
        """Find a product by ID, title or slug.

        Args:
            term: UUID, title (any case) or slug.

        Returns:
            Product with its images loaded.

        Raises:
            ProductNotFoundError: If no product matches.
        """
        async with self.session_factory() as session:
            product = await ProductRepository(session).find_by_term(term)

        if product is None:
            raise ProductNotFoundError(term)

        return product

    async def find_one_plain(self, term: str) -> dict[str, Any]:
        """Find a product and flatten its images to URLs.

        Args:
            term: UUID, title (any case) or slug.

        Returns:
            Flattened product.

        Raises:
            ProductNotFoundError: If no product matches.
        """
        product = await self.find_one(term)
        return product.to_dict()

    async def update(self, product_id: str, changes: ProductChanges) -> dict[str, Any]:
        """Merge partial changes into a product, optionally replacing its images.

        The row is read and locked inside the transaction, so a product
        deleted concurrently is reported as not found rather than written.
        Image replacement is all or nothing: readers see the old set until
        the commit and the new set afterwards.

        Args:
            product_id: Product ID.
            changes: Supplied fields and optional replacement image URLs.

        Returns:
            Flattened product as re-read after the commit.

        Raises:
            ProductNotFoundError: If the product does not exist.
            ProductConflictError: If the new title or slug is already taken.
            UnexpectedServerError: For any other failure; nothing is written.
        """
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    repository = ProductRepository(session)
                    product = await repository.get_for_update(product_id)
                    if product is None:
                        raise ProductNotFoundError(product_id)

                    if changes.has_images:
                        await repository.replace_images(product, list(changes.images))

                    for name, value in changes.scalar_values().items():
                        if name == "slug":
                            value = normalize_slug(value)
                        elif name == "gender":
                            value = Gender(value)
                        elif name in ("sizes", "tags"):
                            value = list(value)
                        setattr(product, name, value)

                    await repository.save(product)
        except DomainError:
            raise
        except Exception as e:
            self.errors.raise_for(e)

        logger.info(
            "Product updated",
            product_id=product_id,
            fields=sorted(changes.scalar_values()),
            images_replaced=changes.has_images,
        )
        return await self.find_one_plain(product_id)

    async def remove(self, term: str) -> str:
        """Delete a product and its images.

        Args:
            term: Product ID (titles and slugs are accepted too).

        Returns:
            Confirmation message.

        Raises:
            ProductNotFoundError: If no product matches.
            UnexpectedServerError: If the store fails.
        """
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    repository = ProductRepository(session)
                    product = await repository.find_by_term(term)
                    if product is None:
                        raise ProductNotFoundError(term)
                    product_id = product.id
                    await repository.delete(product)
        except DomainError:
            raise
        except Exception as e:
            self.errors.raise_for(e)

        logger.info("Product deleted", product_id=product_id, term=term)
        return f"Product with id {term} deleted"

    async def delete_all_products(self) -> int:
        """Delete every product and image.

        Returns:
            Number of deleted products.
        """
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    deleted = await ProductRepository(session).delete_all()
        except Exception as e:
            self.errors.raise_for(e)

        logger.info("All products deleted", deleted=deleted)
        return deleted
