"""SQLAlchemy models for product catalog.

Defines Product and ProductImage tables for persistent storage.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from sqlalchemy import (
    JSON,
    CheckConstraint,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopcatalog.infrastructure.database import Base


class Gender(str, Enum):
    """Audience a product is made for."""

    MEN = "men"
    WOMEN = "women"
    KID = "kid"
    UNISEX = "unisex"


def normalize_slug(value: str) -> str:
    """Normalize a title or slug into the stored slug form.

    Lower-cases the value, replaces spaces with underscores and drops
    apostrophes, e.g. "Men's Chill Crew Neck" -> "mens_chill_crew_neck".

    Args:
        value: Raw slug or title.

    Returns:
        Normalized slug.
    """
    return value.lower().replace(" ", "_").replace("'", "")


class Product(Base):
    """Product entity in the catalog.

    A product owns an ordered collection of images; the images have no
    lifecycle of their own and are removed together with the product.

    Attributes:
        id: Unique product identifier (UUID).
        title: Product title (unique).
        slug: URL-safe alternate lookup key (unique).
        price: Price, never negative.
        description: Product description.
        stock: Units in stock, never negative.
        sizes: Ordered list of available sizes.
        gender: Target audience.
        tags: Free-form classification tags.
        images: Owned images, ordered by position.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sizes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    gender: Mapped[Gender] = mapped_column(
        SAEnum(
            Gender,
            name="product_gender",
            native_enum=False,
            length=10,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    images: Mapped[list["ProductImage"]] = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.position",
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, slug={self.slug})>"

    @property
    def image_urls(self) -> list[str]:
        """Image URLs in display order."""
        return [image.url for image in self.images]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the flattened representation.

        Images are resolved to their URLs; image records never leave the
        catalog core.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "price": self.price,
            "description": self.description,
            "stock": self.stock,
            "sizes": list(self.sizes),
            "gender": Gender(self.gender).value,
            "tags": list(self.tags),
            "images": self.image_urls,
        }


class ProductImage(Base):
    """Image owned by a product.

    Attributes:
        id: Auto-incremented image identifier.
        url: Image location.
        position: Zero-based display position within the product.
        product_id: Owning product ID.
    """

    __tablename__ = "product_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    product_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductImage(id={self.id}, url={self.url})>"


def build_images(urls: list[str]) -> list[ProductImage]:
    """Create owned image records for the given URLs, keeping their order.

    Args:
        urls: Image URLs in display order.

    Returns:
        Unsaved image records.
    """
    return [ProductImage(url=url, position=index) for index, url in enumerate(urls)]
