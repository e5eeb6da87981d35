"""Product Catalog.

Stores products with their owned images and provides lookup, paginated
listing, atomic updates and seeding.
"""

from shopcatalog.catalog.errors import DatabaseErrorClassifier
from shopcatalog.catalog.models import Gender, Product, ProductImage
from shopcatalog.catalog.repository import ProductRepository, is_uuid, lookup_predicate
from shopcatalog.catalog.seed import SeedService
from shopcatalog.catalog.service import (
    UNSET,
    CatalogService,
    PaginationParams,
    ProductChanges,
    ProductDraft,
)

__all__ = [
    # Models
    "Gender",
    "Product",
    "ProductImage",
    # Repository
    "ProductRepository",
    "is_uuid",
    "lookup_predicate",
    # Errors
    "DatabaseErrorClassifier",
    # Service
    "UNSET",
    "CatalogService",
    "PaginationParams",
    "ProductChanges",
    "ProductDraft",
    # Seeding
    "SeedService",
]
