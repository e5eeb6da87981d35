"""Domain layer.

Error taxonomy shared by the catalog core and the API layer.
"""

from shopcatalog.domain.exceptions import (
    CatalogError,
    DomainError,
    ProductConflictError,
    ProductNotFoundError,
    UnexpectedServerError,
)

__all__ = [
    "CatalogError",
    "DomainError",
    "ProductConflictError",
    "ProductNotFoundError",
    "UnexpectedServerError",
]
