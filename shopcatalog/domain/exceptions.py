"""Domain exceptions.

All catalog-level errors the core reports to its callers. The API layer
translates them into HTTP responses; nothing below it knows about HTTP.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog-related errors."""

    pass


class ProductNotFoundError(CatalogError):
    """Raised when a lookup, update or delete target does not exist."""

    def __init__(self, term: str) -> None:
        """Initialize product not found error.

        Args:
            term: Identifier, title or slug used for the lookup.
        """
        super().__init__(
            f"Product with term {term} not found",
            details={"term": term},
        )


class ProductConflictError(CatalogError):
    """Raised when a write violates a uniqueness constraint.

    The message is the store's own detail text and is safe to show to callers.
    """

    def __init__(self, detail: str) -> None:
        """Initialize product conflict error.

        Args:
            detail: Human-readable detail reported by the store.
        """
        super().__init__(detail, details={"detail": detail})


class UnexpectedServerError(CatalogError):
    """Raised for any store failure that is not a classified conflict.

    Carries no internal detail; the original error is logged and chained.
    """

    def __init__(self) -> None:
        """Initialize unexpected server error."""
        super().__init__("Unexpected error check server logs")
