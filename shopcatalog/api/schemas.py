"""API schemas for the Shop Catalog API.

Pydantic models for request/response validation and serialization.
"""

from pydantic import BaseModel, Field

from shopcatalog.catalog.models import Gender


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class CreateProductRequest(BaseModel):
    """Request to create a product."""

    title: str = Field(..., min_length=1, description="Product title")
    price: float = Field(default=0, ge=0, description="Price")
    description: str | None = Field(default=None, description="Product description")
    slug: str | None = Field(
        default=None, min_length=1, description="Slug, derived from the title if omitted"
    )
    stock: int = Field(default=0, ge=0, description="Units in stock")
    sizes: list[str] = Field(..., description="Available sizes")
    gender: Gender = Field(..., description="Target audience")
    tags: list[str] = Field(default_factory=list, description="Classification tags")
    images: list[str] = Field(default_factory=list, description="Image URLs")


class UpdateProductRequest(BaseModel):
    """Partial product update.

    Omitted fields are left untouched. ``images``, when present, replaces
    the whole image set.
    """

    title: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    slug: str | None = Field(default=None, min_length=1)
    stock: int | None = Field(default=None, ge=0)
    sizes: list[str] | None = None
    gender: Gender | None = None
    tags: list[str] | None = None
    images: list[str] | None = None


class ProductResponse(BaseModel):
    """Product with its images flattened to URLs."""

    id: str
    title: str
    slug: str
    price: float
    description: str | None = None
    stock: int
    sizes: list[str]
    gender: Gender
    tags: list[str]
    images: list[str]


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
