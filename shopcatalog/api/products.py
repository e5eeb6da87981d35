"""Product API endpoints.

Provides endpoints for the product catalog:
- POST /products - create a product with its images
- GET /products - list products (limit/offset)
- GET /products/{term} - get a product by ID, title or slug
- PATCH /products/{id} - update a product, optionally replacing its images
- DELETE /products/{id} - delete a product and its images
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from shopcatalog.api.schemas import (
    CreateProductRequest,
    ErrorResponse,
    MessageResponse,
    ProductResponse,
    UpdateProductRequest,
)
from shopcatalog.catalog.service import (
    CatalogService,
    PaginationParams,
    ProductChanges,
    ProductDraft,
)
from shopcatalog.domain.exceptions import (
    CatalogError,
    ProductConflictError,
    ProductNotFoundError,
)
from shopcatalog.infrastructure.config import settings
from shopcatalog.infrastructure.database import async_session_factory

router = APIRouter(prefix="/products", tags=["Products"])

# Fields that may be cleared with an explicit null
NULLABLE_FIELDS = {"description"}


# ============================================================================
# Dependencies
# ============================================================================


def get_catalog_service() -> CatalogService:
    """Get catalog service bound to the application session factory."""
    return CatalogService(async_session_factory)


# ============================================================================
# Converters
# ============================================================================


def to_http_error(error: CatalogError) -> HTTPException:
    """Convert a catalog error into an HTTP exception.

    Unexpected errors keep their generic message; their detail was already
    logged by the classifier.
    """
    if isinstance(error, ProductNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
        error_code = "PRODUCT_NOT_FOUND"
    elif isinstance(error, ProductConflictError):
        status_code = status.HTTP_400_BAD_REQUEST
        error_code = "PRODUCT_CONFLICT"
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        error_code = "INTERNAL_ERROR"

    return HTTPException(
        status_code=status_code,
        detail={"error_code": error_code, "message": error.message},
    )


def request_to_changes(request: UpdateProductRequest) -> ProductChanges:
    """Keep only the fields the client actually sent."""
    supplied = request.model_dump(exclude_unset=True)
    return ProductChanges(
        **{
            name: value
            for name, value in supplied.items()
            if value is not None or name in NULLABLE_FIELDS
        }
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create product",
)
async def create_product(
    request: CreateProductRequest,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductResponse:
    """Create a product and its images in one write.

    Raises:
        HTTPException: 400 if title or slug is taken.
    """
    draft = ProductDraft(**request.model_dump())
    try:
        product = await service.create(draft)
    except CatalogError as e:
        raise to_http_error(e) from e

    return ProductResponse(**product)


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List products",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    limit: int = Query(default=settings.default_page_limit, ge=0, description="Page size"),
    offset: int = Query(default=0, ge=0, description="Products to skip"),
) -> list[ProductResponse]:
    """List products in insertion order."""
    try:
        products = await service.find_all(PaginationParams(limit=limit, offset=offset))
    except CatalogError as e:
        raise to_http_error(e) from e

    return [ProductResponse(**product) for product in products]


@router.get(
    "/{term}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
    description="Find a product by UUID, title (case-insensitive) or slug.",
)
async def get_product(
    term: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductResponse:
    """Get a product by ID, title or slug."""
    try:
        product = await service.find_one_plain(term)
    except CatalogError as e:
        raise to_http_error(e) from e

    return ProductResponse(**product)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Update product",
)
async def update_product(
    product_id: UUID,
    request: UpdateProductRequest,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> ProductResponse:
    """Update a product.

    Sending ``images`` replaces the whole image set atomically; omitting it
    leaves the images untouched.
    """
    try:
        product = await service.update(str(product_id), request_to_changes(request))
    except CatalogError as e:
        raise to_http_error(e) from e

    return ProductResponse(**product)


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(
    product_id: UUID,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> MessageResponse:
    """Delete a product together with its images."""
    try:
        message = await service.remove(str(product_id))
    except CatalogError as e:
        raise to_http_error(e) from e

    return MessageResponse(message=message)
