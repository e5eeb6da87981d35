"""Seed endpoint.

Resets the catalog to the built-in seed products.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from shopcatalog.api.products import get_catalog_service, to_http_error
from shopcatalog.api.schemas import ErrorResponse, MessageResponse
from shopcatalog.catalog.seed import SeedService
from shopcatalog.catalog.service import CatalogService
from shopcatalog.domain.exceptions import CatalogError

router = APIRouter(prefix="/seed", tags=["Seed"])


def get_seed_service(
    catalog: Annotated[CatalogService, Depends(get_catalog_service)],
) -> SeedService:
    """Get seed service on top of the catalog service."""
    return SeedService(catalog)


@router.get(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    responses={500: {"model": ErrorResponse}},
    summary="Seed catalog",
    description="Delete every product and insert the seed products.",
)
async def run_seed(
    service: Annotated[SeedService, Depends(get_seed_service)],
) -> MessageResponse:
    """Run the catalog seed.

    Raises:
        HTTPException: If the store fails.
    """
    try:
        message = await service.run_seed()
    except CatalogError as e:
        raise to_http_error(e) from e

    return MessageResponse(message=message)
