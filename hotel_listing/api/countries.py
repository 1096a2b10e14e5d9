"""
Country API

Provides CRUD endpoints for Countries.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from hotel_listing.api.deps import CountryServiceDep, get_current_user, require_role
from hotel_listing.common.errors import AppError
from hotel_listing.db.seed import ADMINISTRATOR_ROLE
from hotel_listing.domain.catalog import CountryCreate, CountryDetail, CountryResponse, CountryUpdate
from hotel_listing.domain.paging import PagedResult, QueryParameters

router = APIRouter(prefix="/countries", tags=["Countries"])


@router.get("/all", response_model=list[CountryResponse])
async def list_all_countries(
    service: CountryServiceDep,
):
    """
    Get all Countries
    """
    try:
        return await service.list_all()
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.get("", response_model=PagedResult[CountryResponse])
async def list_countries(
    service: CountryServiceDep,
    query: Annotated[QueryParameters, Query()],
):
    """
    Get Country List

    Skips ``start_index`` rows and returns at most ``page_size``.
    """
    try:
        return await service.list_paged(query)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.get("/{country_id}", response_model=CountryDetail)
async def get_country(
    country_id: int,
    service: CountryServiceDep,
):
    """
    Get single Country with its hotels
    """
    try:
        return await service.get(country_id)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.post(
    "",
    response_model=CountryResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_user)],
)
async def create_country(
    data: CountryCreate,
    service: CountryServiceDep,
):
    """
    Create Country
    """
    try:
        return await service.create(data)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.put(
    "/{country_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_current_user)],
)
async def update_country(
    country_id: int,
    data: CountryUpdate,
    service: CountryServiceDep,
):
    """
    Update Country

    Only the fields present in the body are changed.
    """
    try:
        await service.update(country_id, data)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.delete(
    "/{country_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_role(ADMINISTRATOR_ROLE))],
)
async def delete_country(
    country_id: int,
    service: CountryServiceDep,
):
    """
    Delete Country (and its hotels)
    """
    try:
        await service.delete(country_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)
