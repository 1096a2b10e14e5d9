"""
Hotel API

Provides CRUD endpoints for Hotels.
"""

from typing import Annotated

from fastapi import APIRouter, Query, Response, status
from fastapi.responses import JSONResponse

from hotel_listing.api.deps import HotelServiceDep
from hotel_listing.common.errors import AppError
from hotel_listing.domain.catalog import HotelCreate, HotelDetail, HotelResponse, HotelUpdate
from hotel_listing.domain.paging import PagedResult, QueryParameters

router = APIRouter(prefix="/hotels", tags=["Hotels"])


@router.get("/all", response_model=list[HotelResponse])
async def list_all_hotels(
    service: HotelServiceDep,
):
    """
    Get all Hotels
    """
    try:
        return await service.list_all()
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.get("", response_model=PagedResult[HotelResponse])
async def list_hotels(
    service: HotelServiceDep,
    query: Annotated[QueryParameters, Query()],
):
    """
    Get Hotel List
    """
    try:
        return await service.list_paged(query)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.get("/{hotel_id}", response_model=HotelDetail)
async def get_hotel(
    hotel_id: int,
    service: HotelServiceDep,
):
    """
    Get single Hotel with its country
    """
    try:
        return await service.get(hotel_id)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.post("", response_model=HotelResponse, status_code=status.HTTP_201_CREATED)
async def create_hotel(
    data: HotelCreate,
    service: HotelServiceDep,
):
    """
    Create Hotel
    """
    try:
        return await service.create(data)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.put("/{hotel_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_hotel(
    hotel_id: int,
    data: HotelUpdate,
    service: HotelServiceDep,
):
    """
    Update Hotel
    """
    try:
        await service.update(hotel_id, data)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.delete("/{hotel_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_hotel(
    hotel_id: int,
    service: HotelServiceDep,
):
    """
    Delete Hotel
    """
    try:
        await service.delete(hotel_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)
