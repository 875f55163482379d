"""
Car endpoints.

CRUD routes for car records. Request bodies are validated by the
Pydantic schemas; service errors are translated to 404/409 here.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from app.api.dependencies import CarServiceDep
from app.core.exceptions import CarServiceError
from app.schemas.car import CarCreateRequest, CarResponse, CarUpdateRequest


router = APIRouter(tags=["cars"])


def _to_http_exception(exc: CarServiceError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@router.post(
    "/cars",
    response_model=CarResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a car",
)
async def create_car(
    request: CarCreateRequest,
    service: CarServiceDep,
) -> CarResponse:
    """
    Register a new car.

    Raises:
        HTTPException 409: If regNumber is already registered
        HTTPException 422: If the request body is invalid
    """
    try:
        return await service.create(request)
    except CarServiceError as e:
        raise _to_http_exception(e)


@router.get(
    "/cars/{car_id}",
    response_model=CarResponse,
    summary="Get car by ID",
)
async def get_car(car_id: int, service: CarServiceDep) -> CarResponse:
    """
    Get a single car.

    Raises:
        HTTPException 404: If the car does not exist
    """
    try:
        return await service.get(car_id)
    except CarServiceError as e:
        raise _to_http_exception(e)


@router.get(
    "/cars",
    response_model=List[CarResponse],
    summary="List cars",
    description="Returns all cars, most recently created first.",
)
async def list_cars(service: CarServiceDep) -> List[CarResponse]:
    return await service.list()


@router.put(
    "/cars/{car_id}",
    response_model=CarResponse,
    summary="Update a car",
    description="Partial update: fields left out or set to null keep their current value.",
)
async def update_car(
    car_id: int,
    request: CarUpdateRequest,
    service: CarServiceDep,
) -> CarResponse:
    """
    Update an existing car.

    Raises:
        HTTPException 404: If the car does not exist
        HTTPException 409: If the new regNumber belongs to another car
        HTTPException 422: If the request body is invalid
    """
    try:
        return await service.update(car_id, request)
    except CarServiceError as e:
        raise _to_http_exception(e)


@router.delete(
    "/cars/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a car",
)
async def delete_car(car_id: int, service: CarServiceDep) -> None:
    """
    Delete a car permanently.

    Raises:
        HTTPException 404: If the car does not exist
    """
    try:
        await service.delete(car_id)
    except CarServiceError as e:
        raise _to_http_exception(e)
