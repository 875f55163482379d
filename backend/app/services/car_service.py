"""
Car service: CRUD orchestration on top of an ICarStore.

Enforces registration number uniqueness, applies partial updates and
turns missing records and duplicate registration numbers into
NotFoundError / ConflictError. Request validation happens earlier, in
the Pydantic schemas.
"""

from typing import List

from app.core.exceptions import (
    CAR_NOT_FOUND,
    REG_NUMBER_TAKEN,
    ConflictError,
    NotFoundError,
)
from app.core.logging_config import get_logger
from app.models.car import Car
from app.schemas.car import CarCreateRequest, CarResponse, CarUpdateRequest
from app.services.interfaces.car_store import ICarStore


logger = get_logger(__name__)


def apply_update(car: Car, request: CarUpdateRequest) -> Car:
    """
    Merge the non-null fields of an update request into a car.

    reg_number is skipped: its assignment depends on the uniqueness
    check done by CarService.update. id and created_at are never
    part of an update request.

    Args:
        car: Car to modify in place
        request: Partial update; None means "leave unchanged"

    Returns:
        The same car instance
    """
    changes = request.model_dump(exclude_none=True, exclude={"reg_number"})
    for field, value in changes.items():
        setattr(car, field, value)
    return car


class CarService:
    """
    Service for car record management.

    Each operation is a single read or write against the store.

    Attributes:
        store: Persistence backend implementing ICarStore
    """

    def __init__(self, store: ICarStore):
        self.store = store

    async def create(self, request: CarCreateRequest) -> CarResponse:
        """
        Register a new car.

        Raises:
            ConflictError: If request.reg_number is already registered
        """
        if await self.store.exists_by_reg_number(request.reg_number):
            logger.warning(
                "Rejected car create: reg_number taken",
                extra={"reg_number": request.reg_number}
            )
            raise ConflictError(REG_NUMBER_TAKEN)

        car = Car(
            reg_number=request.reg_number,
            model=request.model,
            mileage=request.mileage,
            release_year=request.release_year,
            owner=request.owner,
        )
        saved = await self.store.save(car)

        logger.info("Car created", extra={"car_id": saved.id})
        return self.to_response(saved)

    async def get(self, car_id: int) -> CarResponse:
        """
        Fetch a single car.

        Raises:
            NotFoundError: If no car has this id
        """
        car = await self.store.find_by_id(car_id)
        if car is None:
            logger.warning("Car not found", extra={"car_id": car_id})
            raise NotFoundError(CAR_NOT_FOUND)
        return self.to_response(car)

    async def list(self) -> List[CarResponse]:
        """Return all cars, highest id first."""
        cars = await self.store.find_all_sorted_by_id_desc()
        return [self.to_response(car) for car in cars]

    async def update(self, car_id: int, request: CarUpdateRequest) -> CarResponse:
        """
        Partially update a car.

        Only fields set (non-null) in the request are applied. A
        reg_number equal to the current one is accepted without a
        uniqueness lookup.

        Raises:
            NotFoundError: If no car has this id
            ConflictError: If the new reg_number belongs to another car
        """
        car = await self.store.find_by_id(car_id)
        if car is None:
            logger.warning("Car not found", extra={"car_id": car_id})
            raise NotFoundError(CAR_NOT_FOUND)

        if request.reg_number is not None and request.reg_number != car.reg_number:
            if await self.store.exists_by_reg_number(request.reg_number):
                logger.warning(
                    "Rejected car update: reg_number taken",
                    extra={"car_id": car_id, "reg_number": request.reg_number}
                )
                raise ConflictError(REG_NUMBER_TAKEN)
            car.reg_number = request.reg_number

        apply_update(car, request)
        saved = await self.store.save(car)

        logger.info("Car updated", extra={"car_id": car_id})
        return self.to_response(saved)

    async def delete(self, car_id: int) -> None:
        """
        Delete a car permanently.

        Raises:
            NotFoundError: If no car has this id
        """
        if not await self.store.exists_by_id(car_id):
            logger.warning("Car not found", extra={"car_id": car_id})
            raise NotFoundError(CAR_NOT_FOUND)

        await self.store.delete_by_id(car_id)
        logger.info("Car deleted", extra={"car_id": car_id})

    @staticmethod
    def to_response(car: Car) -> CarResponse:
        """Project a stored car onto the response schema."""
        return CarResponse.model_validate(car)
