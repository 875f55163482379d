"""
FastAPI dependency functions.

Builds the per-request object graph explicitly:
database session -> CarRepository -> CarService.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.repositories.car import CarRepository
from app.services.car_service import CarService
from app.services.interfaces.car_store import ICarStore


DatabaseSession = Annotated[AsyncSession, Depends(get_db)]


def get_car_store(db: DatabaseSession) -> ICarStore:
    """
    Dependency to inject the car store.

    Args:
        db: Database session from dependency injection

    Returns:
        CarRepository bound to the request session
    """
    return CarRepository(db)


CarStore = Annotated[ICarStore, Depends(get_car_store)]


def get_car_service(store: CarStore) -> CarService:
    """Dependency to inject CarService with the request's store."""
    return CarService(store)


CarServiceDep = Annotated[CarService, Depends(get_car_service)]
