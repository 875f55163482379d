"""
Car repository for car CRUD operations.

SQLAlchemy implementation of ICarStore. Works on a request-scoped
session: it flushes so generated values are available, but leaves
commit/rollback of the request to the session owner.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import REG_NUMBER_TAKEN, ConflictError
from app.models.car import Car
from app.services.interfaces.car_store import ICarStore


def _is_reg_number_violation(exc: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed: cars.reg_number"
    # PostgreSQL: 'duplicate key value violates unique constraint "uq_cars_reg_number"'
    message = str(exc.orig).lower()
    return "unique" in message and "reg_number" in message


class CarRepository(ICarStore):
    """
    Repository for car data access.

    Attributes:
        session: SQLAlchemy async session for database operations
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists_by_reg_number(self, reg_number: str) -> bool:
        """
        Check if a reg_number is already registered.

        Note:
            Used by the service before create/update to provide a better
            error message than the database constraint violation.
        """
        stmt = select(Car.id).where(Car.reg_number == reg_number).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def find_by_reg_number(self, reg_number: str) -> Optional[Car]:
        stmt = select(Car).where(Car.reg_number == reg_number)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_id(self, car_id: int) -> Optional[Car]:
        stmt = select(Car).where(Car.id == car_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_all_sorted_by_id_desc(self) -> List[Car]:
        stmt = select(Car).order_by(Car.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def save(self, car: Car) -> Car:
        """
        Insert or update a car.

        Args:
            car: New (id is None) or session-attached Car instance

        Returns:
            The same instance refreshed with database-generated fields

        Raises:
            ConflictError: If the reg_number unique constraint fails
            IntegrityError: For any other constraint violation
        """
        self.session.add(car)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            if _is_reg_number_violation(exc):
                raise ConflictError(REG_NUMBER_TAKEN) from exc
            raise

        await self.session.refresh(car)
        return car

    async def exists_by_id(self, car_id: int) -> bool:
        stmt = select(Car.id).where(Car.id == car_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def delete_by_id(self, car_id: int) -> None:
        """
        Delete a car by id.

        Deleting an id that does not exist is a no-op; callers that need
        a 404 check exists_by_id first.
        """
        car = await self.find_by_id(car_id)
        if car is None:
            return
        await self.session.delete(car)
        await self.session.flush()
