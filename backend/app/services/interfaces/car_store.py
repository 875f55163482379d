"""
Car Store Interface (ICarStore)

Abstract base class defining the persistence capabilities the car
service depends on.

Implementation guide:
- All methods must be async
- save() inserts when car.id is None and updates in place otherwise
- Uniqueness of reg_number is checked by the service; implementations
  backed by a database should also enforce it with a unique constraint
  and raise ConflictError when it fires
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.models.car import Car


class ICarStore(ABC):
    """
    Abstract interface for car record storage.

    The store owns the authoritative copy of every car. Ids are
    generated by the store on insert and never reused.
    """

    @abstractmethod
    async def exists_by_reg_number(self, reg_number: str) -> bool:
        """
        Check whether any car has the given registration number.

        Args:
            reg_number: Registration number to look up

        Returns:
            True if a car with this registration number exists
        """
        pass

    @abstractmethod
    async def find_by_reg_number(self, reg_number: str) -> Optional[Car]:
        """
        Retrieve a car by registration number.

        Returns:
            Car instance if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id(self, car_id: int) -> Optional[Car]:
        """
        Retrieve a car by id.

        Returns:
            Car instance if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_sorted_by_id_desc(self) -> List[Car]:
        """
        Return every car, newest id first.
        """
        pass

    @abstractmethod
    async def save(self, car: Car) -> Car:
        """
        Persist a car.

        Inserts when ``car.id`` is None, otherwise writes the changed
        fields of the existing record.

        Args:
            car: Car instance to persist

        Returns:
            The persisted car, including generated id and created_at

        Raises:
            ConflictError: If the registration number is already taken
        """
        pass

    @abstractmethod
    async def exists_by_id(self, car_id: int) -> bool:
        """
        Check whether a car with the given id exists.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, car_id: int) -> None:
        """
        Permanently delete the car with the given id.
        """
        pass
