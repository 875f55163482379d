"""Service interface contracts (ABCs)"""

from app.services.interfaces.car_store import ICarStore

__all__ = [
    'ICarStore',
]
