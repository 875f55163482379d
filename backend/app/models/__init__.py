"""
SQLAlchemy ORM models for the car registry.

Import models from this module to ensure they're registered with SQLAlchemy.
"""

from app.models.base import Base, ModelMixin
from app.models.car import Car

__all__ = [
    "Base",
    "ModelMixin",
    "Car",
]
