"""
Base models and mixins for SQLAlchemy ORM.

Provides the declarative base, a timestamp helper and common
utilities for all database models.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import declarative_base


# SQLAlchemy declarative base for all ORM models
Base = declarative_base()


def utc_now_iso() -> str:
    """
    Get current UTC timestamp in ISO format.

    Returns:
        ISO format timestamp string with offset
        (e.g., "2025-01-15T10:30:45.123456+00:00")

    Note:
        Timestamps are stored as TEXT so SQLite keeps the offset.
    """
    return datetime.now(timezone.utc).isoformat()


class ModelMixin:
    """
    Mixin providing common model utilities.

    Adds helper methods for serialization and representation.
    """

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to dictionary.

        Returns:
            Dictionary with all column values

        Note:
            Only includes columns, not relationships.
        """
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
            if key in ["id", "reg_number", "model"]
        )
        return f"{self.__class__.__name__}({attrs})"
