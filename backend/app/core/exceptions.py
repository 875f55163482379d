"""
Service-level exceptions.

Business-state errors raised by the car service (and by the repository
when the database unique constraint catches a duplicate). Each carries
the HTTP status code the API layer responds with.
"""

CAR_NOT_FOUND = "Car not found"
REG_NUMBER_TAKEN = "Car with regNumber already exists"


class CarServiceError(Exception):
    """Base class for predictable car service errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CarServiceError):
    """Raised when an id does not resolve to an existing car."""

    status_code = 404


class ConflictError(CarServiceError):
    """Raised when a registration number is already taken."""

    status_code = 409


__all__ = [
    "CAR_NOT_FOUND",
    "REG_NUMBER_TAKEN",
    "CarServiceError",
    "NotFoundError",
    "ConflictError",
]
