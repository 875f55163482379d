"""
Pydantic schemas for car endpoints.

These models are the validation boundary of the API: requests that fail
size or range checks are rejected with 422 before reaching the service.
JSON payloads use camelCase keys (regNumber, releaseYear, createdAt);
snake_case field names are accepted on input as well.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CarBase(BaseModel):
    """Shared config: camelCase JSON aliases, snake_case names also accepted."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CarCreateRequest(CarBase):
    """
    Request schema for registering a new car.

    Attributes:
        reg_number: Registration number (required, unique, max 32 chars)
        model: Car model name (required, max 100 chars)
        mileage: Odometer reading (optional, >= 0)
        release_year: Year of manufacture (optional, >= 1900)
        owner: Owner name (optional, max 200 chars)
    """
    reg_number: str = Field(
        ...,
        min_length=1,
        max_length=32,
        description="Registration number (unique)"
    )
    model: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Car model name"
    )
    mileage: Optional[int] = Field(default=None, ge=0, description="Odometer reading")
    release_year: Optional[int] = Field(default=None, ge=1900, description="Year of manufacture")
    owner: Optional[str] = Field(default=None, max_length=200, description="Owner name")

    @field_validator("reg_number", "model")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        """Required text fields must contain a non-whitespace character."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "regNumber": "A123BC",
                "model": "Civic",
                "mileage": 120000,
                "releaseYear": 2012,
                "owner": "Alex",
            }
        }
    )


class CarUpdateRequest(CarBase):
    """
    Request schema for a partial car update.

    All fields are optional; a missing or null field leaves the stored
    value unchanged.
    """
    reg_number: Optional[str] = Field(default=None, max_length=32)
    model: Optional[str] = Field(default=None, max_length=100)
    mileage: Optional[int] = Field(default=None, ge=0)
    release_year: Optional[int] = Field(default=None, ge=1900)
    owner: Optional[str] = Field(default=None, max_length=200)


class CarResponse(CarBase):
    """
    Response schema for a stored car.

    Attributes:
        id: Generated identifier
        reg_number: Registration number
        model: Car model name
        created_at: Creation timestamp with UTC offset
        mileage: Odometer reading
        release_year: Year of manufacture
        owner: Owner name
    """
    id: int = Field(..., description="Generated identifier")
    reg_number: str
    model: str
    created_at: datetime = Field(..., description="ISO 8601 timestamp")
    mileage: Optional[int] = None
    release_year: Optional[int] = None
    owner: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
