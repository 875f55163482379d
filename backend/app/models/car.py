"""
Car model, the single record type managed by the registry.
"""

from sqlalchemy import CheckConstraint, Column, Integer, String, UniqueConstraint

from app.models.base import Base, ModelMixin, utc_now_iso


class Car(Base, ModelMixin):
    """
    Car record keyed by a generated integer id.

    Attributes:
        id: Autoincrement primary key, assigned on insert
        reg_number: Registration number (unique business key)
        model: Car model name
        created_at: ISO 8601 UTC timestamp set on insert, never updated
        mileage: Odometer reading (optional, non-negative)
        release_year: Year of manufacture (optional, 1900 or later)
        owner: Owner name (optional)
    """

    __tablename__ = "cars"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Generated primary key"
    )

    reg_number = Column(
        String(32),
        nullable=False,
        doc="Vehicle registration number"
    )

    model = Column(
        String(100),
        nullable=False,
        doc="Car model name"
    )

    created_at = Column(
        String,
        nullable=False,
        default=utc_now_iso,
        doc="UTC timestamp when record was created"
    )

    mileage = Column(Integer, nullable=True)

    release_year = Column(Integer, nullable=True)

    owner = Column(String(200), nullable=True)

    __table_args__ = (
        UniqueConstraint("reg_number", name="uq_cars_reg_number"),
        CheckConstraint("mileage >= 0", name="ck_cars_mileage_non_negative"),
        CheckConstraint("release_year >= 1900", name="ck_cars_release_year_min"),
        # ids of deleted rows are never handed out again
        {"sqlite_autoincrement": True},
    )
