"""Destination ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travelplanner.app.db.base import Base
from travelplanner.app.db.mixins import TimestampMixin

if TYPE_CHECKING:
    from .attraction import Attraction
    from .hotel import Hotel
    from .restaurant import Restaurant
    from .trip import Trip


class Destination(TimestampMixin, Base):
    """Destination table - cities users can plan trips to."""

    __tablename__ = "destination"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    country: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    average_daily_budget: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Relationships
    attractions: Mapped[list["Attraction"]] = relationship(
        "Attraction", back_populates="destination", cascade="all, delete-orphan"
    )
    hotels: Mapped[list["Hotel"]] = relationship(
        "Hotel", back_populates="destination", cascade="all, delete-orphan"
    )
    restaurants: Mapped[list["Restaurant"]] = relationship(
        "Restaurant", back_populates="destination", cascade="all, delete-orphan"
    )
    trips: Mapped[list["Trip"]] = relationship("Trip", back_populates="destination")

    @property
    def coordinates(self) -> tuple[float, float] | None:
        """Latitude/longitude pair, or None unless both are known."""
        if self.latitude is None or self.longitude is None:
            return None
        return self.latitude, self.longitude

    def __repr__(self) -> str:
        return f"<Destination(id={self.id}, name={self.name!r}, country={self.country!r})>"
