"""Restaurant ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travelplanner.app.db.base import Base
from travelplanner.app.db.mixins import TimestampMixin

if TYPE_CHECKING:
    from .destination import Destination

PRICE_LEVELS = ("budget", "midrange", "luxury")


class Restaurant(TimestampMixin, Base):
    """Restaurant table - food places for a destination."""

    __tablename__ = "restaurant"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    destination_id: Mapped[int | None] = mapped_column(
        ForeignKey("destination.id", ondelete="CASCADE"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    cuisine: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_level: Mapped[str] = mapped_column(Text, nullable=False, default="midrange")
    short_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    average_price_per_person: Mapped[int | None] = mapped_column(
        Integer, nullable=True
    )

    destination: Mapped["Destination | None"] = relationship(
        "Destination", back_populates="restaurants"
    )

    def __repr__(self) -> str:
        return f"<Restaurant(id={self.id}, name={self.name!r})>"
