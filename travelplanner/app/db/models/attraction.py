"""Attraction ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travelplanner.app.db.base import Base
from travelplanner.app.db.mixins import TimestampMixin

if TYPE_CHECKING:
    from .destination import Destination

ATTRACTION_CATEGORIES = (
    "sightseeing",
    "food",
    "nature",
    "adventure",
    "culture",
    "shopping",
)


class Attraction(TimestampMixin, Base):
    """Attraction table - points of interest within a destination."""

    __tablename__ = "attraction"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    destination_id: Mapped[int | None] = mapped_column(
        ForeignKey("destination.id", ondelete="CASCADE"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    category: Mapped[str] = mapped_column(Text, nullable=False, default="sightseeing")
    short_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    approximate_cost: Mapped[int | None] = mapped_column(Integer, nullable=True)

    destination: Mapped["Destination | None"] = relationship(
        "Destination", back_populates="attractions"
    )

    def __repr__(self) -> str:
        return f"<Attraction(id={self.id}, name={self.name!r})>"
