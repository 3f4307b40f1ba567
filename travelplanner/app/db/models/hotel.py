"""Hotel ORM model."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travelplanner.app.db.base import Base
from travelplanner.app.db.mixins import TimestampMixin

if TYPE_CHECKING:
    from .destination import Destination


class Hotel(TimestampMixin, Base):
    """Hotel table - accommodation options for a destination."""

    __tablename__ = "hotel"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    destination_id: Mapped[int | None] = mapped_column(
        ForeignKey("destination.id", ondelete="CASCADE"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    stars: Mapped[int | None] = mapped_column(Integer, nullable=True)
    price_per_night: Mapped[int] = mapped_column(Integer, nullable=False)
    is_budget_friendly: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    short_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)

    destination: Mapped["Destination | None"] = relationship(
        "Destination", back_populates="hotels"
    )

    def __repr__(self) -> str:
        return f"<Hotel(id={self.id}, name={self.name!r})>"
