"""Trip ORM model."""

from datetime import date
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Date, Float, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travelplanner.app.db.base import Base
from travelplanner.app.db.mixins import TimestampMixin

if TYPE_CHECKING:
    from .destination import Destination
    from .user import User


class Trip(TimestampMixin, Base):
    """Trip table - saved itineraries, each owned by exactly one user."""

    __tablename__ = "trip"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    destination_id: Mapped[int] = mapped_column(
        ForeignKey("destination.id", ondelete="CASCADE"), nullable=False
    )
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("user.id", ondelete="CASCADE"), nullable=False
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    duration_days: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_budget: Mapped[float | None] = mapped_column(Float, nullable=True)
    interests: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    itinerary: Mapped[Any] = mapped_column(JSON, nullable=True)
    budget_breakdown: Mapped[Any] = mapped_column(JSON, nullable=True)

    # Relationships
    destination: Mapped["Destination"] = relationship(
        "Destination", back_populates="trips"
    )
    owner: Mapped["User"] = relationship("User", back_populates="trips")

    __table_args__ = (Index("idx_trip_owner_created", "owner_id", "created_at"),)

    def __repr__(self) -> str:
        return f"<Trip(id={self.id}, title={self.title!r}, owner_id={self.owner_id})>"
