"""Trip planning request/response contracts."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveInt,
    model_validator,
)
from pydantic.alias_generators import to_camel

# Finite and strictly positive; JSON Infinity and NaN are rejected
PositiveFiniteFloat = Annotated[float, Field(gt=0, allow_inf_nan=False)]

if TYPE_CHECKING:
    from travelplanner.app.db.models import Destination, Trip


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimeOfDay(str, Enum):
    """Part of the day an activity is scheduled in."""

    morning = "morning"
    afternoon = "afternoon"
    evening = "evening"


class ActivityType(str, Enum):
    """Activity categories the planner may emit."""

    sightseeing = "sightseeing"
    food = "food"
    nature = "nature"
    adventure = "adventure"
    culture = "culture"
    shopping = "shopping"
    other = "other"


class Activity(CamelModel):
    """Single activity within an itinerary day."""

    time_of_day: TimeOfDay
    name: str
    type: ActivityType
    approx_cost: float
    notes: str = ""
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class ItineraryDay(CamelModel):
    """One day of a generated itinerary."""

    day: int = Field(ge=1)
    title: str
    summary: str
    activities: list[Activity] = Field(default_factory=list)


class BudgetBreakdown(CamelModel):
    """Budget split returned alongside the itinerary."""

    currency: str = "USD"
    total: float
    accommodation_per_night: float
    food_per_day: float
    transport_per_day: float
    activities_per_day: float
    notes: str = ""


_NULL_AS_OMITTED = {"interests", "saveTrip", "save_trip"}


class TripRequest(CamelModel):
    """Caller-supplied parameters for generating an itinerary."""

    destination_id: int = Field(description="Destination to plan for")
    budget: PositiveInt | PositiveFiniteFloat = Field(description="Total trip budget")
    duration_days: int = Field(gt=0, description="Trip length in days")
    interests: list[str] = Field(
        default_factory=list, description="Free-text interests, in priority order"
    )
    save_trip: bool = Field(default=False, description="Persist the result as a Trip")
    title: str | None = Field(default=None, description="Trip title when saving")
    start_date: date | None = Field(default=None, description="Required when saving")
    end_date: date | None = Field(default=None, description="Required when saving")

    @model_validator(mode="before")
    @classmethod
    def _nulls_as_omitted(cls, data: Any) -> Any:
        """Treat explicit nulls for optional lists and flags like omitted keys."""
        if isinstance(data, dict):
            data = {
                k: v
                for k, v in data.items()
                if not (v is None and k in _NULL_AS_OMITTED)
            }
        return data

    @model_validator(mode="after")
    def _dates_required_when_saving(self) -> TripRequest:
        """Saving a trip needs both dates, in order."""
        if self.save_trip:
            if self.start_date is None or self.end_date is None:
                raise ValueError(
                    "startDate and endDate are required when saveTrip is true"
                )
            if self.end_date < self.start_date:
                raise ValueError("endDate must be on or after startDate")
        return self


class DestinationRef(CamelModel):
    """Destination echo attached to plan results and trips."""

    id: int
    name: str
    country: str
    latitude: float | None = None
    longitude: float | None = None

    @classmethod
    def from_destination(cls, destination: Destination) -> DestinationRef:
        """Build the echo from a stored destination."""
        coords = destination.coordinates
        return cls(
            id=destination.id,
            name=destination.name,
            country=destination.country,
            latitude=coords[0] if coords else None,
            longitude=coords[1] if coords else None,
        )


class TripResponse(CamelModel):
    """Serialized Trip record."""

    id: int
    title: str
    destination: DestinationRef | None = None
    owner_id: int
    start_date: date
    end_date: date
    duration_days: int | None = None
    total_budget: int | float | None = None
    interests: list[str] | None = None
    itinerary: Any = None
    budget_breakdown: Any = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_trip(cls, trip: Trip) -> TripResponse:
        """Serialize a stored trip with its destination populated."""
        return cls(
            id=trip.id,
            title=trip.title,
            destination=(
                DestinationRef.from_destination(trip.destination)
                if trip.destination is not None
                else None
            ),
            owner_id=trip.owner_id,
            start_date=trip.start_date,
            end_date=trip.end_date,
            duration_days=trip.duration_days,
            total_budget=trip.total_budget,
            interests=trip.interests,
            itinerary=trip.itinerary,
            budget_breakdown=trip.budget_breakdown,
            created_at=trip.created_at,
            updated_at=trip.updated_at,
        )


class PlanResult(CamelModel):
    """Structured itinerary and budget returned by the planner.

    Itinerary and budget are passed through as the model produced them.
    """

    destination: DestinationRef
    duration_days: int
    budget: int | float
    interests: list[str]
    itinerary: Any = None
    budget_breakdown: Any = None
    trip: TripResponse | None = None
