"""Pydantic contracts for the planning API."""

from .trip import (
    Activity,
    ActivityType,
    BudgetBreakdown,
    CamelModel,
    DestinationRef,
    ItineraryDay,
    PlanResult,
    TimeOfDay,
    TripRequest,
    TripResponse,
)

__all__ = [
    "CamelModel",
    "TimeOfDay",
    "ActivityType",
    "Activity",
    "ItineraryDay",
    "BudgetBreakdown",
    "TripRequest",
    "DestinationRef",
    "TripResponse",
    "PlanResult",
]
