"""Shape extracted itineraries into plan results and saved trips."""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from travelplanner.app.db.models import Destination, Trip
from travelplanner.app.models.trip import (
    BudgetBreakdown,
    DestinationRef,
    ItineraryDay,
    PlanResult,
    TripRequest,
)

logger = logging.getLogger(__name__)

_ITINERARY = TypeAdapter(list[ItineraryDay])


def default_trip_title(destination_name: str, duration_days: int, budget: int | float) -> str:
    """Title used for saved trips when the caller gives none."""
    return f"Trip to {destination_name} ({duration_days} days, budget {budget})"


def assemble_plan_result(
    request: TripRequest, destination: Destination, parsed: dict[str, Any]
) -> PlanResult:
    """Merge the request and destination with the model's itinerary and budget.

    Destination, duration, budget and interests always come from the request,
    never from the model output.
    """
    return PlanResult(
        destination=DestinationRef.from_destination(destination),
        duration_days=request.duration_days,
        budget=request.budget,
        interests=list(request.interests),
        itinerary=parsed.get("itinerary"),
        budget_breakdown=parsed.get("budgetBreakdown"),
    )


def persist_trip(
    session: Session,
    request: TripRequest,
    destination: Destination,
    parsed: dict[str, Any],
    owner_id: int,
) -> Trip:
    """Create a Trip owned by ``owner_id``. Every call creates a new record."""
    trip = Trip(
        title=request.title
        or default_trip_title(destination.name, request.duration_days, request.budget),
        destination_id=destination.id,
        owner_id=owner_id,
        start_date=request.start_date,
        end_date=request.end_date,
        duration_days=request.duration_days,
        total_budget=request.budget,
        interests=list(request.interests),
        itinerary=parsed.get("itinerary"),
        budget_breakdown=parsed.get("budgetBreakdown"),
    )
    session.add(trip)
    session.commit()
    session.refresh(trip)

    logger.info(
        "trip_saved",
        extra={"trip_id": trip.id, "owner_id": owner_id, "destination_id": destination.id},
    )
    return trip


def find_schema_issues(parsed: dict[str, Any]) -> list[str]:
    """List places where ``parsed`` departs from the requested output shape.

    Informational only: results are never rejected because of these.
    """
    issues: list[str] = []

    if "itinerary" not in parsed:
        issues.append("itinerary: missing")
    else:
        try:
            _ITINERARY.validate_python(parsed["itinerary"])
        except ValidationError as e:
            issues.extend(_format_errors("itinerary", e))

    if "budgetBreakdown" not in parsed:
        issues.append("budgetBreakdown: missing")
    else:
        try:
            BudgetBreakdown.model_validate(parsed["budgetBreakdown"])
        except ValidationError as e:
            issues.extend(_format_errors("budgetBreakdown", e))

    return issues


def _format_errors(prefix: str, error: ValidationError) -> list[str]:
    return [
        ".".join([prefix, *(str(part) for part in err["loc"])]) + f": {err['msg']}"
        for err in error.errors()
    ]
