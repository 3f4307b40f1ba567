"""Trip endpoints: owner-scoped CRUD and AI itinerary planning."""

from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import Field, model_validator
from sqlalchemy import select
from sqlalchemy.orm import Session

from travelplanner.app.api.auth import CurrentUser, get_current_user, get_optional_user
from travelplanner.app.api.pagination import (
    ItemEnvelope,
    ListEnvelope,
    PageParams,
    page_params,
    paginate,
)
from travelplanner.app.db.models import Destination, Trip
from travelplanner.app.db.session import get_session
from travelplanner.app.models.trip import CamelModel, PlanResult, TripResponse
from travelplanner.app.planning import (
    CompletionClient,
    PlanningError,
    get_completion_client,
    run_plan,
)
from travelplanner.app.security import is_owner

router = APIRouter(prefix="/api/trips", tags=["trips"])

# Fields an update may set back to null
_CLEARABLE_FIELDS = {
    "duration_days",
    "total_budget",
    "interests",
    "itinerary",
    "budget_breakdown",
}


class TripCreateRequest(CamelModel):
    """Request to store a trip directly, without generating it."""

    title: str = Field(..., min_length=1, max_length=300)
    destination_id: int
    start_date: date
    end_date: date
    duration_days: int | None = Field(None, gt=0)
    total_budget: float | None = Field(None, gt=0)
    interests: list[str] | None = None
    itinerary: Any = None
    budget_breakdown: Any = None

    @model_validator(mode="after")
    def _end_after_start(self) -> "TripCreateRequest":
        if self.end_date < self.start_date:
            raise ValueError("endDate must be on or after startDate")
        return self


class TripUpdateRequest(CamelModel):
    """Partial update of a stored trip. Ownership cannot be changed."""

    title: str | None = Field(None, min_length=1, max_length=300)
    destination_id: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    duration_days: int | None = Field(None, gt=0)
    total_budget: float | None = Field(None, gt=0)
    interests: list[str] | None = None
    itinerary: Any = None
    budget_breakdown: Any = None


def _require_destination(session: Session, destination_id: int) -> Destination:
    destination = session.get(Destination, destination_id)
    if destination is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Destination not found",
        )
    return destination


def _load_owned_trip(
    session: Session, trip_id: int, current_user: CurrentUser, action: str
) -> Trip:
    """Fetch a trip and check the caller owns it.

    Raises:
        HTTPException: 404 if the trip does not exist, 403 if owned by someone else
    """
    trip = session.get(Trip, trip_id)
    if trip is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found",
        )
    if not is_owner(trip, current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"You can only {action} your own trips",
        )
    return trip


@router.post(
    "/plan",
    response_model=PlanResult,
    response_model_exclude_none=True,
)
async def plan_trip(
    payload: dict[str, Any] = Body(...),
    current_user: CurrentUser | None = Depends(get_optional_user),
    session: Session = Depends(get_session),
    completion: CompletionClient = Depends(get_completion_client),
) -> PlanResult:
    """Generate an itinerary and budget for a destination.

    Public endpoint; a bearer token is required only when ``saveTrip`` is
    true, in which case the result is also stored as a Trip owned by the
    caller.
    """
    try:
        return await run_plan(payload, current_user, session, completion)
    except PlanningError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.get("", response_model=ListEnvelope[TripResponse])
def list_trips(
    params: PageParams = Depends(page_params),
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    """List the caller's trips, newest first."""
    stmt = (
        select(Trip)
        .where(Trip.owner_id == current_user.id)
        .order_by(Trip.created_at.desc(), Trip.id.desc())
    )
    rows, meta = paginate(session, stmt, params)
    return {"data": [TripResponse.from_trip(trip) for trip in rows], "meta": meta}


@router.get("/{trip_id}", response_model=ItemEnvelope[TripResponse])
def get_trip(
    trip_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    """Get one of the caller's trips."""
    trip = _load_owned_trip(session, trip_id, current_user, "access")
    return {"data": TripResponse.from_trip(trip)}


@router.post(
    "",
    response_model=ItemEnvelope[TripResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_trip(
    request: TripCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    """Store a trip owned by the caller."""
    _require_destination(session, request.destination_id)

    trip = Trip(
        title=request.title,
        destination_id=request.destination_id,
        owner_id=current_user.id,
        start_date=request.start_date,
        end_date=request.end_date,
        duration_days=request.duration_days,
        total_budget=request.total_budget,
        interests=request.interests,
        itinerary=request.itinerary,
        budget_breakdown=request.budget_breakdown,
    )
    session.add(trip)
    session.commit()
    session.refresh(trip)

    return {"data": TripResponse.from_trip(trip)}


@router.put("/{trip_id}", response_model=ItemEnvelope[TripResponse])
def update_trip(
    trip_id: int,
    request: TripUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    """Update one of the caller's trips."""
    trip = _load_owned_trip(session, trip_id, current_user, "update")

    changes = {
        field: value
        for field, value in request.model_dump(exclude_unset=True).items()
        if value is not None or field in _CLEARABLE_FIELDS
    }
    if changes.get("destination_id") is not None:
        _require_destination(session, changes["destination_id"])

    for field, value in changes.items():
        setattr(trip, field, value)

    if trip.end_date < trip.start_date:
        session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="endDate must be on or after startDate",
        )

    session.commit()
    session.refresh(trip)

    return {"data": TripResponse.from_trip(trip)}


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_trip(
    trip_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
) -> None:
    """Delete one of the caller's trips."""
    trip = _load_owned_trip(session, trip_id, current_user, "delete")
    session.delete(trip)
    session.commit()
