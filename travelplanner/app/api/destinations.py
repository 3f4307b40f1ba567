"""Destinations API endpoints."""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ConfigDict, Field
from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from travelplanner.app.api.auth import CurrentUser, get_current_user
from travelplanner.app.api.catalog import (
    AttractionResponse,
    HotelResponse,
    RestaurantResponse,
)
from travelplanner.app.api.pagination import (
    ItemEnvelope,
    ListEnvelope,
    PageParams,
    page_params,
    paginate,
)
from travelplanner.app.db.models.destination import Destination
from travelplanner.app.db.session import get_session
from travelplanner.app.db.slugs import unique_slug
from travelplanner.app.models.trip import CamelModel

router = APIRouter(prefix="/api/destinations", tags=["destinations"])


class DestinationResponse(CamelModel):
    """Destination without related records."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    slug: str
    country: str
    description: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    average_daily_budget: int | None = None
    created_at: datetime
    updated_at: datetime


class DestinationDetailResponse(DestinationResponse):
    """Destination with attractions, hotels and restaurants populated."""

    attractions: list[AttractionResponse] = []
    hotels: list[HotelResponse] = []
    restaurants: list[RestaurantResponse] = []


class CreateDestinationRequest(CamelModel):
    """Request to create a new destination."""

    name: str = Field(..., min_length=1, max_length=200)
    country: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    average_daily_budget: int | None = Field(None, ge=0)


@router.get("", response_model=ListEnvelope[DestinationResponse])
def list_destinations(
    search: str | None = Query(None, description="Search by name or country"),
    params: PageParams = Depends(page_params),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    """List destinations with optional search."""
    stmt = select(Destination)

    if search:
        search_lower = f"%{search.lower()}%"
        stmt = stmt.where(
            (func.lower(Destination.name).like(search_lower))
            | (func.lower(Destination.country).like(search_lower))
        )

    stmt = stmt.order_by(Destination.name, Destination.id)
    rows, meta = paginate(session, stmt, params)

    return {
        "data": [DestinationResponse.model_validate(dest) for dest in rows],
        "meta": meta,
    }


@router.get("/{destination_id}", response_model=ItemEnvelope[DestinationDetailResponse])
def get_destination(
    destination_id: int,
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    """Get one destination with its attractions, hotels and restaurants."""
    stmt = (
        select(Destination)
        .where(Destination.id == destination_id)
        .options(
            selectinload(Destination.attractions),
            selectinload(Destination.hotels),
            selectinload(Destination.restaurants),
        )
    )
    destination = session.execute(stmt).scalar_one_or_none()

    if not destination:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Destination not found",
        )

    return {"data": DestinationDetailResponse.model_validate(destination)}


@router.post(
    "",
    response_model=ItemEnvelope[DestinationResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_destination(
    request: CreateDestinationRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    """Create a new destination."""
    existing = session.execute(
        select(Destination).where(
            func.lower(Destination.name) == request.name.lower(),
            func.lower(Destination.country) == request.country.lower(),
        )
    ).scalar_one_or_none()

    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Destination already exists",
        )

    destination = Destination(
        name=request.name,
        slug=unique_slug(session, Destination, request.name),
        country=request.country,
        description=request.description,
        latitude=request.latitude,
        longitude=request.longitude,
        average_daily_budget=request.average_daily_budget,
    )

    session.add(destination)
    session.commit()
    session.refresh(destination)

    return {"data": DestinationResponse.model_validate(destination)}
