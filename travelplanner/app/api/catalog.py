"""Read-only catalog endpoints for attractions, hotels and restaurants."""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import ConfigDict
from sqlalchemy import select
from sqlalchemy.orm import Session

from travelplanner.app.api.pagination import (
    ListEnvelope,
    PageParams,
    page_params,
    paginate,
)
from travelplanner.app.db.models import Attraction, Hotel, Restaurant
from travelplanner.app.db.session import get_session
from travelplanner.app.models.trip import CamelModel

router = APIRouter(prefix="/api", tags=["catalog"])


class CatalogItem(CamelModel):
    """Fields shared by every catalog record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    destination_id: int | None = None
    name: str
    slug: str
    short_description: str | None = None
    description: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    created_at: datetime
    updated_at: datetime


class AttractionResponse(CatalogItem):
    category: str
    approximate_cost: int | None = None


class HotelResponse(CatalogItem):
    stars: int | None = None
    price_per_night: int
    is_budget_friendly: bool


class RestaurantResponse(CatalogItem):
    cuisine: str | None = None
    price_level: str
    average_price_per_person: int | None = None


def _list_for_destination(
    session: Session,
    model: type[Any],
    schema: type[CatalogItem],
    destination_id: int | None,
    params: PageParams,
) -> dict[str, Any]:
    stmt = select(model)
    if destination_id is not None:
        stmt = stmt.where(model.destination_id == destination_id)
    stmt = stmt.order_by(model.name, model.id)

    rows, meta = paginate(session, stmt, params)
    return {"data": [schema.model_validate(row) for row in rows], "meta": meta}


@router.get("/attractions", response_model=ListEnvelope[AttractionResponse])
def list_attractions(
    destination_id: int | None = Query(None, alias="destinationId"),
    params: PageParams = Depends(page_params),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    """List attractions, optionally for one destination."""
    return _list_for_destination(
        session, Attraction, AttractionResponse, destination_id, params
    )


@router.get("/hotels", response_model=ListEnvelope[HotelResponse])
def list_hotels(
    destination_id: int | None = Query(None, alias="destinationId"),
    params: PageParams = Depends(page_params),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    """List hotels, optionally for one destination."""
    return _list_for_destination(session, Hotel, HotelResponse, destination_id, params)


@router.get("/restaurants", response_model=ListEnvelope[RestaurantResponse])
def list_restaurants(
    destination_id: int | None = Query(None, alias="destinationId"),
    params: PageParams = Depends(page_params),
    session: Session = Depends(get_session),
) -> dict[str, Any]:
    """List restaurants, optionally for one destination."""
    return _list_for_destination(
        session, Restaurant, RestaurantResponse, destination_id, params
    )
