"""Pagination helpers for list endpoints."""

import math
from typing import Any, Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from travelplanner.app.models.trip import CamelModel

T = TypeVar("T")

MAX_PAGE_SIZE = 100


class PageParams(BaseModel):
    """Validated page/pageSize query parameters."""

    page: int = 1
    page_size: int = 25

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def page_params(
    page: int = Query(1, ge=1, description="1-indexed page number"),
    page_size: int = Query(
        25, ge=1, le=MAX_PAGE_SIZE, alias="pageSize", description="Items per page"
    ),
) -> PageParams:
    """FastAPI dependency reading pagination query parameters."""
    return PageParams(page=page, page_size=page_size)


class Pagination(CamelModel):
    page: int
    page_size: int
    page_count: int
    total: int


class Meta(CamelModel):
    pagination: Pagination


class ListEnvelope(BaseModel, Generic[T]):
    """``{data, meta}`` wrapper for collection responses."""

    data: list[T]
    meta: Meta


class ItemEnvelope(BaseModel, Generic[T]):
    """``{data}`` wrapper for single-record responses."""

    data: T


def paginate(
    session: Session, stmt: Select[Any], params: PageParams
) -> tuple[list[Any], Meta]:
    """Run ``stmt`` for one page and describe the page in a Meta block."""
    total = session.execute(
        select(func.count()).select_from(stmt.order_by(None).subquery())
    ).scalar_one()
    rows = list(
        session.execute(stmt.offset(params.offset).limit(params.page_size)).scalars()
    )
    meta = Meta(
        pagination=Pagination(
            page=params.page,
            page_size=params.page_size,
            page_count=max(1, math.ceil(total / params.page_size)),
            total=total,
        )
    )
    return rows, meta
