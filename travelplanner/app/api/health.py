"""Health check endpoint for infrastructure status."""

from typing import Literal

from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from travelplanner.app.db.session import get_session_factory


class HealthStatus(BaseModel):
    """Health check response."""

    status: Literal["ok", "down"]
    checks: dict[str, Literal["ok", "down"]]


async def get_health() -> HealthStatus:
    """
    Check health of core infrastructure components.

    Checks:
    - Database: Attempts to execute SELECT 1

    Returns:
        HealthStatus with overall status and individual check results
    """
    checks: dict[str, Literal["ok", "down"]] = {}

    try:
        session_factory = get_session_factory()
        with session_factory() as session:
            session.execute(text("SELECT 1"))
        checks["db"] = "ok"
    except SQLAlchemyError:
        checks["db"] = "down"

    overall_status: Literal["ok", "down"] = (
        "ok" if all(status == "ok" for status in checks.values()) else "down"
    )

    return HealthStatus(status=overall_status, checks=checks)
