"""FastAPI application factory."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from travelplanner.app.api.auth import router as auth_router
from travelplanner.app.api.auth import users_router
from travelplanner.app.api.catalog import router as catalog_router
from travelplanner.app.api.destinations import router as destinations_router
from travelplanner.app.api.health import get_health
from travelplanner.app.api.trips import router as trips_router
from travelplanner.app.config import get_settings
from travelplanner.app.db.base import Base
from travelplanner.app.db.session import get_engine
from travelplanner.app.security import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    root.setLevel(level.upper())


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(create_tables: bool = True) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        create_tables: Create missing tables on startup (development databases)

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Travel Planner API",
        description="Destinations, trips and AI-generated itineraries",
        version="0.1.0",
    )

    # Security middleware (before CORS)
    app.add_middleware(SecurityHeadersMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.ui_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Health check endpoint
    @app.get("/healthz")
    async def healthz() -> dict[str, Any]:
        """Health check endpoint."""
        result = await get_health()
        return result.model_dump()

    # Include routers
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(destinations_router)
    app.include_router(catalog_router)
    app.include_router(trips_router)

    if create_tables:

        @app.on_event("startup")
        def startup_event() -> None:
            """Run startup tasks."""
            logger.info("Application starting up, ensuring tables exist")
            Base.metadata.create_all(get_engine())

    return app


# Create app instance for uvicorn
app = create_app()
