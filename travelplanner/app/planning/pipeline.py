"""End-to-end handling of a single plan request.

Stages run strictly in order::

    received -> guarded -> prompted -> completed -> extracted
             -> assembled -> (persisted) -> returned

Any failure raises a ``PlanningError`` and ends the request. Nothing is
retried, and a trip is only written after extraction succeeded.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from sqlalchemy.orm import Session

from travelplanner.app.db.models import Destination
from travelplanner.app.models.trip import PlanResult, TripRequest, TripResponse
from travelplanner.app.planning.assembler import (
    assemble_plan_result,
    find_schema_issues,
    persist_trip,
)
from travelplanner.app.planning.completion import CompletionClient
from travelplanner.app.planning.errors import (
    DestinationNotFoundError,
    PlanAuthorizationError,
    PlanningError,
    PlanValidationError,
)
from travelplanner.app.planning.extract import extract_plan_json
from travelplanner.app.planning.guard import AccessVerdict, decide_access, wants_save
from travelplanner.app.planning.prompt import PromptInput, build_plan_prompt

if TYPE_CHECKING:
    from travelplanner.app.api.auth import CurrentUser

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"destinationId", "budget", "durationDays"}


class PlanStage(str, Enum):
    """Lifecycle stages of a plan request."""

    received = "received"
    guarded = "guarded"
    prompted = "prompted"
    completed = "completed"
    extracted = "extracted"
    assembled = "assembled"
    persisted = "persisted"
    returned = "returned"


def _enter(stage: PlanStage) -> PlanStage:
    logger.debug("plan_stage", extra={"stage": stage.value})
    return stage


def parse_trip_request(payload: dict[str, Any]) -> TripRequest:
    """Validate a raw body into a TripRequest or raise PlanValidationError."""
    try:
        return TripRequest.model_validate(payload)
    except ValidationError as e:
        raise PlanValidationError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    missing = {
        str(err["loc"][0])
        for err in error.errors()
        if err["type"] == "missing" and err["loc"]
    }
    if missing & _REQUIRED_FIELDS:
        return "destinationId, budget and durationDays are required"

    messages = []
    for err in error.errors():
        msg = err["msg"].removeprefix("Value error, ")
        if err["loc"]:
            messages.append(f"{'.'.join(str(p) for p in err['loc'])}: {msg}")
        else:
            messages.append(msg)
    return "; ".join(messages)


async def run_plan(
    payload: dict[str, Any],
    user: CurrentUser | None,
    session: Session,
    completion: CompletionClient,
) -> PlanResult:
    """Run one plan request from raw body to result.

    Args:
        payload: Request body as received
        user: Authenticated caller, or None for anonymous requests
        session: Database session used for lookups and the optional save
        completion: Client used for the single model call

    Returns:
        PlanResult, with ``trip`` set only when the request asked to save

    Raises:
        PlanningError: On any failure; see ``errors`` for the kinds
    """
    stage = _enter(PlanStage.received)
    try:
        verdict = decide_access(wants_save(payload), user)
        if verdict is AccessVerdict.REJECT_UNAUTHORIZED:
            raise PlanAuthorizationError("You must be authenticated to save trips")
        stage = _enter(PlanStage.guarded)

        request = parse_trip_request(payload)
        destination = session.get(Destination, request.destination_id)
        if destination is None:
            raise DestinationNotFoundError("Destination not found")

        completion.ensure_configured()

        prompt = build_plan_prompt(
            PromptInput(
                destination_name=destination.name,
                destination_country=destination.country,
                destination_coords=destination.coordinates,
                duration_days=request.duration_days,
                budget=request.budget,
                interests=request.interests,
            )
        )
        stage = _enter(PlanStage.prompted)

        raw = await completion.complete(prompt)
        stage = _enter(PlanStage.completed)

        parsed = extract_plan_json(raw)
        stage = _enter(PlanStage.extracted)

        issues = find_schema_issues(parsed)
        if issues:
            logger.warning(
                "plan_schema_mismatch",
                extra={"destination_id": destination.id, "issues": issues[:10]},
            )

        result = assemble_plan_result(request, destination, parsed)
        stage = _enter(PlanStage.assembled)

        if request.save_trip:
            # Saving always needs an owner, whatever the guard decided
            if user is None:
                raise PlanAuthorizationError("You must be authenticated to save trips")
            trip = persist_trip(session, request, destination, parsed, owner_id=user.id)
            result.trip = TripResponse.from_trip(trip)
            stage = _enter(PlanStage.persisted)

    except PlanningError as e:
        logger.info(
            "plan_failed",
            extra={"stage": stage.value, "kind": e.kind, "detail": e.message},
        )
        raise

    logger.info(
        "plan_returned",
        extra={
            "stage": PlanStage.returned.value,
            "destination_id": destination.id,
            "days": len(result.itinerary) if isinstance(result.itinerary, list) else None,
            "saved": result.trip is not None,
        },
    )
    return result
