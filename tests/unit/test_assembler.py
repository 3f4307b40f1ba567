"""Tests for plan result assembly and trip persistence."""

from datetime import date

from sqlalchemy import func, select

from travelplanner.app.db.models import Trip
from travelplanner.app.models.trip import TripRequest
from travelplanner.app.planning.assembler import (
    assemble_plan_result,
    default_trip_title,
    find_schema_issues,
    persist_trip,
)


def _request(destination_id: int, **overrides) -> TripRequest:
    values = {
        "destinationId": destination_id,
        "budget": 1000,
        "durationDays": 3,
        "interests": ["food"],
    }
    values.update(overrides)
    return TripRequest.model_validate(values)


def test_result_echoes_request_not_model(kyoto, sample_plan):
    """Model output cannot override the echoed request fields."""
    parsed = {
        **sample_plan,
        "destination": {"id": 999, "name": "Elsewhere"},
        "durationDays": 42,
        "budget": 1,
        "interests": ["hijacked"],
    }

    result = assemble_plan_result(_request(kyoto.id), kyoto, parsed)

    assert result.destination.id == kyoto.id
    assert result.destination.name == "Kyoto"
    assert result.duration_days == 3
    assert result.budget == 1000
    assert result.interests == ["food"]
    assert result.itinerary == sample_plan["itinerary"]
    assert result.budget_breakdown == sample_plan["budgetBreakdown"]
    assert result.trip is None


def test_result_without_coordinates(kyoto, sample_plan):
    result = assemble_plan_result(_request(kyoto.id), kyoto, sample_plan)

    assert result.destination.latitude is None
    assert result.destination.longitude is None


def test_result_with_coordinates(paris, sample_plan):
    result = assemble_plan_result(_request(paris.id), paris, sample_plan)

    assert result.destination.latitude == 48.8566
    assert result.destination.longitude == 2.3522


def test_missing_sections_pass_through_as_none(kyoto):
    result = assemble_plan_result(_request(kyoto.id), kyoto, {"unexpected": True})

    assert result.itinerary is None
    assert result.budget_breakdown is None


def test_budget_type_preserved(kyoto, sample_plan):
    as_int = assemble_plan_result(_request(kyoto.id, budget=500), kyoto, sample_plan)
    as_float = assemble_plan_result(_request(kyoto.id, budget=500.5), kyoto, sample_plan)

    assert isinstance(as_int.budget, int)
    assert as_float.budget == 500.5


def test_default_title():
    assert default_trip_title("Kyoto", 3, 1000) == "Trip to Kyoto (3 days, budget 1000)"


def test_persist_trip_uses_request_fields(test_session, test_user, kyoto, sample_plan):
    request = _request(
        kyoto.id,
        saveTrip=True,
        startDate="2025-04-01",
        endDate="2025-04-03",
    )

    trip = persist_trip(test_session, request, kyoto, sample_plan, owner_id=test_user.id)

    assert trip.id is not None
    assert trip.owner_id == test_user.id
    assert trip.destination_id == kyoto.id
    assert trip.title == "Trip to Kyoto (3 days, budget 1000)"
    assert trip.start_date == date(2025, 4, 1)
    assert trip.end_date == date(2025, 4, 3)
    assert trip.total_budget == 1000
    assert trip.interests == ["food"]
    assert trip.itinerary == sample_plan["itinerary"]
    assert trip.budget_breakdown == sample_plan["budgetBreakdown"]


def test_persist_trip_keeps_custom_title(test_session, test_user, kyoto, sample_plan):
    request = _request(
        kyoto.id,
        saveTrip=True,
        title="Cherry blossoms",
        startDate="2025-04-01",
        endDate="2025-04-03",
    )

    trip = persist_trip(test_session, request, kyoto, sample_plan, owner_id=test_user.id)

    assert trip.title == "Cherry blossoms"


def test_persist_trip_never_deduplicates(test_session, test_user, kyoto, sample_plan):
    request = _request(
        kyoto.id, saveTrip=True, startDate="2025-04-01", endDate="2025-04-03"
    )

    first = persist_trip(test_session, request, kyoto, sample_plan, owner_id=test_user.id)
    second = persist_trip(test_session, request, kyoto, sample_plan, owner_id=test_user.id)

    assert first.id != second.id
    count = test_session.execute(select(func.count()).select_from(Trip)).scalar_one()
    assert count == 2


def test_schema_issues_empty_for_conforming_plan(sample_plan):
    assert find_schema_issues(sample_plan) == []


def test_schema_issues_reported(sample_plan):
    sample_plan["itinerary"][0]["activities"][0]["timeOfDay"] = "midnight"
    del sample_plan["budgetBreakdown"]

    issues = find_schema_issues(sample_plan)

    assert "budgetBreakdown: missing" in issues
    assert any(issue.startswith("itinerary.0.activities.0.timeOfDay") for issue in issues)
