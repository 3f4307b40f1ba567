"""Prompt construction for itinerary generation."""

from collections.abc import Sequence

from pydantic import BaseModel, Field, PositiveInt

from travelplanner.app.models.trip import ActivityType, PositiveFiniteFloat, TimeOfDay

DEFAULT_INTERESTS = "general sightseeing, food, and popular attractions"

SYSTEM_DIRECTIVE = (
    "You are a travel planning assistant that outputs only valid JSON objects "
    "suitable for an API response."
)

_TIMES_OF_DAY = "|".join(t.value for t in TimeOfDay)
_ACTIVITY_TYPES = "|".join(t.value for t in ActivityType)
_TIMES_OF_DAY_LIST = ", ".join(t.value for t in TimeOfDay)
_ACTIVITY_TYPES_LIST = ", ".join(t.value for t in ActivityType)

_OUTPUT_SCHEMA = f"""{{
  "itinerary": [
    {{
      "day": 1,
      "title": "string",
      "summary": "string",
      "activities": [
        {{
          "timeOfDay": "{_TIMES_OF_DAY}",
          "name": "string",
          "type": "{_ACTIVITY_TYPES}",
          "approxCost": number,
          "notes": "string",
          "latitude": number (optional, approximate latitude of the activity location),
          "longitude": number (optional, approximate longitude of the activity location)
        }}
      ]
    }}
  ],
  "budgetBreakdown": {{
    "currency": "USD",
    "total": number,
    "accommodationPerNight": number,
    "foodPerDay": number,
    "transportPerDay": number,
    "activitiesPerDay": number,
    "notes": "string"
  }}
}}"""


class PromptInput(BaseModel):
    """Everything the prompt depends on."""

    destination_name: str
    destination_country: str
    destination_coords: tuple[float, float] | None = None
    duration_days: int = Field(gt=0)
    budget: PositiveInt | PositiveFiniteFloat
    interests: list[str] = Field(default_factory=list)


def format_interests(interests: Sequence[str]) -> str:
    """Join distinct interests in first-seen order, or fall back to the default."""
    distinct = list(dict.fromkeys(interests))
    if not distinct:
        return DEFAULT_INTERESTS
    return ", ".join(distinct)


def build_plan_prompt(data: PromptInput) -> str:
    """Render the user instruction for one plan request.

    The output depends only on ``data``; identical inputs give identical text.
    """
    destination_line = f"{data.destination_name}, {data.destination_country}"
    if data.destination_coords is not None:
        lat, lon = data.destination_coords
        destination_line += f" (Coordinates: {lat}, {lon})"

    return f"""
You are a smart travel planner API. Given a destination and constraints, return a detailed JSON itinerary and budget.

Return strict JSON (no markdown, no code fences, no explanation) with this shape:
{_OUTPUT_SCHEMA}

Allowed values for "timeOfDay": {_TIMES_OF_DAY_LIST}.
Allowed values for "type": {_ACTIVITY_TYPES_LIST}.

Destination: {destination_line}
Trip duration: {data.duration_days} days
Total budget: {data.budget}
User interests: {format_interests(data.interests)}

IMPORTANT: For each activity, include "latitude" and "longitude" when you know the approximate location; they are used to show activities on a map. If you do not know where an activity takes place, omit both fields instead of inventing coordinates.
"""
