"""Best-effort JSON extraction from model output."""

import json
from typing import Any

from travelplanner.app.planning.errors import ParseError


def extract_plan_json(raw: str) -> dict[str, Any]:
    """Parse the model's reply into a JSON object.

    Tries a strict parse of the whole text first, then the span from the
    first ``{`` to the last ``}``. Nothing broader is attempted.

    Raises:
        ParseError: If neither attempt yields a JSON object
    """
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        start = raw.find("{")
        end = raw.rfind("}")
        if start == -1 or end < start:
            raise ParseError("AI response was not valid JSON")
        try:
            parsed = json.loads(raw[start : end + 1])
        except json.JSONDecodeError as e:
            raise ParseError("Failed to parse AI JSON response") from e

    if not isinstance(parsed, dict):
        raise ParseError("AI response was not a JSON object")
    return parsed
