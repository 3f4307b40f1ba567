"""Tests for best-effort JSON extraction from model output."""

import json

import pytest

from travelplanner.app.planning.errors import ParseError
from travelplanner.app.planning.extract import extract_plan_json


def test_strict_json_parsed_directly(sample_plan):
    assert extract_plan_json(json.dumps(sample_plan)) == sample_plan


def test_fenced_json_recovered(sample_plan):
    raw = "```json\n" + json.dumps(sample_plan, indent=2) + "\n```"

    assert extract_plan_json(raw) == sample_plan


def test_json_with_surrounding_prose_recovered():
    raw = 'Here is your plan: {"itinerary": [], "budgetBreakdown": {"total": 5}} Enjoy!'

    assert extract_plan_json(raw) == {"itinerary": [], "budgetBreakdown": {"total": 5}}


def test_text_without_braces_is_not_json():
    with pytest.raises(ParseError, match="AI response was not valid JSON"):
        extract_plan_json("Sorry, I cannot help with that.")


def test_braces_in_wrong_order_are_not_json():
    with pytest.raises(ParseError, match="AI response was not valid JSON"):
        extract_plan_json("} nothing here {")


def test_unparseable_brace_span_fails():
    with pytest.raises(ParseError, match="Failed to parse AI JSON response"):
        extract_plan_json('prefix {"itinerary": [1, 2,} suffix')


def test_multiple_objects_are_not_merged():
    # First "{" to last "}" spans both objects, which is not valid JSON
    with pytest.raises(ParseError):
        extract_plan_json('{"a": 1} and {"b": 2}')


def test_top_level_array_rejected():
    with pytest.raises(ParseError):
        extract_plan_json("[1, 2, 3]")


def test_parse_error_maps_to_500():
    with pytest.raises(ParseError) as exc_info:
        extract_plan_json("nope")

    assert exc_info.value.status_code == 500
    assert exc_info.value.kind == "parse"
