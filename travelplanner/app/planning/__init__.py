"""Itinerary generation: access guard, prompt, completion, extraction, assembly."""

from .assembler import assemble_plan_result, default_trip_title, persist_trip
from .completion import CompletionClient, get_completion_client
from .errors import (
    ConfigurationError,
    DestinationNotFoundError,
    GenerationError,
    ParseError,
    PlanAuthorizationError,
    PlanningError,
    PlanValidationError,
    ProviderUnavailableError,
)
from .extract import extract_plan_json
from .guard import AccessVerdict, decide_access
from .pipeline import PlanStage, run_plan
from .prompt import PromptInput, build_plan_prompt

__all__ = [
    "AccessVerdict",
    "decide_access",
    "PromptInput",
    "build_plan_prompt",
    "CompletionClient",
    "get_completion_client",
    "extract_plan_json",
    "assemble_plan_result",
    "default_trip_title",
    "persist_trip",
    "PlanStage",
    "run_plan",
    "PlanningError",
    "PlanValidationError",
    "PlanAuthorizationError",
    "DestinationNotFoundError",
    "ConfigurationError",
    "GenerationError",
    "ParseError",
    "ProviderUnavailableError",
]
