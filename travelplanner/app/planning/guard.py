"""Access decision for plan requests."""

from enum import Enum
from typing import Any

from pydantic import TypeAdapter, ValidationError

_BOOL = TypeAdapter(bool)


class AccessVerdict(str, Enum):
    """Outcome of the access check for a single plan request."""

    PROCEED_ANONYMOUS = "proceed_anonymous"
    PROCEED_AUTHENTICATED = "proceed_authenticated"
    REJECT_UNAUTHORIZED = "reject_unauthorized"


def decide_access(save_trip: bool, user: Any | None) -> AccessVerdict:
    """Decide whether a plan request may proceed.

    Authentication is mandatory only when the caller asks to persist the
    result; otherwise identity is optional.
    """
    if user is not None:
        return AccessVerdict.PROCEED_AUTHENTICATED
    if save_trip:
        return AccessVerdict.REJECT_UNAUTHORIZED
    return AccessVerdict.PROCEED_ANONYMOUS


def wants_save(payload: dict[str, Any]) -> bool:
    """Read the saveTrip flag from a raw body with the request model's coercion.

    Unparseable flags count as False here and are rejected later by
    request validation.
    """
    raw = payload.get("saveTrip", payload.get("save_trip", False))
    if raw is None:
        return False
    try:
        return _BOOL.validate_python(raw)
    except ValidationError:
        return False
