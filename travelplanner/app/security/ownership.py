"""Record-level ownership checks."""

from typing import Any, Protocol


class _HasOwner(Protocol):
    owner_id: Any


class _HasId(Protocol):
    id: Any


def is_owner(record: _HasOwner | None, user: _HasId | None) -> bool:
    """Return True when ``user`` owns ``record``.

    A missing record or an anonymous caller never owns anything.
    """
    if record is None or user is None:
        return False
    return record.owner_id is not None and record.owner_id == user.id
