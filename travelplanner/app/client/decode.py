"""Decode destinations from the payload shapes the API family has used.

Known shapes, tried in this order:

1. ``{"data": <record or [record, ...]>}``: envelope, unwrapped first.
2. ``{"id": ..., "attributes": {...}}``: nested attributes (older servers).
3. ``{"id": ..., "name": ..., "country": ...}``: flat record.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class DestinationDecodeError(ValueError):
    """Raised when a payload matches none of the known destination shapes."""


class DecodedDestination(BaseModel):
    """Destination fields the client relies on."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    id: int
    document_id: str | None = None
    name: str
    country: str
    slug: str | None = None
    description: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    average_daily_budget: int | None = None


def _unwrap_envelope(payload: Any) -> Any:
    if isinstance(payload, dict) and "data" in payload and "id" not in payload:
        data = payload["data"]
        if isinstance(data, list):
            if not data:
                raise DestinationDecodeError("Empty destination list")
            return data[0]
        return data
    return payload


def _from_nested(payload: dict[str, Any]) -> dict[str, Any] | None:
    attributes = payload.get("attributes")
    if not isinstance(attributes, dict):
        return None
    # The outer id and documentId win over copies inside attributes
    merged = {
        k: v for k, v in attributes.items() if k not in ("id", "documentId")
    }
    merged["id"] = payload.get("id", attributes.get("id"))
    merged["documentId"] = payload.get("documentId", attributes.get("documentId"))
    return merged


def _from_flat(payload: dict[str, Any]) -> dict[str, Any] | None:
    if "name" in payload and "country" in payload:
        return payload
    return None


_SHAPES = (_from_nested, _from_flat)


def decode_destination(payload: Any) -> DecodedDestination:
    """Decode one destination, trying each known shape in priority order.

    Raises:
        DestinationDecodeError: If no shape matches or required fields are invalid
    """
    record = _unwrap_envelope(payload)
    if not isinstance(record, dict):
        raise DestinationDecodeError(
            f"Expected a destination object, got {type(record).__name__}"
        )

    for shape in _SHAPES:
        candidate = shape(record)
        if candidate is None:
            continue
        try:
            return DecodedDestination.model_validate(candidate)
        except ValidationError as e:
            raise DestinationDecodeError(
                f"Destination payload matched {shape.__name__} but is invalid: {e}"
            ) from e

    raise DestinationDecodeError("Payload matches no known destination shape")


def decode_destination_list(payload: Any) -> list[DecodedDestination]:
    """Decode a ``{"data": [...]}`` collection or a bare list of destinations."""
    items = payload.get("data") if isinstance(payload, dict) else payload
    if not isinstance(items, list):
        raise DestinationDecodeError("Expected a list of destinations")
    return [decode_destination(item) for item in items]
