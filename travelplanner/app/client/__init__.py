"""HTTP client for the travel planner API."""

from .api import ApiError, TravelPlannerClient
from .decode import DecodedDestination, DestinationDecodeError, decode_destination
from .session import ApiSession

__all__ = [
    "ApiSession",
    "ApiError",
    "TravelPlannerClient",
    "DecodedDestination",
    "DestinationDecodeError",
    "decode_destination",
]
