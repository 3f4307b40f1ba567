"""ORM models for database tables."""

from .attraction import Attraction
from .destination import Destination
from .hotel import Hotel
from .restaurant import Restaurant
from .role import Role
from .trip import Trip
from .user import User

__all__ = [
    "Role",
    "User",
    "Destination",
    "Attraction",
    "Hotel",
    "Restaurant",
    "Trip",
]
