"""Development database seeding script.

Creates demo destinations with attractions, hotels and restaurants, plus a
demo user. Idempotent - safe to run multiple times.

Usage:
    python scripts/dev_seed.py
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from travelplanner.app.api.auth import get_default_role
from travelplanner.app.db import Base, get_engine, get_session_factory
from travelplanner.app.db.models import (
    Attraction,
    Destination,
    Hotel,
    Restaurant,
    User,
)
from travelplanner.app.db.slugs import unique_slug
from travelplanner.app.security import hash_password

logger = logging.getLogger("travelplanner.seed")

DEMO_EMAIL = "demo@travelplanner.dev"
DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demo-password"

DESTINATIONS: list[dict[str, Any]] = [
    {
        "name": "Paris",
        "country": "France",
        "description": "Museums, cafes and riverside walks.",
        "latitude": 48.8566,
        "longitude": 2.3522,
        "average_daily_budget": 180,
        "attractions": [
            ("Louvre Museum", "culture", 22),
            ("Eiffel Tower", "sightseeing", 29),
            ("Jardin du Luxembourg", "nature", 0),
        ],
        "hotels": [
            ("Hotel Le Marais", 4, 210, False),
            ("Montmartre Hostel", 2, 65, True),
        ],
        "restaurants": [
            ("Le Petit Bistro", "French", "midrange", 35),
            ("Crepes du Quai", "French", "budget", 12),
        ],
    },
    {
        "name": "Kyoto",
        "country": "Japan",
        "description": "Temples, gardens and traditional food.",
        "latitude": 35.0116,
        "longitude": 135.7681,
        "average_daily_budget": 140,
        "attractions": [
            ("Fushimi Inari Shrine", "culture", 0),
            ("Arashiyama Bamboo Grove", "nature", 0),
            ("Nishiki Market", "food", 15),
        ],
        "hotels": [
            ("Gion Ryokan", 4, 240, False),
            ("Kyoto Station Capsule", 2, 40, True),
        ],
        "restaurants": [
            ("Ramen Alley", "Japanese", "budget", 10),
            ("Kaiseki Hana", "Japanese", "luxury", 120),
        ],
    },
    {
        "name": "Lisbon",
        "country": "Portugal",
        "description": "Hills, trams and the Atlantic coast.",
        "latitude": 38.7223,
        "longitude": -9.1393,
        "average_daily_budget": 110,
        "attractions": [
            ("Belem Tower", "sightseeing", 10),
            ("Alfama Walk", "culture", 0),
            ("LX Factory", "shopping", 0),
        ],
        "hotels": [
            ("Baixa Boutique", 3, 120, False),
            ("Bairro Alto Hostel", 2, 35, True),
        ],
        "restaurants": [
            ("Tasca do Bairro", "Portuguese", "budget", 15),
            ("Mar Azul", "Seafood", "midrange", 40),
        ],
    },
]


def _seed_catalog(session: Session, destination: Destination, spec: dict[str, Any]) -> None:
    for name, category, cost in spec["attractions"]:
        session.add(
            Attraction(
                destination=destination,
                name=name,
                slug=unique_slug(session, Attraction, name),
                category=category,
                approximate_cost=cost,
            )
        )
    for name, stars, price, budget_friendly in spec["hotels"]:
        session.add(
            Hotel(
                destination=destination,
                name=name,
                slug=unique_slug(session, Hotel, name),
                stars=stars,
                price_per_night=price,
                is_budget_friendly=budget_friendly,
            )
        )
    for name, cuisine, level, price in spec["restaurants"]:
        session.add(
            Restaurant(
                destination=destination,
                name=name,
                slug=unique_slug(session, Restaurant, name),
                cuisine=cuisine,
                price_level=level,
                average_price_per_person=price,
            )
        )
    # Slug lookups above query the table, so flush as we go
    session.flush()


def seed_destinations(session: Session) -> int:
    """Insert missing demo destinations. Returns how many were created."""
    created = 0
    for spec in DESTINATIONS:
        existing = session.execute(
            select(Destination).where(
                Destination.name == spec["name"],
                Destination.country == spec["country"],
            )
        ).scalar_one_or_none()
        if existing is not None:
            logger.info("destination_exists", extra={"destination_id": existing.id})
            continue

        destination = Destination(
            name=spec["name"],
            slug=unique_slug(session, Destination, spec["name"]),
            country=spec["country"],
            description=spec["description"],
            latitude=spec["latitude"],
            longitude=spec["longitude"],
            average_daily_budget=spec["average_daily_budget"],
        )
        session.add(destination)
        session.flush()
        _seed_catalog(session, destination, spec)
        logger.info("destination_created", extra={"destination_id": destination.id})
        created += 1
    return created


def seed_demo_user(session: Session) -> User:
    """Return the demo user, creating it if needed."""
    user = session.execute(
        select(User).where(User.email == DEMO_EMAIL)
    ).scalar_one_or_none()
    if user is not None:
        return user

    user = User(
        username=DEMO_USERNAME,
        email=DEMO_EMAIL,
        password_hash=hash_password(DEMO_PASSWORD),
        role=get_default_role(session),
    )
    session.add(user)
    session.flush()
    logger.info("demo_user_created", extra={"user_id": user.id})
    return user


def seed_database(session: Session) -> None:
    """Seed demo data into ``session`` and commit."""
    created = seed_destinations(session)
    user = seed_demo_user(session)
    session.commit()
    logger.info(
        "seed_complete",
        extra={"destinations_created": created, "demo_user_id": user.id},
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
    Base.metadata.create_all(get_engine())
    with get_session_factory()() as session:
        seed_database(session)
    print(f"Seeded. Demo login: {DEMO_EMAIL} / {DEMO_PASSWORD}")


if __name__ == "__main__":
    main()
