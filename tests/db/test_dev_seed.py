"""Tests for development seed script."""

from sqlalchemy import func, select

from scripts.dev_seed import DEMO_EMAIL, DESTINATIONS, seed_database
from travelplanner.app.db.models import Attraction, Destination, Hotel, Restaurant, User
from travelplanner.app.security import verify_password


def _count(session, model) -> int:
    return session.execute(select(func.count()).select_from(model)).scalar_one()


class TestDevSeed:
    """Tests for development database seeding."""

    def test_seed_creates_required_data(self, test_session):
        """Seed creates every demo destination with its catalog and the demo user."""
        seed_database(test_session)

        assert _count(test_session, Destination) == len(DESTINATIONS)
        assert _count(test_session, Attraction) == sum(
            len(d["attractions"]) for d in DESTINATIONS
        )
        assert _count(test_session, Hotel) == sum(len(d["hotels"]) for d in DESTINATIONS)
        assert _count(test_session, Restaurant) == sum(
            len(d["restaurants"]) for d in DESTINATIONS
        )

        user = test_session.execute(
            select(User).where(User.email == DEMO_EMAIL)
        ).scalar_one()
        assert verify_password("demo-password", user.password_hash)
        assert user.role.type == "authenticated"

    def test_seeded_destinations_have_coordinates(self, test_session):
        seed_database(test_session)

        for destination in test_session.execute(select(Destination)).scalars():
            assert destination.coordinates is not None

    def test_seed_is_idempotent(self, test_session):
        """Running seed multiple times doesn't create duplicates."""
        seed_database(test_session)
        first = {
            model: _count(test_session, model)
            for model in (Destination, Attraction, Hotel, Restaurant, User)
        }

        seed_database(test_session)
        second = {
            model: _count(test_session, model)
            for model in (Destination, Attraction, Hotel, Restaurant, User)
        }

        assert first == second

    def test_existing_destination_left_alone(self, test_session, paris):
        seed_database(test_session)

        names = test_session.execute(
            select(Destination.name).where(Destination.name == "Paris")
        ).scalars().all()
        assert names == ["Paris"]
        # Catalog records are only created alongside new destinations
        assert not paris.attractions
