"""Pytest configuration and fixtures for testing."""

import json
from datetime import date

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from travelplanner.app import config
from travelplanner.app.api.auth import get_default_role
from travelplanner.app.config import Settings
from travelplanner.app.db import models  # noqa: F401  (registers tables)
from travelplanner.app.db.base import Base
from travelplanner.app.db.models import Destination, Trip, User
from travelplanner.app.db.session import get_session
from travelplanner.app.planning.completion import (
    CompletionClient,
    get_completion_client,
)
from travelplanner.app.security import create_access_token, hash_password

TEST_PASSWORD = "testpassword123"

SAMPLE_PLAN = {
    "itinerary": [
        {
            "day": 1,
            "title": "Temples and markets",
            "summary": "Eastern Kyoto on foot.",
            "activities": [
                {
                    "timeOfDay": "morning",
                    "name": "Kiyomizu-dera",
                    "type": "culture",
                    "approxCost": 4,
                    "notes": "Go early.",
                    "latitude": 34.9949,
                    "longitude": 135.785,
                },
                {
                    "timeOfDay": "evening",
                    "name": "Pontocho dinner",
                    "type": "food",
                    "approxCost": 40,
                    "notes": "",
                },
            ],
        },
        {
            "day": 2,
            "title": "Bamboo and river",
            "summary": "Arashiyama day trip.",
            "activities": [
                {
                    "timeOfDay": "afternoon",
                    "name": "Arashiyama Bamboo Grove",
                    "type": "nature",
                    "approxCost": 0,
                    "notes": "",
                }
            ],
        },
    ],
    "budgetBreakdown": {
        "currency": "USD",
        "total": 1000,
        "accommodationPerNight": 120,
        "foodPerDay": 60,
        "transportPerDay": 15,
        "activitiesPerDay": 25,
        "notes": "Mid-range estimate.",
    },
}


class FakeCompletionClient(CompletionClient):
    """Completion client that returns a canned reply and records prompts."""

    def __init__(self, reply: str | None = None, error: Exception | None = None):
        super().__init__(model="fake-model", temperature=0.0)
        self.reply = json.dumps(SAMPLE_PLAN) if reply is None else reply
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.ensure_configured()
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(scope="session")
def rsa_keys() -> tuple[str, str]:
    """Generate one RSA key pair for the whole test session."""
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")
    return private_pem, public_pem


@pytest.fixture(autouse=True)
def test_settings(rsa_keys):
    """Swap in settings with real JWT keys and a fake OpenAI key."""
    private_pem, public_pem = rsa_keys
    previous = config._settings
    config._settings = Settings(
        _env_file=None,
        database_url="sqlite://",
        jwt_private_key_pem=private_pem,
        jwt_public_key_pem=public_pem,
        openai_api_key="sk-test",
    )

    yield config._settings

    config._settings = previous


@pytest.fixture(scope="function")
def test_db_engine():
    """Create a test database engine with in-memory SQLite."""
    # StaticPool keeps one connection so the TestClient threadpool sees the same data
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(engine)

    yield engine

    # Cleanup
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session(test_db_engine):
    """Create a test database session."""
    SessionFactory = sessionmaker(bind=test_db_engine, expire_on_commit=False)
    session = SessionFactory()

    yield session

    session.close()


def _make_user(session: Session, username: str, email: str) -> User:
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(TEST_PASSWORD),
        role=get_default_role(session),
    )
    session.add(user)
    session.commit()
    return user


@pytest.fixture(scope="function")
def test_user(test_session: Session) -> User:
    """Create a test user (password ``testpassword123``)."""
    return _make_user(test_session, "traveller", "test@example.com")


@pytest.fixture(scope="function")
def other_user(test_session: Session) -> User:
    """Create a second user who owns nothing of test_user's."""
    return _make_user(test_session, "stranger", "other@example.com")


@pytest.fixture
def auth_headers(test_user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture
def other_auth_headers(other_user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest.fixture
def kyoto(test_session: Session) -> Destination:
    """Destination without coordinates."""
    destination = Destination(name="Kyoto", slug="kyoto", country="Japan")
    test_session.add(destination)
    test_session.commit()
    return destination


@pytest.fixture
def paris(test_session: Session) -> Destination:
    """Destination with known coordinates."""
    destination = Destination(
        name="Paris",
        slug="paris",
        country="France",
        latitude=48.8566,
        longitude=2.3522,
        average_daily_budget=180,
    )
    test_session.add(destination)
    test_session.commit()
    return destination


@pytest.fixture
def saved_trip(test_session: Session, test_user: User, kyoto: Destination) -> Trip:
    trip = Trip(
        title="Spring in Kyoto",
        destination_id=kyoto.id,
        owner_id=test_user.id,
        start_date=date(2025, 4, 1),
        end_date=date(2025, 4, 3),
        duration_days=3,
        total_budget=900,
        interests=["food"],
        itinerary=SAMPLE_PLAN["itinerary"],
        budget_breakdown=SAMPLE_PLAN["budgetBreakdown"],
    )
    test_session.add(trip)
    test_session.commit()
    return trip


@pytest.fixture
def sample_plan() -> dict:
    return json.loads(json.dumps(SAMPLE_PLAN))


@pytest.fixture
def fake_completion() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def client(test_session: Session, fake_completion: FakeCompletionClient):
    """TestClient wired to the test session and the fake completion client."""
    from travelplanner.app.main import create_app

    app = create_app(create_tables=False)

    def _override_session():
        yield test_session

    app.dependency_overrides[get_session] = _override_session
    app.dependency_overrides[get_completion_client] = lambda: fake_completion

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def make_completion():
    """Factory for fake completion clients with a custom reply or error."""
    return FakeCompletionClient
