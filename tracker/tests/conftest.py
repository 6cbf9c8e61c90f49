"""
Centralized Test Configuration.
"""

import random
from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from tracker.app.db.session import Base, init_db
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel
from tracker.app.services.parcel_store import ParcelStore

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(
    engine, class_=Session, expire_on_commit=False
)

RNG_SEED = 20240101


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test function and drop after."""
    init_db(engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    with TestingSessionLocal() as session:
        yield session


@pytest.fixture
def store(db_session):
    return ParcelStore(db_session)


@pytest.fixture
def rng():
    """Seeded generator for unique-looking client ids."""
    return random.Random(RNG_SEED)


@pytest.fixture
def make_parcel():
    """Factory for a fresh registered test parcel."""
    def _make(**overrides) -> Parcel:
        fields = {
            "client": 1000,
            "status": ParcelStatus.REGISTERED,
            "address": "test",
            "created_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        }
        fields.update(overrides)
        return Parcel(**fields)
    return _make
