"""Shared test fixtures for the Itinerary Builder."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


OWNER_ID = "user_owner"
STRANGER_ID = "user_stranger"


# SQLite fixtures
@pytest.fixture
def db_engine():
    """In-memory SQLite engine with the itinerary schema created."""
    from sqlalchemy import create_engine
    from sqlalchemy.pool import StaticPool

    from core.db import Base

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    from sqlalchemy.orm import sessionmaker

    return sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest.fixture
def session(session_factory):
    with session_factory() as session:
        yield session


# Identity fixtures
@pytest.fixture
def owner():
    from core.auth import RequestContext

    return RequestContext.for_user(OWNER_ID)


@pytest.fixture
def stranger():
    from core.auth import RequestContext

    return RequestContext.for_user(STRANGER_ID)


@pytest.fixture
def anonymous():
    from core.auth import RequestContext

    return RequestContext()


@pytest.fixture
def make_trip(session, owner):
    """Create a trip through the service and return its record."""
    from core.models import CreateTripInput
    from core.services.trips import create_trip

    def _make(name="Dubai Trip", context=None, **fields):
        result = create_trip(session, context or owner, CreateTripInput(name=name, **fields))
        return result.data.trip

    return _make


# PostgreSQL fixtures
@pytest.fixture
def pg_session():
    """Provide a session against the local PostgreSQL container for integration tests."""
    from core.config import get_config
    from core.db import AuroraClient, Base

    with AuroraClient(get_config()) as client:
        Base.metadata.create_all(client.engine)
        with client.session() as session:
            yield session
            session.rollback()
