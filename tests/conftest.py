"""
Pytest Configuration and Fixtures

Provides a throwaway SQLite file per test and common fixtures.
"""
import pytest
from contextlib import asynccontextmanager
from fastapi.testclient import TestClient

from planetas.database import Database


@pytest.fixture(scope="function")
def test_database(tmp_path):
    """Lazily opened database in a temporary directory."""
    database = Database(tmp_path / "databases" / "planetas.db")
    yield database
    database.close()


@pytest.fixture(scope="function")
def db_session(test_database):
    """Create a fresh database session for each test."""
    session = test_database.session()
    yield session
    session.close()


@pytest.fixture
def planet_service(db_session):
    from planetas.services import PlanetService

    return PlanetService(db_session)


@pytest.fixture(scope="function")
def client(test_database):
    """Create a test client bound to the test database."""
    from planetas.database import get_database
    from planetas.main import app

    # Replace the lifespan so the default database path is never opened
    original_lifespan = app.router.lifespan_context

    @asynccontextmanager
    async def test_lifespan(app):
        test_database.open()
        yield

    app.router.lifespan_context = test_lifespan
    app.dependency_overrides[get_database] = lambda: test_database

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    app.router.lifespan_context = original_lifespan


@pytest.fixture
def sample_planet(db_session):
    """Create a sample planet for testing."""
    from planetas.models import Planet

    planet = Planet(name="Mars", distance=1.52, size=6779.0)
    db_session.add(planet)
    db_session.commit()
    db_session.refresh(planet)
    return planet


@pytest.fixture
def sample_planets(db_session, sample_planet):
    """Mars plus two more planets, in insertion order."""
    from planetas.models import Planet

    planets = [
        sample_planet,
        Planet(name="Earth", distance=1.0, size=12742.0, nickname="Blue Marble"),
        Planet(name="Jupiter", distance=5.2, size=139820.0, nickname="Gas Giant"),
    ]
    db_session.add_all(planets[1:])
    db_session.commit()
    for planet in planets:
        db_session.refresh(planet)
    return planets
