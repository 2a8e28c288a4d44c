"""Pytest configuration and fixtures.

Every test gets its own in-memory SQLite database wrapped in a `Database`
handle and a FastAPI TestClient built around it.
"""

from __future__ import annotations

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from travel_admin.core.database import Database
from travel_admin.main import create_app


# --- Database Fixtures ---


@pytest.fixture
def database() -> Generator[Database, None, None]:
    """In-memory SQLite shared across threads (TestClient runs sync endpoints in a threadpool)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db = Database(engine=engine)
    db.init_db()

    yield db

    engine.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def client(database) -> Generator[TestClient, None, None]:
    app = create_app(database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def lenient_client(database) -> Generator[TestClient, None, None]:
    """Client that returns 500 responses instead of re-raising server errors."""
    app = create_app(database)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


# --- Sample Data Factories ---


@pytest.fixture
def make_region(client) -> Callable[..., dict]:
    def _make(**overrides) -> dict:
        payload = {
            "title": "Swiss Alps",
            "description": "Mountains and lakes",
            "img": ["/uploads/alps.jpg"],
            "link": "https://example.com/alps",
        }
        payload.update(overrides)
        response = client.post("/api/regions", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def region(make_region) -> dict:
    return make_region()


@pytest.fixture
def tour_payload(region) -> dict:
    """Full payload shared by the three tour resources."""
    return {
        "title": "Glacier walk",
        "transport": "bus",
        "duration": "3 days",
        "timeToStart": "08:00",
        "type": "hiking",
        "level": "medium",
        "minNumPeople": 2,
        "maxNumPeople": 12,
        "price": 450,
        "addInfo": "Bring boots",
        "img": ["/uploads/glacier.jpg"],
        "tourDates": ["2026-07-01", "2026-07-15"],
        "bookingType": "request",
        "places": ["Zermatt", "Gornergrat"],
        "checklists": ["boots", "jacket"],
        "regionId": region["id"],
        "infoByDays": [
            {"title": "Day 1", "description": "Arrival"},
            {"title": "Day 2", "description": "Glacier"},
        ],
    }
