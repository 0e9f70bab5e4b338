"""
Shared fixtures: an in-memory SQLite database behind the real FastAPI app.
"""
import os

# Must be set before app modules read settings
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models import User

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


def register(client, username: str) -> dict:
    """Sign up and log in, returning bearer auth headers."""
    client.post(
        "/api/auth/signup",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": "testpassword123"
        }
    )
    response = client.post(
        "/api/auth/login",
        json={"username": username, "password": "testpassword123"}
    )
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return register(client, "alice")


@pytest.fixture
def other_headers(client):
    return register(client, "mallory")


@pytest.fixture
def trip(client, auth_headers):
    """Trip 2024-06-01..2024-06-10 with a budget of 1000."""
    response = client.post(
        "/api/trips",
        json={
            "title": "Summer in Europe",
            "start_date": "2024-06-01",
            "end_date": "2024-06-10",
            "budget_limit": 1000
        },
        headers=auth_headers
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def add_destination(client, auth_headers):
    """Factory posting a destination to a trip; returns the raw response."""
    def _add(trip_id, arrival, departure, city="Paris", country="France", **extra):
        payload = {
            "city_name": city,
            "country": country,
            "arrival_date": arrival,
            "departure_date": departure,
        }
        payload.update(extra)
        return client.post(f"/api/trips/{trip_id}/destinations", json=payload, headers=auth_headers)
    return _add


@pytest.fixture
def owner(db_session):
    """A user row for calling services directly."""
    user = User(username="svc", email="svc@example.com", hashed_password="x")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user
