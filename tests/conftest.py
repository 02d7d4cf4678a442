import os

# Point the app at a throwaway in-memory database before it is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key"

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core.database import Base, SessionLocal, engine, init_db
from app.core.security import create_access_token, hash_password
from app.users.models import User
from app.users.repositories.user_repository import UserRepository


def auth_headers(user):
    token = create_access_token(user.user_id, user.email, user.role)
    return {"Authorization": f"Bearer {token}"}


def days_from_today(days):
    return (date.today() + timedelta(days=days)).isoformat()


@pytest.fixture(autouse=True)
def setup_database():
    """Fresh schema for every test"""
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_session():
    """Session for arranging and inspecting rows directly"""
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def make_user(db_session):
    """Factory for users stored straight into the database"""
    counter = {"n": 0}

    def _make_user(name="Player", role="user", email=None, password="password1"):
        counter["n"] += 1
        user = User(
            name=name,
            email=email or f"user{counter['n']}@example.com",
            password_hash=hash_password(password),
            role=role,
        )
        UserRepository(db_session).add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def admin_user(make_user):
    return make_user(name="Admin", role="admin", email="admin@example.com")


@pytest.fixture
def regular_user(make_user):
    return make_user(name="Jordan", email="jordan@example.com")


@pytest.fixture
def admin_headers(admin_user):
    return auth_headers(admin_user)


@pytest.fixture
def user_headers(regular_user):
    return auth_headers(regular_user)


@pytest.fixture
def create_team(client, admin_headers):
    def _create_team(name="Eagles", captain="Alex", password="secret1", **extra):
        response = client.post(
            "/teams",
            json={"name": name, "captain": captain, "password": password, **extra},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.json()
        return response.json()["team"]

    return _create_team


@pytest.fixture
def create_league(client, admin_headers):
    def _create_league(name="Spring League", start_offset=10, end_offset=60, **extra):
        response = client.post(
            "/leagues",
            json={
                "name": name,
                "startDate": days_from_today(start_offset),
                "endDate": days_from_today(end_offset),
                **extra,
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.json()
        return response.json()["league"]

    return _create_league


@pytest.fixture
def create_ground(client, admin_headers):
    def _create_ground(name="Central Park Arena", price=50, **extra):
        response = client.post(
            "/grounds",
            json={"name": name, "location": "Downtown", "size": "7-a-side", "pricePerHour": price, **extra},
            headers=admin_headers,
        )
        assert response.status_code == 201, response.json()
        return response.json()["ground"]

    return _create_ground


@pytest.fixture
def create_match(client, admin_headers):
    def _create_match(name="Sunday Kickabout", days_ahead=7, **extra):
        payload = {
            "name": name,
            "date": days_from_today(days_ahead),
            "time": "18:30",
            "location": "Riverside Pitch",
            "matchType": "5-a-side",
        }
        payload.update(extra)
        response = client.post("/matches", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.json()
        return response.json()["match"]

    return _create_match
