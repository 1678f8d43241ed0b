"""
Shared fixtures: an in-memory SQLite database injected through get_db.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from config.database import Base, get_db


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _register(client, email="parent@example.com", password="supersecret"):
    response = client.post("/api/auth/register", json={
        "name": "Parent",
        "email": email,
        "password": password,
    })
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def register_user(client):
    def _make(email="parent@example.com", password="supersecret"):
        return _register(client, email, password)
    return _make


@pytest.fixture
def auth_headers(register_user):
    return register_user()


@pytest.fixture
def baby(client, auth_headers):
    response = client.post("/api/babies", headers=auth_headers, json={
        "name": "Adam",
        "gender": "boy",
        "birth_date": "2024-01-15",
        "theme_color": "#8b5cf6",
    })
    assert response.status_code == 201
    return response.json()
