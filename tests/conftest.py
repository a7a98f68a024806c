"""Pytest configuration and fixtures."""

import os

# Settings are read once at import time, so the environment must be set first
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from src.database import Base, get_db  # noqa: E402
from src.main import app  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and username."""

    def __init__(self, *args, user_id: int | None = None, username: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.username = username


SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    from src import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(client, username: str, password: str, name: str | None = None) -> AuthHeaders:
    """Create a user through the API and return bearer headers for it."""
    response = client.post(
        "/api/v1/users",
        json={"username": username, "name": name, "password": password},
    )
    assert response.status_code == 201

    response = client.post("/api/v1/login", json={"username": username, "password": password})
    assert response.status_code == 200
    data = response.json()

    return AuthHeaders(
        {"Authorization": f"Bearer {data['access_token']}"},
        user_id=data["user"]["id"],
        username=username,
    )


@pytest.fixture
def auth_headers(client):
    """Create the root user and return auth headers with user info."""
    return register_and_login(client, "root", "password", "Superuser")


@pytest.fixture
def other_auth_headers(client):
    """Create a second user and return auth headers for it."""
    return register_and_login(client, "newuser", "password", "New User")


@pytest.fixture
def initial_post(client, auth_headers):
    """Create one post owned by the root user."""
    response = client.post(
        "/api/v1/posts",
        headers=auth_headers,
        json={
            "title": "async/await simplifies making async calls",
            "author": "Test Author",
            "url": "http://example.com",
            "likes": 5,
        },
    )
    assert response.status_code == 201
    return response.json()
