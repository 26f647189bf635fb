"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Registered accounts with bearer tokens
"""

import os

# Settings are read at import time; point them at SQLite and cheap hashing
# before anything from the application is imported.
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from applytrack.core.database import Base, get_db
from applytrack.core.security import get_password_hash
from applytrack.crud import account as account_crud
import applytrack.models  # noqa: F401
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

DEFAULT_PASSWORD = "SecurePass123!"


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_account(db_session):
    """Factory creating an account row directly (bypasses the API)."""
    def _make(email: str = "owner@example.com", password: str = DEFAULT_PASSWORD):
        return account_crud.create(db_session, email=email, hashed_password=get_password_hash(password))

    return _make


@pytest.fixture
def login(client):
    """
    Factory: register an account through the API and log it in.

    Returns (account_id, headers) where headers carry the bearer token.
    """
    def _login(email: str, password: str = DEFAULT_PASSWORD):
        response = client.post("/api/v1/auth/register", json={
            "email": email,
            "password": password,
            "confirmPassword": password,
        })
        assert response.status_code == 201, response.text

        response = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        data = response.json()
        return data["accountId"], {"Authorization": f"Bearer {data['token']}"}

    return _login


@pytest.fixture
def owner(login):
    """(account_id, headers) of the account that owns the test data"""
    return login("owner@example.com")


@pytest.fixture
def intruder(login):
    """(account_id, headers) of a second, unrelated account"""
    return login("intruder@example.com")


@pytest.fixture
def sample_application_data():
    """Sample job application payload"""
    return {
        "companyName": "Acme",
        "jobRole": "Engineer",
        "status": "APPLIED",
        "appliedDate": "2024-01-10",
    }


@pytest.fixture
def sample_round_data():
    """Sample interview round payload (two days after the sample applied date)"""
    return {
        "roundType": "PHONE",
        "interviewDate": "2024-01-12",
        "notes": "Recruiter screen",
        "result": "PENDING",
    }
