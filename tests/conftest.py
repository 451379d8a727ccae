"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Users and bearer tokens
"""

import os

# The app engine is never used by tests, but must not point at Postgres
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite://")
os.environ.setdefault("JSON_LOGS", "false")

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token
from app.models.user import User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
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


def make_user(db_session, **overrides) -> User:
    fields = {
        "id": uuid.uuid4(),
        "email": f"user_{uuid.uuid4().hex[:8]}@example.com",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "profile_image": "https://cdn.example.com/ada.png",
        "headline": "Hiring manager",
    }
    fields.update(overrides)
    user = User(**fields)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_factory(db_session):
    """Create users with profile defaults: user_factory(is_active=False)"""
    def factory(**overrides):
        return make_user(db_session, **overrides)
    return factory


@pytest.fixture
def token_headers():
    """Build an Authorization header for a user"""
    return auth_headers


@pytest.fixture
def user_a(db_session):
    return make_user(db_session, first_name="Alice", last_name="Owner")


@pytest.fixture
def user_b(db_session):
    return make_user(db_session, first_name="Bob", last_name="Other", headline="Recruiter")


@pytest.fixture
def headers_a(user_a):
    return auth_headers(user_a)


@pytest.fixture
def headers_b(user_b):
    return auth_headers(user_b)


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Senior Python Developer",
        "description": "Build and run our job matching APIs.",
        "company": "Acme Corp",
        "location": "San Francisco, CA (Remote)",
        "salary": "120k-150k",
        "requirements": "5+ years Python, FastAPI, PostgreSQL",
        "contactName": "Jane Recruiter",
        "contactEmail": "jane@acme.example",
    }
