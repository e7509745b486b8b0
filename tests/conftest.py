"""
Test configuration for the health diary backend.
"""
import os

# Settings are read at import time
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SWEEP_EXPIRED_TOKENS_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from health_diary.database import Base, get_db
from health_diary.main import app
from health_diary.users.models import UserRole
from health_diary.users.service import create_user

# Test database URL
TEST_DATABASE_URL = "sqlite://"

# Create test database engine
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "secret123"


@pytest.fixture(scope="function")
def db():
    """
    Create a fresh database for each test.
    """
    # Create tables
    Base.metadata.create_all(bind=engine)

    # Create session
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

    # Drop tables after test
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """
    Create a test client with a test database session.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    # Override the get_db dependency
    app.dependency_overrides[get_db] = override_get_db

    # Create test client
    with TestClient(app) as client:
        yield client

    # Remove dependency override
    app.dependency_overrides = {}


@pytest.fixture
def doctor(db):
    return create_user(db, name="Dr. Ana Lima", email="ana@example.com", password=PASSWORD, role=UserRole.DOCTOR)


@pytest.fixture
def patient(db):
    return create_user(db, name="Bruno Costa", email="bruno@example.com", password=PASSWORD, role=UserRole.PATIENT)


@pytest.fixture
def login(client):
    """
    Log a user in through the API and return the response body.
    """
    def _login(email, password=PASSWORD):
        response = client.post("/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return response.json()
    return _login
