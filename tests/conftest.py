"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Job service wired to the test session
"""

import os

# Keep the app from waiting on a real database during import and startup
os.environ.setdefault("DATABASE_ENABLED", "false")
os.environ.setdefault("DATASOURCE_URL", "sqlite:///./test_app.db")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, DatabaseConnectionChecker, get_db
from app.core.deps import get_connection_checker
from app.crud.job import JobRepository
from app.models.job import Job
from app.services.job_service import JobService
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
def test_engine():
    return engine


@pytest.fixture
def repository(db_session):
    return JobRepository(db_session)


@pytest.fixture
def job_service(repository):
    return JobService(repository)


@pytest.fixture
def seeded_service(job_service):
    """Job service with the default jobs inserted"""
    job_service.seed_if_empty()
    return job_service


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependencies.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    checker = DatabaseConnectionChecker(engine)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_connection_checker] = lambda: checker

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Site Reliability Engineer",
        "department": "Engineering",
        "location": "Chennai / Remote",
        "type": "Full-time",
        "experience": "4+ years",
        "salary": "10 LPA - 14 LPA",
        "category": "engineering",
        "description": "Keep our platform fast and available. Own on-call, observability and capacity planning.",
        "requirements": "Kubernetes, Terraform, Prometheus, 4+ years experience",
        "posted": "true",
        "featured": False
    }


@pytest.fixture
def make_job():
    """Factory building unsaved Job instances with sensible defaults"""
    def _make(**overrides):
        values = {
            "title": "Test Job",
            "department": "Engineering",
            "location": "Bangalore",
            "type": "Full-time",
            "experience": "1+ years",
            "salary": "4 LPA - 6 LPA",
            "category": "engineering",
            "description": "A test job",
            "requirements": "Testing",
            "posted": "true",
            "applicants": 0,
            "featured": False,
        }
        values.update(overrides)
        return Job(**values)
    return _make
