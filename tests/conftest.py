"""Shared test fixtures for the InkScore test suite."""

import os

# Must be set before any inkscore module is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "inkscore-test-secret")
os.environ.setdefault("ANALYSIS_RATE_LIMIT", "1000/minute")
os.environ.setdefault("ENABLE_SCHEDULER", "false")

import pytest
from fastapi.testclient import TestClient

from inkscore.main import app
from inkscore.models.database import Base, SessionLocal, engine
from inkscore.models.user import User
from inkscore.utils.jwt_utils import create_access_token


# ── Database ─────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _tables():
    """Fresh schema per test (in-memory SQLite shared through StaticPool)."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user(db):
    u = User(id="user-1", email="writer@example.com")
    db.add(u)
    db.commit()
    return u


# ── API ──────────────────────────────────────────────────────────────────

@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def auth_headers():
    def _headers(user_id: str = "user-1") -> dict:
        token = create_access_token({"sub": user_id, "email": f"{user_id}@example.com"})
        return {"Authorization": f"Bearer {token}"}
    return _headers


# ── Payloads ─────────────────────────────────────────────────────────────

@pytest.fixture
def sample_features():
    return {
        "LSZ": 0.8, "PRT": 0.8, "SLN": 0.5, "RHM": 0.5, "LCR": 0.2,
        "BLN": 0.9, "MLM": 0.5, "WSP": 0.5, "LSP": 0.5, "CNT": 0.5,
    }


@pytest.fixture
def sample_traits():
    return {
        "CNF": 0.7, "EMX": 0.4, "CRT": 0.6, "DSC": 0.5,
        "SOC": 0.3, "NRG": 0.8, "INT": 0.2, "IND": 0.9,
    }
