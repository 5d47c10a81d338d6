"""Shared fixtures: a fresh in-memory record store per test, a fake clock, and an API client."""

import os
import sys

import pytest
from sqlalchemy.orm import sessionmaker

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from promptvault.database import build_engine, get_db, init_db
from promptvault.middleware.auth import create_access_token, get_clock
from promptvault.models.prompt import PromptCategory
from promptvault.schemas.prompt import PromptCreate
from promptvault.services import prompt_service, user_service


class FakeClock:
    """Monotonic nanosecond clock that advances one microsecond per reading."""

    def __init__(self, start: int = 1_700_000_000_000_000_000, step: int = 1_000):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        self.now += self.step
        return self.now


@pytest.fixture
def engine():
    eng = build_engine("sqlite://")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_user(db, clock):
    """Create a user record for a principal."""
    def _make(principal: str, username=None, email=None):
        return user_service.create_user(db, principal, clock(), username, email)
    return _make


@pytest.fixture
def make_prompt(db, clock):
    """Create a prompt authored by ``author`` with sensible defaults."""
    def _make(author: str, **overrides):
        fields = {
            "title": "Cold email opener",
            "description": "Three-line outreach opener for B2B sales",
            "content": "Write a cold email to {name} about {product}.",
            "category": PromptCategory.MARKETING,
            "tags": ["email", "sales"],
            "price": 100_000_000,
            "is_premium": False,
            "is_public": True,
        }
        fields.update(overrides)
        return prompt_service.create_prompt(db, author, clock(), PromptCreate(**fields))
    return _make


@pytest.fixture
def client(session_factory, clock):
    from fastapi.testclient import TestClient
    from promptvault.main import app

    def _override_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_db
    app.dependency_overrides[get_clock] = lambda: clock
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def auth(principal: str) -> dict:
    """Authorization header for a caller principal."""
    return {"Authorization": f"Bearer {create_access_token(principal)}"}


@pytest.fixture
def headers():
    return auth
