"""Shared fixtures for the user directory tests."""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from services.cache import TTLCache
from services.repository import UserRepository
from services.store import UserStore
from services.users import UserService


class FakeClock:
    """Manually advanced clock so TTL tests don't sleep."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def cache(clock):
    return TTLCache(ttl_seconds=60, clock=clock)


@pytest.fixture
def repository(store, cache):
    return UserRepository(store, cache)


@pytest.fixture
def service(repository):
    return UserService(repository)


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.setenv("GIT_SHA", "abc123")
    monkeypatch.delenv("CACHE_TTL_SECONDS", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    return Settings()


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
