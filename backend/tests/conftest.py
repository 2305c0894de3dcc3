from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from repositories import MemoryStore
from wall_service import WallService

START = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Returns START, then advances by ``step`` on every call."""

    def __init__(self, start: datetime = START, step: timedelta = timedelta(seconds=1)):
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(store: MemoryStore, clock: FakeClock) -> WallService:
    return WallService(store, clock=clock)


@pytest.fixture
def ana(service: WallService):
    result = service.register("ana", "Ana", "Gomez", "secret1")
    assert result.ok
    return result.value


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch, store: MemoryStore):
    monkeypatch.setenv("WALL_STORAGE", "memory")
    with TestClient(create_app(Settings(), store=store)) as c:
        yield c
