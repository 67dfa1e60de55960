from __future__ import annotations

import random
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from montyhall.api.deps import get_game_store, reset_game_store_for_tests
from montyhall.game_store import GameStore
from montyhall.main import app


@pytest.fixture()
def store() -> GameStore:
    return GameStore(rng=random.Random(1234))


@pytest.fixture()
def client(store: GameStore) -> Generator[TestClient, None, None]:
    """TestClient wired to a fresh seeded store instead of the process-wide one."""

    def _override() -> GameStore:
        return store

    app.dependency_overrides[get_game_store] = _override
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_game_store_for_tests()
