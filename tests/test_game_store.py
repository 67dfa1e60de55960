from __future__ import annotations

import random
import threading

import pytest

from montyhall.errors import GameDoesNotExistError
from montyhall.game_store import GameStore, create_game_store
from montyhall.models import DoorStatus, GamePhase


def test_create_issues_increasing_ids(store: GameStore) -> None:
    games = [store.create() for _ in range(3)]

    assert [g.id for g in games] == [1, 2, 3]
    assert store.list_ids() == [1, 2, 3]
    assert len(store) == 3
    assert all(g.phase == GamePhase.initial for g in games)


def test_retrieve_returns_the_same_game(store: GameStore) -> None:
    game = store.create()
    game.select(1)

    again = store.retrieve(game.id)
    assert again is game
    assert again.door(1).status == DoorStatus.SELECTED


def test_retrieve_unknown_game(store: GameStore) -> None:
    store.create()

    with pytest.raises(GameDoesNotExistError) as e:
        store.retrieve(42)

    assert e.value.game_id == 42
    assert str(e.value) == "Game '42' does not exist"
    assert store.list_ids() == [1]


def test_remove_twice_fails_the_second_time(store: GameStore) -> None:
    game = store.create()

    store.remove(game.id)
    assert game.id not in store

    with pytest.raises(GameDoesNotExistError):
        store.remove(game.id)
    with pytest.raises(GameDoesNotExistError):
        store.retrieve(game.id)


def test_ids_are_not_reused_after_remove(store: GameStore) -> None:
    first = store.create()
    store.remove(first.id)

    assert store.create().id == 2


def test_seeded_stores_replay_the_same_games() -> None:
    def _layout(s: GameStore) -> list[int | None]:
        out = []
        for _ in range(10):
            game = s.create()
            game.select(1)
            out.append(game.revealed_door_id)
        return out

    assert _layout(GameStore(rng=random.Random(7))) == _layout(GameStore(rng=random.Random(7)))


def test_concurrent_creates_get_unique_ids(store: GameStore) -> None:
    ids: list[int] = []
    lock = threading.Lock()
    barrier = threading.Barrier(16)

    def _worker() -> None:
        barrier.wait()
        local = [store.create().id for _ in range(50)]
        with lock:
            ids.extend(local)

    threads = [threading.Thread(target=_worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(ids) == 800
    assert len(set(ids)) == 800
    assert len(store) == 800


def test_create_game_store_honours_seed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONTYHALL_SEED", "99")
    a = create_game_store()
    b = create_game_store()

    for _ in range(5):
        ga, gb = a.create(), b.create()
        ga.select(2)
        gb.select(2)
        assert ga.revealed_door_id == gb.revealed_door_id
