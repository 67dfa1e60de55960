from __future__ import annotations

from montyhall.game_store import GameStore, create_game_store

_STORE: GameStore | None = None


def init_game_store() -> GameStore:
    """Create the process-wide store once; later calls return the same instance."""

    global _STORE
    if _STORE is None:
        _STORE = create_game_store()
    return _STORE


def reset_game_store_for_tests() -> None:
    global _STORE
    _STORE = None


def get_game_store() -> GameStore:
    if _STORE is None:
        raise RuntimeError("Game store not initialized. Call init_game_store() at startup.")
    return _STORE
