from __future__ import annotations

import itertools
import logging
import random
import threading

from montyhall.config import get_seed
from montyhall.errors import GameDoesNotExistError
from montyhall.game import Game

logger = logging.getLogger(__name__)


class GameStore:
    """Thread-safe in-memory registry of games keyed by integer id.

    Ids are issued from 1 upwards and never reused. Each game gets its own
    generator derived from the store's, so a seeded store replays the same
    sequence of games.
    """

    def __init__(self, *, rng: random.Random | None = None) -> None:
        if rng is None:
            rng = random.Random(random.SystemRandom().randint(1, 2**31 - 1))
        self._rng = rng
        self._games: dict[int, Game] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self) -> Game:
        with self._lock:
            game_id = next(self._ids)
            game = Game(game_id, rng=random.Random(self._rng.getrandbits(64)))
            self._games[game_id] = game
        logger.info("created game %s", game_id)
        return game

    def retrieve(self, game_id: int) -> Game:
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            raise GameDoesNotExistError(game_id)
        return game

    def remove(self, game_id: int) -> None:
        with self._lock:
            game = self._games.pop(game_id, None)
        if game is None:
            raise GameDoesNotExistError(game_id)
        logger.info("removed game %s", game_id)

    def list_ids(self) -> list[int]:
        with self._lock:
            return sorted(self._games)

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def __contains__(self, game_id: object) -> bool:
        with self._lock:
            return game_id in self._games


def create_game_store() -> GameStore:
    seed = get_seed()
    if seed is None:
        return GameStore()
    logger.info("seeding game store with %s", seed)
    return GameStore(rng=random.Random(seed))
