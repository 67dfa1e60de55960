from __future__ import annotations

import logging
import random
import threading

from statemachine.exceptions import TransitionNotAllowed

from montyhall.errors import DoorDoesNotExistError, IllegalTransitionError
from montyhall.fsm import DoorFSM, GameFSM
from montyhall.models import DoorStatus, GameOutcome, GamePhase
from montyhall.validators import MoveContext, MoveName, pipeline_for_move

logger = logging.getLogger(__name__)

DOOR_IDS: tuple[int, ...] = (1, 2, 3)

_DOOR_EVENTS: dict[DoorStatus, str] = {
    DoorStatus.SELECTED: "select",
    DoorStatus.OPEN: "open",
}


class Door:
    """One of a game's three doors.

    The prize flag is fixed at creation and only readable once the door is OPEN.
    Status changes go through `set_status`, which only allows the moves the
    DoorFSM declares. Nothing but the owning Game should call it.
    """

    def __init__(self, *, game_id: int, door_id: int, has_prize: bool) -> None:
        self._game_id = game_id
        self._id = door_id
        self._has_prize = has_prize
        self._status = DoorStatus.CLOSED

    @property
    def id(self) -> int:
        return self._id

    @property
    def status(self) -> DoorStatus:
        return self._status

    @property
    def has_prize(self) -> bool | None:
        if self._status != DoorStatus.OPEN:
            return None
        return self._has_prize

    def set_status(self, status: DoorStatus) -> None:
        event = _DOOR_EVENTS.get(status)
        if event is None:
            raise IllegalTransitionError(self._game_id, self._id, status, "doors cannot be moved back to CLOSED")

        fsm = DoorFSM(self._status)
        try:
            fsm.send(event)
        except TransitionNotAllowed as e:
            raise IllegalTransitionError(self._game_id, self._id, status, f"door is {self._status.value}") from e
        self._status = fsm.status

    def __repr__(self) -> str:
        return f"Door(id={self._id}, status={self._status.value})"


class Game:
    """A single Monty Hall round.

    `select` marks the player's pick and has the host open one other door that
    does not hide the prize; `open` is the player's final move, either staying
    on the selected door or switching to the remaining closed one. A move that
    fails leaves every door as it was.
    """

    def __init__(self, game_id: int, *, rng: random.Random | None = None, prize_door_id: int | None = None) -> None:
        self._id = game_id
        self._rng = rng if rng is not None else random.Random()

        if prize_door_id is None:
            prize_door_id = self._rng.choice(DOOR_IDS)
        elif prize_door_id not in DOOR_IDS:
            raise DoorDoesNotExistError(game_id, prize_door_id)
        self._prize_door_id = prize_door_id

        self._doors: dict[int, Door] = {
            door_id: Door(game_id=game_id, door_id=door_id, has_prize=door_id == prize_door_id) for door_id in DOOR_IDS
        }
        self._phase = GamePhase.initial
        self._selected_door_id: int | None = None
        self._revealed_door_id: int | None = None
        self._opened_door_id: int | None = None
        self._lock = threading.Lock()

    @property
    def id(self) -> int:
        return self._id

    @property
    def doors(self) -> tuple[Door, ...]:
        return tuple(self._doors[door_id] for door_id in DOOR_IDS)

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def selected_door_id(self) -> int | None:
        """The player's first pick; kept after the game resolves."""
        return self._selected_door_id

    @property
    def revealed_door_id(self) -> int | None:
        return self._revealed_door_id

    @property
    def opened_door_id(self) -> int | None:
        return self._opened_door_id

    @property
    def outcome(self) -> GameOutcome | None:
        if self._opened_door_id is None:
            return None
        return GameOutcome.win if self._opened_door_id == self._prize_door_id else GameOutcome.lose

    def door(self, door_id: int) -> Door:
        try:
            return self._doors[door_id]
        except KeyError as e:
            raise DoorDoesNotExistError(self._id, door_id) from e

    def select(self, door_id: int) -> None:
        with self._lock:
            door = self.door(door_id)
            self._validate(door_id, "select")

            # The host never opens the selected door or the prize door. When the
            # player picked the prize there are two candidates.
            candidates = [d for d in DOOR_IDS if d != door_id and d != self._prize_door_id]
            revealed_id = self._rng.choice(candidates)

            phase = self._advance("select", door_id, DoorStatus.SELECTED)
            door.set_status(DoorStatus.SELECTED)
            self._doors[revealed_id].set_status(DoorStatus.OPEN)

            self._phase = phase
            self._selected_door_id = door_id
            self._revealed_door_id = revealed_id

        logger.info("game %s: door %s selected, host revealed door %s", self._id, door_id, revealed_id)

    def open(self, door_id: int) -> None:
        with self._lock:
            door = self.door(door_id)
            self._validate(door_id, "open")

            phase = self._advance("open", door_id, DoorStatus.OPEN)
            door.set_status(DoorStatus.OPEN)

            self._phase = phase
            self._opened_door_id = door_id

        logger.info(
            "game %s: door %s opened (%s, %s)",
            self._id,
            door_id,
            "stay" if door_id == self._selected_door_id else "switch",
            self.outcome,
        )

    def transition(self, door_id: int, status: DoorStatus) -> None:
        """Drive `door_id` towards a requested status.

        SELECTED means `select`, OPEN means `open`. No move leads to CLOSED.
        """

        if status == DoorStatus.SELECTED:
            self.select(door_id)
        elif status == DoorStatus.OPEN:
            self.open(door_id)
        else:
            self.door(door_id)
            raise IllegalTransitionError(self._id, door_id, status, "doors cannot be moved back to CLOSED")

    def _validate(self, door_id: int, move: MoveName) -> None:
        ctx = MoveContext(game_id=self._id, door_id=door_id, move=move)
        try:
            pipeline_for_move(move).validate(ctx=ctx, game=self)
        except IllegalTransitionError as e:
            logger.debug("game %s: rejected %s on door %s: %s", self._id, move, door_id, e.reason)
            raise

    def _advance(self, event: str, door_id: int, status: DoorStatus) -> GamePhase:
        fsm = GameFSM(self._phase)
        try:
            fsm.send(event)
        except TransitionNotAllowed as e:
            raise IllegalTransitionError(self._id, door_id, status, f"game is {self._phase.value}") from e
        return fsm.phase

    def __repr__(self) -> str:
        return f"Game(id={self._id}, phase={self._phase.value}, doors={list(self._doors.values())!r})"
