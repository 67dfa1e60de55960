from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from montyhall.errors import IllegalTransitionError
from montyhall.models import DoorStatus, GamePhase

if TYPE_CHECKING:
    from montyhall.game import Game


MoveName = Literal["select", "open"]

_TARGET_STATUS: dict[str, DoorStatus] = {
    "select": DoorStatus.SELECTED,
    "open": DoorStatus.OPEN,
}


@dataclass(frozen=True, slots=True)
class MoveContext:
    """The move being attempted; enough to build a precise error message."""

    game_id: int
    door_id: int
    move: MoveName

    @property
    def target(self) -> DoorStatus:
        return _TARGET_STATUS[self.move]

    def reject(self, reason: str) -> IllegalTransitionError:
        return IllegalTransitionError(self.game_id, self.door_id, self.target, reason)


class MoveValidator(ABC):
    """A small, composable legality check for a requested move."""

    @abstractmethod
    def validate(self, *, ctx: MoveContext, game: Game) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class PhaseValidator(MoveValidator):
    """Validates the game phase for a given move.

    `reasons` gives a friendlier message for specific wrong phases; any other
    wrong phase gets the generic one.
    """

    allowed_phases: frozenset[GamePhase]
    reasons: dict[GamePhase, str] = field(default_factory=dict)

    def validate(self, *, ctx: MoveContext, game: Game) -> None:
        phase = game.phase
        if phase in self.allowed_phases:
            return
        reason = self.reasons.get(phase)
        if reason is None:
            allowed = ",".join(sorted(p.value for p in self.allowed_phases))
            reason = f"move '{ctx.move}' not allowed in phase '{phase.value}' (allowed: {allowed})"
        raise ctx.reject(reason)


@dataclass(frozen=True, slots=True)
class RevealedDoorValidator(MoveValidator):
    """The door the host opened is settled and cannot be played."""

    def validate(self, *, ctx: MoveContext, game: Game) -> None:
        if game.revealed_door_id == ctx.door_id:
            raise ctx.reject("door was already opened by the host")


@dataclass(frozen=True, slots=True)
class DoorStatusValidator(MoveValidator):
    allowed_statuses: frozenset[DoorStatus]

    def validate(self, *, ctx: MoveContext, game: Game) -> None:
        status = game.door(ctx.door_id).status
        if status not in self.allowed_statuses:
            raise ctx.reject(f"door is {status.value}")


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[MoveValidator, ...]

    def validate(self, *, ctx: MoveContext, game: Game) -> None:
        for v in self.validators:
            v.validate(ctx=ctx, game=game)


DEFAULT_MOVE_PIPELINES: dict[str, ValidatorPipeline] = {
    "select": ValidatorPipeline(
        validators=(
            PhaseValidator(
                allowed_phases=frozenset({GamePhase.initial}),
                reasons={
                    GamePhase.selected: "a door is already selected",
                    GamePhase.resolved: "the game is already resolved",
                },
            ),
            DoorStatusValidator(allowed_statuses=frozenset({DoorStatus.CLOSED})),
        )
    ),
    "open": ValidatorPipeline(
        validators=(
            PhaseValidator(
                allowed_phases=frozenset({GamePhase.selected}),
                reasons={
                    GamePhase.initial: "no door has been selected yet",
                    GamePhase.resolved: "the game is already resolved",
                },
            ),
            RevealedDoorValidator(),
            DoorStatusValidator(allowed_statuses=frozenset({DoorStatus.CLOSED, DoorStatus.SELECTED})),
        )
    ),
}


def pipeline_for_move(move: str) -> ValidatorPipeline:
    try:
        return DEFAULT_MOVE_PIPELINES[move]
    except KeyError as e:
        raise ValueError(f"Unknown move: {move}") from e
