from __future__ import annotations

import random

import pytest

from montyhall.errors import IllegalTransitionError
from montyhall.game import Game
from montyhall.models import DoorStatus, GamePhase
from montyhall.validators import (
    DoorStatusValidator,
    MoveContext,
    PhaseValidator,
    RevealedDoorValidator,
    pipeline_for_move,
)


def _game(prize_door_id: int = 2) -> Game:
    return Game(1, rng=random.Random(0), prize_door_id=prize_door_id)


def test_phase_validator_denies_wrong_phase_with_generic_message() -> None:
    game = _game()
    ctx = MoveContext(game_id=game.id, door_id=1, move="open")
    validator = PhaseValidator(allowed_phases=frozenset({GamePhase.selected}))

    with pytest.raises(IllegalTransitionError) as e:
        validator.validate(ctx=ctx, game=game)

    assert "not allowed in phase 'initial'" in str(e.value)
    assert "allowed: selected" in str(e.value)


def test_open_pipeline_explains_missing_selection() -> None:
    game = _game()
    ctx = MoveContext(game_id=game.id, door_id=3, move="open")

    with pytest.raises(IllegalTransitionError) as e:
        pipeline_for_move("open").validate(ctx=ctx, game=game)

    assert e.value.reason == "no door has been selected yet"
    assert e.value.status == "OPEN"


def test_revealed_door_validator() -> None:
    game = _game(prize_door_id=2)
    game.select(1)
    assert game.revealed_door_id == 3

    ctx = MoveContext(game_id=game.id, door_id=3, move="open")
    with pytest.raises(IllegalTransitionError) as e:
        RevealedDoorValidator().validate(ctx=ctx, game=game)
    assert "host" in str(e.value)

    # Other doors pass.
    RevealedDoorValidator().validate(ctx=MoveContext(game_id=game.id, door_id=2, move="open"), game=game)


def test_door_status_validator() -> None:
    game = _game()
    game.select(1)
    validator = DoorStatusValidator(allowed_statuses=frozenset({DoorStatus.CLOSED}))

    with pytest.raises(IllegalTransitionError) as e:
        validator.validate(ctx=MoveContext(game_id=game.id, door_id=1, move="select"), game=game)
    assert e.value.reason == "door is SELECTED"


def test_select_pipeline_reports_existing_selection() -> None:
    game = _game()
    game.select(2)
    ctx = MoveContext(game_id=game.id, door_id=1, move="select")

    with pytest.raises(IllegalTransitionError) as e:
        pipeline_for_move("select").validate(ctx=ctx, game=game)
    assert e.value.reason == "a door is already selected"


def test_unknown_move_pipeline_raises() -> None:
    with pytest.raises(ValueError) as e:
        pipeline_for_move("close")
    assert "Unknown move" in str(e.value)
