from __future__ import annotations

from enum import StrEnum

from montyhall.errors import InvalidStatusError


class DoorStatus(StrEnum):
    CLOSED = "CLOSED"
    SELECTED = "SELECTED"
    OPEN = "OPEN"


class GamePhase(StrEnum):
    initial = "initial"
    # A door is selected and the host has revealed another; waiting for the final open.
    selected = "selected"
    resolved = "resolved"


class GameOutcome(StrEnum):
    win = "win"
    lose = "lose"


def parse_door_status(value: object, *, key: str = "status") -> DoorStatus:
    """Convert a raw request value (any case) into a DoorStatus."""

    if not isinstance(value, str):
        raise InvalidStatusError(value, key=key)
    try:
        return DoorStatus(value.strip().upper())
    except ValueError as e:
        raise InvalidStatusError(value, key=key) from e
