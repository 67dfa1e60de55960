from __future__ import annotations


class MontyHallError(Exception):
    """Base class for every failure the game core reports."""


class GameDoesNotExistError(MontyHallError, LookupError):
    def __init__(self, game_id: int) -> None:
        self.game_id = game_id
        super().__init__(f"Game '{game_id}' does not exist")


class DoorDoesNotExistError(MontyHallError, LookupError):
    def __init__(self, game_id: int, door_id: int) -> None:
        self.game_id = game_id
        self.door_id = door_id
        super().__init__(f"Door '{door_id}' does not exist in game '{game_id}'")


class IllegalTransitionError(MontyHallError):
    """A well-formed move that the game's current phase does not allow."""

    def __init__(self, game_id: int, door_id: int, status: str, reason: str | None = None) -> None:
        self.game_id = game_id
        self.door_id = door_id
        self.status = str(status)
        self.reason = reason
        message = f"It is illegal to transition door '{door_id}' in game '{game_id}' to '{self.status}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidStatusError(MontyHallError, ValueError):
    def __init__(self, value: object, key: str = "status") -> None:
        self.value = value
        self.key = key
        super().__init__(f"'{value}' is an illegal value for key '{key}'")
