from __future__ import annotations

from pydantic import BaseModel, Field

from montyhall.models import DoorStatus, GameOutcome, GamePhase


class Link(BaseModel):
    rel: str
    href: str


class DoorResource(BaseModel):
    id: int
    status: DoorStatus

    # Only known once the door is OPEN; null while it is still closed or selected.
    has_prize: bool | None = None

    links: list[Link] = Field(default_factory=list)


class DoorsResource(BaseModel):
    doors: list[DoorResource]
    links: list[Link] = Field(default_factory=list)


class GameResource(BaseModel):
    id: int
    phase: GamePhase
    outcome: GameOutcome | None = None
    links: list[Link] = Field(default_factory=list)
