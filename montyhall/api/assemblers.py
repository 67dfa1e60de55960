from __future__ import annotations

from fastapi import Request

from montyhall.api.models import DoorResource, DoorsResource, GameResource, Link
from montyhall.game import Game


def _game_href(request: Request, game: Game) -> str:
    return str(request.url_for("show_game_route", game_id=game.id))


def _doors_href(request: Request, game: Game) -> str:
    return str(request.url_for("show_doors_route", game_id=game.id))


def game_resource(*, request: Request, game: Game) -> GameResource:
    return GameResource(
        id=game.id,
        phase=game.phase,
        outcome=game.outcome,
        links=[
            Link(rel="self", href=_game_href(request, game)),
            Link(rel="doors", href=_doors_href(request, game)),
        ],
    )


def doors_resource(*, request: Request, game: Game) -> DoorsResource:
    doors = [
        DoorResource(
            id=door.id,
            status=door.status,
            has_prize=door.has_prize,
            links=[
                Link(
                    rel="self",
                    href=str(request.url_for("modify_door_route", game_id=game.id, door_id=door.id)),
                )
            ],
        )
        for door in game.doors
    ]
    return DoorsResource(
        doors=doors,
        links=[
            Link(rel="self", href=_doors_href(request, game)),
            Link(rel="game", href=_game_href(request, game)),
        ],
    )
