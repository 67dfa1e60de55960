from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from montyhall.api.assemblers import doors_resource, game_resource
from montyhall.api.deps import get_game_store
from montyhall.api.models import DoorsResource, GameResource
from montyhall.errors import DoorDoesNotExistError, GameDoesNotExistError, IllegalTransitionError, InvalidStatusError
from montyhall.game_store import GameStore
from montyhall.models import parse_door_status

router = APIRouter()

STATUS_KEY = "status"


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/games", status_code=status.HTTP_201_CREATED)
async def create_game_route(request: Request, store: GameStore = Depends(get_game_store)) -> Response:
    game = store.create()
    location = str(request.url_for("show_game_route", game_id=game.id))
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.get("/games/{game_id}", response_model=GameResource)
async def show_game_route(game_id: int, request: Request, store: GameStore = Depends(get_game_store)) -> GameResource:
    try:
        game = store.retrieve(game_id)
    except GameDoesNotExistError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return game_resource(request=request, game=game)


@router.delete("/games/{game_id}")
async def destroy_game_route(game_id: int, store: GameStore = Depends(get_game_store)) -> Response:
    try:
        store.remove(game_id)
    except GameDoesNotExistError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_200_OK)


@router.get("/games/{game_id}/doors", response_model=DoorsResource)
async def show_doors_route(game_id: int, request: Request, store: GameStore = Depends(get_game_store)) -> DoorsResource:
    try:
        game = store.retrieve(game_id)
    except GameDoesNotExistError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return doors_resource(request=request, game=game)


@router.put("/games/{game_id}/doors/{door_id}")
async def modify_door_route(
    game_id: int,
    door_id: int,
    body: dict[str, Any],
    store: GameStore = Depends(get_game_store),
) -> Response:
    try:
        if STATUS_KEY not in body:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Missing key '{STATUS_KEY}'")
        requested = parse_door_status(body[STATUS_KEY], key=STATUS_KEY)

        game = store.retrieve(game_id)
        game.transition(door_id, requested)
    except InvalidStatusError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except (GameDoesNotExistError, DoorDoesNotExistError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except IllegalTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    return Response(status_code=status.HTTP_200_OK)
