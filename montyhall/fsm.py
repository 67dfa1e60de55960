from __future__ import annotations

from statemachine import State, StateMachine

from montyhall.models import DoorStatus, GamePhase


class DoorFSM(StateMachine):
    """Guards the status of a single door.

    - CLOSED -> SELECTED: the player's first pick
    - CLOSED -> OPEN: the host reveal, or the player switching
    - SELECTED -> OPEN: the player staying

    CLOSED is never re-entered and OPEN is final.
    """

    closed = State(DoorStatus.CLOSED.value, value=DoorStatus.CLOSED.value, initial=True)
    selected = State(DoorStatus.SELECTED.value, value=DoorStatus.SELECTED.value)
    opened = State(DoorStatus.OPEN.value, value=DoorStatus.OPEN.value, final=True)

    select = closed.to(selected)
    open = closed.to(opened) | selected.to(opened)

    def __init__(self, status: DoorStatus = DoorStatus.CLOSED):
        super().__init__(start_value=status.value)

    @property
    def status(self) -> DoorStatus:
        return DoorStatus(str(self.current_state.value))


class GameFSM(StateMachine):
    """Game-level phases: initial -> selected -> resolved.

    `select` covers the player's pick together with the host reveal; `open` is
    the player's final move. Door-level legality is checked separately.
    """

    initial = State(GamePhase.initial.value, value=GamePhase.initial.value, initial=True)
    selected = State(GamePhase.selected.value, value=GamePhase.selected.value)
    resolved = State(GamePhase.resolved.value, value=GamePhase.resolved.value, final=True)

    select = initial.to(selected)
    open = selected.to(resolved)

    def __init__(self, phase: GamePhase = GamePhase.initial):
        super().__init__(start_value=phase.value)

    @property
    def phase(self) -> GamePhase:
        return GamePhase(str(self.current_state.value))
