from __future__ import annotations

import logging

from .board import RequestBoard
from .car import CarState
from .direction import CarMode, Direction
from .interface import TickResult

logger = logging.getLogger(__name__)


class SweepDispatcher:
    """Shuttles end to end regardless of demand.

    Calls matching the travel direction are cleared on the tick the car
    reaches (or turns around on) their floor, not on the tick it leaves.
    """

    def tick(self, state: CarState, board: RequestBoard) -> TickResult:
        floor_before = state.current_floor
        mode_before = state.mode
        if state.mode is CarMode.IDLE:
            state.commit(state.last_direction or Direction.UP)

        direction = state.mode.direction
        if self._at_end(state.current_floor, direction, board.floor_count):
            # Turning around takes the whole tick
            direction = direction.opposite
            state.commit(direction)
            logger.debug("Sweep reversed to %s at floor %d", direction.name, state.current_floor)
        else:
            state.advance()

        cleared = None
        if board.pending_at(state.current_floor).contains(direction):
            board.clear(state.current_floor, direction)
            cleared = direction
        return TickResult(
            floor_before=floor_before,
            floor_after=state.current_floor,
            mode_before=mode_before,
            mode_after=state.mode,
            cleared=cleared,
        )

    def _at_end(self, floor: int, direction: Direction, floor_count: int) -> bool:
        if direction is Direction.UP:
            return floor >= floor_count - 1
        return floor <= 0
