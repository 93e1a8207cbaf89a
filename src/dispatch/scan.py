from __future__ import annotations

import logging
from typing import Optional

from .board import RequestBoard
from .car import CarState
from .direction import CarMode, Direction
from .interface import TickResult

logger = logging.getLogger(__name__)


class ScanDispatcher:
    """Bidirectional, request-aware SCAN (elevator algorithm).

    A committed car keeps going while any request lies anywhere ahead of it,
    serves the floor it reaches when the call there matches its direction,
    and drops back to idle once nothing is left ahead. An idle car picks a
    direction from the board, preferring the one it travelled last.
    """

    def tick(self, state: CarState, board: RequestBoard) -> TickResult:
        floor_before = state.current_floor
        mode_before = state.mode
        cleared: Optional[Direction] = None

        if state.mode is CarMode.IDLE:
            direction = self._resolve(state, board)
            if direction is None:
                return self._result(floor_before, mode_before, state)
            state.commit(direction)
            logger.debug("Car resolved %s at floor %d", direction.name, state.current_floor)
            # Board at the current floor before leaving it
            if board.pending_at(state.current_floor).contains(direction):
                board.clear(state.current_floor, direction)
                return self._result(floor_before, mode_before, state, direction)
            cleared = self._move(state, board)
            return self._result(floor_before, mode_before, state, cleared)

        direction = state.mode.direction
        if not self._pending_ahead(board, state.current_floor, direction):
            state.release()
            logger.debug("Car exhausted %s demand at floor %d", direction.name, state.current_floor)
            return self._result(floor_before, mode_before, state)

        # A same-direction call placed at the occupied floor is served in place
        if board.pending_at(state.current_floor).contains(direction):
            board.clear(state.current_floor, direction)
            return self._result(floor_before, mode_before, state, direction)

        cleared = self._move(state, board)
        return self._result(floor_before, mode_before, state, cleared)

    def _resolve(self, state: CarState, board: RequestBoard) -> Optional[Direction]:
        floor = state.current_floor
        above = board.any_above(floor)
        below = board.any_below(floor)
        if above and below:
            return self._tie_break(state)
        if above:
            return Direction.UP
        if below:
            return Direction.DOWN

        here = board.pending_at(floor)
        if len(here) == 2:
            return self._tie_break(state)
        return next(iter(here), None)

    def _tie_break(self, state: CarState) -> Direction:
        return state.last_direction or Direction.UP

    def _pending_ahead(self, board: RequestBoard, floor: int, direction: Direction) -> bool:
        if direction is Direction.UP:
            return board.any_above(floor)
        return board.any_below(floor)

    def _move(self, state: CarState, board: RequestBoard) -> Optional[Direction]:
        state.advance()
        direction = state.mode.direction
        if board.pending_at(state.current_floor).contains(direction):
            board.clear(state.current_floor, direction)
            return direction
        return None

    def _result(
        self,
        floor_before: int,
        mode_before: CarMode,
        state: CarState,
        cleared: Optional[Direction] = None,
    ) -> TickResult:
        return TickResult(
            floor_before=floor_before,
            floor_after=state.current_floor,
            mode_before=mode_before,
            mode_after=state.mode,
            cleared=cleared,
        )
