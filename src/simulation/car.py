from __future__ import annotations

from typing import Optional

from dispatch import CarMode, CarState, Direction, Dispatcher, RequestBoard, TickResult


class Car:
    """One elevator car: a dispatcher plus the board and state it exclusively owns."""

    def __init__(
        self,
        car_id: int,
        floor_count: int,
        dispatcher: Dispatcher,
        initial_mode: CarMode = CarMode.IDLE,
        initial_floor: int = 0,
    ) -> None:
        self.car_id = car_id
        self.dispatcher = dispatcher
        self.board = RequestBoard(floor_count)
        if not 0 <= initial_floor < floor_count:
            raise ValueError(f"Floor {initial_floor} outside [0, {floor_count})")
        self.state = CarState(current_floor=initial_floor, mode=initial_mode)
        self.last_result: Optional[TickResult] = None

    def request_service(self, floor: int, direction: Direction) -> None:
        self.board.request_service(floor, direction)

    def tick(self) -> TickResult:
        self.last_result = self.dispatcher.tick(self.state, self.board)
        return self.last_result

    @property
    def door_open(self) -> bool:
        direction = self.state.mode.direction
        if direction is None:
            return False
        return self.board.pending_at(self.state.current_floor).contains(direction)

    def has_work(self) -> bool:
        return self.board.any_pending()

    def snapshot(self) -> dict:
        return {
            "car_id": self.car_id,
            "current_floor": self.state.current_floor,
            "mode": self.state.mode.value,
            "door_open": self.door_open,
            "last_served": self._last_served(),
            "board": [cell.names() for cell in self.board.contents()],
        }

    def _last_served(self) -> Optional[str]:
        # Direction cleared on the most recent tick, for rendering a door cycle
        if self.last_result is None or self.last_result.cleared is None:
            return None
        return self.last_result.cleared.name.lower()
