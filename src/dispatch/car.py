from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .direction import CarMode, Direction


@dataclass
class CarState:
    """Position and travel commitment of one car."""

    current_floor: int = 0
    mode: CarMode = CarMode.IDLE
    last_direction: Optional[Direction] = None

    def __post_init__(self) -> None:
        self.mode = CarMode.parse(self.mode)
        if self.last_direction is None:
            self.last_direction = self.mode.direction

    def commit(self, direction: Direction) -> None:
        self.mode = CarMode.for_direction(direction)
        self.last_direction = direction

    def release(self) -> None:
        self.mode = CarMode.IDLE

    def advance(self) -> None:
        direction = self.mode.direction
        if direction is None:
            raise RuntimeError("An idle car cannot advance")
        self.current_floor += direction.value
