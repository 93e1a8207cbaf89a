from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .board import RequestBoard
from .car import CarState
from .direction import CarMode, Direction


@dataclass(frozen=True)
class TickResult:
    """What one tick did to a car."""

    floor_before: int
    floor_after: int
    mode_before: CarMode
    mode_after: CarMode
    cleared: Optional[Direction] = None

    @property
    def moved(self) -> bool:
        return self.floor_before != self.floor_after

    @property
    def mode_changed(self) -> bool:
        return self.mode_before is not self.mode_after


class Dispatcher(Protocol):
    """Strategy interface for advancing one car by one tick."""

    def tick(self, state: CarState, board: RequestBoard) -> TickResult:
        """
        Apply a single tick to ``state`` and ``board`` in place.

        Implementations move the car at most one floor and only ever clear
        entries from the board, never add them.
        """
        ...
