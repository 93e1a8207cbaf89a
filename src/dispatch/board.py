from __future__ import annotations

from typing import List

from .direction import Direction, DirectionSet, require_direction


class RequestBoard:
    """Pending service per floor.

    Each entry only records which directions are still owed at that floor,
    never how many times they were asked for. The board is sized once and
    never resized.
    """

    def __init__(self, floor_count: int) -> None:
        if floor_count < 2:
            raise ValueError(f"floor_count must be at least 2, got {floor_count}")
        self.floor_count = floor_count
        self._cells: List[DirectionSet] = [DirectionSet.EMPTY] * floor_count

    def request_service(self, floor: int, direction: Direction) -> None:
        self._check_floor(floor)
        self._cells[floor] = self._cells[floor].add(require_direction(direction))

    def clear(self, floor: int, direction: Direction) -> None:
        self._check_floor(floor)
        self._cells[floor] = self._cells[floor].remove(require_direction(direction))

    def has_pending(self, floor: int) -> bool:
        self._check_floor(floor)
        return not self._cells[floor].is_empty()

    def pending_at(self, floor: int) -> DirectionSet:
        self._check_floor(floor)
        return self._cells[floor]

    def any_above(self, from_floor: int) -> bool:
        self._check_floor(from_floor)
        return any(self._cells[from_floor + 1 :])

    def any_below(self, from_floor: int) -> bool:
        self._check_floor(from_floor)
        return any(self._cells[:from_floor])

    def any_pending(self) -> bool:
        return any(self._cells)

    def contents(self) -> List[DirectionSet]:
        return list(self._cells)

    def _check_floor(self, floor: int) -> None:
        if isinstance(floor, bool) or not isinstance(floor, int):
            raise TypeError(f"Floor must be an int, got {floor!r}")
        if not 0 <= floor < self.floor_count:
            raise ValueError(f"Floor {floor} outside [0, {self.floor_count})")

    def __len__(self) -> int:
        return self.floor_count
