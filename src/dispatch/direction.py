from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterator, List, Optional


class Direction(Enum):
    """A single travel or call direction."""

    UP = 1
    DOWN = -1

    @property
    def opposite(self) -> "Direction":
        return Direction.DOWN if self is Direction.UP else Direction.UP

    @classmethod
    def parse(cls, value: object) -> "Direction":
        if isinstance(value, Direction):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown direction {value!r}. Expected 'up' or 'down'")


def require_direction(direction: object) -> Direction:
    if not isinstance(direction, Direction):
        raise TypeError(f"Expected a Direction, got {direction!r}")
    return direction


@dataclass(frozen=True)
class DirectionSet:
    """Immutable set over {UP, DOWN}; empty means nothing pending."""

    members: FrozenSet[Direction] = frozenset()

    @classmethod
    def of(cls, *directions: Direction) -> "DirectionSet":
        return cls(frozenset(require_direction(d) for d in directions))

    def contains(self, direction: Direction) -> bool:
        return direction in self.members

    def add(self, direction: Direction) -> "DirectionSet":
        return DirectionSet(self.members | {require_direction(direction)})

    def remove(self, direction: Direction) -> "DirectionSet":
        return DirectionSet(self.members - {require_direction(direction)})

    def union(self, other: "DirectionSet") -> "DirectionSet":
        return DirectionSet(self.members | other.members)

    def is_empty(self) -> bool:
        return not self.members

    def names(self) -> List[str]:
        return [d.name.lower() for d in Direction if d in self.members]

    def __contains__(self, direction: object) -> bool:
        return direction in self.members

    def __iter__(self) -> Iterator[Direction]:
        return (d for d in Direction if d in self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __bool__(self) -> bool:
        return bool(self.members)


DirectionSet.EMPTY = DirectionSet()
DirectionSet.BOTH = DirectionSet(frozenset(Direction))


class CarMode(Enum):
    """Travel commitment of a car. IDLE means either direction is admissible."""

    IDLE = "idle"
    UP = "up"
    DOWN = "down"

    @property
    def direction(self) -> Optional[Direction]:
        if self is CarMode.UP:
            return Direction.UP
        if self is CarMode.DOWN:
            return Direction.DOWN
        return None

    @classmethod
    def for_direction(cls, direction: Direction) -> "CarMode":
        return cls.UP if direction is Direction.UP else cls.DOWN

    @classmethod
    def parse(cls, value: object) -> "CarMode":
        if isinstance(value, CarMode):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(
            f"Unknown car mode {value!r}. Available: {', '.join(m.value for m in cls)}"
        )
