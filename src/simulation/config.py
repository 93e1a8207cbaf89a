from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict

from dispatch import DISPATCHER_REGISTRY, CarMode


@dataclass
class SimulationConfig:
    """Construction-time settings shared by the server and scenario runner."""

    floor_count: int = 10
    car_count: int = 1
    tick_period: float = 2.0
    dispatcher: str = "scan"
    initial_mode: str = "idle"
    initial_floor: int = 0

    def __post_init__(self) -> None:
        for name in ("floor_count", "car_count", "initial_floor"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
        if isinstance(self.tick_period, bool) or not isinstance(self.tick_period, (int, float)):
            raise ValueError(f"tick_period must be a number, got {self.tick_period!r}")
        if not isinstance(self.dispatcher, str):
            raise ValueError(f"dispatcher must be a name, got {self.dispatcher!r}")
        self.dispatcher = self.dispatcher.lower()
        if self.floor_count < 2:
            raise ValueError(f"floor_count must be at least 2, got {self.floor_count}")
        if self.car_count < 1:
            raise ValueError(f"car_count must be at least 1, got {self.car_count}")
        if self.tick_period <= 0:
            raise ValueError(f"tick_period must be positive, got {self.tick_period}")
        if not 0 <= self.initial_floor < self.floor_count:
            raise ValueError(
                f"initial_floor {self.initial_floor} outside [0, {self.floor_count})"
            )
        if self.dispatcher not in DISPATCHER_REGISTRY:
            raise ValueError(
                f"Unknown dispatcher '{self.dispatcher}'. Available: {', '.join(DISPATCHER_REGISTRY)}"
            )
        CarMode.parse(self.initial_mode)

    @classmethod
    def from_dict(cls, data: Dict) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)
