from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from dispatch import CarMode, Direction, get_dispatcher

from .car import Car
from .config import SimulationConfig


@dataclass
class Building:
    """Container for independently dispatched cars serving one floor range."""

    config: SimulationConfig = field(default_factory=SimulationConfig)
    cars: List[Car] = field(init=False)

    def __post_init__(self) -> None:
        mode = CarMode.parse(self.config.initial_mode)
        self.cars = [
            Car(
                car_id=i,
                floor_count=self.config.floor_count,
                dispatcher=get_dispatcher(self.config.dispatcher),
                initial_mode=mode,
                initial_floor=self.config.initial_floor,
            )
            for i in range(self.config.car_count)
        ]

    @property
    def floor_count(self) -> int:
        return self.config.floor_count

    @property
    def dispatcher_name(self) -> str:
        return self.config.dispatcher

    def get_car(self, car_id: int) -> Car:
        for car in self.cars:
            if car.car_id == car_id:
                return car
        raise ValueError(f"Unknown car {car_id}. Available: {', '.join(str(c.car_id) for c in self.cars)}")

    def has_car(self, car_id: int) -> bool:
        return any(car.car_id == car_id for car in self.cars)

    def request_service(self, car_id: int, floor: int, direction: Direction) -> None:
        self.get_car(car_id).request_service(floor, direction)

    def set_dispatcher(self, name: str) -> None:
        # Each car gets its own instance; cars never share dispatch state.
        dispatchers = [get_dispatcher(name) for _ in self.cars]
        for car, dispatcher in zip(self.cars, dispatchers):
            car.dispatcher = dispatcher
        self.config.dispatcher = name.lower()

    def has_work(self) -> bool:
        return any(car.has_work() for car in self.cars)

    def snapshot(self, car_id: Optional[int] = None) -> dict:
        if car_id is not None:
            return self.get_car(car_id).snapshot()
        return {
            "floor_count": self.floor_count,
            "cars": [car.snapshot() for car in self.cars],
        }
