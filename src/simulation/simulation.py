from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from dispatch import Direction, TickResult

from .building import Building
from .car import Car

logger = logging.getLogger(__name__)


class Simulation:
    """Time-stepped driver that ticks every car once per step."""

    def __init__(self, building: Optional[Building] = None) -> None:
        self.building = building or Building()
        self.current_time: int = 0
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}

    def request_service(self, car_id: int, floor: int, direction: Direction) -> None:
        self.building.request_service(car_id, floor, direction)
        self._emit(
            "request",
            {"car_id": car_id, "floor": floor, "direction": direction.name.lower(), "time": self.current_time},
        )

    def run(self, duration: int) -> None:
        for _ in range(duration):
            self.step()

    def run_until_idle(self, max_ticks: int) -> int:
        """Step until no car has pending service and return the ticks spent."""

        start = self.current_time
        while self.building.has_work():
            if self.current_time - start >= max_ticks:
                raise RuntimeError(f"Requests still pending after {max_ticks} ticks")
            self.step()
        return self.current_time - start

    def step(self) -> List[TickResult]:
        results = [self._tick_car(car) for car in self.building.cars]
        self.current_time += 1
        return results

    def step_car(self, car_id: int) -> TickResult:
        return self._tick_car(self.building.get_car(car_id))

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def _tick_car(self, car: Car) -> TickResult:
        result = car.tick()
        if result.mode_changed:
            logger.info(
                "Car %d at floor %d: %s -> %s",
                car.car_id,
                result.floor_after,
                result.mode_before.value,
                result.mode_after.value,
            )
        payload = {"car_id": car.car_id, "time": self.current_time, "result": result}
        self._emit("tick", payload)
        if result.cleared is not None:
            logger.info(
                "Car %d served %s call at floor %d",
                car.car_id,
                result.cleared.name.lower(),
                result.floor_after,
            )
            self._emit("served", payload)
        return result

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
