"""CLI for running offline liftscan scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from dispatch import Direction
from simulation import Building, Simulation, SimulationConfig


def build_simulation(config: Dict) -> Simulation:
    building_cfg = SimulationConfig.from_dict(config.get("building", {}))
    return Simulation(Building(building_cfg))


def _apply_scheduled_requests(
    simulation: Simulation, requests: Iterable[Dict], current_time: int
) -> None:
    for request in requests:
        if request.get("time", 0) != current_time:
            continue
        simulation.request_service(
            request.get("car", 0),
            request["floor"],
            Direction.parse(request["direction"]),
        )


def run_simulation(simulation: Simulation, config: Dict) -> List[Dict]:
    duration = config.get("duration", 30)
    requests = config.get("requests", [])
    timeline: List[Dict] = []

    for _ in range(duration):
        _apply_scheduled_requests(simulation, requests, simulation.current_time)
        time_step = simulation.current_time
        results = simulation.step()
        for car, result in zip(simulation.building.cars, results):
            timeline.append(
                {
                    "time": time_step,
                    "car": car.car_id,
                    "floor": result.floor_after,
                    "mode": result.mode_after.value,
                    "cleared": result.cleared.name.lower() if result.cleared else None,
                }
            )
    return timeline


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the tick timeline as JSON",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    config = json.loads(args.config.read_text())
    simulation = build_simulation(config)
    timeline = run_simulation(simulation, config)

    results = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "duration": config.get("duration", 30),
        "dispatcher": simulation.building.dispatcher_name,
        "final_state": simulation.building.snapshot(),
        "timeline": timeline,
    }

    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Dispatcher: {results['dispatcher']}")
    print(f"Duration: {results['duration']} ticks")
    for entry in timeline:
        served = f"  served {entry['cleared']}" if entry["cleared"] else ""
        print(f"  t={entry['time']:>3} car {entry['car']}: floor {entry['floor']} {entry['mode']}{served}")
    if args.output:
        print(f"Saved timeline to {args.output}")


if __name__ == "__main__":
    main()
