import json
from pathlib import Path

import run_scenario

SCENARIO = Path(__file__).resolve().parent.parent / "scenarios" / "reversal.json"


def load():
    return json.loads(SCENARIO.read_text())


def test_reversal_scenario_timeline():
    config = load()
    simulation = run_scenario.build_simulation(config)
    timeline = run_scenario.run_simulation(simulation, config)

    assert len(timeline) == config["duration"]
    floors = [entry["floor"] for entry in timeline]
    assert floors[:8] == [3, 4, 4, 4, 3, 2, 1, 0]
    served = [(entry["time"], entry["floor"], entry["cleared"]) for entry in timeline if entry["cleared"]]
    assert served == [(3, 4, "down"), (7, 0, "down")]
    assert timeline[-1]["mode"] == "idle"


def test_requests_are_applied_at_their_time():
    config = {
        "building": {"floor_count": 4},
        "duration": 4,
        "requests": [{"time": 2, "floor": 1, "direction": "up"}],
    }
    simulation = run_scenario.build_simulation(config)
    timeline = run_scenario.run_simulation(simulation, config)
    assert [entry["floor"] for entry in timeline] == [0, 0, 1, 1]
    assert timeline[2]["cleared"] == "up"


def test_save_results(tmp_path):
    output = tmp_path / "out" / "result.json"
    run_scenario.save_results(output, {"scenario": "x"})
    assert json.loads(output.read_text()) == {"scenario": "x"}
    run_scenario.save_results(None, {"scenario": "x"})
