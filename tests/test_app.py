import pytest

import main
from algorithms import AlgorithmDefinition, Category, Visualizer
from algorithms.step import domain


def _boom(state):
    yield domain(list(state), description="fine")
    raise ZeroDivisionError("division by zero inside the producer")


BROKEN = AlgorithmDefinition(
    key="broken", label="Broken", category=Category.SORTING,
    visualizer=Visualizer.BAR_CHART, generate_input=lambda: [1, 2], run=_boom,
)


# ---------------------------------------------------------------------------
# Page & catalog
# ---------------------------------------------------------------------------
def test_index_loads_default_algorithm(client):
    res = client.get("/")
    assert res.status_code == 200
    page = res.get_data(as_text=True)
    assert 'id="algo-selector"' in page
    assert "<svg" in page
    assert main.engine.algorithm.key == main.DEFAULT_ALGORITHM


def test_catalog(client):
    res = client.get("/api/algorithms")
    keys = [a["key"] for a in res.get_json()]
    assert "bubble-sort" in keys and "bst-interactive" in keys


def test_state_before_anything(client):
    data = client.get("/api/state").get_json()
    assert data["state"] == "idle"
    assert "placeholder" in data["svg"]


# ---------------------------------------------------------------------------
# Load / reset / stepping
# ---------------------------------------------------------------------------
def test_load_and_step(client):
    res = client.post("/api/load", json={"algorithm": "insertion-sort", "args": [6], "seed": 3})
    assert res.status_code == 200
    data = res.get_json()
    assert data["state"] == "ready"
    assert data["step_count"] == 0
    assert len(data["snapshot"]["data"]) == 6
    assert "algo-input" in data["controls"]

    data = client.post("/api/step/next").get_json()
    assert data["advanced"] is True
    assert data["step_count"] == 1

    data = client.post("/api/step/end").get_json()
    assert data["state"] == "finished"
    assert data["is_finished"] is True
    assert data["snapshot"]["data"] == sorted(data["snapshot"]["data"])


def test_load_from_panel_inputs(client):
    data = client.post("/api/load", json={"algorithm": "bubble-sort", "inputs": {"size": "9"}}).get_json()
    assert len(data["snapshot"]["data"]) == 9


def test_load_unknown_algorithm_is_404(client):
    res = client.post("/api/load", json={"algorithm": "nope"})
    assert res.status_code == 404
    assert main.engine.state.value == "idle"


def test_load_with_bad_argument_is_400_and_keeps_engine(client):
    client.post("/api/load", json={"algorithm": "stack-interactive"})
    client.post("/api/command", json={"method": "push", "args": [7]})
    client.post("/api/step/end")

    res = client.post("/api/load", json={"algorithm": "bubble-sort", "args": ["not-a-number"]})
    assert res.status_code == 400
    data = res.get_json()
    assert data["error"].startswith("Bad input:")
    assert data["algorithm"] == "stack-interactive"
    assert data["last_error"] is None
    assert main.engine.logical_state == [7]


def test_reset_with_bad_argument_is_400(client):
    client.post("/api/load", json={"algorithm": "bubble-sort", "args": [6]})
    res = client.post("/api/reset", json={"args": ["six"]})
    assert res.status_code == 400
    assert len(main.engine.logical_state) == 6


def test_reset_same_seed(client):
    first = client.post("/api/load", json={"algorithm": "dfs", "args": [30], "seed": 5}).get_json()
    client.post("/api/step/end")
    again = client.post("/api/reset", json={"args": [30], "seed": 5}).get_json()
    assert again["step_count"] == 0
    assert again["snapshot"] == first["snapshot"]


def test_step_end_with_limit(client):
    client.post("/api/load", json={"algorithm": "merge-sort", "args": [30]})
    data = client.post("/api/step/end", json={"limit": 4}).get_json()
    assert data["taken"] == 4
    assert data["state"] == "ready"


def test_play_and_tick(client):
    client.post("/api/load", json={"algorithm": "bubble-sort"})
    data = client.post("/api/step/play").get_json()
    assert data["is_playing"] is True
    data = client.post("/api/tick").get_json()
    assert data["advanced"] is False            # a full period has not elapsed
    data = client.post("/api/step/play").get_json()
    assert data["state"] == "paused"


# ---------------------------------------------------------------------------
# Speed
# ---------------------------------------------------------------------------
def test_speed_variants(client):
    assert client.post("/api/config/speed", json={"speed_ms": 5}).get_json() == {"speed_ms": 50}
    assert client.post("/api/config/speed", json={"slider": 850}).get_json() == {"speed_ms": 200}
    assert client.post("/api/config/speed", json={"preset": "fast"}).get_json() == {"speed_ms": 150}
    assert client.post("/api/config/speed", json={"preset": "warp"}).status_code == 400
    assert client.post("/api/config/speed", json={}).status_code == 400


@pytest.mark.parametrize("body", [{"speed_ms": "fast"}, {"slider": "right"}, {"speed_ms": None}, {"preset": ["fast"]}])
def test_malformed_speed_is_400(client, body):
    res = client.post("/api/config/speed", json=body)
    assert res.status_code == 400
    assert res.get_json()["error"].startswith("Bad speed:")
    assert main.engine.speed_ms == 500


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
def test_command_requires_algorithm(client):
    assert client.post("/api/command", json={"method": "push", "args": [1]}).status_code == 400


def test_interactive_commands(client):
    data = client.post("/api/load", json={"algorithm": "stack-interactive"}).get_json()
    assert 'class="algo-button' in data["controls"]

    data = client.post("/api/command", json={"method": "push", "args": [8]}).get_json()
    assert data["state"] == "playing"
    client.post("/api/step/end")
    client.post("/api/command", json={"control": "push", "inputs": {"value": "3"}})
    data = client.post("/api/step/end").get_json()
    assert main.engine.logical_state == [8, 3]
    assert 'class="node"' in data["svg"]


def test_unknown_command_is_400_and_changes_nothing(client):
    client.post("/api/load", json={"algorithm": "queue-interactive"})
    before = client.get("/api/state").get_json()
    res = client.post("/api/command", json={"method": "teleport"})
    assert res.status_code == 400
    assert res.get_json()["error"] == "Unknown command: teleport"
    assert main.engine.logical_state == [10, 20, 30]
    assert client.get("/api/state").get_json()["snapshot"] == before["snapshot"]


def test_interactive_preview_is_drawn_before_first_command(client):
    data = client.post("/api/load", json={"algorithm": "queue-interactive"}).get_json()
    assert data["svg"].count('class="node"') == 3


# ---------------------------------------------------------------------------
# Faults
# ---------------------------------------------------------------------------
def test_producer_fault_is_500(client):
    main.engine.load(BROKEN)
    res = client.post("/api/step/next")
    assert res.status_code == 500
    data = res.get_json()
    assert "division by zero" in data["error"]
    assert data["state"] == "finished"
    assert "ZeroDivisionError" in data["last_error"]
    assert "error" in data["explanation"]

    # dead run: stepping again is a harmless no-op
    data = client.post("/api/step/next").get_json()
    assert data["advanced"] is False


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
def test_record_returns_metrics(client):
    res = client.post("/api/record", json={"algorithm": "selection-sort", "args": [8], "seed": 1})
    assert res.status_code == 200
    data = res.get_json()
    assert data["metrics"]["algo_key"] == "selection-sort"
    assert data["metrics"]["finished"] is True
    assert "Analytics" in data["analytics"]
    # recording uses its own engine
    assert main.engine.algorithm is None


def test_record_unknown_is_404(client):
    assert client.post("/api/record", json={"algorithm": "nope"}).status_code == 404


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------
def test_engine_routes_hold_the_lock(client, monkeypatch):
    held = []
    real_tick = main.engine.tick

    def tick():
        held.append(main.engine_lock.locked())
        return real_tick()

    monkeypatch.setattr(main.engine, "tick", tick)
    client.post("/api/load", json={"algorithm": "bubble-sort"})
    client.post("/api/tick")
    assert held == [True]
    assert not main.engine_lock.locked()


def test_lock_is_released_after_a_fault(client):
    main.engine.load(BROKEN)
    assert client.post("/api/step/next").status_code == 500
    assert not main.engine_lock.locked()
    assert client.get("/api/state").status_code == 200
