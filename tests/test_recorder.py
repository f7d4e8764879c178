import json

import pytest

from engine import Recorder, RunMetrics


def test_run_to_completion_requires_start():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_unknown_algorithm_raises():
    with pytest.raises(ValueError):
        Recorder().start("no-such-algorithm")


def test_records_every_frame_including_initial():
    rec = Recorder()
    rec.start("bubble-sort", 6, seed=1)
    assert len(rec.steps) == 1

    metrics = rec.run_to_completion()
    assert isinstance(metrics, RunMetrics)
    assert metrics.algo_key == "bubble-sort"
    assert metrics.algo_label == "Bubble Sort"
    assert metrics.total_steps == len(rec.steps) == rec.engine.step_count + 1
    assert metrics.finished
    assert metrics.final_description == "Sorting completed!"
    assert metrics.memory_bytes > 0
    assert metrics.wall_time_ms >= 0
    assert rec.get_metrics() is metrics
    assert rec.steps[-1].data == sorted(rec.steps[0].data)


def test_limit_leaves_run_unfinished():
    rec = Recorder()
    rec.start("quick-sort", 40, seed=3)
    metrics = rec.run_to_completion(limit=5)
    assert metrics.total_steps == 6
    assert not metrics.finished


def test_same_seed_same_recording():
    first, second = Recorder(), Recorder()
    for rec in (first, second):
        rec.start("dfs", 30, seed=12)
        rec.run_to_completion()
    assert first.metrics.total_steps == second.metrics.total_steps
    assert [s.description for s in first.steps] == [s.description for s in second.steps]


def test_interactive_run_via_engine_command():
    rec = Recorder()
    rec.start("stack-interactive")
    rec.engine.run_command("push", 3)
    metrics = rec.run_to_completion()
    assert metrics.total_steps == 3          # placeholder + two push frames
    assert rec.engine.logical_state == [3]


def test_export_is_json_serialisable():
    rec = Recorder()
    rec.start("prims-mst", 5, seed=2)
    rec.run_to_completion()

    exported = rec.export()
    assert exported["algo_key"] == "prims-mst"
    assert exported["args"] == [5]
    assert exported["seed"] == 2
    assert exported["metrics"]["total_steps"] == len(exported["steps"])
    json.dumps(exported)
