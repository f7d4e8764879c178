import pytest

from algorithms import Visualizer, list_algorithms
from engine import EngineState, PlaybackEngine

STEP_LIMIT = 200_000

AUTONOMOUS  = [a for a in list_algorithms() if not a.is_interactive]
INTERACTIVE = [a for a in list_algorithms() if a.is_interactive]


@pytest.mark.parametrize("algo", AUTONOMOUS, ids=lambda a: a.key)
def test_autonomous_run_reaches_finished(algo):
    frames = []
    engine = PlaybackEngine(on_step=frames.append)
    engine.load(algo, seed=2024)

    taken = engine.jump_to_end(limit=STEP_LIMIT)
    assert taken < STEP_LIMIT
    assert engine.state is EngineState.FINISHED
    assert engine.last_error is None

    # every run opens and closes with narration
    assert frames[0].description
    assert frames[-1].description


@pytest.mark.parametrize("algo", AUTONOMOUS, ids=lambda a: a.key)
def test_reset_with_same_seed_repeats_first_snapshot(algo):
    engine = PlaybackEngine()
    engine.load(algo, seed=99)
    first = engine.current.to_dict()
    engine.reset(seed=99)
    assert engine.current.to_dict() == first


@pytest.mark.parametrize(
    "algo", [a for a in AUTONOMOUS if a.visualizer is Visualizer.BAR_CHART], ids=lambda a: a.key,
)
def test_bar_highlights_stay_in_bounds(algo):
    frames = []
    engine = PlaybackEngine(on_step=frames.append)
    engine.load(algo, seed=7)
    engine.jump_to_end(limit=STEP_LIMIT)
    for snap in frames:
        for index in snap.highlighted_indices:
            assert 0 <= index < len(snap.data)


@pytest.mark.parametrize("algo", INTERACTIVE, ids=lambda a: a.key)
def test_every_command_reaches_finished(algo):
    engine = PlaybackEngine()
    engine.load(algo, seed=1)
    assert engine.state is EngineState.READY

    for control in algo.controls:
        if control.bound_method is None:
            continue
        for _ in range(3):
            assert engine.press(control.id, {"value": 17})
            taken = engine.jump_to_end(limit=STEP_LIMIT)
            assert 0 < taken < STEP_LIMIT
            assert engine.state is EngineState.FINISHED
            assert engine.current.description
