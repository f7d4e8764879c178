import logging

import pytest

from algorithms import AlgorithmDefinition, Category, Visualizer, get_algorithm
from algorithms.step import domain, projection
from algorithms.structures.doubly_linked_list import DoublyLinkedList
from engine import (
    DEFAULT_SPEED_MS, MAX_SPEED_MS, MIN_SPEED_MS, SPEED_PRESETS,
    EngineState, PlaybackEngine, speed_from_slider,
)
from projection.graph import GraphProjection


def _autonomous(run, generate=lambda: [1, 2, 3], key="custom"):
    return AlgorithmDefinition(
        key=key, label="Custom", category=Category.SORTING,
        visualizer=Visualizer.BAR_CHART, generate_input=generate, run=run,
    )


def _counting(n):
    def run(state):
        for i in range(n):
            yield domain(list(state), description=f"frame {i}")
    return run


def _boom(state):
    yield domain(list(state), description="fine")
    yield domain(list(state), description="still fine")
    raise RuntimeError("producer exploded")


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------
def test_starts_idle(engine):
    assert engine.state is EngineState.IDLE
    assert engine.current is None
    assert engine.speed_ms == DEFAULT_SPEED_MS


def test_load_publishes_first_snapshot_without_counting(engine):
    seen = []
    engine.on_step = seen.append
    engine.load(_autonomous(_counting(3)))

    assert engine.state is EngineState.READY
    assert engine.step_count == 0
    assert engine.current.description == "frame 0"
    assert seen == [engine.current]


def test_load_accepts_registry_key(engine):
    engine.load("bubble-sort", 8, seed=1)
    assert engine.algorithm is get_algorithm("bubble-sort")
    assert len(engine.logical_state) == 8


def test_unknown_key_raises(engine):
    with pytest.raises(ValueError):
        engine.load("no-such-algorithm")
    assert engine.state is EngineState.IDLE


def test_interactive_load_publishes_ready_placeholder(engine):
    engine.load("stack-interactive")
    assert engine.state is EngineState.READY
    assert engine.current.description == "Ready"
    assert engine.current.data == []
    assert not engine.has_producer


def test_empty_producer_falls_back_to_placeholder(engine):
    engine.load(_autonomous(_counting(0)))
    assert engine.current.description == "Ready"
    assert engine.current.data == [1, 2, 3]
    assert not engine.step_forward()
    assert engine.state is EngineState.FINISHED


def test_reset_is_noop_while_idle(engine):
    engine.reset()
    assert engine.state is EngineState.IDLE
    assert engine.algorithm is None


def test_reset_with_same_seed_reproduces_run(engine):
    engine.load("quick-sort", 15, seed=42)
    first_input = list(engine.logical_state)
    engine.jump_to_end()
    first_steps = engine.step_count
    first_final = list(engine.logical_state)

    engine.reset(15, seed=42)
    assert engine.state is EngineState.READY
    assert engine.step_count == 0
    assert engine.logical_state == first_input
    engine.jump_to_end()
    assert engine.step_count == first_steps
    assert engine.logical_state == first_final


def test_bad_input_argument_leaves_engine_untouched(engine):
    engine.load("stack-interactive")
    engine.run_command("push", 7)
    engine.jump_to_end()
    before = (engine.algorithm, engine.dispatcher, engine.logical_state,
              engine.current, engine.state, engine.step_count)

    with pytest.raises(ValueError):
        engine.load("bubble-sort", "not-a-number")

    after = (engine.algorithm, engine.dispatcher, engine.logical_state,
             engine.current, engine.state, engine.step_count)
    assert after == before
    assert engine.algorithm.key == "stack-interactive"
    assert engine.logical_state == [7]
    assert engine.state is EngineState.FINISHED


def test_bad_reset_argument_keeps_running_producer(engine):
    engine.load("merge-sort", 10, seed=3)
    engine.step_forward()
    with pytest.raises(ValueError):
        engine.reset("ten")
    assert engine.has_producer
    assert engine.step_count == 1
    assert engine.step_forward()


# ---------------------------------------------------------------------------
# Stepping
# ---------------------------------------------------------------------------
def test_step_forward_counts_and_finishes(engine):
    engine.load(_autonomous(_counting(3)))
    assert engine.step_forward()
    assert engine.step_forward()
    assert engine.step_count == 2
    assert engine.current.description == "frame 2"

    assert not engine.step_forward()
    assert engine.state is EngineState.FINISHED
    assert engine.step_count == 2
    assert not engine.has_producer

    # exhausted producer: further steps are no-ops
    assert not engine.step_forward()
    assert engine.state is EngineState.FINISHED


def test_domain_snapshots_overwrite_logical_state(engine):
    def run(state):
        yield domain([9], description="first")
        yield domain([7, 7], description="second")
        yield domain(None, description="cleared")

    engine.load(_autonomous(run))
    # the load-time snapshot is not reconciled
    assert engine.logical_state == [1, 2, 3]
    engine.step_forward()
    assert engine.logical_state == [7, 7]
    engine.step_forward()
    assert engine.logical_state is None


def test_projection_snapshots_leave_logical_state(engine):
    def run(state):
        yield projection(GraphProjection(), description="picture")
        yield projection(GraphProjection(), description="another picture")

    engine.load(_autonomous(run))
    state = engine.logical_state
    engine.jump_to_end()
    assert engine.logical_state is state


def test_jump_to_end_respects_limit(engine):
    engine.load(_autonomous(_counting(50)))
    assert engine.jump_to_end(limit=10) == 10
    assert engine.step_count == 10
    assert engine.state is EngineState.READY
    assert engine.jump_to_end() == 39
    assert engine.state is EngineState.FINISHED


# ---------------------------------------------------------------------------
# Play / pause / timer
# ---------------------------------------------------------------------------
def test_toggle_play_transitions(engine):
    engine.toggle_play()
    assert engine.state is EngineState.IDLE

    engine.load(_autonomous(_counting(5)))
    engine.toggle_play()
    assert engine.state is EngineState.PLAYING
    engine.toggle_play()
    assert engine.state is EngineState.PAUSED
    engine.toggle_play()
    assert engine.state is EngineState.PLAYING

    engine.jump_to_end()
    assert engine.state is EngineState.FINISHED
    engine.toggle_play()
    assert engine.state is EngineState.FINISHED


def test_play_and_pause_only_go_through_toggle(engine):
    # a finished or idle engine must never be pushed into PAUSED/PLAYING
    assert not hasattr(engine, "play")
    assert not hasattr(engine, "pause")

    engine.load(_autonomous(_counting(2)))
    engine.jump_to_end()
    for _ in range(3):
        engine.toggle_play()
        assert engine.state is EngineState.FINISHED
        assert not engine.is_playing


def test_tick_advances_once_per_period(engine, clock):
    engine.load(_autonomous(_counting(10)))
    engine.set_speed(200)
    engine.toggle_play()

    clock.advance(150)
    assert not engine.tick()
    clock.advance(60)
    assert engine.tick()
    assert engine.step_count == 1
    assert not engine.tick()
    clock.advance(210)
    assert engine.tick()
    assert engine.step_count == 2


def test_tick_accepts_explicit_time(engine, clock):
    engine.load(_autonomous(_counting(10)))
    engine.toggle_play()
    assert engine.tick(now=clock.now + DEFAULT_SPEED_MS / 1000.0)
    assert engine.step_count == 1


def test_tick_does_nothing_unless_playing(engine, clock):
    engine.load(_autonomous(_counting(10)))
    clock.advance(5000)
    assert not engine.tick()
    assert engine.step_count == 0


def test_speed_change_applies_on_next_tick(engine, clock):
    engine.load(_autonomous(_counting(10)))
    engine.toggle_play()
    clock.advance(100)
    assert not engine.tick()
    engine.set_speed(MIN_SPEED_MS)
    assert engine.tick()


def test_playing_runs_to_finished(engine, clock):
    engine.load(_autonomous(_counting(4)))
    engine.toggle_play()
    for _ in range(10):
        clock.advance(DEFAULT_SPEED_MS)
        engine.tick()
    assert engine.state is EngineState.FINISHED
    assert engine.step_count == 3


def test_playing_without_producer_pauses(engine, clock):
    engine.load("queue-interactive")
    engine.toggle_play()
    assert engine.state is EngineState.PLAYING
    clock.advance(DEFAULT_SPEED_MS)
    assert not engine.tick()
    assert engine.state is EngineState.PAUSED


# ---------------------------------------------------------------------------
# Speed
# ---------------------------------------------------------------------------
def test_speed_is_clamped(engine):
    assert engine.set_speed(1) == MIN_SPEED_MS
    assert engine.set_speed(99999) == MAX_SPEED_MS
    assert engine.set_speed(300) == 300


def test_speed_presets(engine):
    assert engine.set_speed_preset("turbo") == SPEED_PRESETS["turbo"] == 50
    assert engine.set_speed_preset("slow") == 1000
    with pytest.raises(ValueError):
        engine.set_speed_preset("ludicrous")


def test_slider_is_inverted():
    assert speed_from_slider(1000) == 50
    assert speed_from_slider(50) == 1000
    assert speed_from_slider(550) == 500


# ---------------------------------------------------------------------------
# Interactive commands
# ---------------------------------------------------------------------------
def _drain(engine):
    engine.jump_to_end()


def test_stack_commands_match_reference(engine):
    engine.load("stack-interactive")
    reference = []
    script = [("push", 4), ("push", 9), ("pop",), ("push", 1), ("push", 6), ("pop",), ("pop",), ("pop",), ("pop",)]
    for command in script:
        assert engine.run_command(*command)
        assert engine.state is EngineState.PLAYING
        _drain(engine)
        if command[0] == "push":
            reference.append(command[1])
        elif reference:
            reference.pop()
        assert engine.logical_state == reference
    assert engine.current.description == "Stack underflow! (empty)"


def test_queue_commands_match_reference(engine):
    engine.load("queue-interactive")
    reference = [10, 20, 30]
    for command in [("dequeue",), ("enqueue", 5), ("dequeue",), ("enqueue", 8), ("dequeue",)]:
        engine.run_command(*command)
        _drain(engine)
        if command[0] == "enqueue":
            reference.append(command[1])
        else:
            reference.pop(0)
        assert engine.logical_state == reference


def test_linked_list_commands_match_reference(engine):
    engine.load("doubly-linked-list")
    lst = engine.logical_state
    assert isinstance(lst, DoublyLinkedList)
    reference = [10, 20, 30]
    for command in [("prepend", 1), ("append", 99), ("delete_head",), ("delete_head",)]:
        engine.run_command(*command)
        _drain(engine)
        if command[0] == "prepend":
            reference.insert(0, command[1])
        elif command[0] == "append":
            reference.append(command[1])
        else:
            reference.pop(0)
        assert engine.logical_state is lst
        assert lst.values() == reference

    # prev links mirror next links
    backwards = []
    node = lst.tail
    while node is not None:
        backwards.append(node.value)
        node = node.prev
    assert backwards == list(reversed(reference))


def test_bst_insert_keeps_in_order_sorted(engine):
    engine.load("bst-interactive")
    for value in [50, 30, 70, 20, 40, 60, 80, 30]:
        engine.run_command("insert", value)
        _drain(engine)
    tree = engine.logical_state
    assert tree.in_order() == [20, 30, 30, 40, 50, 60, 70, 80]
    assert len(tree) == 8


def test_unknown_command_changes_nothing(engine, caplog):
    engine.load("stack-interactive")
    engine.run_command("push", 3)
    _drain(engine)
    before_state = engine.state
    before_current = engine.current
    before_steps = engine.step_count

    with caplog.at_level(logging.WARNING):
        assert not engine.run_command("teleport", 1)
    assert "teleport" in caplog.text
    assert engine.state is before_state
    assert engine.current is before_current
    assert engine.step_count == before_steps
    assert engine.logical_state == [3]


def test_commands_rejected_for_autonomous_algorithms(engine):
    engine.load("bubble-sort", 5)
    assert not engine.run_command("push", 1)
    assert engine.state is EngineState.READY


def test_command_without_load_is_rejected(engine):
    assert not engine.run_command("push", 1)
    assert engine.state is EngineState.IDLE


def test_new_command_abandons_running_one(engine):
    engine.load("stack-interactive")
    engine.run_command("push", 1)
    engine.step_forward()                   # pushed, not yet drained
    engine.run_command("push", 2)
    _drain(engine)
    assert engine.logical_state == [1, 2]


def test_press_resolves_buttons(engine):
    engine.load("stack-interactive")
    assert engine.press("push", {"value": "12"})
    _drain(engine)
    assert engine.logical_state == [12]
    assert engine.press("pop")
    _drain(engine)
    assert engine.logical_state == []
    assert not engine.press("no-such-button")


def test_reset_discards_interactive_state(engine):
    engine.load("stack-interactive")
    engine.run_command("push", 5)
    _drain(engine)
    engine.reset()
    assert engine.logical_state == []
    assert engine.state is EngineState.READY


# ---------------------------------------------------------------------------
# Producer faults
# ---------------------------------------------------------------------------
def test_producer_fault_is_logged_and_reraised(engine, caplog):
    engine.load(_autonomous(_boom))
    assert engine.step_forward()

    with caplog.at_level(logging.ERROR):
        with pytest.raises(RuntimeError, match="exploded"):
            engine.step_forward()

    assert "Producer for 'custom' failed" in caplog.text
    assert engine.state is EngineState.FINISHED
    assert isinstance(engine.last_error, RuntimeError)
    assert not engine.has_producer
    assert engine.current.description == "still fine"
    # dead producer: further steps are no-ops
    assert not engine.step_forward()


def test_fault_during_timer_stops_playback(engine, clock):
    engine.load(_autonomous(_boom))
    engine.toggle_play()
    clock.advance(DEFAULT_SPEED_MS)
    engine.tick()
    clock.advance(DEFAULT_SPEED_MS)
    with pytest.raises(RuntimeError):
        engine.tick()
    assert engine.state is EngineState.FINISHED
    clock.advance(DEFAULT_SPEED_MS)
    assert not engine.tick()


def test_reset_recovers_from_fault(engine):
    engine.load(_autonomous(_boom))
    engine.step_forward()
    with pytest.raises(RuntimeError):
        engine.step_forward()
    engine.reset()
    assert engine.state is EngineState.READY
    assert engine.last_error is None
    assert engine.current.description == "fine"


def test_to_dict_reports_state(engine):
    engine.load("bubble-sort", 4, seed=3)
    out = engine.to_dict()
    assert out["state"] == "ready"
    assert out["algorithm"] == "bubble-sort"
    assert out["snapshot"]["kind"] == "domain"
    assert len(out["snapshot"]["data"]) == 4
