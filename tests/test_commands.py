import logging
import random

from algorithms import get_algorithm
from engine import CommandDispatcher


def _stack():
    return CommandDispatcher(get_algorithm("stack-interactive"))


def test_build_runs_named_method_against_state():
    state = []
    producer = _stack().build("push", state, (7,))
    frames = list(producer)
    assert state == [7]
    assert frames[0].description == "Pushed 7 to the top."


def test_build_is_lazy_until_iterated():
    state = []
    producer = _stack().build("push", state, (7,))
    assert state == []
    next(producer)
    assert state == [7]


def test_build_unknown_method_warns(caplog):
    with caplog.at_level(logging.WARNING):
        assert _stack().build("peek", [], ()) is None
    assert "peek" in caplog.text
    assert "push, pop" in caplog.text


def test_press_reads_value_input():
    assert _stack().press("push", {"value": "42"}) == ("push", (42,))
    assert _stack().press("push", {"value": 5}) == ("push", (5,))


def test_press_argumentless_button_ignores_value():
    assert _stack().press("pop", {"value": "42"}) == ("pop", ())


def test_press_blank_value_falls_back_to_random():
    random.seed(0)
    for inputs in (None, {}, {"value": ""}, {"value": "   "}):
        name, (value,) = _stack().press("push", inputs)
        assert name == "push"
        assert 1 <= value <= 99


def test_press_non_numeric_value_warns_and_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        _, (value,) = _stack().press("push", {"value": "abc"})
    assert 1 <= value <= 99
    assert "abc" in caplog.text


def test_press_unknown_or_non_button_control():
    dispatcher = _stack()
    assert dispatcher.press("nope") is None
    # "value" is a numeric input, not a button
    assert dispatcher.press("value") is None


def test_press_uses_bound_method_not_control_id():
    dispatcher = CommandDispatcher(get_algorithm("doubly-linked-list"))
    assert dispatcher.press("del-head") == ("delete_head", ())
    dispatcher = CommandDispatcher(get_algorithm("queue-interactive"))
    assert dispatcher.press("enq", {"value": 3}) == ("enqueue", (3,))


def test_reset_arguments_use_defaults_and_inputs():
    dispatcher = CommandDispatcher(get_algorithm("bubble-sort"))
    assert dispatcher.reset_arguments() == (20,)
    assert dispatcher.reset_arguments({"size": "12"}) == (12,)


def test_reset_arguments_skip_value_input():
    dispatcher = _stack()
    assert dispatcher.reset_arguments({"value": 9}) == ()


def test_reset_arguments_bad_input_uses_default(caplog):
    dispatcher = CommandDispatcher(get_algorithm("n-queens"))
    with caplog.at_level(logging.WARNING):
        assert dispatcher.reset_arguments({"n": "eight"}) == (4,)
    assert "eight" in caplog.text


def test_reset_arguments_without_controls():
    assert CommandDispatcher(get_algorithm("sudoku-solver")).reset_arguments({"size": 3}) == ()
