"""
commands.py — Command Dispatcher
================================
Turns a user command into a fresh producer for an INTERACTIVE algorithm.

    dispatcher = CommandDispatcher(REGISTRY["stack-interactive"])
    producer   = dispatcher.build("push", logical_state, (42,))

Buttons are resolved through the algorithm's declarative controls: a
button names its bound method, and (unless it is argument-less) reads its
argument from the numeric input whose id is "value".  A missing or blank
value falls back to a random integer in [1, 99].

Unknown names are configuration errors: they are logged and answered
with None so the engine can leave its state untouched.
"""

import logging
import random
from typing import Any, Mapping, Optional, Sequence, Tuple

from algorithms import VALUE_INPUT_ID, AlgorithmDefinition, ControlKind
from algorithms.step import Producer

logger = logging.getLogger(__name__)

FALLBACK_MIN = 1
FALLBACK_MAX = 99


class CommandDispatcher:
    def __init__(self, algorithm: AlgorithmDefinition):
        self.algorithm = algorithm

    # ------------------------------------------------------------------
    # Method name → producer
    # ------------------------------------------------------------------
    def build(self, name: str, state: Any, args: Sequence = ()) -> Optional[Producer]:
        """Create `methods[name](state, *args)`, or None if no such method."""
        method = self.algorithm.methods.get(name)
        if method is None:
            logger.warning(
                "Algorithm '%s' has no command '%s' (available: %s)",
                self.algorithm.key, name, ", ".join(self.algorithm.methods) or "none",
            )
            return None
        logger.debug("Dispatching %s.%s%r", self.algorithm.key, name, tuple(args))
        return method(state, *args)

    # ------------------------------------------------------------------
    # Button id → (method name, args)
    # ------------------------------------------------------------------
    def press(self, control_id: str,
              inputs: Optional[Mapping[str, Any]] = None) -> Optional[Tuple[str, tuple]]:
        control = self.algorithm.control(control_id)
        if control is None or control.kind is not ControlKind.BUTTON or not control.bound_method:
            logger.warning("Algorithm '%s' has no button '%s'", self.algorithm.key, control_id)
            return None

        if not control.takes_value:
            return control.bound_method, ()
        return control.bound_method, (self._value_argument(inputs or {}),)

    def _value_argument(self, inputs: Mapping[str, Any]) -> int:
        raw = inputs.get(VALUE_INPUT_ID)
        if raw is not None and str(raw).strip() != "":
            try:
                return int(raw)
            except (TypeError, ValueError):
                logger.warning("Ignoring non-numeric value input %r", raw)
        return random.randint(FALLBACK_MIN, FALLBACK_MAX)

    # ------------------------------------------------------------------
    # Numeric inputs → generate_input(*args)
    # ------------------------------------------------------------------
    def reset_arguments(self, inputs: Optional[Mapping[str, Any]] = None) -> tuple:
        """Positional input-generator args from the non-"value" numeric inputs."""
        inputs = inputs or {}
        args = []
        for control in self.algorithm.controls:
            if control.kind is not ControlKind.NUMERIC_INPUT or control.id == VALUE_INPUT_ID:
                continue
            raw = inputs.get(control.id, control.default_value)
            args.append(_as_int(raw, control.default_value))
        return tuple(args)


def _as_int(raw: Any, default: Optional[int]) -> Optional[int]:
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric input %r, using default %r", raw, default)
        return default
