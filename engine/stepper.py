"""
stepper.py — Playback Engine
============================
The PlaybackEngine is the ONLY object the UI interacts with during a run.
It owns the active producer, the logical state that producers mutate, and
a poll-driven timer that paces auto-play.

State machine:
    IDLE      →  load()          →  READY
    READY     →  toggle_play()   →  PLAYING
    PAUSED    →  toggle_play()   →  PLAYING
    PLAYING   →  toggle_play()   →  PAUSED
    PLAYING   →  (no producer)   →  PAUSED
    any*      →  (exhausted)     →  FINISHED
    any*      →  run_command()   →  PLAYING
    any*      →  reset()         →  READY          (* once loaded)

Reconciliation:
  After every published snapshot the engine decides whether `data` IS the
  logical state (sorting arrays, heightmaps) or only a picture of it
  (graph / grid projections).  Projections never overwrite the logical
  state; anything else does.  The very first snapshot pulled at load time
  is published but not reconciled.

Timing:
  There is no background thread.  The host (a Flask request, a test, a
  GUI idle callback) calls `tick()`; while PLAYING the engine advances at
  most once per `speed_ms`.  Speed changes therefore take effect on the
  next tick.

Thread safety:
  This class is NOT thread-safe.  Every call must come from one thread.
"""

import logging
import random
import time
from enum import Enum
from typing import Any, Callable, Optional, Union

from algorithms import AlgorithmDefinition, get_algorithm
from algorithms.step import Producer, Snapshot
from engine.commands import CommandDispatcher

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class EngineState(Enum):
    IDLE     = "idle"
    READY    = "ready"
    PLAYING  = "playing"
    PAUSED   = "paused"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed (milliseconds per step)
# ---------------------------------------------------------------------------
MIN_SPEED_MS     = 50
MAX_SPEED_MS     = 1000
DEFAULT_SPEED_MS = 500

SPEED_PRESETS = {
    "slow":   1000,   # teaching mode
    "medium": 500,
    "fast":   150,    # demo mode
    "turbo":  50,
}


def clamp_speed(ms: float) -> int:
    return int(max(MIN_SPEED_MS, min(MAX_SPEED_MS, ms)))


def speed_from_slider(value: float) -> int:
    """The speed slider is inverted: right (1000) is fast, left (50) is slow."""
    return clamp_speed(MAX_SPEED_MS + MIN_SPEED_MS - value)


# ---------------------------------------------------------------------------
# PlaybackEngine
# ---------------------------------------------------------------------------
class PlaybackEngine:
    """
    Attributes:
        state         : Current EngineState.
        algorithm     : Loaded AlgorithmDefinition (None while IDLE).
        logical_state : The persistent value producers read and mutate.
        current       : Last published Snapshot.
        step_count    : Snapshots published since the last load / reset,
                        the initial one excluded.
        speed_ms      : Milliseconds between auto-advance ticks.
        last_error    : Exception that killed the last producer, if any.
        on_step       : Optional callback(Snapshot) fired on every publish.
                        The UI hooks its re-render here.
    """

    def __init__(self, on_step: Optional[Callable[[Snapshot], None]] = None,
                 clock: Callable[[], float] = time.monotonic):
        self._producer:    Optional[Producer]            = None
        self.dispatcher:   Optional[CommandDispatcher]   = None
        self.algorithm:    Optional[AlgorithmDefinition] = None
        self.state:        EngineState                   = EngineState.IDLE
        self.logical_state: Any                          = None
        self.current:      Optional[Snapshot]            = None
        self.step_count:   int                           = 0
        self.speed_ms:     int                           = DEFAULT_SPEED_MS
        self.last_error:   Optional[BaseException]       = None
        self.on_step:      Optional[Callable[[Snapshot], None]] = on_step

        # for auto-play timing
        self._clock:       Callable[[], float] = clock
        self._last_tick:   float               = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, algorithm: Union[AlgorithmDefinition, str], *input_args,
             seed: Optional[int] = None) -> None:
        """Build fresh input, attach a fresh producer and show the first frame."""
        algo = self._resolve(algorithm)
        if seed is not None:
            random.seed(seed)
        # a bad input argument raises here and leaves the engine untouched
        fresh_input = algo.generate_input(*input_args)

        self._stop_timer()
        if self._producer is not None:
            self._producer.close()
        self.algorithm     = algo
        self.dispatcher    = CommandDispatcher(algo)
        self.last_error    = None
        self.step_count    = 0
        self._producer     = None
        self.logical_state = fresh_input
        self.state         = EngineState.READY
        logger.info("Loaded '%s' (args=%r, seed=%r)", algo.key, input_args, seed)

        first: Optional[Snapshot] = None
        if algo.run is not None:
            self._producer = algo.run(self.logical_state)
            # eagerly fetch step 0 so the UI can show the initial state
            first = self._fetch_next()
        if first is None:
            first = Snapshot(data=self.logical_state, description="Ready")
        self._publish(first)

    def reset(self, *input_args, seed: Optional[int] = None) -> None:
        """Reload the current algorithm.  No-op while IDLE."""
        if self.algorithm is None:
            return
        self.load(self.algorithm, *input_args, seed=seed)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one snapshot.  Returns True if a new snapshot was published."""
        if self._producer is None:
            if self.state is EngineState.PLAYING:
                self._stop_timer()
                self.state = EngineState.PAUSED
            return False

        snapshot = self._fetch_next()
        if snapshot is None:
            self._finish()
            return False

        self.step_count += 1
        self._publish(snapshot)
        self._reconcile(snapshot)
        return True

    def jump_to_end(self, limit: Optional[int] = None) -> int:
        """Drain the producer (at most `limit` snapshots).  Returns the count taken."""
        taken = 0
        while limit is None or taken < limit:
            if not self.step_forward():
                break
            taken += 1
        return taken

    # ------------------------------------------------------------------
    # Commands (interactive algorithms)
    # ------------------------------------------------------------------
    def run_command(self, name: str, *args) -> bool:
        """Replace the producer with `methods[name](logical_state, *args)` and play it."""
        if self.dispatcher is None:
            logger.warning("Command '%s' ignored: no algorithm loaded", name)
            return False
        producer = self.dispatcher.build(name, self.logical_state, args)
        if producer is None:
            return False

        if self._producer is not None:
            logger.debug("Abandoning unfinished producer for '%s'", name)
            self._producer.close()
        self._producer  = producer
        self.last_error = None
        self._play()
        return True

    def press(self, control_id: str, inputs: Optional[dict] = None) -> bool:
        """Resolve a button through the dispatcher and run its command."""
        if self.dispatcher is None:
            logger.warning("Button '%s' ignored: no algorithm loaded", control_id)
            return False
        resolved = self.dispatcher.press(control_id, inputs)
        if resolved is None:
            return False
        name, args = resolved
        return self.run_command(name, *args)

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def _play(self) -> None:
        self.state      = EngineState.PLAYING
        self._last_tick = self._clock()

    def _pause(self) -> None:
        self._stop_timer()
        self.state = EngineState.PAUSED

    def toggle_play(self) -> None:
        if self.state is EngineState.PLAYING:
            self._pause()
        elif self.state in (EngineState.READY, EngineState.PAUSED):
            self._play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and at least one
        period has elapsed, advances one step.  Returns True if a step
        was taken.
        """
        if self.state is not EngineState.PLAYING:
            return False
        now = self._clock() if now is None else now
        if (now - self._last_tick) * 1000.0 < self.speed_ms:
            return False
        self._last_tick = now
        return self.step_forward()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, ms: float) -> int:
        self.speed_ms = clamp_speed(ms)
        return self.speed_ms

    def set_speed_preset(self, preset: str) -> int:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset}")
        return self.set_speed(SPEED_PRESETS[preset])

    def set_speed_from_slider(self, value: float) -> int:
        return self.set_speed(speed_from_slider(value))

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def has_producer(self) -> bool:
        return self._producer is not None

    @property
    def is_finished(self) -> bool:
        return self.state is EngineState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state is EngineState.PLAYING

    def to_dict(self) -> dict:
        return {
            "state":        self.state.value,
            "algorithm":    self.algorithm.key if self.algorithm else None,
            "step_count":   self.step_count,
            "speed_ms":     self.speed_ms,
            "has_producer": self.has_producer,
            "snapshot":     self.current.to_dict() if self.current else None,
            "last_error":   repr(self.last_error) if self.last_error else None,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @staticmethod
    def _resolve(algorithm: Union[AlgorithmDefinition, str]) -> AlgorithmDefinition:
        if isinstance(algorithm, AlgorithmDefinition):
            return algorithm
        algo = get_algorithm(algorithm)
        if algo is None:
            raise ValueError(f"Unknown algorithm: {algorithm}")
        return algo

    def _fetch_next(self) -> Optional[Snapshot]:
        """Pull one Snapshot from the producer, or None once it is exhausted."""
        if self._producer is None:
            return None
        try:
            return next(self._producer)
        except StopIteration:
            return None
        except Exception as exc:
            logger.exception(
                "Producer for '%s' failed after %d step(s)",
                self.algorithm.key if self.algorithm else "?", self.step_count,
            )
            self.last_error = exc
            self._finish()
            raise

    def _finish(self) -> None:
        self._stop_timer()
        self._producer = None
        self.state     = EngineState.FINISHED

    def _stop_timer(self) -> None:
        self._last_tick = 0.0

    def _reconcile(self, snapshot: Snapshot) -> None:
        if snapshot.is_projection:
            return
        self.logical_state = snapshot.data

    def _publish(self, snapshot: Snapshot) -> None:
        self.current = snapshot
        if self.on_step is not None:
            self.on_step(snapshot)
