"""
recorder.py — Run Recorder & Analytics
======================================
Records a complete algorithm run (every published Snapshot, the initial
frame included) and computes the metrics the analytics card shows.

Usage:
    rec = Recorder()
    rec.start("bubble-sort", 12, seed=7)
    rec.run_to_completion()          # drains the producer
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for save/replay

Interactive algorithms have no producer until a command runs, so record
them by calling `rec.engine.run_command(...)` before `run_to_completion()`.
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from algorithms.step import Snapshot
from engine.stepper import PlaybackEngine

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:          str   = ""
    algo_label:        str   = ""
    total_steps:       int   = 0        # snapshots published, initial frame included
    wall_time_ms:      float = 0.0      # wall-clock time to run to completion
    memory_bytes:      int   = 0        # approx size of the recorded snapshot buffer
    final_description: str   = ""
    finished:          bool  = False    # False when stopped by `limit`


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Snapshots from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
        engine  : The underlying PlaybackEngine (for live step-by-step access).
    """

    def __init__(self):
        self.steps:   List[Snapshot]        = []
        self.metrics: Optional[RunMetrics]  = None
        self.engine:  Optional[PlaybackEngine] = None

        self._args:       tuple         = ()
        self._seed:       Optional[int] = None
        self._start_time: float         = 0.0

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, *input_args, seed: Optional[int] = None) -> None:
        """Load the algorithm into a private engine that records every frame."""
        self.steps   = []
        self.metrics = None
        self._args   = input_args
        self._seed   = seed

        self.engine = PlaybackEngine(on_step=self.record_step)
        # raises ValueError for an unknown key
        self.engine.load(algo_key, *input_args, seed=seed)

    def run_to_completion(self, limit: Optional[int] = None) -> RunMetrics:
        """Drain the producer (at most `limit` more steps), then compute metrics."""
        if self.engine is None:
            raise RuntimeError("Call start() first.")

        self._start_time = time.monotonic()
        self.engine.jump_to_end(limit)
        wall_ms = (time.monotonic() - self._start_time) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "Recorded %s: %d step(s) in %.2f ms",
            self.metrics.algo_key, self.metrics.total_steps, self.metrics.wall_time_ms,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Step access (for live playback recording)
    # ------------------------------------------------------------------
    def record_step(self, snapshot: Snapshot) -> None:
        self.steps.append(snapshot)

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        algo = self.engine.algorithm if self.engine else None
        return {
            "algo_key": algo.key if algo else "",
            "args":     list(self._args),
            "seed":     self._seed,
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        algo = self.engine.algorithm
        last = self.steps[-1] if self.steps else None

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s)

        return RunMetrics(
            algo_key=algo.key if algo else "",
            algo_label=algo.label if algo else "",
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            final_description=last.description if last else "",
            finished=not self.engine.has_producer,
        )
