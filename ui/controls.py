"""
controls.py — UI Control Panels
===============================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – play/pause/next/end/reset + speed slider & presets
  • algorithm_selector  – dropdown grouped by category
  • algorithm_controls  – numeric inputs & command buttons, built from the
                          algorithm's declarative Control list
  • analytics_panel     – total steps, wall time, memory of a recorded run
  • explanation_panel   – the current snapshot's narration

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

import html
from typing import List, Optional

from algorithms import AlgorithmDefinition, Category, ControlKind
from engine import MAX_SPEED_MS, MIN_SPEED_MS, SPEED_PRESETS, RunMetrics


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    step_count: int = 0,
    speed_ms: int = 500,
    is_finished: bool = False,
) -> str:
    play_icon = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"
    # the slider is inverted: its value is MIN + MAX - speed_ms
    slider = MIN_SPEED_MS + MAX_SPEED_MS - speed_ms

    presets = "".join(
        f'<option value="{name}" {"selected" if ms == speed_ms else ""}>{name.capitalize()} ({ms} ms)</option>'
        for name, ms in SPEED_PRESETS.items()
    )

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-reset" title="Reset with fresh input">⟲</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Next step">⏵</button>
        <button id="btn-end" title="Jump to end">⏭</button>
      </div>
      <div class="step-info">
        Step <span id="step-count">{step_count}</span>
        {' <span class="finished-badge">FINISHED</span>' if is_finished else ''}
      </div>
      <div class="speed-control">
        <label>Speed:
          <input type="range" id="speed-slider" min="{MIN_SPEED_MS}" max="{MAX_SPEED_MS}" step="50" value="{slider}">
        </label>
        <select id="speed-selector">
          <option value="">Custom</option>
          {presets}
        </select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgorithmDefinition],
    selected_key: Optional[str] = None,
) -> str:
    groups = []
    for category in Category:
        members = [a for a in algorithms if a.category is category]
        if not members:
            continue
        options = []
        for algo in members:
            sel = 'selected' if algo.key == selected_key else ''
            suffix = f" — {algo.complexity}" if algo.complexity else ""
            options.append(f'<option value="{algo.key}" {sel}>{html.escape(algo.label)}{suffix}</option>')
        groups.append(f'<optgroup label="{category.value}">{"".join(options)}</optgroup>')

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector">
        {''.join(groups)}
      </select>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Controls (from declarative metadata)
# ---------------------------------------------------------------------------
def algorithm_controls(algorithm: Optional[AlgorithmDefinition] = None) -> str:
    if algorithm is None:
        return """
        <div class="panel algorithm-controls">
          <p class="placeholder">Select an algorithm.</p>
        </div>
        """

    inputs, buttons = [], []
    for control in algorithm.controls:
        if control.kind is ControlKind.NUMERIC_INPUT:
            inputs.append(
                f'<label>{html.escape(control.label)}: '
                f'<input type="number" class="algo-input" id="{control.id}" '
                f'value="{control.default_value if control.default_value is not None else ""}"></label>'
            )
        elif control.kind is ControlKind.BUTTON:
            buttons.append(
                f'<button class="algo-button btn-secondary" id="{control.id}" '
                f'data-method="{control.bound_method}">{html.escape(control.label)}</button>'
            )

    mode = "Interactive: use the buttons below." if algorithm.is_interactive else "Press ▶ to animate."
    return f"""
    <div class="panel algorithm-controls" data-algorithm="{algorithm.key}">
      <h3>{html.escape(algorithm.label)}</h3>
      <p class="algo-description">{html.escape(algorithm.description)}</p>
      <p class="hint">{mode}</p>
      <div class="input-row">{''.join(inputs)}</div>
      <div class="button-row">{''.join(buttons)}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Record a run to see metrics.</p>
        </div>
        """

    status = "✅ Completed" if metrics.finished else "⏸ Stopped early"
    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {html.escape(metrics.algo_label)}</h3>
      <table>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Memory:</td><td><strong>{metrics.memory_bytes // 1024} KB</strong></td></tr>
        <tr><td>Outcome:</td><td><strong>{html.escape(metrics.final_description)}</strong></td></tr>
        <tr><td>Status:</td><td><strong>{status}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(description: str = "", error: Optional[str] = None) -> str:
    if error:
        return f"""<div class="explanation-text error">⚠ {html.escape(error)}</div>"""
    if not description:
        description = "Pick an algorithm, then press ▶ to watch it step by step."
    return f"""<div class="explanation-text">{html.escape(description)}</div>"""
