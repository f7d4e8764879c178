"""
main.py — Algorithm Step Visualizer Flask App
=============================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/algorithms         – catalog metadata
  POST /api/load               – select an algorithm, build fresh input
  POST /api/reset              – rebuild input for the current algorithm
  POST /api/step/next          – advance one step
  POST /api/step/play          – toggle play/pause
  POST /api/step/end           – drain the producer
  POST /api/tick               – timer tick (the page polls this while playing)
  POST /api/config/speed       – speed in ms, from the slider, or a preset
  POST /api/command            – run an interactive command (method or button)
  POST /api/record             – record a full run on a private engine → metrics
  GET  /api/state              – current engine state + rendered SVG

State management:
  One in-process PlaybackEngine serves every request: single user,
  single simulation.  The engine is not thread-safe, so every route that
  touches it holds `engine_lock`; the development server also runs with
  threading disabled.

Configuration (environment):
  HOST, PORT                       – bind address (127.0.0.1:5000)
  VISUALIZER_LOG_LEVEL             – logging level name (INFO)
  VISUALIZER_DEFAULT_ALGORITHM     – algorithm shown on first visit (bubble-sort)
"""

from flask import Flask, render_template_string, request, jsonify
from functools import wraps
import logging
import threading
import sys
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import get_algorithm, list_algorithms
from algorithms.step import Snapshot
from engine import PlaybackEngine, Recorder, CommandDispatcher
from ui import (
    render_snapshot,
    render_placeholder,
    playback_controls,
    algorithm_selector,
    algorithm_controls,
    analytics_panel,
    explanation_panel,
)

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = os.environ.get("VISUALIZER_DEFAULT_ALGORITHM", "bubble-sort")
RECORD_LIMIT      = 100_000

app = Flask(__name__)
engine = PlaybackEngine()
engine_lock = threading.Lock()


# ---------------------------------------------------------------------------
# Engine State Helpers
# ---------------------------------------------------------------------------
def ensure_loaded() -> None:
    """Load the default algorithm on first visit."""
    if engine.algorithm is None:
        engine.load(DEFAULT_ALGORITHM)


def render_current() -> str:
    algo = engine.algorithm
    if algo is None:
        return render_placeholder("Pick an algorithm to begin.")
    snapshot = engine.current
    # interactive structures show their live state until the first command
    if snapshot is not None and algo.preview is not None and not snapshot.is_projection:
        snapshot = Snapshot(data=algo.preview(engine.logical_state), description=snapshot.description)
    return render_snapshot(algo.visualizer, snapshot)


def payload(**extra) -> dict:
    """Everything the page needs to redraw after an engine call."""
    state = engine.to_dict()
    description = engine.current.description if engine.current else ""
    error = repr(engine.last_error) if engine.last_error else None
    state.update(
        svg=render_current(),
        explanation=explanation_panel(description, error=error),
        is_playing=engine.is_playing,
        is_finished=engine.is_finished,
    )
    state.update(extra)
    return state


def serialized(view):
    """Run a route with exclusive access to the shared engine."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        with engine_lock:
            return view(*args, **kwargs)
    return wrapper


def fault_response(exc: Exception):
    """Producer fault: the engine already logged it and moved to FINISHED."""
    return jsonify(payload(error=str(exc) or type(exc).__name__)), 500


def load_failure(exc: Exception):
    """A failed load/reset is a producer fault only if the engine recorded it."""
    if exc is engine.last_error:
        return fault_response(exc)
    logger.warning("Rejected input arguments: %s", exc)
    return jsonify(payload(error=f"Bad input: {exc}")), 400


def body() -> dict:
    return request.get_json(silent=True) or {}


def input_args(data: dict, algorithm) -> tuple:
    """Explicit `args`, or arguments derived from the panel's numeric `inputs`."""
    if "args" in data:
        return tuple(data.get("args") or ())
    if "inputs" in data:
        return CommandDispatcher(algorithm).reset_arguments(data.get("inputs"))
    return ()


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
@serialized
def index():
    ensure_loaded()
    algo = engine.algorithm
    description = engine.current.description if engine.current else ""

    html = render_template_string(INDEX_TEMPLATE,
        svg=render_current(),
        algo_selector=algorithm_selector(list_algorithms(), selected_key=algo.key),
        controls=algorithm_controls(algo),
        playback=playback_controls(
            is_playing=engine.is_playing,
            step_count=engine.step_count,
            speed_ms=engine.speed_ms,
            is_finished=engine.is_finished,
        ),
        analytics=analytics_panel(),
        explanation=explanation_panel(description),
    )
    return html


@app.route("/api/algorithms")
def api_algorithms():
    return jsonify([algo.to_dict() for algo in list_algorithms()])


# ---------------------------------------------------------------------------
# API: Load / Reset
# ---------------------------------------------------------------------------
@app.route("/api/load", methods=["POST"])
@serialized
def api_load():
    data = body()
    key = data.get("algorithm", DEFAULT_ALGORITHM)
    algo = get_algorithm(key)
    if algo is None:
        return jsonify({"error": f"Unknown algorithm: {key}"}), 404

    try:
        engine.load(algo, *input_args(data, algo), seed=data.get("seed"))
    except Exception as exc:
        return load_failure(exc)
    return jsonify(payload(controls=algorithm_controls(algo)))


@app.route("/api/reset", methods=["POST"])
@serialized
def api_reset():
    data = body()
    if engine.algorithm is None:
        return jsonify(payload())

    try:
        engine.reset(*input_args(data, engine.algorithm), seed=data.get("seed"))
    except Exception as exc:
        return load_failure(exc)
    return jsonify(payload())


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
@serialized
def api_step_next():
    try:
        advanced = engine.step_forward()
    except Exception as exc:
        return fault_response(exc)
    return jsonify(payload(advanced=advanced))


@app.route("/api/step/play", methods=["POST"])
@serialized
def api_step_play():
    engine.toggle_play()
    return jsonify(payload())


@app.route("/api/step/end", methods=["POST"])
@serialized
def api_step_end():
    limit = body().get("limit")
    try:
        taken = engine.jump_to_end(int(limit) if limit is not None else None)
    except Exception as exc:
        return fault_response(exc)
    return jsonify(payload(taken=taken))


@app.route("/api/tick", methods=["POST"])
@serialized
def api_tick():
    try:
        advanced = engine.tick()
    except Exception as exc:
        return fault_response(exc)
    return jsonify(payload(advanced=advanced))


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
@serialized
def api_config_speed():
    data = body()
    try:
        if "preset" in data:
            speed = engine.set_speed_preset(data["preset"])
        elif "slider" in data:
            speed = engine.set_speed_from_slider(float(data["slider"]))
        elif "speed_ms" in data:
            speed = engine.set_speed(float(data["speed_ms"]))
        else:
            return jsonify({"error": "Expected one of speed_ms, slider, preset"}), 400
    except (TypeError, ValueError) as exc:
        return jsonify({"error": f"Bad speed: {exc}"}), 400
    return jsonify({"speed_ms": speed})


# ---------------------------------------------------------------------------
# API: Commands (interactive algorithms)
# ---------------------------------------------------------------------------
@app.route("/api/command", methods=["POST"])
@serialized
def api_command():
    data = body()
    if engine.algorithm is None:
        return jsonify({"error": "No algorithm loaded"}), 400

    if "control" in data:
        accepted = engine.press(data["control"], data.get("inputs"))
        name = data["control"]
    else:
        name = data.get("method", "")
        accepted = engine.run_command(name, *(data.get("args") or ()))

    if not accepted:
        return jsonify(payload(error=f"Unknown command: {name}")), 400
    return jsonify(payload())


# ---------------------------------------------------------------------------
# API: Record a full run
# ---------------------------------------------------------------------------
@app.route("/api/record", methods=["POST"])
@serialized
def api_record():
    data = body()
    key = data.get("algorithm") or (engine.algorithm.key if engine.algorithm else DEFAULT_ALGORITHM)
    algo = get_algorithm(key)
    if algo is None:
        return jsonify({"error": f"Unknown algorithm: {key}"}), 404

    rec = Recorder()
    try:
        rec.start(key, *input_args(data, algo), seed=data.get("seed"))
        metrics = rec.run_to_completion(int(data.get("limit", RECORD_LIMIT)))
    except Exception as exc:
        logger.warning("Recording '%s' failed: %s", key, exc)
        return jsonify({"error": str(exc)}), 500

    return jsonify({
        "metrics":   rec.export()["metrics"],
        "analytics": analytics_panel(metrics),
    })


@app.route("/api/state")
@serialized
def api_state():
    return jsonify(payload())


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Algorithm Step Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    :root {
      --ink: #e6edf3;   --ink-dim: #7d8590;
      --page: #010409;  --rail: #0d1117;  --card: #161b22;  --card-alt: #1c2128;
      --rule: #30363d;  --cyan: #0ea5e9;  --teal: #06b6d4;  --green: #10b981;  --rose: #f43f5e;
      --mono: 'JetBrains Mono', monospace;
    }
    * { box-sizing: border-box; margin: 0; padding: 0; }
    body { display: grid; grid-template-columns: 340px 1fr; height: 100vh; overflow: hidden;
           font-family: 'DM Sans', system-ui, sans-serif; color: var(--ink); background: var(--page); }

    #sidebar { padding: 24px 16px; overflow-y: auto; background: var(--rail); border-right: 1px solid var(--rule); }
    #main { display: grid; grid-template-rows: 1fr auto; min-width: 0; }
    #canvas-container { display: grid; place-items: center; border-bottom: 1px solid var(--rule); }
    #canvas-svg svg { max-width: 100%; height: auto; }
    #explanation-container { min-height: 120px; padding: 20px; background: var(--rail); }
    #explanation-container h3 { margin-bottom: 12px; font-size: 14px; color: var(--cyan); text-transform: uppercase; }

    .explanation-text { font-size: 15px; line-height: 1.8; color: var(--ink-dim); }
    .explanation-text.error { color: var(--rose); }

    .panel { margin-bottom: 16px; padding: 18px; border: 1px solid var(--rule); border-radius: 12px; background: var(--card); }
    .panel h3 { margin-bottom: 14px; font-size: 13px; letter-spacing: .5px; text-transform: uppercase; }
    .hint, .algo-description, .placeholder { margin-bottom: 8px; font-size: 12px; color: var(--ink-dim); }
    .button-row, .input-row { display: flex; flex-wrap: wrap; gap: 8px; margin-bottom: 12px; }
    label { display: block; margin: 10px 0 4px; font-size: 12px; color: var(--ink-dim); text-transform: uppercase; }

    button { padding: 10px 16px; border: 0; border-radius: 8px; cursor: pointer; font: 600 13px 'DM Sans', sans-serif;
             color: #fff; background: linear-gradient(135deg, var(--cyan), var(--teal)); }
    .btn-secondary { border: 1px solid var(--rule); background: var(--card-alt); }
    select, input { width: 100%; margin: 6px 0; padding: 10px 12px; font-size: 13px; color: var(--ink);
                    border: 1px solid var(--rule); border-radius: 8px; background: var(--page); }

    .step-info { margin: 10px 0; padding: 8px 12px; font: 13px var(--mono); color: var(--ink-dim);
                 border-left: 3px solid var(--cyan); background: var(--page); }
    .finished-badge { padding: 4px 10px; border-radius: 6px; font-size: 11px; font-weight: 700; background: var(--green); }

    table { width: 100%; font-size: 13px; }
    td { padding: 6px 4px; }
    td:last-child { text-align: right; font-family: var(--mono); color: var(--cyan); }
  </style>

</head>
<body>
  <div id="sidebar">
    <div id="algo-selector-panel">{{ algo_selector|safe }}</div>
    <div id="controls">{{ controls|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <button id="btn-record" class="btn-secondary">📊 Record full run</button>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>
    <div id="explanation-container">
      <h3>Step Explanation</h3>
      <div id="explanation">{{ explanation|safe }}</div>
    </div>
  </div>

  <script>
    let timer = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function inputs() {
      const values = {};
      document.querySelectorAll('.algo-input').forEach(el => { values[el.id] = el.value; });
      return values;
    }

    function apply(data) {
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.explanation) document.getElementById('explanation').innerHTML = data.explanation;
      if (data.controls) document.getElementById('controls').innerHTML = data.controls;
      if (data.step_count !== undefined) document.getElementById('step-count').textContent = data.step_count;
      const play = document.getElementById('btn-play');
      if (play && data.state) play.textContent = data.is_playing ? '⏸' : '▶';
      if (data.is_playing) startTimer(); else stopTimer();
    }

    function startTimer() {
      if (timer) return;
      timer = setInterval(async () => apply(await post('/api/tick')), 50);
    }

    function stopTimer() {
      if (timer) clearInterval(timer);
      timer = null;
    }

    document.getElementById('btn-play')?.addEventListener('click', async () => apply(await post('/api/step/play')));
    document.getElementById('btn-next')?.addEventListener('click', async () => apply(await post('/api/step/next')));
    document.getElementById('btn-end')?.addEventListener('click', async () => apply(await post('/api/step/end')));
    document.getElementById('btn-reset')?.addEventListener('click', async () => {
      apply(await post('/api/reset', {inputs: inputs()}));
    });

    document.getElementById('algo-selector')?.addEventListener('change', async (e) => {
      apply(await post('/api/load', {algorithm: e.target.value}));
    });

    // command buttons are re-rendered on every load, so delegate
    document.getElementById('controls').addEventListener('click', async (e) => {
      const btn = e.target.closest('.algo-button');
      if (!btn) return;
      apply(await post('/api/command', {control: btn.id, inputs: inputs()}));
    });

    document.getElementById('speed-slider')?.addEventListener('change', async (e) => {
      await post('/api/config/speed', {slider: +e.target.value});
    });
    document.getElementById('speed-selector')?.addEventListener('change', async (e) => {
      if (e.target.value) await post('/api/config/speed', {preset: e.target.value});
    });

    document.getElementById('btn-record')?.addEventListener('click', async () => {
      const data = await post('/api/record', {inputs: inputs()});
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("VISUALIZER_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "5000"))

    print("=" * 60)
    print("  Algorithm Step Visualizer")
    print("  Starting Flask server...")
    print(f"  Open http://{host}:{port}")
    print("=" * 60)
    app.run(host=host, port=port, debug=False, threaded=False)
