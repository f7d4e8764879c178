"""
ui/
---
Presentation layer.

    from ui import render_snapshot
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_snapshot, render_placeholder, CanvasConfig

from ui.controls import (
    playback_controls,
    algorithm_selector,
    algorithm_controls,
    analytics_panel,
    explanation_panel,
)

__all__ = [
    "render_snapshot",
    "render_placeholder",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "algorithm_controls",
    "analytics_panel",
    "explanation_panel",
]
