# どこで: `src/unitcircle/__init__.py`。
# 何を: ルート `unitcircle` パッケージを定義する。
# なぜ: import 起点を `unitcircle` に統一するため。

from __future__ import annotations

from unitcircle.api import export_unit_circle, render_unit_circle, run
from unitcircle.core.angle_annotator import draw_angle
from unitcircle.core.angle_sequencer import popular_lines
from unitcircle.core.circle_tracer import trace_circle
from unitcircle.core.render_context import RenderContext

__all__ = [
    "RenderContext",
    "draw_angle",
    "export_unit_circle",
    "popular_lines",
    "render_unit_circle",
    "run",
    "trace_circle",
]
