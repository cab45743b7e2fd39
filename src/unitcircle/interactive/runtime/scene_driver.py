# どこで: `src/unitcircle/interactive/runtime/scene_driver.py`。
# 何を: 「背景クリア → 円トレース（1 回）→ 代表角の注記（1 回）→ 以後はフレーム提示のみ」の進行を管理する。
# なぜ: 1 回きりの処理の順序と RunState の更新を、ウィンドウや pyglet から独立してテストできるようにするため。

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from unitcircle.core.angle_annotator import AnnotatedAngle
from unitcircle.core.angle_sequencer import popular_lines
from unitcircle.core.circle_tracer import trace_circle
from unitcircle.core.color import BLACK, RGBA, WHITE
from unitcircle.core.render_context import RenderContext, RunState
from unitcircle.interactive.runtime.pacer import RealTimeClock

_logger = logging.getLogger(__name__)


class UnitCircleScene:
    """単位円アニメーションの進行役。"""

    def __init__(
        self,
        ctx: RenderContext,
        *,
        center: tuple[int, int],
        radius: int,
        background: RGBA = WHITE,
        line_color: RGBA = BLACK,
        state: RunState | None = None,
    ) -> None:
        self._ctx = ctx
        self._cx, self._cy = (int(center[0]), int(center[1]))
        self._radius = int(radius)
        self._background = background
        self._line_color = line_color
        self.state = state if state is not None else RunState()
        self.annotated: list[AnnotatedAngle] = []
        self.trace_steps = 0

    def step(self) -> None:
        """1 ループ分の処理を行う。初回だけ円と半径線を描き、以後は提示のみ。"""

        surface = self._ctx.surface
        state = self.state

        if not state.circle_drawn:
            surface.set_draw_color(*self._background)
            surface.clear()

        surface.set_draw_color(*self._line_color)

        if not state.circle_drawn:
            clock = RealTimeClock(start_time=time.perf_counter())
            self.trace_steps = trace_circle(self._ctx, self._cx, self._cy, self._radius)
            state.circle_drawn = True
            _logger.info("Circle traced: steps=%d (%.2fs)", self.trace_steps, clock.t())

        if not state.lines_drawn:
            clock = RealTimeClock(start_time=time.perf_counter())
            self.annotated = popular_lines(self._ctx, self._cx, self._cy, self._radius)
            state.lines_drawn = True
            labelled = sum(1 for item in self.annotated if item.label is not None)
            _logger.info(
                "Angles drawn: lines=%d labels=%d (%.2fs)",
                len(self.annotated),
                labelled,
                clock.t(),
            )

        surface.present()

    def run(self, *, should_quit: Callable[[], bool], idle: Callable[[], None]) -> None:
        """終了要求が来るまで `step()` と `idle()` を繰り返す。"""

        while not should_quit():
            self.step()
            if should_quit():
                break
            idle()


__all__ = ["UnitCircleScene"]
