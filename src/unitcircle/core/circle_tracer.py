"""
どこで: `src/unitcircle/core/circle_tracer.py`。円周の逐次トレース。
何を: 中点円アルゴリズム（整数演算のみ）で第 1 八分円を進め、8 方向対称に円周の点を描く。
なぜ: 三角関数を使わず O(radius) 点で円を描き、1 ステップずつ見せるアニメーションにするため。
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from unitcircle.core.render_context import RenderContext

_logger = logging.getLogger(__name__)

Point2D = tuple[int, int]


def octant_steps(radius: int) -> Iterator[Point2D]:
    """第 1 八分円の (x, y) をステップ順に返す。

    Parameters
    ----------
    radius : int
        円の半径 [px]。0 以下なら何も返さない。

    Yields
    ------
    tuple[int, int]
        中心からの相対座標 (x, y)。常に x >= y >= 0。

    Notes
    -----
    x = radius - 1, y = 0 から始め、誤差項 err = 1 - 2*radius を保持する。
    各ステップで y を進める判定と x を戻す判定を順に両方行う（else ではない）。
    x < y になった時点で八分円を抜けて終了する。
    """

    r = int(radius)
    x = r - 1
    y = 0
    dx = 1
    dy = 1
    err = dx - (r << 1)

    while x >= y:
        yield x, y

        if err <= 0:
            y += 1
            err += dy
            dy += 2

        if err > 0:
            x -= 1
            dx += 2
            err += dx - (r << 1)


def symmetric_points(cx: int, cy: int, x: int, y: int) -> tuple[Point2D, ...]:
    """八分円上の (x, y) を中心 (cx, cy) まわりの 8 点へ展開して返す。

    y == 0 や x == y では同じ点が 2 度現れるが、間引かずにそのまま 8 点返す。
    """

    return (
        (cx + x, cy - y),
        (cx - x, cy - y),
        (cx + x, cy + y),
        (cx - x, cy + y),
        (cx + y, cy - x),
        (cx - y, cy - x),
        (cx + y, cy + x),
        (cx - y, cy + x),
    )


def trace_circle(ctx: RenderContext, cx: int, cy: int, radius: int) -> int:
    """円周を 1 ステップずつ描画面へ描き、ステップ数を返す。

    各ステップで 8 点を描いてフレームを提示し、`timing.trace_delay_ms` だけ待つ。
    色は呼び出し側が事前に `set_draw_color` で設定しておく。
    """

    surface = ctx.surface
    delay = ctx.timing.trace_delay_ms
    steps = 0
    for x, y in octant_steps(radius):
        for px, py in symmetric_points(cx, cy, x, y):
            surface.draw_point(px, py)
        surface.present()
        ctx.pause(delay)
        steps += 1

    _logger.debug("traced circle: center=(%d, %d) radius=%d steps=%d", cx, cy, radius, steps)
    return steps


__all__ = ["Point2D", "octant_steps", "symmetric_points", "trace_circle"]
