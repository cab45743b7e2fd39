# どこで: `src/unitcircle/core/angle_sequencer.py`。
# 何を: 17 個の代表角を昇順に 1 回ずつ注記する。
# なぜ: 単位円の代表角をアニメーションで順に見せるため。

from __future__ import annotations

from unitcircle.core.angle_annotator import AnnotatedAngle, draw_angle
from unitcircle.core.angle_table import canonical_degrees
from unitcircle.core.render_context import RenderContext

POPULAR_ANGLES: tuple[int, ...] = canonical_degrees()


def popular_lines(ctx: RenderContext, cx: int, cy: int, radius: int) -> list[AnnotatedAngle]:
    """代表角すべてについて `draw_angle` を昇順に呼び、結果を返す。"""

    return [draw_angle(ctx, cx, cy, float(degrees), radius) for degrees in POPULAR_ANGLES]


__all__ = ["POPULAR_ANGLES", "popular_lines"]
