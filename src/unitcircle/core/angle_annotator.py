"""
どこで: `src/unitcircle/core/angle_annotator.py`。角度 1 本分の半径線と注記。
何を: 角度 [deg] から円周上の端点を求めて半径線を描き、代表角ならラベルを端点付近へ配置して描く。
なぜ: 「角度 → 端点 → ラベル文字列 → ラベル位置」を 1 つの手続きにまとめ、表とは独立に検証できるようにするため。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from unitcircle.core.angle_table import AngleEntry, angle_entry
from unitcircle.core.render_context import RenderContext
from unitcircle.core.surface import RenderError

logger = logging.getLogger(__name__)

Point2D = tuple[int, int]


@dataclass(frozen=True, slots=True)
class AnnotatedAngle:
    """`draw_angle` 1 回分の結果。ラベルを描かなかった場合 label/label_pos は None。"""

    degrees: float
    end: Point2D
    label: str | None = None
    label_pos: Point2D | None = None


def angle_endpoint(cx: int, cy: int, degrees: float, radius: int) -> Point2D:
    """中心 (cx, cy)・半径 radius の円周上で、degrees に対応する点を返す。

    Notes
    -----
    角度は +X 軸から反時計回り。スクリーン座標は y 下向きなので sin 成分は引く。
    成分は 0 方向へ切り捨てる（90° の cos のような微小誤差は 0 になる）。

    Raises
    ------
    ValueError
        degrees が有限の値でない（NaN / inf）場合。
    """

    value = float(degrees)
    if not math.isfinite(value):
        raise ValueError(f"degrees は有限の値である必要がある: got={degrees!r}")
    theta = math.radians(value)
    r = float(radius)
    r_x = int(math.cos(theta) * r)
    r_y = int(math.sin(theta) * r)
    return int(cx) + r_x, int(cy) - r_y


def label_position(entry: AngleEntry, end: Point2D, width: int, height: int) -> Point2D:
    """entry の配置規則でラベル（width x height）の左上座標を返す。"""

    return entry.placement.top_left(end, width, height)


def _draw_label(ctx: RenderContext, entry: AngleEntry, end: Point2D) -> Point2D | None:
    try:
        image = ctx.label_slot.replace(ctx.text.render_text(entry.label, ctx.label_color))
        pos = label_position(entry, end, int(image.width), int(image.height))
        ctx.text.draw_image(image, *pos)
    except RenderError as exc:
        logger.warning("ラベル描画をスキップします: degrees=%s label=%r (%s)", entry.degrees, entry.label, exc)
        return None
    ctx.surface.present()
    return pos


def draw_angle(ctx: RenderContext, cx: int, cy: int, degrees: float, radius: int) -> AnnotatedAngle:
    """中心から degrees 方向の半径線を描き、代表角ならラベルも描く。

    Parameters
    ----------
    ctx : RenderContext
        描画文脈。線色は呼び出し側が設定済みの前提。
    cx, cy : int
        円の中心 [px]。
    degrees : float
        角度 [deg]。表に無い角度は線だけ描く。
    radius : int
        半径 [px]。0 なら中心に長さ 0 の線を描く。

    Returns
    -------
    AnnotatedAngle
        端点と、描いたラベル（あれば）の文字列・位置。

    Raises
    ------
    ValueError
        degrees が有限の値でない場合（何も描かない）。

    Notes
    -----
    テキストの描画に失敗しても例外は外へ出さず、警告ログを残してラベルだけ省く。
    """

    delay = ctx.timing.angle_delay_ms
    end = angle_endpoint(cx, cy, degrees, radius)

    ctx.surface.draw_line(int(cx), int(cy), *end)
    ctx.surface.present()
    ctx.pause(delay)

    entry = angle_entry(degrees)
    label: str | None = None
    label_pos: Point2D | None = None
    if entry is not None:
        label_pos = _draw_label(ctx, entry, end)
        if label_pos is not None:
            label = entry.label

    ctx.pause(delay)
    return AnnotatedAngle(degrees=degrees, end=end, label=label, label_pos=label_pos)


__all__ = ["AnnotatedAngle", "angle_endpoint", "draw_angle", "label_position"]
