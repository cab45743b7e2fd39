"""
どこで: `src/unitcircle/export/svg.py`。
何を: DisplayList に記録された点・線・ラベルを SVG として保存する関数を提供する。
なぜ: interactive 依存なしに、描き終えた単位円を 1 枚のファイルとして残せるようにするため。
"""

from __future__ import annotations

from pathlib import Path
from xml.sax.saxutils import escape, quoteattr

import numpy as np

from unitcircle.core.color import rgba_to_hex
from unitcircle.core.surface import DisplayList, LineOp, PointOp, TextOp

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def _opacity_attr(alpha: int) -> str:
    if int(alpha) >= 255:
        return ""
    return f' opacity="{_fmt(int(alpha) / 255.0)}"'


def _unique_points(ops: list[PointOp]) -> list[PointOp]:
    """同一座標・同一色の点を 1 つにまとめ、初出順で返す。

    8 方向展開では軸上と対角線上の点が重複するため、SVG では間引く。
    """
    if not ops:
        return []
    keys = np.asarray(
        [(op.x, op.y, *op.color) for op in ops],
        dtype=np.int64,
    )
    _, first = np.unique(keys, axis=0, return_index=True)
    return [ops[int(i)] for i in np.sort(first)]


def _point_element(op: PointOp) -> str:
    fill = rgba_to_hex(op.color)
    return (
        f'  <rect x="{op.x}" y="{op.y}" width="1" height="1" '
        f'fill="{fill}"{_opacity_attr(op.color[3])} />'
    )


def _line_element(op: LineOp) -> str:
    stroke = rgba_to_hex(op.color)
    # 画素中心を通るよう 0.5 ずらす。
    return (
        f'  <line x1="{_fmt(op.x0 + 0.5)}" y1="{_fmt(op.y0 + 0.5)}" '
        f'x2="{_fmt(op.x1 + 0.5)}" y2="{_fmt(op.y1 + 0.5)}" '
        f'stroke="{stroke}" stroke-width="1"{_opacity_attr(op.color[3])} />'
    )


def _text_element(op: TextOp) -> str:
    fill = rgba_to_hex(op.color)
    return (
        f'  <text x="{op.x}" y="{op.y}" font-family="monospace" '
        f'font-size="{_fmt(op.font_size)}" dominant-baseline="hanging" '
        f'textLength="{op.width}" fill="{fill}" '
        f"data-label={quoteattr(op.text)}>{escape(op.text)}</text>"
    )


def export_svg(
    display_list: DisplayList,
    path: str | Path,
    *,
    canvas_size: tuple[int, int],
) -> Path:
    """記録済みの描画命令を SVG として保存する。

    Parameters
    ----------
    display_list : DisplayList
        描画命令の記録。背景色は最後の `clear()` 時点の色。
    path : str or Path
        出力先パス。親ディレクトリは作成する。
    canvas_size : tuple[int, int]
        キャンバス寸法 [px]（viewBox と width/height に使う）。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が正でない場合。
    """
    _path = Path(path)
    canvas_w, canvas_h = canvas_size
    if int(canvas_w) <= 0 or int(canvas_h) <= 0:
        raise ValueError("canvas_size は正の値である必要がある")

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(canvas_w)} {int(canvas_h)}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )
    lines.append(
        f'  <rect x="0" y="0" width="{int(canvas_w)}" height="{int(canvas_h)}" '
        f'fill="{rgba_to_hex(display_list.background)}" />'
    )

    # 点は重複排除のためまとめて先に出し、線とラベルは描画順を保つ。
    ops = display_list.ops
    point_ops = [op for op in ops if isinstance(op, PointOp)]
    for op in _unique_points(point_ops):
        lines.append(_point_element(op))

    for op in ops:
        if isinstance(op, LineOp):
            lines.append(_line_element(op))
        elif isinstance(op, TextOp):
            lines.append(_text_element(op))

    lines.append("</svg>")

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(lines) + "\n")

    return _path


__all__ = ["export_svg"]
