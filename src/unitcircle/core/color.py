# どこで: `src/unitcircle/core/color.py`。
# 何を: 描画色（RGBA 0..255）の正規化と、0..1 float RGB との相互変換を提供する。
# なぜ: config（0..1）と描画面（0..255）で色の表現が異なるため、変換規則を一箇所に集約するため。

from __future__ import annotations

from typing import Any, cast

RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)


def _clamp255(v: object) -> int:
    iv = int(cast(Any, v))
    return 0 if iv < 0 else 255 if iv > 255 else iv


def coerce_rgba(value: object) -> RGBA:
    """値を RGBA タプル `(r, g, b, a)`（0..255）に正規化して返す。

    Parameters
    ----------
    value : object
        `(r, g, b)` または `(r, g, b, a)` のシーケンス。a 省略時は 255。

    Returns
    -------
    tuple[int, int, int, int]
        `int()` 化 + 0..255 clamp 済みの RGBA。

    Raises
    ------
    ValueError
        長さ 3 / 4 のシーケンスでない場合。
    """

    try:
        seq = list(cast(Any, value))
    except Exception as exc:
        raise ValueError(f"rgba value must be a length-3 or 4 sequence: {value!r}") from exc
    if len(seq) == 3:
        seq.append(255)
    if len(seq) != 4:
        raise ValueError(f"rgba value must be a length-3 or 4 sequence: {value!r}")

    r, g, b, a = (_clamp255(v) for v in seq)
    return r, g, b, a


def rgb01_to_rgb255(rgb01: tuple[float, float, float]) -> tuple[int, int, int]:
    """0..1 float RGB を 0..255 int RGB に変換して返す。"""

    r, g, b = rgb01
    return (
        _clamp255(round(float(r) * 255.0)),
        _clamp255(round(float(g) * 255.0)),
        _clamp255(round(float(b) * 255.0)),
    )


def rgb01_to_rgba(rgb01: tuple[float, float, float]) -> RGBA:
    """0..1 float RGB を不透明な RGBA（0..255）に変換して返す。"""

    r, g, b = rgb01_to_rgb255(rgb01)
    return r, g, b, 255


def rgba_to_hex(rgba: RGBA) -> str:
    """RGBA を `#RRGGBB` に変換して返す（alpha は捨てる）。"""

    r, g, b, _a = coerce_rgba(rgba)
    return f"#{r:02X}{g:02X}{b:02X}"


__all__ = [
    "BLACK",
    "RGBA",
    "WHITE",
    "coerce_rgba",
    "rgb01_to_rgb255",
    "rgb01_to_rgba",
    "rgba_to_hex",
]
