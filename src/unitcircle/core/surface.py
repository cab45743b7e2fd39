"""
どこで: `src/unitcircle/core/surface.py`。描画先（Display Surface / Text Renderer）の境界定義。
何を: 描画面とテキスト描画の Protocol、回復可能な描画失敗 `RenderError`、
    および描画命令を記録するヘッドレス実装 `DisplayList` を提供する。
なぜ: 円トレース/角度注記のアルゴリズムを pyglet から切り離し、テストと export で同じ経路を使うため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from unitcircle.core.color import RGBA, WHITE, coerce_rgba


class RenderError(RuntimeError):
    """テキストのラスタライズや画像描画の失敗（回復可能）。"""


class LabelImage(Protocol):
    """1 ラベル分の描画済みテキスト画像。"""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def release(self) -> None: ...


class DisplaySurface(Protocol):
    """点と線を描き、フレームを提示する描画面。

    座標はスクリーン座標（px, 左上原点, y は下向き）。
    """

    def clear(self) -> None: ...

    def set_draw_color(self, r: int, g: int, b: int, a: int = 255) -> None: ...

    def draw_point(self, x: int, y: int) -> None: ...

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None: ...

    def present(self) -> None: ...


class TextRenderer(Protocol):
    """文字列を画像化し、描画面へ配置する。

    どちらの操作も失敗時は `RenderError` を送出する。
    """

    def render_text(self, text: str, color: RGBA) -> LabelImage: ...

    def draw_image(self, image: LabelImage, x: int, y: int) -> None: ...


@dataclass(frozen=True, slots=True)
class PointOp:
    x: int
    y: int
    color: RGBA


@dataclass(frozen=True, slots=True)
class LineOp:
    x0: int
    y0: int
    x1: int
    y1: int
    color: RGBA


@dataclass(frozen=True, slots=True)
class TextOp:
    """配置済みラベル（x, y はラベル矩形の左上）。"""

    text: str
    x: int
    y: int
    width: int
    height: int
    color: RGBA
    font_size: float


DrawOp = PointOp | LineOp | TextOp


@dataclass(slots=True)
class MeasuredText:
    """`MonospaceTextMetrics` が返す LabelImage。"""

    text: str
    width: int
    height: int
    color: RGBA
    font_size: float
    released: bool = False

    def release(self) -> None:
        self.released = True


class MonospaceTextMetrics:
    """フォントを読まずに等幅フォント相当の文字枠を見積もる。

    Notes
    -----
    幅は `ceil(len(text) * font_size * 0.6)`、高さは `ceil(font_size * 1.25)`。
    ヘッドレス実行（テスト / SVG export）でラベル配置を決めるためだけに使う。
    """

    ADVANCE_RATIO = 0.6
    LINE_HEIGHT_RATIO = 1.25

    def __init__(self, *, font_size: float = 12.0) -> None:
        size = float(font_size)
        if size <= 0:
            raise ValueError(f"font_size は正の値である必要がある: got={font_size!r}")
        self.font_size = size

    def measure(self, text: str) -> tuple[int, int]:
        """text の (width, height) を px で返す。"""

        width = int(math.ceil(len(text) * self.font_size * self.ADVANCE_RATIO))
        height = int(math.ceil(self.font_size * self.LINE_HEIGHT_RATIO))
        return width, height


class DisplayList:
    """描画命令をそのまま記録するヘッドレスな DisplaySurface / TextRenderer。

    `clear()` は SDL のレンダラと同じく「現在の描画色で塗りつぶす」扱いで、
    それまでの命令を破棄して背景色を更新する。
    """

    def __init__(
        self,
        *,
        metrics: MonospaceTextMetrics | None = None,
        fail_text: bool = False,
    ) -> None:
        self._ops: list[DrawOp] = []
        self._color: RGBA = WHITE
        self._background: RGBA = WHITE
        self._metrics = metrics if metrics is not None else MonospaceTextMetrics()
        self._fail_text = bool(fail_text)
        self.frames = 0

    # --- DisplaySurface ---

    def clear(self) -> None:
        self._ops.clear()
        self._background = self._color

    def set_draw_color(self, r: int, g: int, b: int, a: int = 255) -> None:
        self._color = coerce_rgba((r, g, b, a))

    def draw_point(self, x: int, y: int) -> None:
        self._ops.append(PointOp(int(x), int(y), self._color))

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        self._ops.append(LineOp(int(x0), int(y0), int(x1), int(y1), self._color))

    def present(self) -> None:
        self.frames += 1

    # --- TextRenderer ---

    def render_text(self, text: str, color: RGBA) -> MeasuredText:
        if self._fail_text:
            raise RenderError(f"text rendering disabled: {text!r}")
        if not text:
            raise RenderError("空文字列は描画できない")
        width, height = self._metrics.measure(text)
        return MeasuredText(
            text=str(text),
            width=width,
            height=height,
            color=coerce_rgba(color),
            font_size=self._metrics.font_size,
        )

    def draw_image(self, image: LabelImage, x: int, y: int) -> None:
        if not isinstance(image, MeasuredText) or image.released:
            raise RenderError(f"描画できない LabelImage です: {image!r}")
        self.record_text(
            image.text,
            x,
            y,
            width=image.width,
            height=image.height,
            color=image.color,
            font_size=image.font_size,
        )

    def record_text(
        self,
        text: str,
        x: int,
        y: int,
        *,
        width: int,
        height: int,
        color: RGBA,
        font_size: float,
    ) -> None:
        """配置済みラベルを記録する（他の TextRenderer 実装からも使う）。"""

        self._ops.append(
            TextOp(
                text=str(text),
                x=int(x),
                y=int(y),
                width=int(width),
                height=int(height),
                color=coerce_rgba(color),
                font_size=float(font_size),
            )
        )

    # --- 参照 ---

    @property
    def draw_color(self) -> RGBA:
        return self._color

    @property
    def background(self) -> RGBA:
        return self._background

    @property
    def ops(self) -> tuple[DrawOp, ...]:
        return tuple(self._ops)

    def points(self) -> list[tuple[int, int]]:
        """記録済みの点を描画順に返す（重複を含む）。"""

        return [(op.x, op.y) for op in self._ops if isinstance(op, PointOp)]

    def points_array(self) -> np.ndarray:
        """記録済みの点を shape (N, 2) の int32 配列で返す。"""

        pts = self.points()
        if not pts:
            return np.zeros((0, 2), dtype=np.int32)
        return np.asarray(pts, dtype=np.int32)

    def lines(self) -> list[LineOp]:
        return [op for op in self._ops if isinstance(op, LineOp)]

    def texts(self) -> list[TextOp]:
        return [op for op in self._ops if isinstance(op, TextOp)]


__all__ = [
    "DisplayList",
    "DisplaySurface",
    "DrawOp",
    "LabelImage",
    "LineOp",
    "MeasuredText",
    "MonospaceTextMetrics",
    "PointOp",
    "RenderError",
    "TextOp",
    "TextRenderer",
]
