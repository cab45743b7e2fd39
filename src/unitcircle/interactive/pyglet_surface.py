"""
どこで: `src/unitcircle/interactive/pyglet_surface.py`。
何を: pyglet ウィンドウを DisplaySurface として扱うアダプタを提供する。
    描いた点・線・ラベルは `pyglet.shapes` / `pyglet.text.Label` として Batch に溜め、`present()` で毎回描き直す。
なぜ: ダブルバッファのウィンドウでも「描き足し」の見た目を保ちつつ、同じ内容を DisplayList に記録して export できるようにするため。
"""

from __future__ import annotations

import pyglet
from pyglet import gl
from pyglet.window import Window

from unitcircle.core.color import RGBA, WHITE, coerce_rgba
from unitcircle.core.surface import DisplayList


class PygletSurface:
    """pyglet の Window 上の DisplaySurface。

    Notes
    -----
    座標はスクリーン座標（左上原点, y 下向き）で受け取り、pyglet の下原点座標へ反転して描く。
    """

    def __init__(self, window: Window) -> None:
        self.window = window
        self.display_list = DisplayList()
        self._color: RGBA = WHITE
        self._background: RGBA = WHITE
        self._batch = pyglet.graphics.Batch()
        # Batch から参照されるだけでは GC されるため、描画物をここで保持する。
        self._drawables: list[object] = []

    @property
    def height(self) -> int:
        return int(self.window.height)

    @property
    def background(self) -> RGBA:
        return self._background

    def clear(self) -> None:
        self.display_list.clear()
        self._background = self._color
        for drawable in self._drawables:
            drawable.delete()  # type: ignore[attr-defined]
        self._drawables.clear()
        self._batch = pyglet.graphics.Batch()

    def set_draw_color(self, r: int, g: int, b: int, a: int = 255) -> None:
        self._color = coerce_rgba((r, g, b, a))
        self.display_list.set_draw_color(*self._color)

    def draw_point(self, x: int, y: int) -> None:
        self.display_list.draw_point(x, y)
        rect = pyglet.shapes.Rectangle(
            int(x),
            self.height - int(y) - 1,
            1,
            1,
            color=self._color,
            batch=self._batch,
        )
        self._drawables.append(rect)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        self.display_list.draw_line(x0, y0, x1, y1)
        h = self.height
        # 画素中心を通るよう 0.5 ずらす。
        line = pyglet.shapes.Line(
            int(x0) + 0.5,
            h - int(y0) - 0.5,
            int(x1) + 0.5,
            h - int(y1) - 0.5,
            1,
            self._color,
            batch=self._batch,
        )
        self._drawables.append(line)

    def stamp_label(
        self,
        text: str,
        x: int,
        y: int,
        *,
        width: int,
        height: int,
        color: RGBA,
        font_name: str | None,
        font_size: float,
    ) -> None:
        """ラベルを左上 (x, y) に固定して描き足す。"""

        label = pyglet.text.Label(
            str(text),
            font_name=font_name,
            font_size=float(font_size),
            color=coerce_rgba(color),
            x=int(x),
            y=self.height - int(y),
            anchor_x="left",
            anchor_y="top",
            batch=self._batch,
        )
        self._drawables.append(label)
        self.display_list.record_text(
            text,
            x,
            y,
            width=width,
            height=height,
            color=color,
            font_size=font_size,
        )

    def redraw(self) -> None:
        """背景で塗り、これまでに描いたものを back buffer へ描く（flip しない）。"""

        r, g, b, a = self._background
        gl.glClearColor(r / 255.0, g / 255.0, b / 255.0, a / 255.0)
        self.window.clear()
        self._batch.draw()

    def present(self) -> None:
        window = self.window
        if window.has_exit:
            return
        window.switch_to()
        window.dispatch_events()
        # イベント処理中にウィンドウが閉じられた場合、コンテキストはもう使えない。
        if window.has_exit:
            return
        self.redraw()
        window.flip()
        self.display_list.present()


__all__ = ["PygletSurface"]
