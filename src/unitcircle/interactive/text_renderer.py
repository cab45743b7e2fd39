# どこで: `src/unitcircle/interactive/text_renderer.py`。
# 何を: pyglet のテキスト描画を TextRenderer として扱うアダプタを提供する。
# なぜ: ラベル文字列の寸法取得と配置を pyglet に任せ、フォント解決の失敗を RenderError として core へ返すため。

from __future__ import annotations

import logging
import math

import pyglet

from unitcircle.core.color import RGBA, coerce_rgba
from unitcircle.core.font_resolver import font_family_name, resolve_font_path
from unitcircle.core.surface import LabelImage, RenderError
from unitcircle.interactive.pyglet_surface import PygletSurface

_logger = logging.getLogger(__name__)


class PygletLabelImage:
    """寸法計測用の pyglet Label を包んだ LabelImage。"""

    def __init__(self, label: pyglet.text.Label, *, text: str, color: RGBA, font_name: str | None) -> None:
        self._label: pyglet.text.Label | None = label
        self.text = text
        self.color = color
        self.font_name = font_name
        self.width = int(math.ceil(float(label.content_width)))
        self.height = int(math.ceil(float(label.content_height)))

    @property
    def released(self) -> bool:
        return self._label is None

    def release(self) -> None:
        label = self._label
        self._label = None
        if label is not None:
            label.delete()


class PygletTextRenderer:
    """pyglet.text でラベルを描く TextRenderer。"""

    def __init__(self, surface: PygletSurface, *, font: str = "", font_size: float = 12.0) -> None:
        self._surface = surface
        self._font = str(font).strip()
        self._font_size = float(font_size)
        self._font_name: str | None = None
        self._font_ready = False

    def _resolve_font_name(self) -> str | None:
        """ラベルに使うフォントファミリー名を返す（未指定なら None = pyglet 既定）。"""

        if not self._font:
            return None
        if self._font_ready:
            return self._font_name

        try:
            path = resolve_font_path(self._font)
            family = font_family_name(path)
        except (FileNotFoundError, ValueError) as exc:
            raise RenderError(f"フォントを解決できません: {self._font!r}") from exc

        try:
            pyglet.font.add_file(str(path))
        except Exception as exc:
            raise RenderError(f"フォントを登録できません: {path}") from exc
        _logger.info("Loaded font: %s (%s)", family, path)
        self._font_name = family
        self._font_ready = True
        return family

    def render_text(self, text: str, color: RGBA) -> PygletLabelImage:
        if not text:
            raise RenderError("空文字列は描画できない")
        font_name = self._resolve_font_name()
        rgba = coerce_rgba(color)
        try:
            label = pyglet.text.Label(
                str(text),
                font_name=font_name,
                font_size=self._font_size,
                color=rgba,
                anchor_x="left",
                anchor_y="top",
            )
        except Exception as exc:
            raise RenderError(f"テキストを描画できません: {text!r}") from exc
        return PygletLabelImage(label, text=str(text), color=rgba, font_name=font_name)

    def draw_image(self, image: LabelImage, x: int, y: int) -> None:
        if not isinstance(image, PygletLabelImage) or image.released:
            raise RenderError(f"描画できない LabelImage です: {image!r}")
        try:
            self._surface.stamp_label(
                image.text,
                x,
                y,
                width=image.width,
                height=image.height,
                color=image.color,
                font_name=image.font_name,
                font_size=self._font_size,
            )
        except Exception as exc:
            raise RenderError(f"ラベルを配置できません: {image.text!r}") from exc


__all__ = ["PygletLabelImage", "PygletTextRenderer"]
