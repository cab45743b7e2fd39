# どこで: `src/unitcircle/interactive/runtime/draw_window_system.py`。
# 何を: 描画ウィンドウ・描画面・テキスト描画・待機・シーン進行を束ね、キー操作での保存を受け持つサブシステムを提供する。
# なぜ: `src/unitcircle/api/runner.py` の `run()` を「配線」に寄せ、描画責務を独立させるため。

from __future__ import annotations

import logging
from pathlib import Path

from pyglet.window import key

from unitcircle.core.color import rgb01_to_rgba
from unitcircle.core.render_context import RenderContext
from unitcircle.export.image import default_output_path, export_image
from unitcircle.export.svg import export_svg
from unitcircle.interactive.draw_window import create_draw_window
from unitcircle.interactive.pyglet_surface import PygletSurface
from unitcircle.interactive.render_settings import SceneSettings
from unitcircle.interactive.runtime.pacer import WindowPacer
from unitcircle.interactive.runtime.scene_driver import UnitCircleScene
from unitcircle.interactive.text_renderer import PygletTextRenderer

_logger = logging.getLogger(__name__)


class DrawWindowSystem:
    """単位円ウィンドウのサブシステム。"""

    def __init__(self, settings: SceneSettings) -> None:
        """ウィンドウと描画面を生成し、シーンを組み立てる。"""

        self._settings = settings

        self.window = create_draw_window(settings)
        self._surface = PygletSurface(self.window)
        self._text = PygletTextRenderer(
            self._surface,
            font=settings.font,
            font_size=settings.font_size,
        )
        self._pacer = WindowPacer(self.window)
        self._ctx = RenderContext(
            surface=self._surface,
            text=self._text,
            sleep=self._pacer.sleep,
            timing=settings.timing,
            label_color=rgb01_to_rgba(settings.label_color),
        )
        self.scene = UnitCircleScene(
            self._ctx,
            center=settings.center,
            radius=settings.circle_radius,
            background=rgb01_to_rgba(settings.background_color),
            line_color=rgb01_to_rgba(settings.line_color),
        )

        self._svg_output_path = default_output_path("svg", "svg")
        self._png_output_path = default_output_path("png", "png")
        self.window.push_handlers(on_key_press=self._on_key_press)

    def _on_key_press(self, symbol: int, _modifiers: int) -> None:
        if symbol == key.S:
            try:
                path = self.save_svg()
                print(f"Saved SVG: {path}")
            except Exception as e:
                _logger.exception("Failed to save SVG")
                print(f"Failed to save SVG: {e}")
            return
        if symbol == key.P:
            try:
                path = self.save_png()
                print(f"Saved PNG: {path}")
            except Exception as e:
                _logger.exception("Failed to save PNG")
                print(f"Failed to save PNG: {e}")

    def save_svg(self) -> Path:
        """ここまでに描いた内容を SVG として保存し、保存先パスを返す。"""
        return export_svg(
            self._surface.display_list,
            self._svg_output_path,
            canvas_size=self._settings.window_size,
        )

    def save_png(self) -> Path:
        """ここまでに描いた内容を PNG として保存し、保存先パスを返す。"""
        return export_image(
            self._surface.display_list,
            self._png_output_path,
            canvas_size=self._settings.window_size,
        )

    def run(self) -> None:
        """ウィンドウが閉じられるまでアニメーションと待機を繰り返す。"""

        fps = float(self._settings.fps)
        idle_ms = int(1000.0 / fps) if fps > 0 else 0
        self.scene.run(
            should_quit=lambda: self._pacer.quit_requested,
            idle=lambda: self._pacer.sleep(idle_ms),
        )

    def close(self) -> None:
        """ラベル画像と window 資源を解放する。"""

        try:
            self._ctx.release()
        except Exception:
            _logger.exception("Failed to release label image")
        finally:
            self.window.close()


__all__ = ["DrawWindowSystem"]
