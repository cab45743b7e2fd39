# どこで: `src/unitcircle/interactive/draw_window.py`。
# 何を: 単位円を描く pyglet ウィンドウの生成を行う。
# なぜ: interactive 依存をこの層に閉じ込め、core/export をヘッドレスに保つため。

from __future__ import annotations

import pyglet
from pyglet.gl import Config
from pyglet.window import Window

from unitcircle.interactive.render_settings import SceneSettings


def create_draw_window(settings: SceneSettings) -> Window:
    """設定に基づき描画ウィンドウを生成する。"""
    # 1px の点を潰さないよう MSAA は使わない。
    config = Config(double_buffer=True)  # type: ignore[abstract]
    width, height = settings.window_size
    window = pyglet.window.Window(  # type: ignore[abstract]
        width=int(width),
        height=int(height),
        resizable=False,
        caption=str(settings.caption),
        config=config,
    )
    return window
