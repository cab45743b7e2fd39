"""
どこで: `src/unitcircle/api/runner.py`。公開 API のランナー実装。
何を: config.yaml と引数から設定を確定し、pyglet ウィンドウ上で単位円アニメーションを実行する。
なぜ: `main.py` を実行して、円のトレースと代表角の注記を実際に見られる経路を用意するため。
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pyglet

from unitcircle.core.render_context import AnimationTiming
from unitcircle.core.runtime_config import runtime_config, set_config_path
from unitcircle.interactive.render_settings import SceneSettings
from unitcircle.interactive.runtime.draw_window_system import DrawWindowSystem


def build_settings(
    *,
    window_size: tuple[int, int] | None = None,
    circle_radius: int | None = None,
    trace_delay_ms: int | None = None,
    angle_delay_ms: int | None = None,
    font: str | None = None,
    font_size: float | None = None,
    background_color: tuple[float, float, float] = (1.0, 1.0, 1.0),
    line_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
    label_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
    fps: float = 60.0,
) -> SceneSettings:
    """config.yaml の値に、None でない引数を上書きして SceneSettings を返す。"""

    cfg = runtime_config()
    timing = AnimationTiming(
        trace_delay_ms=int(cfg.trace_delay_ms if trace_delay_ms is None else trace_delay_ms),
        angle_delay_ms=int(cfg.angle_delay_ms if angle_delay_ms is None else angle_delay_ms),
    )
    return SceneSettings(
        window_size=tuple(cfg.window_size if window_size is None else window_size),  # type: ignore[arg-type]
        circle_radius=int(cfg.circle_radius if circle_radius is None else circle_radius),
        timing=timing,
        background_color=background_color,
        line_color=line_color,
        label_color=label_color,
        font=str(cfg.font if font is None else font),
        font_size=float(cfg.font_size if font_size is None else font_size),
        fps=float(fps),
    )


def run(
    *,
    config_path: str | Path | None = None,
    window_size: tuple[int, int] | None = None,
    circle_radius: int | None = None,
    trace_delay_ms: int | None = None,
    angle_delay_ms: int | None = None,
    font: str | None = None,
    font_size: float | None = None,
    background_color: tuple[float, float, float] = (1.0, 1.0, 1.0),
    line_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
    label_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
    fps: float = 60.0,
) -> None:
    """pyglet ウィンドウを生成し、円のトレースと代表角の注記をアニメーション表示する。

    Parameters
    ----------
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。指定した場合は探索より優先する。
    window_size : tuple[int, int] | None
        ウィンドウ寸法 [px]。None なら config の `scene.window_size`。円の中心は画面中央。
    circle_radius : int | None
        円の半径 [px]。None なら config の `scene.circle_radius`。
    trace_delay_ms : int | None
        円トレース 1 ステップごとの待機 [ms]。None なら config。
    angle_delay_ms : int | None
        角度 1 本ごとの待機 [ms]（線の後とラベルの後に 1 回ずつ）。None なら config。
    font : str | None
        ラベル用フォント（パス / ファイル名 / 部分一致）。空文字なら pyglet 既定。None なら config。
    font_size : float | None
        ラベルの文字サイズ [pt]。None なら config。
    background_color : tuple[float, float, float]
        背景色 RGB（0..1）。既定は白。
    line_color : tuple[float, float, float]
        円と半径線の色 RGB（0..1）。既定は黒。
    label_color : tuple[float, float, float]
        ラベル文字色 RGB（0..1）。既定は黒。
    fps : float
        描き終えた後の再描画頻度。`<=0` の場合は待たずに回す。

    Returns
    -------
    None
        ウィンドウを閉じる（または Escape）と制御を返す。
    """

    set_config_path(config_path)
    cfg = runtime_config()

    # pyglet の Window 作成前にオプションを設定する。
    pyglet.options["vsync"] = False

    settings = build_settings(
        window_size=window_size,
        circle_radius=circle_radius,
        trace_delay_ms=trace_delay_ms,
        angle_delay_ms=angle_delay_ms,
        font=font,
        font_size=font_size,
        background_color=background_color,
        line_color=line_color,
        label_color=label_color,
        fps=fps,
    )

    draw_window = DrawWindowSystem(settings)
    draw_window.window.set_location(*cfg.window_pos)

    # `closers` は teardown 用（close 順もここで管理する）。
    closers: list[Callable[[], None]] = [draw_window.close]
    try:
        draw_window.run()
    finally:
        # 例外でも確実に後始末する。作成順の逆で閉じる。
        for close in reversed(closers):
            close()
