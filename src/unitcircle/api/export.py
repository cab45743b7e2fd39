"""
どこで: `src/unitcircle/api/export.py`。
何を: ウィンドウを開かずに単位円（円周 + 代表角の半径線とラベル）を描き切り、SVG / PNG として保存する。
なぜ: 対話ウィンドウと同じ描画手順の結果を、ヘッドレス環境でもファイルとして得られるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from unitcircle.core.color import rgb01_to_rgba
from unitcircle.core.render_context import NO_DELAY, RenderContext
from unitcircle.core.runtime_config import runtime_config, set_config_path
from unitcircle.core.surface import DisplayList, MonospaceTextMetrics
from unitcircle.export.image import default_output_path, export_image
from unitcircle.interactive.runtime.scene_driver import UnitCircleScene


def render_unit_circle(
    *,
    window_size: tuple[int, int],
    circle_radius: int,
    font_size: float = 12.0,
    background_color: tuple[float, float, float] = (1.0, 1.0, 1.0),
    line_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
    label_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> DisplayList:
    """待機なしで単位円を描き切り、描画命令の記録を返す。"""

    display_list = DisplayList(metrics=MonospaceTextMetrics(font_size=font_size))
    ctx = RenderContext(
        surface=display_list,
        text=display_list,
        timing=NO_DELAY,
        label_color=rgb01_to_rgba(label_color),
    )
    w, h = window_size
    scene = UnitCircleScene(
        ctx,
        center=(int(w) // 2, int(h) // 2),
        radius=int(circle_radius),
        background=rgb01_to_rgba(background_color),
        line_color=rgb01_to_rgba(line_color),
    )
    try:
        scene.step()
    finally:
        ctx.release()
    return display_list


def export_unit_circle(
    path: str | Path | None = None,
    *,
    config_path: str | Path | None = None,
    window_size: tuple[int, int] | None = None,
    circle_radius: int | None = None,
    font_size: float | None = None,
    background_color: tuple[float, float, float] = (1.0, 1.0, 1.0),
    line_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
    label_color: tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> Path:
    """単位円を描き切って `.svg` / `.png` として保存し、保存先パスを返す。

    Parameters
    ----------
    path : str | Path | None
        出力先。None なら `{output_dir}/svg/unit_circle.svg`。拡張子で形式を決める。
    config_path : str | Path | None
        設定ファイル（config.yaml）のパス。
    window_size, circle_radius, font_size
        None なら config の値。
    background_color, line_color, label_color : tuple[float, float, float]
        RGB（0..1）。

    Raises
    ------
    ValueError
        未対応の拡張子の場合。
    RuntimeError
        PNG 出力で resvg が使えない場合。
    """

    set_config_path(config_path)
    cfg = runtime_config()

    size = tuple(cfg.window_size if window_size is None else window_size)
    display_list = render_unit_circle(
        window_size=size,  # type: ignore[arg-type]
        circle_radius=int(cfg.circle_radius if circle_radius is None else circle_radius),
        font_size=float(cfg.font_size if font_size is None else font_size),
        background_color=background_color,
        line_color=line_color,
        label_color=label_color,
    )

    out_path = default_output_path("svg", "svg") if path is None else Path(path)
    return export_image(display_list, out_path, canvas_size=size)  # type: ignore[arg-type]
