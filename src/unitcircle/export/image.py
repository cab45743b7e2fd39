"""
どこで: `src/unitcircle/export/image.py`。
何を: SVG を外部ラスタライザ（resvg）で PNG に変換して保存する関数と、出力パス規則を提供する。
なぜ: SVG を正（ソース）として保存し、PNG は任意倍率で再生成できる導線を用意するため。
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from unitcircle.core.color import RGBA, rgba_to_hex
from unitcircle.core.runtime_config import output_root_dir, runtime_config
from unitcircle.core.surface import DisplayList
from unitcircle.export.svg import export_svg

DEFAULT_STEM = "unit_circle"


def default_output_path(kind: str, ext: str) -> Path:
    """既定の保存パス `{output_root}/{kind}/unit_circle.{ext}` を返す。"""

    ext_norm = str(ext).lstrip(".").strip()
    if not ext_norm:
        raise ValueError("ext は空でない必要がある")
    return output_root_dir() / str(kind) / f"{DEFAULT_STEM}.{ext_norm}"


def export_image(
    display_list: DisplayList,
    path: str | Path,
    *,
    canvas_size: tuple[int, int],
) -> Path:
    """記録済みの描画命令を画像として保存する。

    Notes
    -----
    `.svg` はそのまま保存する。`.png` は隣に SVG を保存し、resvg でラスタライズして生成する。
    """
    _path = Path(path)
    suffix = _path.suffix.lower()

    if suffix == ".svg":
        return export_svg(display_list, _path, canvas_size=canvas_size)

    if suffix == ".png":
        svg_path = _path.with_suffix(".svg")
        export_svg(display_list, svg_path, canvas_size=canvas_size)
        return rasterize_svg_to_png(
            svg_path,
            _path,
            output_size=png_output_size(canvas_size),
            background=display_list.background,
        )

    raise ValueError(f"未対応の画像フォーマット: {suffix!r}")


def png_output_size(canvas_size: tuple[int, int]) -> tuple[int, int]:
    """canvas_size を基準に PNG 出力ピクセルサイズを返す。"""

    canvas_w, canvas_h = canvas_size
    if int(canvas_w) <= 0 or int(canvas_h) <= 0:
        raise ValueError("canvas_size は正の (width, height) である必要がある")
    scale = float(runtime_config().png_scale)
    return int(int(canvas_w) * scale), int(int(canvas_h) * scale)


def _resvg_command(
    *,
    input_svg: Path,
    output_png: Path,
    output_size: tuple[int, int],
    background: RGBA,
) -> list[str]:
    out_w, out_h = output_size
    if int(out_w) <= 0 or int(out_h) <= 0:
        raise ValueError("output_size は正の (width, height) である必要がある")
    return [
        "resvg",
        "--width",
        str(int(out_w)),
        "--height",
        str(int(out_h)),
        "--background",
        rgba_to_hex(background),
        str(input_svg),
        str(output_png),
    ]


def rasterize_svg_to_png(
    svg_path: str | Path,
    png_path: str | Path,
    *,
    output_size: tuple[int, int],
    background: RGBA = (255, 255, 255, 255),
) -> Path:
    """SVG を PNG として保存する。

    Parameters
    ----------
    svg_path : str or Path
        入力 SVG パス。
    png_path : str or Path
        出力 PNG パス。
    output_size : tuple[int, int]
        出力 PNG の (width, height) ピクセルサイズ。
    background : tuple[int, int, int, int]
        背景色 RGBA（0..255, alpha は無視）。既定は白。

    Returns
    -------
    Path
        出力 PNG パス。

    Raises
    ------
    RuntimeError
        resvg が見つからない、またはラスタライズに失敗した場合。
    """

    _svg_path = Path(svg_path)
    _png_path = Path(png_path)
    _png_path.parent.mkdir(parents=True, exist_ok=True)

    cmd = _resvg_command(
        input_svg=_svg_path,
        output_png=_png_path,
        output_size=output_size,
        background=background,
    )
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        raise RuntimeError(
            "resvg が見つかりません（`resvg` をインストールして PATH を通してください）"
        ) from e

    if proc.returncode != 0:
        details = (proc.stderr or proc.stdout or "").strip()
        raise RuntimeError(f"resvg が失敗しました (code={proc.returncode}). {details}".strip())

    return _png_path


__all__ = [
    "default_output_path",
    "export_image",
    "png_output_size",
    "rasterize_svg_to_png",
]
