# どこで: `src/unitcircle/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 画面サイズ・半径・待機時間・フォント・出力先をコードに埋め込まず、ユーザーが差し替えられるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """unitcircle の実行時設定。"""

    config_path: Path | None
    output_dir: Path
    font_dirs: tuple[Path, ...]
    window_pos: tuple[int, int]
    window_size: tuple[int, int]
    circle_radius: int
    trace_delay_ms: int
    angle_delay_ms: int
    font: str
    font_size: float
    png_scale: float


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    p = Path(str(path)).expanduser()
    _EXPLICIT_CONFIG_PATH = p
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".unitcircle" / "config.yaml",
        home / ".config" / "unitcircle" / "config.yaml",
    )


def _expand_path_text(text: str) -> str:
    return os.path.expandvars(os.path.expanduser(str(text)))


def _as_optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    return Path(_expand_path_text(s))


def _as_path_list(value: Any, *, key: str) -> list[Path]:
    if value is None:
        return []
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return []
        parts = [p for p in s.split(os.pathsep) if p]
        return [Path(_expand_path_text(p)) for p in parts]
    if not isinstance(value, (list, tuple)):
        raise RuntimeError(f"{key} は文字列か配列である必要があります: got={value!r}")

    out: list[Path] = []
    for item in value:
        p = _as_optional_path(item)
        if p is not None:
            out.append(p)
    return out


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int_pair(value: Any, *, key: str) -> tuple[int, int] | None:
    if value is None:
        return None
    try:
        seq = list(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}") from exc
    if len(seq) != 2:
        raise RuntimeError(f"{key} は [x, y] の配列である必要があります: got={value!r}")
    try:
        x = int(seq[0])
        y = int(seq[1])
    except Exception as exc:
        raise RuntimeError(f"{key} は [x, y] の整数配列である必要があります: got={value!r}") from exc
    return (x, y)


def _as_int(value: Any, *, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    try:
        return int(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc


def _as_float(value: Any, *, key: str) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _require(value: Any, *, key: str) -> Any:
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    return value


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("unitcircle")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="unitcircle/resource/default_config.yaml")


def _merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """トップレベルのセクション単位で override を base へ重ねる（1 段だけ再帰）。"""

    out = dict(base)
    for key, value in override.items():
        current = out.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged = dict(current)
            merged.update(value)
            out[key] = merged
        else:
            out[key] = value
    return out


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。"""

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge_sections(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge_sections(payload, _load_yaml_config(explicit_path))

    version = _require(payload.get("version"), key="version")
    version_i = _as_int(version, key="version")
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    output_dir = _require(_as_optional_path(paths.get("output_dir")), key="paths.output_dir")
    font_dirs = _as_path_list(paths.get("font_dirs"), key="paths.font_dirs")

    ui = _as_mapping(payload.get("ui"), key="ui")
    window_pos = _require(
        _as_int_pair(ui.get("window_position"), key="ui.window_position"),
        key="ui.window_position",
    )

    scene = _as_mapping(payload.get("scene"), key="scene")
    window_size = _require(
        _as_int_pair(scene.get("window_size"), key="scene.window_size"),
        key="scene.window_size",
    )
    if window_size[0] <= 0 or window_size[1] <= 0:
        raise ValueError(f"scene.window_size は正の値である必要があります: got={window_size}")
    circle_radius = _require(
        _as_int(scene.get("circle_radius"), key="scene.circle_radius"),
        key="scene.circle_radius",
    )
    trace_delay_ms = _require(
        _as_int(scene.get("trace_delay_ms"), key="scene.trace_delay_ms"),
        key="scene.trace_delay_ms",
    )
    angle_delay_ms = _require(
        _as_int(scene.get("angle_delay_ms"), key="scene.angle_delay_ms"),
        key="scene.angle_delay_ms",
    )
    if trace_delay_ms < 0 or angle_delay_ms < 0:
        raise ValueError(
            "scene.trace_delay_ms / scene.angle_delay_ms は 0 以上である必要があります"
            f": got=({trace_delay_ms}, {angle_delay_ms})"
        )

    text = _as_mapping(payload.get("text"), key="text")
    font_raw = text.get("font")
    font = "" if font_raw is None else str(font_raw).strip()
    font_size = _require(_as_float(text.get("font_size"), key="text.font_size"), key="text.font_size")
    if font_size <= 0:
        raise ValueError(f"text.font_size は正の値である必要があります: got={font_size}")

    export = _as_mapping(payload.get("export"), key="export")
    png = _as_mapping(export.get("png"), key="export.png")
    png_scale = _require(_as_float(png.get("scale"), key="export.png.scale"), key="export.png.scale")
    if png_scale <= 0:
        raise ValueError(f"export.png.scale は正の値である必要があります: got={png_scale}")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        output_dir=output_dir,
        font_dirs=tuple(font_dirs),
        window_pos=window_pos,
        window_size=window_size,
        circle_radius=int(circle_radius),
        trace_delay_ms=int(trace_delay_ms),
        angle_delay_ms=int(angle_delay_ms),
        font=font,
        font_size=float(font_size),
        png_scale=float(png_scale),
    )
    _CONFIG_CACHE = cfg
    return cfg


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.unitcircle/config.yaml` / `~/.config/unitcircle/config.yaml`
    3) `run(..., config_path=...)` の `config_path`
    """

    cfg = runtime_config()
    return Path(cfg.output_dir)


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
