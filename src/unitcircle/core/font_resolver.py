# どこで: `src/unitcircle/core/font_resolver.py`。
# 何を: ラベル用フォント指定（パス / ファイル名 / 部分一致）の解決と、フォントファミリー名の取得を提供する。
# なぜ: config.yaml の `font_dirs` に置いたフォントを名前で指定でき、描画側へ実体パスとファミリー名を渡すため。

from __future__ import annotations

from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from unitcircle.core.runtime_config import runtime_config

_FONT_EXTENSIONS = (".ttf", ".otf", ".ttc")

_FONT_FILES_CACHE: dict[tuple[str, ...], tuple[Path, ...]] = {}
_FAMILY_NAME_CACHE: dict[Path, str] = {}


def _search_dirs() -> tuple[Path, ...]:
    cfg = runtime_config()
    return tuple(Path(d).expanduser() for d in cfg.font_dirs)


def _list_font_files(*, dirs: tuple[Path, ...]) -> tuple[Path, ...]:
    key = tuple(str(d) for d in dirs)
    cached = _FONT_FILES_CACHE.get(key)
    if cached is not None:
        return cached

    seen: list[Path] = []
    for root in dirs:
        if not root.is_dir():
            continue
        for ext in _FONT_EXTENSIONS:
            for fp in root.glob(f"**/*{ext}"):
                resolved = fp.resolve()
                if resolved.is_file():
                    seen.append(resolved)

    out = tuple(sorted(set(seen)))
    _FONT_FILES_CACHE[key] = out
    return out


def clear_font_cache() -> None:
    """フォント一覧とファミリー名のキャッシュを破棄する。"""

    _FONT_FILES_CACHE.clear()
    _FAMILY_NAME_CACHE.clear()


def resolve_font_path(font: str) -> Path:
    """`font` 指定を実体ファイルへ解決して返す。

    Raises
    ------
    FileNotFoundError
        空指定、または探索しても見つからない場合。
    """

    raw = str(font).strip()
    if not raw:
        raise FileNotFoundError("フォントが指定されていません")

    # 0) 直接パス（絶対/相対）を許容
    direct_path = Path(raw).expanduser()
    if direct_path.is_file():
        return direct_path.resolve()

    # 1) 探索ディレクトリ直下のファイル名一致
    dirs = _search_dirs()
    for d in dirs:
        fp = d / raw
        if fp.is_file():
            return fp.resolve()

    # 2) 部分一致（安定順: ファイルパスの安定ソート）
    files = _list_font_files(dirs=dirs)
    key = raw.lower().replace(" ", "")
    for fp in files:
        name = fp.name.lower().replace(" ", "")
        if key in name:
            return fp

    searched = ", ".join(str(d) for d in dirs) if dirs else "(none)"
    cfg = runtime_config()
    example_yaml = "paths:\n  font_dirs:\n    - \"~/Fonts\"\n"
    hint = (
        f"フォントが見つかりません: {raw!r}。"
        " 実在パスを渡すか、config.yaml の `paths.font_dirs` を設定してください"
        "（例: ./.unitcircle/config.yaml または ~/.config/unitcircle/config.yaml）。"
        f"\n\n{example_yaml}\nsearched_dirs={searched}, config_path={cfg.config_path}"
    )
    raise FileNotFoundError(hint)


def font_family_name(path: Path) -> str:
    """フォントファイルのファミリー名（name テーブルの nameID 1）を返す。

    Raises
    ------
    ValueError
        フォントとして読めない、またはファミリー名を持たない場合。
    """

    resolved = Path(path).resolve()
    cached = _FAMILY_NAME_CACHE.get(resolved)
    if cached is not None:
        return cached

    try:
        # .ttc は先頭のフェイスを使う。
        font = TTFont(str(resolved), fontNumber=0, lazy=True)
    except (OSError, TTLibError) as exc:
        raise ValueError(f"フォントを読み込めません: {resolved}") from exc

    try:
        name_table = font["name"]
        family = name_table.getDebugName(1)
    except KeyError as exc:
        raise ValueError(f"name テーブルがありません: {resolved}") from exc
    finally:
        font.close()

    if not family:
        raise ValueError(f"ファミリー名がありません: {resolved}")

    _FAMILY_NAME_CACHE[resolved] = str(family)
    return str(family)


__all__ = [
    "clear_font_cache",
    "font_family_name",
    "resolve_font_path",
]
