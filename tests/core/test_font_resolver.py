from __future__ import annotations

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from unitcircle.core.font_resolver import (
    clear_font_cache,
    font_family_name,
    resolve_font_path,
)
from unitcircle.core.runtime_config import set_config_path


@pytest.fixture(autouse=True)
def _isolate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    clear_font_cache()
    yield
    set_config_path(None)
    clear_font_cache()


def _use_font_dir(tmp_path: Path, font_dir: Path) -> None:
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "\n".join(["paths:", "  font_dirs:", f'    - "{font_dir}"', ""]),
        encoding="utf-8",
    )
    set_config_path(cfg_path)


def _build_font(path: Path, family: str) -> Path:
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder([".notdef", "space"])
    fb.setupCharacterMap({0x20: "space"})
    fb.setupGlyf({name: TTGlyphPen(None).glyph() for name in (".notdef", "space")})
    fb.setupHorizontalMetrics({".notdef": (500, 0), "space": (500, 0)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": "Regular"})
    fb.setupOS2()
    fb.setupPost()
    fb.save(str(path))
    return path


def test_resolve_prefers_direct_path_then_font_dirs(tmp_path: Path) -> None:
    font_dir = tmp_path / "fonts"
    font_dir.mkdir()
    in_dir = font_dir / "Label-Regular.ttf"
    in_dir.write_bytes(b"\x00" * 16)
    elsewhere = tmp_path / "other" / "Label-Regular.ttf"
    elsewhere.parent.mkdir()
    elsewhere.write_bytes(b"\x00" * 16)
    _use_font_dir(tmp_path, font_dir)

    assert resolve_font_path("Label-Regular.ttf") == in_dir.resolve()
    assert resolve_font_path(str(elsewhere)) == elsewhere.resolve()


def test_resolve_partial_match_ignores_case_and_spaces(tmp_path: Path) -> None:
    font_dir = tmp_path / "fonts"
    (font_dir / "sub").mkdir(parents=True)
    target = font_dir / "sub" / "NotoSansMono-Regular.otf"
    target.write_bytes(b"\x00" * 16)
    _use_font_dir(tmp_path, font_dir)

    assert resolve_font_path("noto sans mono") == target.resolve()


def test_resolve_empty_font_raises() -> None:
    with pytest.raises(FileNotFoundError):
        resolve_font_path("  ")


def test_resolve_error_message_contains_hints() -> None:
    with pytest.raises(FileNotFoundError) as excinfo:
        resolve_font_path("___no_such_font___")
    msg = str(excinfo.value)
    assert "searched_dirs=" in msg
    assert "font_dirs:" in msg


def test_font_family_name_reads_name_table(tmp_path: Path) -> None:
    path = _build_font(tmp_path / "label.ttf", "UnitCircle Test")
    assert font_family_name(path) == "UnitCircle Test"


def test_font_family_name_rejects_non_font(tmp_path: Path) -> None:
    path = tmp_path / "broken.ttf"
    path.write_bytes(b"this is definitely not a font file")
    with pytest.raises(ValueError):
        font_family_name(path)
