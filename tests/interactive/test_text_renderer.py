from __future__ import annotations

from pathlib import Path

import pytest

from unitcircle.core.surface import RenderError

try:
    from unitcircle.interactive import text_renderer
except Exception as exc:  # ディスプレイ / GL ライブラリが無い環境
    pytest.skip(f"pyglet を初期化できない: {exc}", allow_module_level=True)


class _FakeLabel:
    content_width = 40.2
    content_height = 14.0

    def __init__(self) -> None:
        self.deleted = False

    def delete(self) -> None:
        self.deleted = True


class _FailingSurface:
    def stamp_label(self, *args, **kwargs) -> None:
        raise OSError("gl failed")


def test_label_image_rounds_size_up_and_releases_label():
    label = _FakeLabel()
    image = text_renderer.PygletLabelImage(label, text="2pi (1, 0)", color=(0, 0, 0, 255), font_name=None)

    assert (image.width, image.height) == (41, 14)
    image.release()
    assert image.released
    assert label.deleted


def test_stamp_failure_is_reported_as_render_error():
    renderer = text_renderer.PygletTextRenderer(_FailingSurface())
    image = text_renderer.PygletLabelImage(_FakeLabel(), text="0pi (1, 0)", color=(0, 0, 0, 255), font_name=None)

    with pytest.raises(RenderError) as excinfo:
        renderer.draw_image(image, 10, 20)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_released_image_is_rejected():
    renderer = text_renderer.PygletTextRenderer(_FailingSurface())
    image = text_renderer.PygletLabelImage(_FakeLabel(), text="x", color=(0, 0, 0, 255), font_name=None)
    image.release()

    with pytest.raises(RenderError):
        renderer.draw_image(image, 0, 0)


def test_font_registration_failure_is_reported_as_render_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    font_module = pytest.importorskip("pyglet.font")
    font_path = tmp_path / "Broken.ttf"

    def fail_add_file(_path: str) -> None:
        raise OSError("cannot load font")

    monkeypatch.setattr(text_renderer, "resolve_font_path", lambda _font: font_path)
    monkeypatch.setattr(text_renderer, "font_family_name", lambda _path: "Broken")
    monkeypatch.setattr(font_module, "add_file", fail_add_file)

    renderer = text_renderer.PygletTextRenderer(_FailingSurface(), font="Broken")
    with pytest.raises(RenderError):
        renderer.render_text("0pi (1, 0)", (0, 0, 0, 255))


def test_unresolvable_font_is_reported_as_render_error(monkeypatch: pytest.MonkeyPatch):
    def missing(_font: str) -> Path:
        raise FileNotFoundError("no font")

    monkeypatch.setattr(text_renderer, "resolve_font_path", missing)

    renderer = text_renderer.PygletTextRenderer(_FailingSurface(), font="Nope")
    with pytest.raises(RenderError):
        renderer.render_text("0pi (1, 0)", (0, 0, 0, 255))
