from pathlib import Path

import pytest

from unitcircle.core.runtime_config import output_root_dir, runtime_config, set_config_path


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> None:
    set_config_path(None)
    yield
    set_config_path(None)


def _isolate_config_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def _write_discovered(tmp_path: Path, text: str) -> Path:
    discovered = tmp_path / ".unitcircle" / "config.yaml"
    discovered.parent.mkdir(parents=True, exist_ok=True)
    discovered.write_text(text, encoding="utf-8")
    return discovered


def test_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    assert output_root_dir() == Path("data") / "output"
    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.font_dirs == (Path("data") / "input" / "font",)
    assert cfg.window_pos == (25, 25)
    assert cfg.window_size == (800, 800)
    assert cfg.circle_radius == 200
    assert cfg.trace_delay_ms == 25
    assert cfg.angle_delay_ms == 50
    assert cfg.font == ""
    assert cfg.font_size == 12.0
    assert cfg.png_scale == 2.0


def test_discovered_config_overrides_only_given_keys(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    discovered = _write_discovered(tmp_path, "scene:\n  circle_radius: 120\n")

    cfg = runtime_config()
    assert cfg.config_path == discovered
    assert cfg.circle_radius == 120
    # 同じセクションの他のキーは同梱デフォルトのまま
    assert cfg.window_size == (800, 800)
    assert cfg.trace_delay_ms == 25


def test_home_config_is_discovered(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    home_cfg = tmp_path / ".config" / "unitcircle" / "config.yaml"
    home_cfg.parent.mkdir(parents=True, exist_ok=True)
    home_cfg.write_text('paths:\n  output_dir: "./out_home"\n', encoding="utf-8")

    assert output_root_dir() == Path("out_home")
    assert runtime_config().config_path == home_cfg


def test_explicit_config_overrides_discovered_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    _write_discovered(tmp_path, 'paths:\n  output_dir: "./out_discovered"\ntext:\n  font_size: 20\n')

    explicit = tmp_path / "explicit.yaml"
    explicit.write_text('paths:\n  output_dir: "./out_explicit"\n', encoding="utf-8")
    set_config_path(explicit)

    assert output_root_dir() == Path("out_explicit")
    cfg = runtime_config()
    assert cfg.config_path == explicit
    assert cfg.font_size == 20.0


def test_explicit_config_path_missing_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    set_config_path(tmp_path / "missing.yaml")

    with pytest.raises(FileNotFoundError):
        output_root_dir()


@pytest.mark.parametrize(
    "text",
    [
        "scene:\n  trace_delay_ms: -1\n",
        "scene:\n  window_size: [0, 800]\n",
        "text:\n  font_size: 0\n",
        "export:\n  png:\n    scale: -2\n",
    ],
)
def test_invalid_values_raise_value_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str):
    _isolate_config_discovery(tmp_path, monkeypatch)
    _write_discovered(tmp_path, text)

    with pytest.raises(ValueError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "version: 2\n",
        "scene: [1, 2]\n",
        "scene:\n  window_size: [800]\n",
        "scene:\n  circle_radius: true\n",
        "- not a mapping\n",
    ],
)
def test_malformed_config_raises_runtime_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str):
    _isolate_config_discovery(tmp_path, monkeypatch)
    _write_discovered(tmp_path, text)

    with pytest.raises(RuntimeError):
        runtime_config()
