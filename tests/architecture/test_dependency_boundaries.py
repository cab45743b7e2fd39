"""依存境界（core/export は pyglet と interactive/api に依存しない）の破りを検出するテスト。"""

from __future__ import annotations

import ast
from importlib.util import resolve_name
from pathlib import Path

import pytest


def _src_root() -> Path:
    path = Path(__file__).resolve()
    for parent in path.parents:
        if (parent / "src" / "unitcircle").is_dir() and (parent / "tests").is_dir():
            return parent / "src"
    raise RuntimeError("repo root が見つからない")


def _module_name(path: Path, src_root: Path) -> tuple[str, str]:
    """(モジュール名, 相対 import の基準パッケージ名) を返す。"""

    parts = list(path.relative_to(src_root).with_suffix("").parts)
    if parts[-1] == "__init__":
        parts = parts[:-1]
        return ".".join(parts), ".".join(parts)
    return ".".join(parts), ".".join(parts[:-1])


def _imported_modules(source: str, *, package: str) -> set[str]:
    modules: set[str] = set()
    for node in ast.walk(ast.parse(source)):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            name = "." * int(node.level or 0) + (node.module or "")
            base = resolve_name(name, package) if node.level else name
            modules.add(base)
            modules.update(f"{base}.{alias.name}" for alias in node.names if alias.name != "*")
    return modules


def _violations(layer: str, forbidden: tuple[str, ...]) -> list[str]:
    src_root = _src_root()
    out: list[str] = []
    for path in sorted((src_root / "unitcircle" / layer).rglob("*.py")):
        _module, package = _module_name(path, src_root)
        modules = _imported_modules(path.read_text(encoding="utf-8"), package=package)
        bad = sorted(m for m in modules if m.startswith(forbidden))
        if bad:
            out.append(f"{path.relative_to(src_root)}: {', '.join(bad)}")
    return out


@pytest.mark.parametrize(
    ("layer", "forbidden"),
    [
        ("core", ("unitcircle.export", "unitcircle.interactive", "unitcircle.api", "pyglet")),
        ("export", ("unitcircle.interactive", "unitcircle.api", "pyglet")),
    ],
)
def test_headless_layers_do_not_import_interactive(layer: str, forbidden: tuple[str, ...]) -> None:
    violations = _violations(layer, forbidden)
    assert not violations, "依存境界違反の import を検出:\n" + "\n".join(violations)


def test_imported_modules_resolves_relative_imports() -> None:
    got = _imported_modules("from ..export import svg\n", package="unitcircle.core")
    assert "unitcircle.export" in got
    assert "unitcircle.export.svg" in got

    got = _imported_modules("from . import color\n", package="unitcircle.core")
    assert "unitcircle.core.color" in got

    got = _imported_modules("import pyglet.window\n", package="unitcircle.core")
    assert got == {"pyglet.window"}
