# どこで: `src/unitcircle/api/__init__.py`。
# 何を: 公開 API パッケージのエントリポイントとして run / export_unit_circle を再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from .export import export_unit_circle, render_unit_circle

__all__ = ["export_unit_circle", "render_unit_circle", "run"]


def run(*args, **kwargs):
    """公開 run API へのラッパ（遅延インポートで GUI 依存を後回しにする）。"""

    from .runner import run as _run

    return _run(*args, **kwargs)
