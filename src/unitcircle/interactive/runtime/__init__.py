# どこで: `src/unitcircle/interactive/runtime/__init__.py`。
# 何を: interactive 実行時の「待機/シーン駆動/ウィンドウ」実装をまとめるパッケージ定義。
# なぜ: `src/unitcircle/api/runner.py` を配線だけに保ち、責務ごとの実装差し替えを容易にするため。

from __future__ import annotations

__all__ = []
