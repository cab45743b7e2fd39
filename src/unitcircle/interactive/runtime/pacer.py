# どこで: `src/unitcircle/interactive/runtime/pacer.py`。
# 何を: アニメーションの待機（sleep）を、ウィンドウイベントを処理しながら行う。
# なぜ: 円トレース中の長い待機でもウィンドウが固まらず、閉じる/Escape で待機を打ち切れるようにするため。

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any


class WindowPacer:
    """ウィンドウのイベントを捌きながら待つ sleep 実装。

    Notes
    -----
    待機は `slice_ms` ごとに区切り、その都度 `dispatch_events()` を呼ぶ。
    `window.has_exit` が立ったら残り時間を捨てて即座に戻る。
    """

    def __init__(
        self,
        window: Any,
        *,
        slice_ms: int = 10,
        clock: Callable[[], float] = time.perf_counter,
        sleeper: Callable[[float], None] = time.sleep,
    ) -> None:
        if int(slice_ms) <= 0:
            raise ValueError(f"slice_ms は正の値である必要がある: got={slice_ms}")
        self._window = window
        self._slice_s = float(slice_ms) / 1000.0
        self._clock = clock
        self._sleeper = sleeper

    @property
    def quit_requested(self) -> bool:
        """ウィンドウが閉じられた（または Escape が押された）なら True。"""

        return bool(getattr(self._window, "has_exit", False))

    def sleep(self, delay_ms: int) -> None:
        """delay_ms だけ待つ。終了要求があれば途中で戻る。"""

        deadline = self._clock() + max(0.0, float(delay_ms) / 1000.0)
        while not self.quit_requested:
            self._window.dispatch_events()
            if self.quit_requested:
                return
            remaining = deadline - self._clock()
            if remaining <= 0.0:
                return
            self._sleeper(min(self._slice_s, remaining))


class RealTimeClock:
    """実時間ベースの経過時間計測。

    Notes
    -----
    `t` は `perf_counter()` の差分（秒）。
    """

    def __init__(self, *, start_time: float) -> None:
        self._start_time = float(start_time)

    def t(self) -> float:
        """開始時刻からの経過秒を返す。"""

        return float(time.perf_counter() - self._start_time)


__all__ = ["RealTimeClock", "WindowPacer"]
