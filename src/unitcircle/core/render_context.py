# どこで: `src/unitcircle/core/render_context.py`。
# 何を: 円トレース/角度注記が共有する描画文脈（描画面・テキスト・待機・タイミング・ラベル枠）と実行状態を定義する。
# なぜ: 描画ターゲットやフォントをプロセス大域に置かず、呼び出しごとに明示的に渡すため。

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from unitcircle.core.color import BLACK, RGBA
from unitcircle.core.surface import DisplaySurface, LabelImage, TextRenderer


@dataclass(frozen=True, slots=True)
class AnimationTiming:
    """アニメーションの待機時間 [ms]。"""

    # 円トレース 1 ステップごとの待機。
    trace_delay_ms: int = 25
    # 角度 1 本ごと（線の後とラベルの後）の待機。
    angle_delay_ms: int = 50

    def __post_init__(self) -> None:
        if int(self.trace_delay_ms) < 0:
            raise ValueError(f"trace_delay_ms は 0 以上である必要がある: got={self.trace_delay_ms}")
        if int(self.angle_delay_ms) < 0:
            raise ValueError(f"angle_delay_ms は 0 以上である必要がある: got={self.angle_delay_ms}")


NO_DELAY = AnimationTiming(trace_delay_ms=0, angle_delay_ms=0)


class LabelSlot:
    """使い回すラベル画像の枠（常に高々 1 枚）。"""

    def __init__(self) -> None:
        self._image: LabelImage | None = None

    @property
    def image(self) -> LabelImage | None:
        return self._image

    def replace(self, image: LabelImage) -> LabelImage:
        """古い画像を解放してから image を保持し、image を返す。"""

        self.release()
        self._image = image
        return image

    def release(self) -> None:
        image = self._image
        self._image = None
        if image is not None:
            image.release()


@dataclass(slots=True)
class RunState:
    """円とラベル群をそれぞれ 1 回だけ描くためのフラグ。"""

    circle_drawn: bool = False
    lines_drawn: bool = False


def _no_sleep(_delay_ms: int) -> None:
    return


@dataclass(slots=True)
class RenderContext:
    """アルゴリズムへ渡す描画文脈。

    Notes
    -----
    単一スレッド前提。描画面もラベル枠も、この文脈を持つ呼び出し側だけが触る。
    """

    surface: DisplaySurface
    text: TextRenderer
    sleep: Callable[[int], None] = _no_sleep
    timing: AnimationTiming = field(default_factory=AnimationTiming)
    label_color: RGBA = BLACK
    label_slot: LabelSlot = field(default_factory=LabelSlot)

    def pause(self, delay_ms: int) -> None:
        """delay_ms > 0 のときだけ待機する。"""

        if int(delay_ms) > 0:
            self.sleep(int(delay_ms))

    def release(self) -> None:
        """保持中のラベル画像を解放する。"""

        self.label_slot.release()


__all__ = [
    "AnimationTiming",
    "LabelSlot",
    "NO_DELAY",
    "RenderContext",
    "RunState",
]
