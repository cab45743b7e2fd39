# どこで: `src/unitcircle/interactive/render_settings.py`。
# 何を: 1 回の実行で固定される描画設定（画面・円・待機・色・フォント）をまとめたデータクラスを定義する。
# なぜ: `run` の引数と config.yaml の値を 1 つの値にまとめ、interactive 側へ一括で渡すため。

from __future__ import annotations

from dataclasses import dataclass, field

from unitcircle.core.render_context import AnimationTiming

WINDOW_CAPTION = "Unit Circle Fun!"


@dataclass(frozen=True, slots=True)
class SceneSettings:
    """単位円アニメーションに用いる設定値の集合。"""

    window_size: tuple[int, int] = (800, 800)
    circle_radius: int = 200
    timing: AnimationTiming = field(default_factory=AnimationTiming)
    background_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    line_color: tuple[float, float, float] = (0.0, 0.0, 0.0)
    label_color: tuple[float, float, float] = (0.0, 0.0, 0.0)
    font: str = ""
    font_size: float = 12.0
    fps: float = 60.0
    caption: str = WINDOW_CAPTION

    def __post_init__(self) -> None:
        w, h = self.window_size
        if int(w) <= 0 or int(h) <= 0:
            raise ValueError(f"window_size は正の (width, height) である必要がある: got={self.window_size}")
        if float(self.font_size) <= 0:
            raise ValueError(f"font_size は正の値である必要がある: got={self.font_size}")

    @property
    def center(self) -> tuple[int, int]:
        """円の中心（画面中央）[px] を返す。"""

        w, h = self.window_size
        return int(w) // 2, int(h) // 2
