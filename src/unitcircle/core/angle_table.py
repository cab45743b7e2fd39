"""
どこで: `src/unitcircle/core/angle_table.py`。代表角のラベル表。
何を: 17 個の代表角（0..360°）ごとに、π の分数表記ラベルと、線端点に対するラベル配置規則を定義する。
なぜ: 角度ごとの分岐を持たず、表引きでラベル文字列と配置を決めるため。
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

Point2D = tuple[int, int]


@dataclass(frozen=True, slots=True)
class LabelPlacement:
    """線端点からラベル矩形（左上）の位置を決める規則。

    Notes
    -----
    左上 = (end_x + gap_x + trunc(width * width_shift), end_y + trunc(height * height_shift))。
    width_shift が負ならラベルは端点の左側へ、height_shift が負なら上側へずれる。
    trunc は 0 方向への切り捨て。
    """

    gap_x: int = 0
    width_shift: Fraction = Fraction(0)
    height_shift: Fraction = Fraction(0)

    def top_left(self, end: Point2D, width: int, height: int) -> Point2D:
        """幅 width・高さ height のラベルを置く左上座標を返す。"""

        end_x, end_y = end
        x = int(end_x) + int(self.gap_x) + int(int(width) * self.width_shift)
        y = int(end_y) + int(int(height) * self.height_shift)
        return x, y


@dataclass(frozen=True, slots=True)
class AngleEntry:
    """代表角 1 件（角度 [deg]・ラベル・配置規則）。"""

    degrees: int
    label: str
    placement: LabelPlacement


def _place(gap_x: int, width_shift: str | int, height_shift: str | int) -> LabelPlacement:
    return LabelPlacement(
        gap_x=int(gap_x),
        width_shift=Fraction(width_shift),
        height_shift=Fraction(height_shift),
    )


# 画素オフセット（+7 / -5 など）は見た目の微調整値。
# 保証するのは「cos の符号側 / sin の符号側へずらす」という向きだけ。
ANGLE_TABLE: tuple[AngleEntry, ...] = (
    # 0° と 360° は端点が同じ。0° は軸線の上、360° は下に置く。
    AngleEntry(0, "0pi (1, 0)", _place(5, 0, -1)),
    AngleEntry(30, "1/6pi (sqrt(3)/2, 1/2)", _place(7, 0, "-1/3")),
    AngleEntry(45, "1/4pi (sqrt(2)/2, sqrt(2)/2)", _place(5, 0, "-1/2")),
    AngleEntry(60, "1/3pi (1/2, sqrt(3)/2)", _place(3, 0, -1)),
    AngleEntry(90, "1/2pi (0, 1)", _place(0, "-1/2", -1)),
    AngleEntry(120, "2/3pi (-1/2, sqrt(3)/2)", _place(-3, -1, -1)),
    AngleEntry(135, "3/4pi (-sqrt(2)/2, sqrt(2)/2)", _place(-5, -1, "-1/2")),
    AngleEntry(150, "5/6pi (-sqrt(3)/2, 1/2)", _place(-7, -1, "-1/3")),
    AngleEntry(180, "1pi (-1, 0)", _place(-5, -1, "-1/2")),
    AngleEntry(210, "7/6pi (-sqrt(3)/2, -1/2)", _place(0, -1, 0)),
    AngleEntry(225, "5/4pi (-sqrt(2)/2, -sqrt(2)/2)", _place(0, -1, 0)),
    AngleEntry(240, "4/3pi (-1/2, -sqrt(3)/2)", _place(0, -1, 0)),
    AngleEntry(270, "3/2pi (0, -1)", _place(0, "-1/2", "1/2")),
    AngleEntry(300, "5/3pi (1/2, -sqrt(3)/2)", _place(0, 0, 0)),
    AngleEntry(315, "7/4pi (sqrt(2)/2, -sqrt(2)/2)", _place(0, 0, 0)),
    AngleEntry(330, "11/6pi (sqrt(3)/2, -1/2)", _place(0, 0, 0)),
    AngleEntry(360, "2pi (1, 0)", _place(7, 0, "1/2")),
)

_BY_DEGREES: dict[int, AngleEntry] = {entry.degrees: entry for entry in ANGLE_TABLE}


def angle_entry(degrees: float) -> AngleEntry | None:
    """degrees に一致する代表角を返す。表に無い（または整数でない）場合は None。"""

    value = float(degrees)
    if not value.is_integer():
        return None
    return _BY_DEGREES.get(int(value))


def canonical_degrees() -> tuple[int, ...]:
    """表の角度を昇順で返す。"""

    return tuple(entry.degrees for entry in ANGLE_TABLE)


__all__ = [
    "ANGLE_TABLE",
    "AngleEntry",
    "LabelPlacement",
    "angle_entry",
    "canonical_degrees",
]
