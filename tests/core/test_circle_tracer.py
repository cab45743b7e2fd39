from __future__ import annotations

import pytest

from unitcircle.core.circle_tracer import octant_steps, symmetric_points, trace_circle
from unitcircle.core.render_context import AnimationTiming, NO_DELAY, RenderContext
from unitcircle.core.surface import DisplayList


def _ctx(*, timing: AnimationTiming = NO_DELAY, sleeps: list[int] | None = None) -> tuple[RenderContext, DisplayList]:
    dl = DisplayList()
    sleep = (lambda ms: sleeps.append(ms)) if sleeps is not None else (lambda _ms: None)
    return RenderContext(surface=dl, text=dl, sleep=sleep, timing=timing), dl


@pytest.mark.parametrize("radius", [0, -1, -50])
def test_non_positive_radius_draws_nothing(radius: int) -> None:
    ctx, dl = _ctx()
    assert trace_circle(ctx, 400, 400, radius) == 0
    assert dl.points() == []
    assert dl.frames == 0


def test_radius_one_draws_eight_points_at_center() -> None:
    ctx, dl = _ctx()
    assert trace_circle(ctx, 10, 20, 1) == 1
    assert dl.points() == [(10, 20)] * 8
    assert dl.frames == 1


@pytest.mark.parametrize("radius", [1, 2, 3, 5, 10, 37, 100, 200])
def test_each_step_draws_eight_points_near_the_circle(radius: int) -> None:
    cx, cy = 400, 400
    ctx, dl = _ctx()
    steps = trace_circle(ctx, cx, cy, radius)

    pts = dl.points_array()
    assert steps > 0
    assert pts.shape == (8 * steps, 2)
    assert dl.frames == steps

    # 整数のまま半径 [r-1, r+1] の帯に入ることを確かめる。
    d2 = (pts[:, 0] - cx) ** 2 + (pts[:, 1] - cy) ** 2
    assert int(d2.min()) >= (radius - 1) ** 2
    assert int(d2.max()) <= (radius + 1) ** 2


def test_first_point_is_on_positive_x_axis() -> None:
    ctx, dl = _ctx()
    trace_circle(ctx, 400, 400, 200)
    assert dl.points()[0] == (599, 400)


def test_octant_stays_in_first_octant_and_advances_y() -> None:
    steps = list(octant_steps(100))
    assert steps[0] == (99, 0)
    assert all(x >= y >= 0 for x, y in steps)
    ys = [y for _x, y in steps]
    assert ys == sorted(ys)


def test_symmetric_points_keeps_duplicates_on_axes() -> None:
    pts = symmetric_points(0, 0, 5, 0)
    assert len(pts) == 8
    assert pts.count((5, 0)) == 2
    assert pts.count((-5, 0)) == 2
    assert set(pts) == {(5, 0), (-5, 0), (0, -5), (0, 5)}


def test_trace_pauses_once_per_step() -> None:
    sleeps: list[int] = []
    ctx, _dl = _ctx(timing=AnimationTiming(trace_delay_ms=7, angle_delay_ms=0), sleeps=sleeps)
    steps = trace_circle(ctx, 50, 50, 30)
    assert sleeps == [7] * steps


def test_points_use_current_draw_color() -> None:
    ctx, dl = _ctx()
    dl.set_draw_color(12, 34, 56)
    trace_circle(ctx, 50, 50, 5)
    assert {op.color for op in dl.ops} == {(12, 34, 56, 255)}
