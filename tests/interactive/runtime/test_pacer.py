import time

import pytest

from unitcircle.interactive.runtime.pacer import RealTimeClock, WindowPacer


class _FakeWindow:
    def __init__(self, *, exit_after: int | None = None) -> None:
        self.has_exit = False
        self.dispatched = 0
        self._exit_after = exit_after

    def dispatch_events(self) -> None:
        self.dispatched += 1
        if self._exit_after is not None and self.dispatched >= self._exit_after:
            self.has_exit = True


class _FakeClock:
    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def test_sleep_is_sliced_and_dispatches_events():
    window = _FakeWindow()
    clock = _FakeClock()
    pacer = WindowPacer(window, slice_ms=250, clock=clock, sleeper=clock.sleep)

    pacer.sleep(625)

    assert clock.sleeps == [0.25, 0.25, 0.125]
    assert clock.now == 0.625
    assert window.dispatched == 4


def test_sleep_returns_early_when_window_requests_exit():
    window = _FakeWindow(exit_after=2)
    clock = _FakeClock()
    pacer = WindowPacer(window, slice_ms=10, clock=clock, sleeper=clock.sleep)

    pacer.sleep(1000)

    assert pacer.quit_requested
    assert clock.sleeps == pytest.approx([0.01])


def test_zero_delay_only_dispatches_once():
    window = _FakeWindow()
    clock = _FakeClock()
    WindowPacer(window, clock=clock, sleeper=clock.sleep).sleep(0)

    assert window.dispatched == 1
    assert clock.sleeps == []


def test_slice_must_be_positive():
    with pytest.raises(ValueError):
        WindowPacer(_FakeWindow(), slice_ms=0)


def test_real_time_clock_returns_elapsed_seconds():
    clock = RealTimeClock(start_time=time.perf_counter() - 1.0)
    assert 0.5 < clock.t() < 1.5
