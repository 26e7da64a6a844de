"""
TimeController — simulated time shared by the hosts.

The core never reads the wall clock: every computation takes an explicit
instant. This controller is the one place that turns wall-clock ticks into
simulated instants, which keeps paused, stepped and accelerated time
decoupled from real elapsed time.

Speeds available (simulated seconds per real second):
    SPEEDS = [0, 1, 10, 60, 300, 3600, 86400, 7*86400]

Controls:
    tc.speed_up() / tc.speed_down()
    tc.reverse()
    tc.toggle_pause()
    tc.step_forward() / tc.step_backward()  — one time_step, pauses
    tc.jump_to_now()                        — resync with the clock, resume
    tc.set_time(dt)                         — pauses
    tc.tick(dt_wall_seconds)                — called every frame
"""

from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .astro_time import julian_date, local_sidereal_time, to_utc

SPEEDS = [0, 1, 10, 60, 300, 3600, 86400, 7 * 86400]
SPEED_LABELS = ["PAUSED", "1×", "10×", "1min/s", "5min/s",
                "1h/s", "1d/s", "1wk/s"]

FAST_STEP_MULTIPLIER = 10


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimeController:
    """
    Parameters
    ----------
    start_utc : instant to start from (default: clock())
    time_step : manual step size (default 1 minute)
    clock     : wall-clock source, injectable for tests
    """

    def __init__(self,
                 start_utc: Optional[datetime] = None,
                 time_step: timedelta = timedelta(minutes=1),
                 speed_idx: int = 1,
                 clock: Callable[[], datetime] = _utc_now):
        self._clock     = clock
        self._now       = to_utc(start_utc) if start_utc is not None else to_utc(clock())
        self._speed_idx = max(0, min(speed_idx, len(SPEEDS) - 1))
        self._direction = +1
        self._paused    = (self._speed_idx == 0)
        self.time_step  = time_step

    # ── Properties ──────────────────────────────────────────────────────────

    @property
    def now(self) -> datetime:
        return self._now

    @property
    def jd(self) -> float:
        return julian_date(self._now)

    @property
    def speed(self) -> float:
        return SPEEDS[self._speed_idx] * self._direction

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def speed_label(self) -> str:
        if self._paused:
            return "PAUSED"
        lbl = SPEED_LABELS[self._speed_idx]
        return ("◀◀ " if self._direction < 0 else "") + lbl

    # ── Controls ────────────────────────────────────────────────────────────

    def speed_up(self) -> None:
        if self._paused:
            self._paused = False
            self._speed_idx = max(1, self._speed_idx)
        elif self._speed_idx < len(SPEEDS) - 1:
            self._speed_idx += 1

    def speed_down(self) -> None:
        if self._speed_idx > 0:
            self._speed_idx -= 1
        if self._speed_idx == 0:
            self._paused = True

    def reverse(self) -> None:
        self._direction *= -1

    def toggle_pause(self) -> None:
        self._paused = not self._paused
        if not self._paused and self._speed_idx == 0:
            self._speed_idx = 1

    def step_forward(self, fast: bool = False) -> None:
        self._jump(self.time_step * (FAST_STEP_MULTIPLIER if fast else 1))

    def step_backward(self, fast: bool = False) -> None:
        self._jump(-self.time_step * (FAST_STEP_MULTIPLIER if fast else 1))

    def jump_to_now(self) -> None:
        self._now       = to_utc(self._clock())
        self._speed_idx = 1
        self._direction = +1
        self._paused    = False

    def set_time(self, dt: datetime) -> None:
        self._now = to_utc(dt)
        self._paused = True

    def _jump(self, delta: timedelta) -> None:
        self._now += delta
        self._paused = True

    # ── Frame update ────────────────────────────────────────────────────────

    def tick(self, dt_wall: float) -> datetime:
        """Advance by dt_wall real seconds and return the simulated instant."""
        if not self._paused:
            self._now += timedelta(seconds=dt_wall * self.speed)
        return self._now

    def lst(self, lon_deg: float) -> float:
        """Local Sidereal Time in hours [0, 24)."""
        return local_sidereal_time(self.jd, lon_deg)


def parse_time_step(text: str) -> timedelta:
    """Parse '30s', '1m', '2h', '1d' (a bare number is seconds)."""
    text = text.strip().lower()
    units = {"s": "seconds", "m": "minutes", "h": "hours", "d": "days"}
    if text and text[-1] in units:
        return timedelta(**{units[text[-1]]: float(text[:-1])})
    return timedelta(seconds=float(text))
