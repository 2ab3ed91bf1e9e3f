"""Sliding-period minimum or maximum of a signal."""

from __future__ import annotations

from typing import Optional


class Extremum:
    """Tracks a minimum or a maximum (not both) over a sliding period of time."""

    def __init__(self, period: int) -> None:
        self.period = period
        self.reset()

    def reset(self) -> None:
        """Forget every recorded value."""
        self._current = 0.0
        self._last_stable = 0.0
        self._time: Optional[int] = None

    def _check_init(self, curtime: int, value: float) -> None:
        if self._time is None:
            self._current = value
            self._time = curtime
        elif curtime - self._time > self.period:
            # the extremum is too old: keep it as the stable one and restart
            self._last_stable = self._current
            self._current = value
            self._time = curtime

    def record_min(self, curtime: int, value: float) -> None:
        """Record ``value`` at ``curtime`` when tracking a minimum."""
        self._check_init(curtime, value)
        if value < self._current:
            self._current = value
            self._time = curtime

    def record_max(self, curtime: int, value: float) -> None:
        """Record ``value`` at ``curtime`` when tracking a maximum."""
        self._check_init(curtime, value)
        if value > self._current:
            self._current = value
            self._time = curtime

    def current(self) -> float:
        """Return the extremum of the current period."""
        return self._current

    def previous(self) -> float:
        """Return the extremum found for the previous period."""
        return self._last_stable