import time
from typing import Protocol


class Clock(Protocol):
    def seconds(self) -> float: ...


class SystemClock:
    """Monotonic wall clock."""

    def seconds(self) -> float:
        return time.monotonic()


class ManualClock:
    """Clock that only moves when told to; used by the simulator and tests."""

    def __init__(self, time_s: float = 0.0) -> None:
        self._time_s = float(time_s)

    def seconds(self) -> float:
        return self._time_s

    def set(self, time_s: float) -> None:
        self._time_s = float(time_s)

    def advance(self, dt: float) -> float:
        if dt < 0.0:
            raise ValueError("dt must be non-negative")
        self._time_s += float(dt)
        return self._time_s
