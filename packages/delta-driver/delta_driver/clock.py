"""Clock and TickContext for the fixed-timestep driver."""

from typing import Callable

from delta_driver.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self, ticks: int = 1) -> int:
        if ticks < 1:
            raise ValueError(f"ticks must be >= 1, got {ticks}")
        self._tick_number += ticks
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], ticks: int = 1) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            ticks=ticks,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
