"""Engine - core loop, pacing, catch-up, and lifecycle hooks."""

from __future__ import annotations

import logging
import time
from typing import Callable

from delta_driver.clock import Clock
from delta_driver.config import EngineConfig
from delta_driver.types import System, TickContext

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, tps: int = 20, max_catchup: int | None = None) -> None:
        self._config = EngineConfig(tps=tps, max_catchup=max_catchup)
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[TickContext], None]] = []
        self._stop_hooks: list[Callable[[TickContext], None]] = []
        self._stop_requested: bool = False

    @classmethod
    def from_config(cls, config: EngineConfig) -> Engine:
        return cls(tps=config.tps, max_catchup=config.max_catchup)

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _run_hooks(self, hooks: list[Callable[[TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop, ticks=0)
        for hook in hooks:
            hook(ctx)

    def _tick(self, ticks: int) -> None:
        self._clock.advance(ticks)
        ctx = self._clock.context(self._request_stop, ticks)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def step(self, ticks: int = 1) -> None:
        """Advance the clock by ``ticks`` units and run every system once."""
        self._stop_requested = False
        self._tick(ticks)

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)
        logger.debug("run started at tick %d for %d ticks", self._clock.tick_number, n)

        for _ in range(n):
            self._tick(1)
            if self._stop_requested:
                break

        logger.debug("run stopped at tick %d", self._clock.tick_number)
        self._run_hooks(self._stop_hooks)

    def run_forever(self) -> None:
        """Run paced to wall time until a system requests a stop.

        A step that finds the loop behind wall time advances every missed
        tick at once, so systems observe ``ctx.ticks > 1`` instead of a burst
        of single steps.
        """
        self._stop_requested = False
        self._run_hooks(self._start_hooks)
        logger.debug("run_forever started at tick %d", self._clock.tick_number)

        dt = self._clock.dt
        max_catchup = self._config.max_catchup
        next_at = time.monotonic()
        while not self._stop_requested:
            now = time.monotonic()
            if now < next_at:
                time.sleep(next_at - now)
                now = next_at

            ticks = 1 + int((now - next_at) / dt)
            if max_catchup is not None and ticks > max_catchup:
                logger.warning(
                    "engine is %d ticks behind, advancing %d and dropping the rest",
                    ticks,
                    max_catchup,
                )
                ticks = max_catchup
                next_at = now + dt
            else:
                next_at += ticks * dt

            self._tick(ticks)

        logger.debug("run_forever stopped at tick %d", self._clock.tick_number)
        self._run_hooks(self._stop_hooks)
