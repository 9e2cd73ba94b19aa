"""Shared type aliases for the fixed-timestep driver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    ticks: int  # logical units advanced by this step, > 1 on catch-up
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


System = Callable[[TickContext], None]
