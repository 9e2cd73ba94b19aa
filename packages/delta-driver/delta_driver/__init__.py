"""delta-driver - A fixed-timestep driver loop for tick-based schedulers."""

from delta_driver.clock import Clock
from delta_driver.config import EngineConfig
from delta_driver.engine import Engine
from delta_driver.types import System, TickContext

__all__ = [
    "Engine",
    "EngineConfig",
    "Clock",
    "TickContext",
    "System",
]
