"""Driver configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration for the driver loop.

    Attributes:
        tps: Logical ticks per wall-clock second.
        max_catchup: Most ticks a single ``run_forever`` step may advance
            after falling behind wall time. ``None`` catches up fully.
    """

    tps: int = 20
    max_catchup: int | None = None

    def __post_init__(self) -> None:
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        if self.max_catchup is not None and self.max_catchup < 1:
            raise ValueError(f"max_catchup must be >= 1, got {self.max_catchup}")
