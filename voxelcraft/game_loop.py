"""Fixed-timestep loop, ambient-occlusion and fog helpers."""

from __future__ import annotations

#: AO brightness indexed by the number of solid neighbours (0 = brightest).
AO_VALUES: tuple[float, float, float, float] = (1.0, 0.7, 0.4, 0.2)

DEFAULT_TICK_RATE = 20.0
DEFAULT_TICK_DURATION = 1.0 / DEFAULT_TICK_RATE


def compute_ao(neighbor_count: int) -> float:
    """AO factor for a vertex with ``neighbor_count`` solid neighbours (clamped to 0-3)."""
    index = min(max(neighbor_count, 0), len(AO_VALUES) - 1)
    return AO_VALUES[index]


def compute_linear_fog(dist: float, start: float, end: float) -> float:
    """Linear fog factor: 1.0 means no fog, 0.0 means fully fogged."""
    if end == start:
        return 0.0 if dist >= end else 1.0
    factor = (end - dist) / (end - start)
    return min(max(factor, 0.0), 1.0)


class GameLoop:
    """Accumulates real time and reports how many fixed ticks to simulate."""

    def __init__(self, tick_duration: float = DEFAULT_TICK_DURATION) -> None:
        if tick_duration <= 0.0:
            raise ValueError("tick_duration must be positive")
        self._tick_duration = tick_duration
        self._accumulator = 0.0
        self._total_ticks = 0

    def accumulate(self, elapsed_seconds: float) -> int:
        """Add elapsed real time and return the number of ticks now due."""
        self._accumulator += elapsed_seconds
        ticks = 0
        while self._accumulator >= self._tick_duration:
            self._accumulator -= self._tick_duration
            ticks += 1
        self._total_ticks += ticks
        return ticks

    @property
    def interpolation(self) -> float:
        """Fraction of a tick left in the accumulator, for render blending."""
        return self._accumulator / self._tick_duration

    @property
    def accumulator(self) -> float:
        return self._accumulator

    @property
    def tick_duration(self) -> float:
        return self._tick_duration

    @property
    def total_ticks(self) -> int:
        return self._total_ticks

    def reset(self) -> None:
        """Discard any accumulated time."""
        self._accumulator = 0.0