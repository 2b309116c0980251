from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    population: int
    neighbor_checks: int
    isolated: int
    average_speed: float
    max_speed: float
    tick_duration_ms: float = 0.0
