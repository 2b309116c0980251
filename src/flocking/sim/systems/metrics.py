from __future__ import annotations

from typing import Sequence

from ..core.agent import Boid
from ..types.metrics import TickMetrics


def create_metrics(
    tick: int,
    agents: Sequence[Boid],
    neighbor_checks: int,
    isolated: int,
    duration_ms: float,
) -> TickMetrics:
    speed_sum = 0.0
    max_speed = 0.0
    for boid in agents:
        speed = boid.velocity.length()
        speed_sum += speed
        if speed > max_speed:
            max_speed = speed
    population = len(agents)
    return TickMetrics(
        tick=tick,
        population=population,
        neighbor_checks=neighbor_checks,
        isolated=isolated,
        average_speed=speed_sum / population if population else 0.0,
        max_speed=max_speed,
        tick_duration_ms=duration_ms,
    )
