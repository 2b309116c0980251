from __future__ import annotations

from typing import List

from pygame.math import Vector2

from ...rng import DeterministicRng
from ..core.agent import Boid
from ..core.bounds import WorldBounds


def random_boid(
    rng: DeterministicRng,
    min_x: float,
    max_x: float,
    min_y: float,
    max_y: float,
    size: Vector2,
) -> Boid:
    position = Vector2(rng.next_range(min_x, max_x), rng.next_range(min_y, max_y))
    velocity = Vector2(rng.next_float(), rng.next_float())
    return Boid(position=position, size=Vector2(size), velocity=velocity)


def init_population(rng: DeterministicRng, bounds: WorldBounds, size: Vector2, n: int) -> List[Boid]:
    if n < 0:
        raise ValueError(f"Population size must be non-negative, got {n}")
    return [random_boid(rng, bounds.min_x, bounds.max_x, bounds.min_y, bounds.max_y, size) for _ in range(n)]
