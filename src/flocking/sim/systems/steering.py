from __future__ import annotations

from typing import Sequence

from pygame.math import Vector2

from ..core.agent import Boid
from ..utils.math2d import with_magnitude

SEPARATION_RADIUS = 35.0
COHESION_MAGNITUDE = 1.0
ALIGNMENT_MAGNITUDE = 1.0
SEPARATION_MAGNITUDE = 4.0


def _require_neighbors(neighbors: Sequence[Boid]) -> int:
    count = len(neighbors)
    if count == 0:
        raise ValueError("Steering rules need at least one neighbor")
    return count


def cohesion(boid: Boid, neighbors: Sequence[Boid]) -> Vector2:
    """Unit vector from ``boid`` toward the centroid of ``neighbors``."""
    count = _require_neighbors(neighbors)
    center_x = 0.0
    center_y = 0.0
    for other in neighbors:
        center_x += other.position.x
        center_y += other.position.y
    toward = Vector2(center_x / count - boid.position.x, center_y / count - boid.position.y)
    return with_magnitude(toward, COHESION_MAGNITUDE)


def alignment(boid: Boid, neighbors: Sequence[Boid]) -> Vector2:
    """Unit velocity delta from ``boid`` toward the mean heading of ``neighbors``."""
    count = _require_neighbors(neighbors)
    mean_x = 0.0
    mean_y = 0.0
    for other in neighbors:
        mean_x += other.velocity.x
        mean_y += other.velocity.y
    delta = Vector2(mean_x / count - boid.velocity.x, mean_y / count - boid.velocity.y)
    return with_magnitude(delta, ALIGNMENT_MAGNITUDE)


def separation(boid: Boid, neighbors: Sequence[Boid]) -> Vector2:
    """Push away from neighbors closer than ``SEPARATION_RADIUS``.

    Zero when no neighbor is that close.
    """
    _require_neighbors(neighbors)
    away = Vector2()
    for other in neighbors:
        if boid.position.distance_to(other.position) < SEPARATION_RADIUS:
            away += boid.position - other.position
    return with_magnitude(away, SEPARATION_MAGNITUDE)


def flocking_velocity(boid: Boid, neighbors: Sequence[Boid]) -> Vector2:
    return boid.velocity + cohesion(boid, neighbors) + alignment(boid, neighbors) + separation(boid, neighbors)
