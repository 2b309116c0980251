from __future__ import annotations

from ..core.agent import Boid
from ..core.bounds import WorldBounds
from ..utils.math2d import limit_magnitude


def limit_velocity(boid: Boid, max_velocity: float) -> None:
    boid.velocity = limit_magnitude(boid.velocity, max_velocity)


def wrap_position(boid: Boid, bounds: WorldBounds) -> None:
    # Toroidal: leaving one edge teleports to the opposite edge.
    position = boid.position
    if position.x < bounds.min_x:
        position.x = bounds.max_x
    elif position.x > bounds.max_x:
        position.x = bounds.min_x
    if position.y < bounds.min_y:
        position.y = bounds.max_y
    elif position.y > bounds.max_y:
        position.y = bounds.min_y


def advance(boid: Boid) -> None:
    boid.position += boid.velocity
