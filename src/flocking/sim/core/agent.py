from __future__ import annotations

from dataclasses import dataclass, field

from pygame.math import Vector2


@dataclass(slots=True)
class Boid:
    position: Vector2
    size: Vector2
    velocity: Vector2 = field(default_factory=Vector2)

    def copy(self) -> "Boid":
        return Boid(
            position=Vector2(self.position),
            size=Vector2(self.size),
            velocity=Vector2(self.velocity),
        )
