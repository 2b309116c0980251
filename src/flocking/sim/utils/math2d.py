from __future__ import annotations

from pygame.math import Vector2

# Vectors shorter than 1e-9 count as zero: their direction is rounding noise.
_EPSILON_SQ = 1e-18


def with_magnitude(vector: Vector2, magnitude: float) -> Vector2:
    """Return a copy of ``vector`` rescaled to ``magnitude``.

    The zero vector has no direction, so it rescales to the zero vector.
    """
    magnitude_sq = vector.length_squared()
    if magnitude_sq <= _EPSILON_SQ:
        return Vector2()
    return vector * (magnitude / magnitude_sq ** 0.5)


def limit_magnitude(vector: Vector2, max_length: float) -> Vector2:
    if max_length <= 0:
        return Vector2()
    magnitude_sq = vector.length_squared()
    if magnitude_sq <= max_length * max_length:
        return Vector2(vector)
    return vector * (max_length / magnitude_sq ** 0.5)
