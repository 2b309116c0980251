from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WorldBounds:
    """Axis-aligned world rectangle ``[min_x, max_x] x [min_y, max_y]``."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self) -> None:
        values = (self.min_x, self.max_x, self.min_y, self.max_y)
        if not all(math.isfinite(value) for value in values):
            raise ValueError(f"World bounds must be finite: {values}")
        if not self.min_x < self.max_x:
            raise ValueError(f"Degenerate x range: [{self.min_x}, {self.max_x}]")
        if not self.min_y < self.max_y:
            raise ValueError(f"Degenerate y range: [{self.min_y}, {self.max_y}]")

    @classmethod
    def from_surface(cls, width: float, height: float) -> "WorldBounds":
        """Centered rectangle for a drawable surface of ``width`` x ``height``."""
        half_w = float(width) / 2.0
        half_h = float(height) / 2.0
        return cls(min_x=-half_w, max_x=half_w, min_y=-half_h, max_y=half_h)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y