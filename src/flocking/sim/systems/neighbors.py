from __future__ import annotations

from typing import List, Sequence

from ..core.agent import Boid


def neighbors_of(index: int, population: Sequence[Boid], radius: float) -> List[Boid]:
    """Boids of ``population`` strictly closer than ``radius`` to ``population[index]``.

    Self is excluded by position in the sequence, so two boids with identical
    state still see each other. This is an exact O(n) scan.
    """
    origin = population[index].position
    found: List[Boid] = []
    for other_index, other in enumerate(population):
        if other_index == index:
            continue
        # Same distance test as separation; squared compares round differently on the radius.
        if origin.distance_to(other.position) < radius:
            found.append(other)
    return found
