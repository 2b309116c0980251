from __future__ import annotations

import logging
from time import perf_counter
from typing import Dict, List, Tuple

from pygame.math import Vector2

from ...rng import DeterministicRng
from ..systems import metrics as metrics_system
from ..systems import motion, steering
from ..systems.neighbors import neighbors_of
from ..systems.spawn import init_population
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata, SnapshotWorld
from .agent import Boid
from .bounds import WorldBounds
from .config import SimulationConfig

logger = logging.getLogger(__name__)


class World:
    """Owns the flock and advances it one synchronous tick at a time.

    Every tick reads a frozen copy of the previous tick's flock, so the order
    in which boids are updated never leaks into their neighbor queries.
    """

    def __init__(self, config: SimulationConfig, rng: DeterministicRng | None = None):
        self._config = config
        self._rng = rng if rng is not None else DeterministicRng(config.seed)
        self._bounds = WorldBounds.from_surface(config.surface_width, config.surface_height)
        self._boid_size = Vector2(config.boid_size)
        self._agents: List[Boid] = []
        self._metrics: TickMetrics | None = None
        self._bootstrap_population()

    @property
    def agents(self) -> List[Boid]:
        return self._agents

    @property
    def bounds(self) -> WorldBounds:
        return self._bounds

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def reset(self) -> None:
        self._rng.reset()
        self._bounds = WorldBounds.from_surface(self._config.surface_width, self._config.surface_height)
        self._metrics = None
        self._bootstrap_population()

    def resize(self, width: float, height: float) -> None:
        bounds = WorldBounds.from_surface(width, height)
        if bounds != self._bounds:
            logger.debug("World bounds changed to %.1f x %.1f", bounds.width, bounds.height)
        self._bounds = bounds

    def step(self, tick: int, surface_size: Tuple[float, float] | None = None) -> TickMetrics:
        start = perf_counter()
        if surface_size is not None:
            self.resize(*surface_size)
        config = self._config
        bounds = self._bounds
        max_dist = config.max_dist
        max_velocity = config.max_velocity

        frozen = [boid.copy() for boid in self._agents]
        neighbor_checks = 0
        isolated = 0
        for index, boid in enumerate(self._agents):
            neighbors = neighbors_of(index, frozen, max_dist)
            neighbor_checks += len(frozen) - 1
            if neighbors:
                boid.velocity = steering.flocking_velocity(frozen[index], neighbors)
            else:
                isolated += 1
            motion.limit_velocity(boid, max_velocity)
            motion.wrap_position(boid, bounds)
            motion.advance(boid)

        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(tick, self._agents, neighbor_checks, isolated, duration_ms)
        return self._metrics

    def render_view(self) -> List[Tuple[Vector2, Vector2]]:
        return [(Vector2(boid.position), Vector2(boid.size)) for boid in self._agents]

    def snapshot(self, tick: int) -> Snapshot:
        metrics = self._metrics if self._metrics is not None else self._snapshot_metrics_from_state(tick)
        bounds = self._bounds
        metadata = SnapshotMetadata(
            seed=self._rng.seed,
            population_size=len(self._agents),
            max_dist=self._config.max_dist,
            max_velocity=self._config.max_velocity,
            config_version=self._config.config_version,
        )
        return Snapshot(
            tick=tick,
            metrics=metrics,
            agents=[self._agent_snapshot(boid) for boid in self._agents],
            world=SnapshotWorld(min_x=bounds.min_x, max_x=bounds.max_x, min_y=bounds.min_y, max_y=bounds.max_y),
            metadata=metadata,
        )

    def _bootstrap_population(self) -> None:
        self._agents = init_population(self._rng, self._bounds, self._boid_size, self._config.population_size)
        logger.debug(
            "Spawned %d boids in [%.1f, %.1f] x [%.1f, %.1f]",
            len(self._agents),
            self._bounds.min_x,
            self._bounds.max_x,
            self._bounds.min_y,
            self._bounds.max_y,
        )

    @staticmethod
    def _agent_snapshot(boid: Boid) -> Dict[str, float]:
        return {
            "x": boid.position.x,
            "y": boid.position.y,
            "vx": boid.velocity.x,
            "vy": boid.velocity.y,
            "width": boid.size.x,
            "height": boid.size.y,
            "speed": boid.velocity.length(),
        }

    def _snapshot_metrics_from_state(self, tick: int) -> TickMetrics:
        return metrics_system.create_metrics(tick, self._agents, 0, 0, 0.0)
