from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from .metrics import TickMetrics


@dataclass(slots=True)
class Snapshot:
    tick: int
    metrics: TickMetrics
    agents: List[Dict[str, Any]]
    world: "SnapshotWorld"
    metadata: "SnapshotMetadata"


@dataclass(slots=True)
class SnapshotWorld:
    min_x: float
    max_x: float
    min_y: float
    max_y: float


@dataclass(slots=True)
class SnapshotMetadata:
    seed: int
    population_size: int
    max_dist: float
    max_velocity: float
    config_version: str
