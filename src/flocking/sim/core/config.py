from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass
class SimulationConfig:
    population_size: int = 40
    boid_size: tuple[float, float] = (10.0, 10.0)
    max_dist: float = 50.0
    max_velocity: float = 10.0
    surface_width: float = 1024.0
    surface_height: float = 768.0
    seed: int = 42
    frame_rate: float = 60.0
    config_version: str = "v1"

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text())
        return load_config(data or {})


def load_config(raw: dict) -> SimulationConfig:
    if not isinstance(raw, dict):
        raise ValueError(f"Simulation config must be a mapping, got {type(raw).__name__}")

    def _pair(value: tuple[float, float] | list[float] | None, default: tuple[float, float]) -> tuple[float, float]:
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return (float(value[0]), float(value[1]))
        if value is None:
            return default
        raise ValueError(f"Expected a pair of numbers, got {value!r}")

    default = SimulationConfig()
    values = {k: v for k, v in raw.items() if k != "boid_size"}
    return SimulationConfig(boid_size=_pair(raw.get("boid_size"), default.boid_size), **values)
