import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from pygame.math import Vector2  # noqa: E402

from flocking.sim.core.agent import Boid  # noqa: E402


@pytest.fixture
def repo_root() -> Path:
    return ROOT


@pytest.fixture
def make_boid():
    def _make(x: float, y: float, vx: float = 0.0, vy: float = 0.0, size: float = 10.0) -> Boid:
        return Boid(position=Vector2(x, y), size=Vector2(size, size), velocity=Vector2(vx, vy))

    return _make
