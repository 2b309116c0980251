from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import pygame

from ..sim.core.config import SimulationConfig
from ..sim.core.world import World

logger = logging.getLogger(__name__)

BACKGROUND = (0, 0, 0)
BOID_COLOR = (255, 255, 255)


def to_screen(x: float, y: float, surface_size: tuple[int, int]) -> tuple[float, float]:
    """World coordinates (origin at center, y up) to surface pixels."""
    width, height = surface_size
    return x + width / 2.0, height / 2.0 - y


def draw_population(surface: pygame.Surface, world: World) -> None:
    surface.fill(BACKGROUND)
    surface_size = surface.get_size()
    for position, size in world.render_view():
        center_x, center_y = to_screen(position.x, position.y, surface_size)
        rect = pygame.Rect(0, 0, max(1, round(size.x)), max(1, round(size.y)))
        rect.center = (round(center_x), round(center_y))
        pygame.draw.ellipse(surface, BOID_COLOR, rect)


def run_viewer(config: SimulationConfig, max_frames: Optional[int] = None) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (int(config.surface_width), int(config.surface_height)), pygame.RESIZABLE
        )
        pygame.display.set_caption("Flocking")
        clock = pygame.time.Clock()
        world = World(config)
        logger.info("Viewer started with %d boids", len(world.agents))

        tick = 0
        running = True
        while running and (max_frames is None or tick < max_frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break
            world.step(tick, screen.get_size())
            draw_population(screen, world)
            pygame.display.flip()
            clock.tick(config.frame_rate)
            tick += 1
        logger.info("Viewer stopped after %d frames", tick)
    finally:
        pygame.quit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Flocking simulation viewer")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with simulation parameters")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--frames", type=int, default=None, help="Stop after this many frames")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = SimulationConfig.from_yaml(args.config) if args.config else SimulationConfig()
    if args.seed is not None:
        config.seed = args.seed
    run_viewer(config, max_frames=args.frames)


if __name__ == "__main__":
    main()
