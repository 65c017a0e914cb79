"""CLI entrypoint and pygame host wiring."""

import argparse
import sys

import pygame
from loguru import logger

from .config import (
    BOUNDS_POLICIES,
    COLORS,
    CULL_MARGIN,
    DEFAULT_BOUNDS,
    FPS,
    SPAWN_INTERVAL,
    VOLLEY_SIZE,
    GameConfig,
)
from .input import PygameInput
from .render import PygameRenderer
from .simulation import SimulationLoop, SimulationState
from .ticker import FrameTicker


def build_parser():
    parser = argparse.ArgumentParser(description="Barrage - dodge the rings")
    parser.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    parser.add_argument("--interval", type=int, default=SPAWN_INTERVAL, help="Frames between volleys")
    parser.add_argument("--volley", type=int, default=VOLLEY_SIZE, help="Projectiles per volley")
    parser.add_argument(
        "--bounds",
        choices=BOUNDS_POLICIES,
        default=DEFAULT_BOUNDS,
        help=f"Player bounds policy (default: {DEFAULT_BOUNDS}; free disables culling)",
    )
    parser.add_argument("--cull-margin", type=float, default=CULL_MARGIN, help="Remove projectiles this far off-screen")
    parser.add_argument("--unbounded", action="store_true", help="Never remove projectiles")
    parser.add_argument("--pause-on-defeat", action="store_true", help="Freeze the playfield after a hit")
    parser.add_argument("--log-level", default="INFO", help="loguru level (default: INFO)")
    return parser


def config_from_args(args):
    return GameConfig(
        fps=args.fps,
        spawn_interval=args.interval,
        volley_size=args.volley,
        bounds=args.bounds,
        cull_margin=None if args.unbounded else args.cull_margin,
        pause_on_defeat=args.pause_on_defeat,
    )


def configure_logging(level):
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


class GameHost:
    """Owns the window and drives one SimulationLoop from a FrameTicker."""

    def __init__(self, screen, config, ticker=None):
        self.screen = screen
        self.config = config
        self.font = pygame.font.SysFont("Consolas", 18)
        self.ticker = ticker or FrameTicker(config.fps)
        self.simulation = SimulationLoop(PygameRenderer(screen), PygameInput(), self.ticker, config)
        self.simulation.add_defeat_listener(self.on_defeat)

    def on_defeat(self, event):
        logger.info(f"Game Over at frame {event.frame}")

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.ticker.stop()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.ticker.stop()
                elif event.key == pygame.K_r and self.simulation.state == SimulationState.DEFEATED:
                    self.simulation.reset()

    def frame(self):
        self.handle_events()
        if not self.ticker.running:
            return

        defeated = self.simulation.state == SimulationState.DEFEATED
        if not (defeated and self.config.pause_on_defeat):
            self.simulation.on_frame()

        if self.simulation.state == SimulationState.DEFEATED:
            msg = self.font.render("Game Over - press R to restart", True, COLORS["warning"])
            self.screen.blit(msg, (self.config.width / 2 - msg.get_width() / 2, self.config.height / 2))

        pygame.display.flip()

    def run(self, max_frames=None):
        self.simulation.start()
        try:
            self.ticker.run(self.frame, max_frames=max_frames)
        finally:
            self.simulation.stop()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    pygame.init()
    try:
        screen = pygame.display.set_mode((config.width, config.height))
        pygame.display.set_caption("Barrage")
        GameHost(screen, config).run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
