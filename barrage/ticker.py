"""Fixed-cadence frame ticker."""

from typing import Protocol

import pygame
from loguru import logger

from .config import FPS


class Ticker(Protocol):
    def current_frame_count(self) -> int: ...


class FrameTicker:
    """Invokes a callback once per frame, paced by ``pygame.time.Clock``.

    The frame count seen by the callback starts at 0 and grows by exactly one
    per invocation, regardless of how long a frame actually took.
    """

    def __init__(self, fps: int = FPS, clock=None) -> None:
        self.fps = fps
        self.clock = clock or pygame.time.Clock()
        self.frames = 0
        self.running = False

    def current_frame_count(self) -> int:
        return self.frames

    def run(self, callback, max_frames: int | None = None) -> None:
        self.running = True
        logger.debug(f"Ticker started at {self.fps} fps")
        while self.running:
            if max_frames is not None and self.frames >= max_frames:
                break
            self.clock.tick(self.fps)
            callback()
            self.frames += 1
        self.running = False
        logger.debug(f"Ticker stopped after {self.frames} frames")

    def stop(self) -> None:
        self.running = False
