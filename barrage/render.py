"""Immediate-mode drawing backends."""

from typing import Protocol

import pygame


class Renderer(Protocol):
    def fill_rect(self, x, y, w, h, color) -> None: ...

    def fill_circle(self, center, radius, color) -> None: ...


class PygameRenderer:
    """Draws filled primitives onto a pygame surface.

    Colors may be anything ``pygame.Color`` accepts: names such as ``"red"``,
    hex strings such as ``"#00aaff"`` or RGB tuples.
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def fill_rect(self, x, y, w, h, color) -> None:
        self.surface.fill(pygame.Color(color), pygame.Rect(x, y, w, h))

    def fill_circle(self, center, radius, color) -> None:
        pygame.draw.circle(self.surface, pygame.Color(color), center, radius)
