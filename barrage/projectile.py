"""A single moving hazard."""

import pygame

from .config import (
    COLORS,
    LETHAL_RADIUS,
    PROJECTILE_CORE_RADIUS,
    PROJECTILE_RADIUS,
    PROJECTILE_RAMP,
    PROJECTILE_SMOOTHING,
)
from .vector import distance, heading_to_vector


class Projectile:
    """Travels along a fixed heading.

    Leaves the spawn point at ``PROJECTILE_RAMP`` times its target speed and
    relaxes toward the target speed by a tenth of the remaining gap every
    frame.
    """

    def __init__(self, position, heading, target_speed, color):
        self.position = pygame.Vector2(position)
        self.heading = heading
        self.target_speed = target_speed
        self.current_speed = target_speed * PROJECTILE_RAMP
        self.color = color

    def __repr__(self):
        return (
            f"Projectile(pos=({self.position.x:.1f}, {self.position.y:.1f}), "
            f"heading={self.heading:.3f}, speed={self.current_speed:.3f}, color={self.color!r})"
        )

    def touches(self, position, radius=LETHAL_RADIUS):
        return distance(self.position, position) <= radius

    def advance(self, player_position=None):
        self.position += heading_to_vector(self.heading) * self.current_speed

        # Proximity is measured after the move but before the speed relaxes.
        hit = player_position is not None and self.touches(player_position)

        self.current_speed += (self.target_speed - self.current_speed) / PROJECTILE_SMOOTHING
        return hit

    def render(self, renderer):
        renderer.fill_circle(self.position, PROJECTILE_RADIUS, self.color)
        renderer.fill_circle(self.position, PROJECTILE_CORE_RADIUS, COLORS["projectile_core"])
