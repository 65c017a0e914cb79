"""Radial volley generation."""

import math

import pygame
from loguru import logger

from .config import GameConfig
from .projectile import Projectile


class SpawnController:
    """Fires symmetric rings of projectiles from the playfield center.

    Rings are aimed so that one projectile heads toward where the player is
    at the moment of firing; the ring does not track the player afterwards.
    Colors rotate through the configured palette, one step per volley.
    """

    def __init__(self, projectiles, config=None):
        self.projectiles = projectiles
        self.config = config or GameConfig()
        self.center = pygame.Vector2(self.config.center)
        self.color_index = 0
        self.volleys_fired = 0

    def fire_ring(self, origin_angle_offset, count, color):
        if count <= 0:
            raise ValueError(f"volley size must be positive, got {count}")

        span = 360 / count
        angle = origin_angle_offset
        volley = []
        for _ in range(count):
            volley.append(Projectile(self.center, angle, self.config.projectile_speed, color))
            angle += math.radians(span)

        self.projectiles.extend(volley)
        return volley

    def aim_angle(self, player_position):
        return math.atan2(player_position[1] - self.center.y, player_position[0] - self.center.x)

    def next_color(self):
        palette = self.config.palette
        color = palette[self.color_index]
        self.color_index = (self.color_index + 1) % len(palette)
        return color

    def is_spawn_frame(self, frame_count):
        return frame_count % self.config.spawn_interval == 0

    def maybe_fire(self, frame_count, player_position):
        if not self.is_spawn_frame(frame_count):
            return []

        angle = self.aim_angle(player_position)
        color = self.next_color()
        volley = self.fire_ring(angle, self.config.volley_size, color)
        self.volleys_fired += 1
        logger.debug(
            f"Volley {self.volleys_fired} at frame {frame_count}: "
            f"{len(volley)} {color} projectiles aimed {math.degrees(angle):.1f} deg"
        )
        return volley
