"""The player-controlled entity and its per-frame input snapshot."""

import math
from dataclasses import dataclass

import pygame

from .config import COLORS, HEIGHT, PLAYER_RADIUS, PLAYER_SLOW_SPEED, PLAYER_SPEED, PLAYER_START, WIDTH
from .input import KeyCode
from .vector import clamp_position, wrap_position


@dataclass(frozen=True)
class InputState:
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    slow: bool = False

    @classmethod
    def poll(cls, source):
        return cls(
            up=source.key_pressed(KeyCode.ARROW_UP),
            down=source.key_pressed(KeyCode.ARROW_DOWN),
            left=source.key_pressed(KeyCode.ARROW_LEFT),
            right=source.key_pressed(KeyCode.ARROW_RIGHT),
            slow=source.key_pressed(KeyCode.SHIFT_LEFT),
        )


def movement_vector(state: InputState) -> pygame.Vector2:
    """Unit (or zero) direction for the pressed arrow keys."""
    velocity = pygame.Vector2(0, 0)
    if state.up:
        velocity.y -= 1
    if state.down:
        velocity.y += 1
    if state.left:
        velocity.x -= 1
    if state.right:
        velocity.x += 1

    if velocity.x != 0 and velocity.y != 0:
        velocity = velocity / math.sqrt(2)
    return velocity


class PlayerEntity:
    def __init__(self, position=PLAYER_START, bounds="free", width=WIDTH, height=HEIGHT):
        self.position = pygame.Vector2(position)
        self.bounds = bounds
        self.width = width
        self.height = height

    def speed_for(self, state: InputState) -> int:
        return PLAYER_SLOW_SPEED if state.slow else PLAYER_SPEED

    def advance(self, state: InputState) -> None:
        self.position += movement_vector(state) * self.speed_for(state)

        if self.bounds == "clamp":
            self.position = clamp_position(self.position, self.width, self.height)
        elif self.bounds == "wrap":
            self.position = wrap_position(self.position, self.width, self.height)

    def render(self, renderer) -> None:
        renderer.fill_circle(self.position, PLAYER_RADIUS, COLORS["player"])
