"""Keyboard input sources."""

from enum import Enum
from typing import Protocol

import pygame


class KeyCode(Enum):
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    SHIFT_LEFT = "ShiftLeft"


PYGAME_KEYS = {
    KeyCode.ARROW_UP: pygame.K_UP,
    KeyCode.ARROW_DOWN: pygame.K_DOWN,
    KeyCode.ARROW_LEFT: pygame.K_LEFT,
    KeyCode.ARROW_RIGHT: pygame.K_RIGHT,
    KeyCode.SHIFT_LEFT: pygame.K_LSHIFT,
}


class InputSource(Protocol):
    def key_pressed(self, code: KeyCode) -> bool: ...


class PygameInput:
    """Level-triggered key state read from ``pygame.key.get_pressed``."""

    def key_pressed(self, code: KeyCode) -> bool:
        keys = pygame.key.get_pressed()
        return bool(keys[PYGAME_KEYS[code]])
