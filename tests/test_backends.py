"""pygame-backed renderer, input source and ticker."""

from __future__ import annotations

import collections

import pygame
import pytest

from barrage.input import KeyCode, PygameInput
from barrage.render import PygameRenderer
from barrage.ticker import FrameTicker


pytestmark = pytest.mark.unit


class FakeClock:
    def __init__(self):
        self.ticks = []

    def tick(self, fps):
        self.ticks.append(fps)
        return 1000 // fps


@pytest.fixture
def surface():
    return pygame.Surface((640, 480))


class TestPygameRenderer:
    def test_fill_rect(self, surface):
        surface.fill((255, 255, 255))
        PygameRenderer(surface).fill_rect(0, 0, 640, 480, "black")
        assert surface.get_at((300, 200)) == pygame.Color("black")

    def test_fill_circle_named_color(self, surface):
        PygameRenderer(surface).fill_circle(pygame.Vector2(100.4, 100.6), 8, "red")
        assert surface.get_at((100, 100)) == pygame.Color("red")
        assert surface.get_at((120, 100)) == pygame.Color(0, 0, 0)

    def test_fill_circle_accepts_vector_center(self, surface):
        PygameRenderer(surface).fill_circle(pygame.Vector2(200, 150), 6, "blue")
        assert surface.get_at((200, 150)) == pygame.Color("blue")
        assert surface.get_at((204, 150)) == pygame.Color("blue")

    def test_fill_circle_hex_color(self, surface):
        PygameRenderer(surface).fill_circle((50, 50), 10, "#00aaff")
        assert surface.get_at((50, 50)) == pygame.Color(0, 170, 255)


class TestPygameInput:
    def test_maps_key_codes(self, monkeypatch):
        pressed = collections.defaultdict(bool, {pygame.K_UP: True, pygame.K_LSHIFT: True})
        monkeypatch.setattr(pygame.key, "get_pressed", lambda: pressed)

        source = PygameInput()
        assert source.key_pressed(KeyCode.ARROW_UP)
        assert source.key_pressed(KeyCode.SHIFT_LEFT)
        assert not source.key_pressed(KeyCode.ARROW_DOWN)
        assert not source.key_pressed(KeyCode.ARROW_LEFT)
        assert not source.key_pressed(KeyCode.ARROW_RIGHT)


class TestFrameTicker:
    def test_counts_from_zero(self):
        ticker = FrameTicker(60, clock=FakeClock())
        seen = []
        ticker.run(lambda: seen.append(ticker.current_frame_count()), max_frames=5)
        assert seen == [0, 1, 2, 3, 4]
        assert ticker.current_frame_count() == 5
        assert not ticker.running

    def test_paces_with_clock(self):
        clock = FakeClock()
        FrameTicker(30, clock=clock).run(lambda: None, max_frames=3)
        assert clock.ticks == [30, 30, 30]

    def test_stop_from_callback(self):
        ticker = FrameTicker(60, clock=FakeClock())

        def callback():
            if ticker.current_frame_count() == 2:
                ticker.stop()

        ticker.run(callback)
        assert ticker.current_frame_count() == 3
