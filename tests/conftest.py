"""Shared fakes for the renderer, input and ticker contracts."""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from barrage.config import GameConfig
from barrage.simulation import SimulationLoop


class RecordingRenderer:
    def __init__(self):
        self.calls = []

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("rect", (x, y, w, h), color))

    def fill_circle(self, center, radius, color):
        self.calls.append(("circle", (center[0], center[1]), radius, color))


class FakeInput:
    def __init__(self, pressed=()):
        self.pressed = set(pressed)

    def key_pressed(self, code):
        return code in self.pressed


class FakeTicker:
    def __init__(self):
        self.frames = 0

    def current_frame_count(self):
        return self.frames


def run_frames(simulation, ticker, count):
    for _ in range(count):
        simulation.on_frame()
        ticker.frames += 1


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def keys():
    return FakeInput()


@pytest.fixture
def ticker():
    return FakeTicker()


@pytest.fixture
def make_simulation(renderer, keys, ticker):
    def _make(**overrides):
        return SimulationLoop(renderer, keys, ticker, GameConfig(**overrides))

    return _make
