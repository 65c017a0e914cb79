"""Barrage: a small bullet-hell simulation."""

from .config import GameConfig
from .simulation import DefeatEvent, SimulationLoop, SimulationState, SimulationStateError

__all__ = [
    "DefeatEvent",
    "GameConfig",
    "SimulationLoop",
    "SimulationState",
    "SimulationStateError",
]
